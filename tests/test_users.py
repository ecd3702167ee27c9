"""Profiles and freelancer search."""

from tests.conftest import API


def test_update_profile_and_read_it_back(client, register):
    user, headers = register("pro@example.com", role="freelancer")

    response = client.put(
        f"{API}/users/me/profile",
        json={
            "bio": "Backend developer",
            "skills": ["python", " fastapi ", "python", ""],
            "location": "Lisbon",
        },
        headers=headers,
    )
    assert response.status_code == 200

    profile = client.get(f"{API}/users/{user['id']}").json()["data"]["profile"]
    assert profile["bio"] == "Backend developer"
    assert profile["skills"] == ["python", "fastapi"]
    assert profile["location"] == "Lisbon"
    assert profile["rating"] == 0.0


def test_get_unknown_user(client):
    response = client.get(f"{API}/users/00000000-0000-0000-0000-000000000000")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"


def test_freelancer_search_by_skill_and_location(client, register):
    _, py_headers = register("py@example.com", role="freelancer", first_name="Pia")
    _, js_headers = register("js@example.com", role="freelancer", first_name="Jon")
    register("someclient@example.com", role="client")
    client.put(
        f"{API}/users/me/profile",
        json={"skills": ["python", "django"], "location": "Berlin"},
        headers=py_headers,
    )
    client.put(
        f"{API}/users/me/profile",
        json={"skills": ["javascript"], "location": "Paris"},
        headers=js_headers,
    )

    everyone = client.get(f"{API}/freelancers").json()["data"]
    assert {u["email"] for u in everyone} == {"py@example.com", "js@example.com"}

    by_skill = client.get(f"{API}/freelancers", params={"skills": "django,rust"}).json()["data"]
    assert [u["email"] for u in by_skill] == ["py@example.com"]

    by_location = client.get(f"{API}/freelancers", params={"location": "par"}).json()["data"]
    assert [u["email"] for u in by_location] == ["js@example.com"]

    by_name = client.get(f"{API}/freelancers", params={"q": "pia"}).json()["data"]
    assert [u["email"] for u in by_name] == ["py@example.com"]


def test_skill_search_ignores_list_punctuation(client, register):
    _, headers = register("py@example.com", role="freelancer")
    client.put(
        f"{API}/users/me/profile", json={"skills": ["python", "sql"]}, headers=headers
    )

    assert client.get(f"{API}/freelancers", params={"skills": '", "'}).json()["data"] == []
    matched = client.get(f"{API}/freelancers", params={"skills": "SQL"}).json()["data"]
    assert [u["email"] for u in matched] == ["py@example.com"]
