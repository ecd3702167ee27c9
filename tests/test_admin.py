"""Administration endpoints."""

from tests.conftest import ADMIN_EMAIL, API


def test_admin_endpoints_require_admin(client, marketplace):
    for path in ("/admin/users", "/admin/projects"):
        response = client.get(f"{API}{path}", headers=marketplace.client_headers)
        assert response.status_code == 403


def test_admin_lists_users_and_all_projects(client, assigned, register, create_project):
    create_project(assigned.client_headers, title="Open one")
    _, admin_headers = register(ADMIN_EMAIL)

    users = client.get(f"{API}/admin/users", headers=admin_headers).json()["data"]
    assert {u["email"] for u in users} == {"client@example.com", "free@example.com", ADMIN_EMAIL}

    projects = client.get(f"{API}/admin/projects", headers=admin_headers).json()["data"]
    assert sorted(p["status"] for p in projects) == ["in-progress", "open"]


def test_suspended_user_is_locked_out(client, marketplace, register):
    _, admin_headers = register(ADMIN_EMAIL)

    response = client.post(
        f"{API}/admin/users/{marketplace.freelancer['id']}/suspend", headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "suspended"

    me = client.get(f"{API}/auth/me", headers=marketplace.freelancer_headers)
    assert me.status_code == 403

    login = client.post(
        f"{API}/auth/login", json={"email": "free@example.com", "password": "secret123"}
    )
    assert login.status_code == 403

    remaining = client.get(f"{API}/admin/users", headers=admin_headers).json()["data"]
    assert "free@example.com" not in {u["email"] for u in remaining}

    freelancers = client.get(f"{API}/freelancers").json()["data"]
    assert freelancers == []
