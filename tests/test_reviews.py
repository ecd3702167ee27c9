"""Reviews and rating aggregation."""

from tests.conftest import API


def _review(client, headers, project_id, reviewee_id, rating=5, review_type="client-to-freelancer"):
    return client.post(
        f"{API}/reviews",
        json={
            "project_id": project_id,
            "reviewee_id": reviewee_id,
            "rating": rating,
            "comment": "Great collaboration",
            "review_type": review_type,
        },
        headers=headers,
    )


def test_review_updates_reviewee_rating(client, assigned, create_project):
    second = create_project(assigned.client_headers, title="Follow-up work")

    first = _review(client, assigned.client_headers, assigned.project["id"], assigned.freelancer["id"], 5)
    assert first.status_code == 201
    assert first.json()["data"]["reviewer_id"] == assigned.client["id"]
    _review(client, assigned.client_headers, second["id"], assigned.freelancer["id"], 4)

    profile = client.get(f"{API}/users/{assigned.freelancer['id']}").json()["data"]["profile"]
    assert profile["rating"] == 4.5

    reviews = client.get(f"{API}/reviews", params={"user_id": assigned.freelancer["id"]}).json()["data"]
    assert len(reviews) == 2


def test_one_review_per_project_reviewer_reviewee(client, assigned):
    args = (assigned.client_headers, assigned.project["id"], assigned.freelancer["id"])
    assert _review(client, *args).status_code == 201

    duplicate = _review(client, *args, rating=1)

    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "DUPLICATE_REVIEW"
    profile = client.get(f"{API}/users/{assigned.freelancer['id']}").json()["data"]["profile"]
    assert profile["rating"] == 5.0


def test_both_sides_may_review(client, assigned):
    by_client = _review(client, assigned.client_headers, assigned.project["id"], assigned.freelancer["id"])
    by_freelancer = _review(
        client,
        assigned.freelancer_headers,
        assigned.project["id"],
        assigned.client["id"],
        3,
        "freelancer-to-client",
    )

    assert by_client.status_code == 201
    assert by_freelancer.status_code == 201
    project_reviews = client.get(
        f"{API}/reviews", params={"project_id": assigned.project["id"]}
    ).json()["data"]
    assert len(project_reviews) == 2


def test_cannot_review_yourself(client, assigned):
    response = _review(client, assigned.client_headers, assigned.project["id"], assigned.client["id"])

    assert response.status_code == 400


def test_rating_must_be_in_range(client, assigned):
    response = _review(
        client, assigned.client_headers, assigned.project["id"], assigned.freelancer["id"], 6
    )

    assert response.status_code == 422
