"""Completing an in-progress project."""

from tests.conftest import API


def _complete(client, project_id, headers, status="completed"):
    return client.patch(f"{API}/projects/{project_id}", json={"status": status}, headers=headers)


def test_assigned_freelancer_completes_project(client, assigned):
    response = _complete(client, assigned.project["id"], assigned.freelancer_headers)

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "completed"

    inbox = client.get(f"{API}/notifications", headers=assigned.client_headers).json()["data"]
    completed = [n for n in inbox if n["type"] == "project_completed"]
    assert len(completed) == 1
    assert completed[0]["related_id"] == assigned.project["id"]


def test_completing_twice_is_rejected(client, assigned):
    _complete(client, assigned.project["id"], assigned.freelancer_headers)

    response = _complete(client, assigned.project["id"], assigned.freelancer_headers)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "INVALID_PROJECT_STATE"
    project = client.get(f"{API}/projects/{assigned.project['id']}").json()["data"]
    assert project["status"] == "completed"


def test_only_assigned_freelancer_may_complete(client, assigned, register):
    _, other_headers = register("other@example.com", role="freelancer")

    assert _complete(client, assigned.project["id"], other_headers).status_code == 403
    assert _complete(client, assigned.project["id"], assigned.client_headers).status_code == 403


def test_open_project_cannot_be_completed(client, marketplace):
    # Nobody is assigned yet, so nobody qualifies
    response = _complete(client, marketplace.project["id"], marketplace.freelancer_headers)

    assert response.status_code == 403


def test_only_completion_is_a_valid_transition(client, assigned):
    response = _complete(client, assigned.project["id"], assigned.freelancer_headers, "open")

    assert response.status_code == 409
    project = client.get(f"{API}/projects/{assigned.project['id']}").json()["data"]
    assert project["status"] == "in-progress"


def test_unknown_status_value(client, assigned):
    response = _complete(client, assigned.project["id"], assigned.freelancer_headers, "done")

    assert response.status_code == 422
