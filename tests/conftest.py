"""Shared fixtures: an isolated SQLite database per test, an API client and account helpers."""

import os

# Must be set before app.config.settings is imported
os.environ.setdefault("ENV", "test")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

from types import SimpleNamespace

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.config.settings import settings

API = "/api/v1"
ADMIN_EMAIL = "admin@example.com"


@pytest.fixture(autouse=True)
def _reset_db_singletons(tmp_path, monkeypatch):
    """Point every test at a fresh SQLite file and reset the engine singletons."""
    import app.db.base as base

    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setattr(settings, "DB_CREATE_ALL", True)
    monkeypatch.setattr(settings, "ADMIN_EMAILS", [ADMIN_EMAIL])
    monkeypatch.setattr(settings, "STRIPE_SECRET_KEY", None)
    monkeypatch.setattr(settings, "AUTO_REJECT_SIBLING_PROPOSALS", True)
    base._engine = None
    base._session_factory = None
    yield
    base._engine = None
    base._session_factory = None


@pytest_asyncio.fixture
async def db_session():
    """A session on a freshly created schema, for service-level tests."""
    from app.db.base import close_db, get_session_factory, init_db

    await init_db()
    async with get_session_factory()() as session:
        yield session
    await close_db()


@pytest.fixture
def client():
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register an account and return (user, auth headers)."""

    def _register(
        email: str,
        role: str = "client",
        first_name: str = "Test",
        last_name: str = "User",
        password: str = "secret123",
    ):
        response = client.post(
            f"{API}/auth/register",
            json={
                "email": email,
                "password": password,
                "first_name": first_name,
                "last_name": last_name,
                "role": role,
            },
        )
        assert response.status_code == 201, response.text
        data = response.json()["data"]
        return data["user"], {"Authorization": f"Bearer {data['access_token']}"}

    return _register


@pytest.fixture
def create_project(client):
    """Post a project as the given client and return it."""

    def _create(headers: dict, **overrides):
        payload = {
            "title": "Build a landing page",
            "description": "Responsive marketing site",
            "category": "web-development",
            "budget": 1500,
            "timeline": "2 weeks",
            "requirements": ["react", "css"],
        }
        payload.update(overrides)
        response = client.post(f"{API}/projects", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


@pytest.fixture
def submit_proposal(client):
    """Submit a proposal as the given freelancer and return it."""

    def _submit(headers: dict, project_id: str, **overrides):
        payload = {
            "cover_letter": "I have built dozens of these.",
            "proposed_budget": 1400,
            "timeline": "10 days",
        }
        payload.update(overrides)
        response = client.post(
            f"{API}/projects/{project_id}/proposals", json=payload, headers=headers
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _submit


@pytest.fixture
def marketplace(register, create_project, submit_proposal):
    """A client with an open project and one freelancer who has bid on it."""
    client_user, client_headers = register("client@example.com", "client", "Carla", "Client")
    freelancer, freelancer_headers = register("free@example.com", "freelancer", "Fred", "Lancer")
    project = create_project(client_headers)
    proposal = submit_proposal(freelancer_headers, project["id"])
    return SimpleNamespace(
        client=client_user,
        client_headers=client_headers,
        freelancer=freelancer,
        freelancer_headers=freelancer_headers,
        project=project,
        proposal=proposal,
    )


@pytest.fixture
def assigned(client, marketplace):
    """The marketplace fixture with its proposal accepted (project in progress)."""
    response = client.post(
        f"{API}/proposals/{marketplace.proposal['id']}/accept",
        headers=marketplace.client_headers,
    )
    assert response.status_code == 200, response.text
    return marketplace
