from sqlalchemy.exc import OperationalError, ProgrammingError

from app.api.dependencies import get_db


def test_health_reports_database(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "healthy"
    assert data["database"] == "connected"


class _FailingSession:
    def __init__(self, error: Exception):
        self.error = error

    async def execute(self, statement):
        raise self.error


def _override_db(client, error: Exception):
    async def failing_db():
        yield _FailingSession(error)

    client.app.dependency_overrides[get_db] = failing_db


def test_unreachable_database_is_service_unavailable(client):
    _override_db(
        client,
        OperationalError("SELECT 1", {}, Exception("unable to open database file")),
    )
    try:
        response = client.get("/health")
    finally:
        client.app.dependency_overrides.clear()

    assert response.status_code == 503
    error = response.json()["error"]
    assert error["code"] == "DATABASE_CONNECTION_ERROR"
    assert "unable to open database file" in error["message"]


def test_failed_health_query_is_health_check_error(client):
    _override_db(client, ProgrammingError("SELECT 1", {}, Exception("no such function")))
    try:
        response = client.get("/health")
    finally:
        client.app.dependency_overrides.clear()

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "DATABASE_HEALTH_CHECK_ERROR"
