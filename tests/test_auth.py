"""Registration, login and caller resolution."""

from tests.conftest import ADMIN_EMAIL, API


def test_register_returns_user_and_token(client):
    response = client.post(
        f"{API}/auth/register",
        json={
            "email": "Ada@Example.com",
            "password": "secret123",
            "first_name": "Ada",
            "last_name": "Lovelace",
            "role": "freelancer",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    user = body["data"]["user"]
    assert user["email"] == "ada@example.com"
    assert user["role"] == "freelancer"
    assert user["status"] == "active"
    assert "password_hash" not in user
    assert body["data"]["token_type"] == "bearer"
    assert body["data"]["access_token"]


def test_register_duplicate_email_conflicts(client, register):
    register("dup@example.com")

    response = client.post(
        f"{API}/auth/register",
        json={
            "email": "DUP@example.com",
            "password": "secret123",
            "first_name": "Other",
            "last_name": "Person",
            "role": "client",
        },
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "USER_ALREADY_EXISTS"


def test_register_cannot_pick_admin_role(client):
    response = client.post(
        f"{API}/auth/register",
        json={
            "email": "sneaky@example.com",
            "password": "secret123",
            "first_name": "Sneaky",
            "last_name": "User",
            "role": "admin",
        },
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_INPUT"


def test_configured_admin_email_gets_admin_role(register):
    user, _ = register(ADMIN_EMAIL, role="client")

    assert user["role"] == "admin"


def test_unknown_fields_are_rejected(client):
    response = client.post(
        f"{API}/auth/register",
        json={
            "email": "x@example.com",
            "password": "secret123",
            "first_name": "X",
            "last_name": "Y",
            "role": "client",
            "is_admin": True,
        },
    )

    assert response.status_code == 422
    assert response.json()["error"]["field"] == "is_admin"


def test_login_and_me(client, register):
    register("login@example.com", password="hunter22")

    response = client.post(
        f"{API}/auth/login", json={"email": "login@example.com", "password": "hunter22"}
    )
    assert response.status_code == 200
    token = response.json()["data"]["access_token"]

    me = client.get(f"{API}/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["data"]["email"] == "login@example.com"


def test_login_with_wrong_password(client, register):
    register("login@example.com", password="hunter22")

    response = client.post(
        f"{API}/auth/login", json={"email": "login@example.com", "password": "wrong-one"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


def test_missing_token_is_unauthenticated(client):
    response = client.get(f"{API}/auth/me")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"


def test_garbage_token_is_unauthenticated(client):
    response = client.get(f"{API}/auth/me", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
