from __future__ import annotations


def test_register_login_and_me_flow(client) -> None:
    register_payload = {"email": "tester@example.com", "password": "SecretPass123", "name": "Test User"}
    register_response = client.post("/auth/register", json=register_payload)
    assert register_response.status_code == 201
    created_user = register_response.json()
    assert created_user["email"] == register_payload["email"]
    assert "password" not in created_user

    login_payload = {"email": register_payload["email"], "password": register_payload["password"]}
    login_response = client.post("/auth/login", json=login_payload)
    assert login_response.status_code == 200
    token_body = login_response.json()
    assert token_body["token_type"] == "bearer"

    headers = {"Authorization": f"Bearer {token_body['access_token']}"}
    me = client.get("/users/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["name"] == "Test User"
    assert me.json()["is_admin"] is False


def test_register_duplicate_email(client) -> None:
    payload = {"email": "dup@example.com", "password": "SecretPass123"}
    assert client.post("/auth/register", json=payload).status_code == 201
    assert client.post("/auth/register", json=payload).status_code == 400


def test_register_rejects_bad_email(client) -> None:
    r = client.post("/auth/register", json={"email": "not-an-email", "password": "SecretPass123"})
    assert r.status_code == 422


def test_login_wrong_password(client) -> None:
    client.post("/auth/register", json={"email": "u@example.com", "password": "SecretPass123"})
    r = client.post("/auth/login", json={"email": "u@example.com", "password": "wrong-password"})
    assert r.status_code == 401


def test_register_ignores_admin_fields(client) -> None:
    register_payload = {
        "email": "evil@example.com",
        "password": "SecretPass123",
        "is_admin": True,
    }
    assert client.post("/auth/register", json=register_payload).status_code == 201

    login_response = client.post("/auth/login", json={"email": "evil@example.com", "password": "SecretPass123"})
    headers = {"Authorization": f"Bearer {login_response.json()['access_token']}"}
    assert client.get("/users/me", headers=headers).json()["is_admin"] is False

    # Admin-only endpoint must remain forbidden.
    r = client.post(
        "/companies",
        json={"handle": "x", "name": "X", "description": "x"},
        headers=headers,
    )
    assert r.status_code == 403


def test_allowlisted_email_is_admin(client, admin_headers) -> None:
    assert client.get("/users/me", headers=admin_headers).json()["is_admin"] is True


def test_invalid_token_rejected(client) -> None:
    r = client.get("/users/me", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401


def test_expired_token_rejected(client) -> None:
    from datetime import timedelta

    from jobly.utils.jwt_handler import create_access_token

    client.post("/auth/register", json={"email": "late@example.com", "password": "SecretPass123"})
    me = client.post("/auth/login", json={"email": "late@example.com", "password": "SecretPass123"})
    assert me.status_code == 200

    token = create_access_token(1, expires_delta=timedelta(seconds=-10))
    r = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token expired"
