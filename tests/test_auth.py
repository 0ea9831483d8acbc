"""Registration, login, profile and token refresh over HTTP."""
from inventory_api.core.security import create_access_token


def _register(client, email="new@example.com", password="secret123"):
    return client.post("/auth/register", json={"email": email, "password": password})


def test_register_returns_user_without_password(client):
    resp = _register(client, email="  New@Example.com ")
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["message"] == "User created successfully"
    assert body["user"]["email"] == "new@example.com"
    assert body["user"]["id"] > 0
    assert "password" not in body["user"]
    assert "password_hash" not in body["user"]


def test_register_duplicate_email(client):
    assert _register(client).status_code == 201
    resp = _register(client, email="NEW@example.com")
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "USR100"
    assert resp.json()["error"]["message"] == "user already exists"


def test_register_validation(client):
    assert _register(client, password="12345").status_code == 422
    assert _register(client, email="not-an-email").status_code == 422
    assert client.post("/auth/register", json={"email": "x@example.com"}).status_code == 422


def test_login_success(client):
    _register(client)
    resp = client.post("/auth/login", json={"email": "new@example.com", "password": "secret123"})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["message"] == "Login successful"
    assert body["token"]
    assert body["user"]["email"] == "new@example.com"


def test_login_wrong_password_and_unknown_email_look_the_same(client):
    _register(client)
    wrong = client.post("/auth/login", json={"email": "new@example.com", "password": "nope123"})
    unknown = client.post("/auth/login", json={"email": "ghost@example.com", "password": "secret123"})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json()
    assert wrong.json()["error"]["message"] == "invalid credentials"


def test_profile_requires_token(client):
    resp = client.get("/auth/profile")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Missing token"


def test_profile_rejects_bad_token(client):
    resp = client.get("/auth/profile", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid token"


def test_profile_rejects_expired_token(client):
    user_id = _register(client).json()["user"]["id"]
    token = create_access_token(user_id, "new@example.com", expires_minutes=-5)
    resp = client.get("/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Token expired"


def test_profile_returns_current_user(client, auth_headers):
    resp = client.get("/auth/profile", headers=auth_headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["user"]["email"] == "tester@example.com"


def test_refresh_issues_usable_token(client, auth_headers):
    resp = client.post("/auth/refresh", headers=auth_headers)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["message"] == "Token refreshed successfully"
    profile = client.get("/auth/profile", headers={"Authorization": f"Bearer {body['token']}"})
    assert profile.status_code == 200


def test_token_for_deleted_user_is_not_found(client):
    token = create_access_token(999, "ghost@example.com")
    resp = client.get("/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "USR102"


def test_versioned_prefix(client):
    resp = client.post("/api/v1/auth/register", json={"email": "v1@example.com", "password": "secret123"})
    assert resp.status_code == 201
    resp = client.post("/api/v1/auth/login", json={"email": "v1@example.com", "password": "secret123"})
    assert resp.status_code == 200
