"""Integration tests for authentication flow.

Tests the complete authentication flow with a real database and HTTP endpoints:
1. Registration → Login → Access protected endpoint
2. Invalid credentials handling
3. Authentication gate on protected routes
"""

from datetime import timedelta

import pytest

from app.infrastructure.config.settings import get_settings
from app.presentation.dependencies import get_token_service

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_complete_auth_flow(client):
    """Test register → login → /me with the issued token."""
    # Step 1: Register
    register_response = await client.post(
        "/api/auth/register",
        json={"username": "alice", "password": "secret123"},
    )
    assert register_response.status_code == 201
    user_data = register_response.json()
    assert user_data["username"] == "alice"
    assert "password" not in user_data
    assert "password_hash" not in user_data
    user_id = user_data["id"]

    # Step 2: Login with credentials
    login_response = await client.post(
        "/api/auth/login",
        json={"username": "alice", "password": "secret123"},
    )
    assert login_response.status_code == 200
    token_data = login_response.json()
    assert token_data["token_type"] == "bearer"
    assert token_data["expires_in"] == 24 * 60 * 60
    access_token = token_data["access_token"]

    # Step 3: Access protected endpoint with token
    me_response = await client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {access_token}"}
    )
    assert me_response.status_code == 200
    assert me_response.json()["id"] == user_id
    assert me_response.json()["username"] == "alice"


@pytest.mark.asyncio
async def test_register_accepts_unique_key_aliases(client):
    response = await client.post(
        "/api/auth/register", json={"uniqueKey": "Carol", "secret": "secret123"}
    )

    assert response.status_code == 201
    assert response.json()["username"] == "carol"


@pytest.mark.asyncio
async def test_register_duplicate_username(client):
    """Test a second registration of the same username is a 409."""
    # Arrange
    payload = {"username": "alice", "password": "secret123"}
    assert (await client.post("/api/auth/register", json=payload)).status_code == 201

    # Act
    response = await client.post(
        "/api/auth/register", json={"username": "ALICE", "password": "different1"}
    )

    # Assert
    assert response.status_code == 409
    assert response.json()["error_code"] == "USER_ALREADY_EXISTS"

    # The original credentials still work
    login = await client.post("/api/auth/login", json=payload)
    assert login.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"username": "dave", "password": "short"},
        {"username": "   ", "password": "secret123"},
        {"username": "dave"},
        {"password": "secret123"},
    ],
)
async def test_register_invalid_input(client, payload):
    """Test policy and schema failures are both 400 VALIDATION_ERROR."""
    response = await client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["error_code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_login_with_wrong_password(client, alice_headers):
    """Test login fails with incorrect password."""
    response = await client.post(
        "/api/auth/login", json={"username": "alice", "password": "wrongpass"}
    )

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert response.json()["error_code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_unknown_user_matches_wrong_password(client, alice_headers):
    """Test unknown usernames and wrong passwords get identical responses."""
    # Act
    wrong_password = await client.post(
        "/api/auth/login", json={"username": "alice", "password": "wrongpass"}
    )
    unknown_user = await client.post(
        "/api/auth/login", json={"username": "nobody", "password": "wrongpass"}
    )

    # Assert
    assert unknown_user.status_code == wrong_password.status_code == 401
    assert unknown_user.json() == wrong_password.json()


@pytest.mark.asyncio
async def test_me_without_token(client):
    response = await client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["error_code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_me_with_invalid_token(client):
    """Test a garbage bearer token is rejected."""
    response = await client.get(
        "/api/auth/me", headers={"Authorization": "Bearer not.a.token"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token"


@pytest.mark.asyncio
async def test_me_with_expired_token(client, alice_headers):
    """Test an expired but correctly signed token is rejected as expired."""
    # Arrange
    me = await client.get("/api/auth/me", headers=alice_headers)
    token_service = get_token_service(get_settings())
    expired = token_service.generate_access_token(
        user_id=me.json()["id"], username="alice", expires_delta=timedelta(seconds=-1)
    )

    # Act
    response = await client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {expired}"}
    )

    # Assert
    assert response.status_code == 401
    assert response.json()["detail"] == "Token has expired"


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "running"


@pytest.mark.asyncio
async def test_wrong_password_changes_nothing(client):
    """Test a rejected login leaves the account exactly as it was."""
    # Arrange
    register = await client.post(
        "/api/auth/register", json={"username": "alice", "password": "secret123"}
    )

    # Act
    rejected = await client.post(
        "/api/auth/login", json={"username": "alice", "password": "wrongpass"}
    )

    # Assert
    assert rejected.status_code == 401
    assert "access_token" not in rejected.json()
    accepted = await client.post(
        "/api/auth/login", json={"username": "alice", "password": "secret123"}
    )
    me = await client.get(
        "/api/auth/me",
        headers={"Authorization": f"Bearer {accepted.json()['access_token']}"},
    )
    assert me.json() == register.json()
