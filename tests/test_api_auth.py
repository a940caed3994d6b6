"""Tests for authentication API endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ghkeep.models.user import User

BOB = {
    "username": "bob",
    "email": "bob@x.com",
    "password": "secret1",
    "githubKey": "ghkey1234567",
}


class TestRegisterEndpoint:
    """Tests for POST /api/auth/register."""

    @pytest.mark.asyncio
    async def test_register(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json=BOB)

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["username"] == "bob"
        assert user["email"] == "bob@x.com"
        assert user["githubKey"] == "ghkey1234567"
        assert "id" in user
        assert "password" not in user

    @pytest.mark.asyncio
    async def test_register_twice_keeps_one_record(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        await client.post("/api/auth/register", json=BOB)
        response = await client.post("/api/auth/register", json={**BOB, "username": "robert"})

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "robert"
        count = await db_session.scalar(select(func.count()).select_from(User))
        assert count == 1

    @pytest.mark.asyncio
    async def test_register_short_username(self, client: AsyncClient, db_session: AsyncSession):
        response = await client.post(
            "/api/auth/register",
            json={**BOB, "email": "a@b.c", "username": "ab"},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_FAILED"
        assert data["errors"] == {"username": "Min 3 characters"}
        assert "message" in data
        count = await db_session.scalar(select(func.count()).select_from(User))
        assert count == 0

    @pytest.mark.asyncio
    async def test_register_missing_fields(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={"email": "bob@x.com"})

        assert response.status_code == 422
        errors = response.json()["errors"]
        assert errors["username"] == "Username is required"
        assert errors["github_key"] == "GitHub key is required"
        assert errors["password"] == "Password is required"

    @pytest.mark.asyncio
    async def test_register_wrong_types(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={**BOB, "email": 42})

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_FAILED"
        assert "email" in data["errors"]

    @pytest.mark.asyncio
    async def test_register_wrong_github_key_type(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={**BOB, "githubKey": 42})

        assert response.status_code == 422
        errors = response.json()["errors"]
        assert "github_key" in errors
        assert "githubKey" not in errors


class TestLoginEndpoint:
    """Tests for POST /api/auth/login."""

    @pytest.mark.asyncio
    async def test_login(self, client: AsyncClient, test_user: User):
        response = await client.post(
            "/api/auth/login", json={"email": "bob@x.com", "password": "secret1"}
        )

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["id"] == test_user.id
        assert user["githubKey"] == "ghkey1234567"

    @pytest.mark.asyncio
    async def test_wrong_password(self, client: AsyncClient, test_user: User):
        response = await client.post(
            "/api/auth/login", json={"email": "bob@x.com", "password": "wrong"}
        )

        assert response.status_code == 401
        data = response.json()
        assert data["code"] == "INVALID_CREDENTIALS"
        assert data["message"] == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_unknown_email_matches_wrong_password(
        self, client: AsyncClient, test_user: User
    ):
        unknown = await client.post(
            "/api/auth/login", json={"email": "ghost@x.com", "password": "secret1"}
        )
        mismatch = await client.post(
            "/api/auth/login", json={"email": "bob@x.com", "password": "secret2"}
        )

        assert unknown.status_code == mismatch.status_code == 401
        assert unknown.json() == mismatch.json()

    @pytest.mark.asyncio
    async def test_invalid_email(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/login", json={"email": "bob", "password": "secret1"}
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {"email": "Invalid email"}


class TestAuthSessionManagement:
    """Tests for the session set by login/register."""

    @pytest.mark.asyncio
    async def test_me_unauthenticated(self, client: AsyncClient):
        response = await client.get("/api/auth/me")
        assert response.status_code == 401
        assert response.json() == {
            "message": "Not authenticated",
            "code": "NOT_AUTHENTICATED",
            "errors": {},
        }

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_payload(self, client: AsyncClient):
        response = await client.get("/api/auth/nope")

        assert response.status_code == 404
        data = response.json()
        assert data["code"] == "NOT_FOUND"
        assert data["errors"] == {}

    @pytest.mark.asyncio
    async def test_me_after_register(self, client: AsyncClient):
        await client.post("/api/auth/register", json=BOB)

        response = await client.get("/api/auth/me")
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "bob@x.com"

    @pytest.mark.asyncio
    async def test_me_after_login(self, client: AsyncClient, test_user: User):
        await client.post("/api/auth/login", json={"email": "bob@x.com", "password": "secret1"})

        response = await client.get("/api/auth/me")
        assert response.status_code == 200
        assert response.json()["user"]["id"] == test_user.id

    @pytest.mark.asyncio
    async def test_logout(self, client: AsyncClient, test_user: User):
        await client.post("/api/auth/login", json={"email": "bob@x.com", "password": "secret1"})

        response = await client.post("/api/auth/logout")
        assert response.status_code == 200

        response = await client.get("/api/auth/me")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_failed_login_does_not_authenticate(self, client: AsyncClient, test_user: User):
        await client.post("/api/auth/login", json={"email": "bob@x.com", "password": "nope123"})

        response = await client.get("/api/auth/me")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_security_headers(self, client: AsyncClient):
        response = await client.get("/api/auth/me")

        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Cache-Control"] == "no-store"
