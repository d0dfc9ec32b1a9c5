"""
Unit tests for the admin/viewer role switch.

Tests cover login and logout, session transport via bearer token and cookie,
and the read/write guards on the resource endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _login(client: AsyncClient, role: str, password=None):
    payload = {"role": role}
    if password is not None:
        payload["password"] = password
    return await client.post("/api/auth/login", json=payload)


class TestRoleSwitchDisabled:
    async def test_me_reports_admin(self, client: AsyncClient):
        response = await client.get("/api/auth/me")
        assert response.json() == {"authenticated": True, "role": "admin"}

    async def test_writes_allowed_without_login(self, client: AsyncClient, profile_payload: dict):
        response = await client.post("/api/profiles", json=profile_payload)
        assert response.status_code == 201


class TestLogin:
    async def test_viewer_login_without_password(self, auth_client: AsyncClient):
        response = await _login(auth_client, "viewer")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["role"] == "viewer"
        assert data["token"]
        assert "session_id" in response.cookies

    async def test_admin_login(self, auth_client: AsyncClient):
        response = await _login(auth_client, "admin", "s3cret")
        assert response.status_code == 200
        assert response.json()["role"] == "admin"

    async def test_admin_login_requires_password(self, auth_client: AsyncClient):
        response = await _login(auth_client, "admin")
        assert response.status_code == 400
        assert response.json()["message"] == "Password required"

    async def test_admin_login_wrong_password(self, auth_client: AsyncClient):
        response = await _login(auth_client, "admin", "wrong")
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid password"

    async def test_unknown_role(self, auth_client: AsyncClient):
        response = await _login(auth_client, "owner")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid login data"


class TestGuards:
    async def test_reads_require_session(self, auth_client: AsyncClient):
        response = await auth_client.get("/api/profiles")
        assert response.status_code == 401

    async def test_viewer_can_read_with_bearer_token(self, auth_client: AsyncClient):
        token = (await _login(auth_client, "viewer")).json()["token"]
        auth_client.cookies.clear()

        response = await auth_client.get("/api/profiles", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    async def test_viewer_cannot_write(self, auth_client: AsyncClient, profile_payload: dict):
        await _login(auth_client, "viewer")

        response = await auth_client.post("/api/profiles", json=profile_payload)

        assert response.status_code == 403
        assert response.json()["message"] == "Admin access required"

    async def test_admin_can_write_with_cookie(self, auth_client: AsyncClient, profile_payload: dict):
        await _login(auth_client, "admin", "s3cret")

        response = await auth_client.post("/api/profiles", json=profile_payload)

        assert response.status_code == 201

    async def test_invalid_token_is_rejected(self, auth_client: AsyncClient):
        response = await auth_client.get("/api/settings", headers={"Authorization": "Bearer bogus"})
        assert response.status_code == 401


class TestLogout:
    async def test_logout_ends_session(self, auth_client: AsyncClient):
        token = (await _login(auth_client, "viewer")).json()["token"]

        response = await auth_client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Logged out successfully"}
        me = await auth_client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.json() == {"authenticated": False, "role": None}

    async def test_logout_without_session(self, auth_client: AsyncClient):
        response = await auth_client.post("/api/auth/logout")
        assert response.status_code == 200
