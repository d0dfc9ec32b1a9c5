"""
Unit tests for the role switch service.
"""

from datetime import timedelta

import pytest

from profilehub.core.database.base import _utc_now, as_utc
from profilehub.core.database.entities.users import UserRole
from profilehub.core.database.repositories.bundle import build_sql_repos_from_session
from profilehub.server.core.config import AuthConfig
from profilehub.server.services.auth import (
    AuthService,
    InvalidCredentialsError,
    PasswordRequiredError,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    def test_hash_and_verify(self):
        hashed = hash_password("201099")
        assert hashed != "201099"
        assert hashed.startswith("$2")
        assert verify_password("201099", hashed) is True
        assert verify_password("201098", hashed) is False

    def test_verify_against_malformed_hash(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


@pytest.fixture
def auth_service(session) -> AuthService:
    config = AuthConfig(ADMIN_USERNAME="root", ADMIN_PASSWORD="pw", SESSION_TTL_SECONDS=60)
    return AuthService(build_sql_repos_from_session(session=session), config)


class TestAuthService:
    @pytest.mark.asyncio
    async def test_ensure_admin_user_is_idempotent(self, auth_service: AuthService):
        first = await auth_service.ensure_admin_user()
        second = await auth_service.ensure_admin_user()

        assert first.id == second.id
        assert first.username == "root"
        assert first.is_admin
        assert verify_password("pw", first.password)

    @pytest.mark.asyncio
    async def test_viewer_login_ignores_password(self, auth_service: AuthService):
        login_session = await auth_service.login(UserRole.VIEWER, "whatever")
        assert login_session.role == "viewer"
        assert login_session.sess["username"] is None

    @pytest.mark.asyncio
    async def test_admin_login_sets_expiry(self, auth_service: AuthService):
        before = _utc_now()
        login_session = await auth_service.login(UserRole.ADMIN, "pw")

        assert login_session.role == "admin"
        assert login_session.sess["username"] == "root"
        expire = as_utc(login_session.expire)
        assert before + timedelta(seconds=59) <= expire <= _utc_now() + timedelta(seconds=60)

    @pytest.mark.asyncio
    async def test_admin_login_errors(self, auth_service: AuthService):
        with pytest.raises(PasswordRequiredError):
            await auth_service.login(UserRole.ADMIN, "")
        with pytest.raises(InvalidCredentialsError):
            await auth_service.login(UserRole.ADMIN, "nope")

    @pytest.mark.asyncio
    async def test_resolve_and_logout(self, auth_service: AuthService):
        login_session = await auth_service.login(UserRole.VIEWER)

        assert (await auth_service.resolve(login_session.sid)).sid == login_session.sid
        assert await auth_service.logout(login_session.sid) is True
        assert await auth_service.resolve(login_session.sid) is None
        assert await auth_service.logout(None) is False
        assert await auth_service.resolve(None) is None

    @pytest.mark.asyncio
    async def test_login_prunes_expired_sessions(self, session):
        repos = build_sql_repos_from_session(session=session)
        # Every session is already expired when it is stored
        config = AuthConfig(ADMIN_USERNAME="root", ADMIN_PASSWORD="pw", SESSION_TTL_SECONDS=-1)
        service = AuthService(repos, config)

        for _ in range(3):
            latest = await service.login(UserRole.VIEWER)

        assert [s.sid for s in await repos.sessions.list()] == [latest.sid]
