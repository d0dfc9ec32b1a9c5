"""Unit tests for the setting, user and login session repositories."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from profilehub.core.database.entities.sessions import LoginSession
from profilehub.core.database.entities.users import User
from profilehub.core.database.repositories.bundle import build_sql_repos_from_session

pytestmark = pytest.mark.asyncio


@pytest.fixture
def repos(in_memory_session):
    return build_sql_repos_from_session(session=in_memory_session)


class TestSettingRepository:
    async def test_set_value_upserts(self, repos):
        created = await repos.settings.set_value("accentColor", "blue")
        updated = await repos.settings.set_value("accentColor", "red")

        assert created.id == updated.id
        assert (await repos.settings.get_by_key("accentColor")).value == "red"
        assert len(await repos.settings.list()) == 1

    async def test_json_values_round_trip(self, repos):
        await repos.settings.set_value("columns", {"visible": ["name", "email"], "width": 3})
        assert (await repos.settings.get_by_key("columns")).value == {"visible": ["name", "email"], "width": 3}

    async def test_missing_key(self, repos):
        assert await repos.settings.get_by_key("nope") is None


class TestUserRepository:
    async def test_get_by_username(self, repos):
        await repos.users.create(User(username="admin", password="hash", role="admin"))
        assert (await repos.users.get_by_username("admin")).is_admin
        assert await repos.users.get_by_username("ghost") is None


class TestLoginSessionRepository:
    async def test_get_active_honours_expiry(self, repos):
        now = datetime(2026, 3, 1, 9, 0, 0, tzinfo=timezone.utc)
        await repos.sessions.create(LoginSession(sid="live", sess={"role": "viewer"}, expire=now + timedelta(hours=1)))
        await repos.sessions.create(LoginSession(sid="dead", sess={"role": "viewer"}, expire=now - timedelta(hours=1)))

        assert (await repos.sessions.get_active("live", now)).sid == "live"
        assert await repos.sessions.get_active("dead", now) is None
        assert await repos.sessions.get_active("unknown", now) is None

    async def test_purge_expired(self, repos):
        now = datetime(2026, 3, 1, 9, 0, 0, tzinfo=timezone.utc)
        await repos.sessions.create(LoginSession(sid="live", sess={}, expire=now + timedelta(hours=1)))
        await repos.sessions.create(LoginSession(sid="dead", sess={}, expire=now - timedelta(hours=1)))

        assert await repos.sessions.purge_expired(now) == 1
        assert [s.sid for s in await repos.sessions.list()] == ["live"]
