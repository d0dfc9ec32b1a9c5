"""
Unit tests for startup seeding.
"""

import pytest

from profilehub.core.database.repositories.bundle import build_sql_repos_from_session
from profilehub.server.core.config import AuthConfig
from profilehub.server.services.seed import DEFAULT_SETTINGS, seed_database

pytestmark = pytest.mark.asyncio


async def test_seed_creates_admin_and_settings(session):
    repos = build_sql_repos_from_session(session=session)

    created = await seed_database(repos, AuthConfig())

    assert sorted(created) == sorted(DEFAULT_SETTINGS)
    admin = await repos.users.get_by_username("admin")
    assert admin is not None and admin.is_admin
    assert (await repos.settings.get_by_key("defaultItemsPerPage")).value == 10


async def test_seed_keeps_existing_values(session):
    repos = build_sql_repos_from_session(session=session)
    await repos.settings.set_value("accentColor", "purple")

    created = await seed_database(repos, AuthConfig())
    again = await seed_database(repos, AuthConfig())

    assert "accentColor" not in created
    assert again == []
    assert (await repos.settings.get_by_key("accentColor")).value == "purple"
    assert len(await repos.users.list()) == 1
