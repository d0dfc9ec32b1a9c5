"""
Startup seeding.

Creates the admin account of the role switch and the default application
settings. Existing rows are never overwritten, so seeding is safe to run on
every startup.
"""

from __future__ import annotations

from typing import Any, Dict, List

from profilehub.core.database.repositories.bundle import SqlRepoBundle
from profilehub.core.logging_config import get_logger
from profilehub.server.core.config import AuthConfig
from profilehub.server.services.auth import AuthService

logger = get_logger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    "accentColor": "blue",
    "defaultItemsPerPage": 10,
    "defaultSortOrder": "newest",
    "showArchivedByDefault": False,
    "emailNotifications": False,
}


async def seed_database(repos: SqlRepoBundle, auth_config: AuthConfig) -> List[str]:
    """Seed the admin user and any missing default settings.

    Args:
        repos: Repository bundle bound to an open session
        auth_config: Role switch configuration naming the admin account

    Returns:
        Keys of the settings that were created
    """
    await AuthService(repos, auth_config).ensure_admin_user()

    created: List[str] = []
    for key, value in DEFAULT_SETTINGS.items():
        if await repos.settings.get_by_key(key) is None:
            await repos.settings.set_value(key, value)
            created.append(key)
    if created:
        logger.info(f"Seeded default settings: {', '.join(created)}")
    return created
