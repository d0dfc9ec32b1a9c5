"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session, for easy injection into API endpoints and services.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .custom_fields import CustomFieldRepository
from .documents import DocumentRepository
from .profiles import ProfileRepository
from .sessions import LoginSessionRepository
from .settings import SettingRepository
from .users import UserRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    profiles: ProfileRepository
    documents: DocumentRepository
    custom_fields: CustomFieldRepository
    settings: SettingRepository
    users: UserRepository
    sessions: LoginSessionRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        profiles=ProfileRepository(session),
        documents=DocumentRepository(session),
        custom_fields=CustomFieldRepository(session),
        settings=SettingRepository(session),
        users=UserRepository(session),
        sessions=LoginSessionRepository(session),
    )
