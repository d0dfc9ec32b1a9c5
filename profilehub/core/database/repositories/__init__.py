"""
Database repository layer using SQLModel.

Each module provides async data access operations for its corresponding
SQLModel entity, built on the shared AsyncBaseRepository and QueryBuilder.

Modules:
- base: AsyncBaseRepository interface and QueryBuilder utilities
- profiles: Profile search, views and flag toggles
- documents: Documents attached to profiles
- custom_fields: Custom fields attached to profiles
- settings: Key/value settings with upsert
- users: Role switch accounts
- sessions: Login sessions
- bundle: All repositories sharing one session
"""

from .bundle import SqlRepoBundle, build_sql_repos_from_session
from .custom_fields import CustomFieldRepository
from .documents import DocumentRepository
from .profiles import ProfileRepository
from .sessions import LoginSessionRepository
from .settings import SettingRepository
from .users import UserRepository

__all__ = [
    "CustomFieldRepository",
    "DocumentRepository",
    "LoginSessionRepository",
    "ProfileRepository",
    "SettingRepository",
    "SqlRepoBundle",
    "UserRepository",
    "build_sql_repos_from_session",
]
