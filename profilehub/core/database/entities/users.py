"""
User entity models.

Users back the admin/viewer role switch. Passwords are stored as bcrypt hashes.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field

from ..base import Base, _utc_now, utc_timestamp_column


class UserRole(str, Enum):
    """Roles understood by the role switch."""

    ADMIN = "admin"
    VIEWER = "viewer"


class User(Base, table=True):
    """Persistent user account.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=128, unique=True, index=True)
    password: str = Field(description="bcrypt password hash")
    role: str = Field(default=UserRole.VIEWER.value, max_length=32)
    profile_image_url: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=_utc_now, sa_type=utc_timestamp_column())
    updated_at: datetime = Field(default_factory=_utc_now, sa_type=utc_timestamp_column())

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username}, role={self.role})"
