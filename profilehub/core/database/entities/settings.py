"""
Setting entity models.

Global application settings stored as JSON values under a unique key.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlmodel import JSON, Field

from ..base import Base, _utc_now, utc_timestamp_column


class Setting(Base, table=True):
    """Persistent key/value setting.

    Table: settings
    """

    __tablename__ = "settings"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    key: str = Field(max_length=255, unique=True, index=True)
    value: Optional[Any] = Field(default=None, sa_type=JSON)
    updated_at: datetime = Field(default_factory=_utc_now, sa_type=utc_timestamp_column())

    def __repr__(self) -> str:
        return f"Setting(key={self.key})"
