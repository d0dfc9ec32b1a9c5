"""
Login session entity models.

A session row maps an opaque session id to the role it was issued for.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlmodel import JSON, Field

from ..base import Base, _utc_now, as_utc, utc_timestamp_column


class LoginSession(Base, table=True):
    """Persistent login session.

    Table: sessions
    """

    __tablename__ = "sessions"
    __table_args__ = ({"extend_existing": True},)

    sid: str = Field(primary_key=True, max_length=128)
    sess: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    expire: datetime = Field(index=True, sa_type=utc_timestamp_column())

    @property
    def role(self) -> Optional[str]:
        return self.sess.get("role")

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return as_utc(self.expire) <= as_utc(now or _utc_now())

    def __repr__(self) -> str:
        return f"LoginSession(sid={self.sid[:8]}..., role={self.role})"
