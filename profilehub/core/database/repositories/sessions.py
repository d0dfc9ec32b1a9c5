"""
Login session repository interface and implementation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import delete as sa_delete
from sqlmodel import select

from ..base import _utc_now
from ..entities.sessions import LoginSession
from .base import AsyncBaseRepository, QueryBuilder


class LoginSessionRepository(AsyncBaseRepository[LoginSession]):
    """Repository for login session data access operations using SQLModel."""

    def __init__(self, session) -> None:
        super().__init__(session, LoginSession)

    async def get_active(self, sid: str, now: Optional[datetime] = None) -> Optional[LoginSession]:
        """Get a session that has not expired yet.

        Args:
            sid: Session id
            now: Reference time, defaults to the current UTC time

        Returns:
            LoginSession or None if unknown or expired
        """
        login_session = await self.get_by_id(sid)
        if login_session is None or login_session.is_expired(now):
            return None
        return login_session

    async def update(self, login_session: LoginSession) -> LoginSession:
        self.session.add(login_session)
        await self.session.commit()
        await self.session.refresh(login_session)
        return login_session

    async def purge_expired(self, now: Optional[datetime] = None) -> int:
        """Delete all expired sessions.

        Returns:
            Number of deleted rows
        """
        stmt = sa_delete(LoginSession).where(LoginSession.expire <= (now or _utc_now()))
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[LoginSession]:
        stmt = select(LoginSession).order_by(LoginSession.expire.desc())
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, LoginSession, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
