"""
Setting repository interface and implementation.

Settings are addressed by key; writes are upserts.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlmodel import select

from ..base import _utc_now
from ..entities.settings import Setting
from .base import AsyncBaseRepository, QueryBuilder


class SettingRepository(AsyncBaseRepository[Setting]):
    """Repository for setting data access operations using SQLModel."""

    def __init__(self, session) -> None:
        super().__init__(session, Setting)

    async def get_by_key(self, key: str) -> Optional[Setting]:
        """Get a setting by its key.

        Args:
            key: Setting key

        Returns:
            Setting instance or None
        """
        stmt = select(Setting).where(Setting.key == key)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, setting: Setting) -> Setting:
        setting.updated_at = _utc_now()
        self.session.add(setting)
        await self.session.commit()
        await self.session.refresh(setting)
        return setting

    async def set_value(self, key: str, value: Any) -> Setting:
        """Create the setting or replace its value.

        Args:
            key: Setting key
            value: Any JSON-serializable value

        Returns:
            The stored Setting
        """
        setting = await self.get_by_key(key)
        if setting is None:
            return await self.create(Setting(key=key, value=value))
        setting.value = value
        return await self.update(setting)

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Setting]:
        stmt = select(Setting).order_by(Setting.key)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Setting, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
