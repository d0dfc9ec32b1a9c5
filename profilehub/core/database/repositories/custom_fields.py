"""
Custom field repository interface and implementation.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlmodel import select

from ..entities.custom_fields import CustomField
from .base import AsyncBaseRepository, QueryBuilder


class CustomFieldRepository(AsyncBaseRepository[CustomField]):
    """Repository for custom field data access operations using SQLModel."""

    def __init__(self, session) -> None:
        super().__init__(session, CustomField)

    async def update(self, field: CustomField) -> CustomField:
        self.session.add(field)
        await self.session.commit()
        await self.session.refresh(field)
        return field

    async def update_value(self, field_id: int, value: Optional[str]) -> Optional[CustomField]:
        """Set the value of a custom field.

        Args:
            field_id: Custom field primary key
            value: New value (may be None)

        Returns:
            Updated CustomField or None if not found
        """
        field = await self.get_by_id(field_id)
        if field is None:
            return None
        field.field_value = value
        return await self.update(field)

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[CustomField]:
        stmt = select(CustomField).order_by(CustomField.id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, CustomField, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_profile(self, profile_id: int) -> List[CustomField]:
        """Custom fields of a profile in insertion order."""
        return await self.list(filters={"profile_id": profile_id})
