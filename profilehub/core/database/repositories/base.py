"""
Shared repository machinery.

Every table repository derives from ``AsyncBaseRepository``, which supplies
the insert/lookup/delete round trips, and uses ``QueryBuilder`` to add
equality filters and limit/offset to its listing statements.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """Async repository bound to one session and one table entity."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        self.session = session
        self.model = model

    async def create(self, entity: EntityType) -> EntityType:
        """Insert a row and reload it so database defaults (ids) are filled in."""
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def get_by_id(self, entity_id: str | int) -> Optional[EntityType]:
        """Look up a row by primary key; None when absent."""
        return await self.session.get(self.model, entity_id)

    @abstractmethod
    async def update(self, entity: EntityType) -> EntityType:
        """Persist changes made to a loaded entity.

        Args:
            entity: Entity with modified attributes

        Returns:
            The refreshed entity
        """

    async def delete(self, entity_id: str | int) -> bool:
        """Remove a row by primary key.

        Returns:
            False when there was nothing to delete
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        await self.session.commit()
        return True

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """Rows of the table in the repository's natural order.

        Args:
            limit: Page size, or None for everything
            offset: Rows to skip
            filters: Column equality filters
        """


class QueryBuilder:
    """Helpers for composing select statements."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Add ``column == value`` conditions.

        Keys that are not attributes of ``model`` and ``None`` values are skipped.
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt
