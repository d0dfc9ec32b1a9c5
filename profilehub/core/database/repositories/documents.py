"""
Document repository interface and implementation.

This module provides data access operations for documents attached to profiles.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlmodel import select

from ..entities.documents import Document
from .base import AsyncBaseRepository, QueryBuilder


class DocumentRepository(AsyncBaseRepository[Document]):
    """Repository for document data access operations using SQLModel."""

    def __init__(self, session) -> None:
        super().__init__(session, Document)

    async def update(self, document: Document) -> Document:
        self.session.add(document)
        await self.session.commit()
        await self.session.refresh(document)
        return document

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Document]:
        """List documents, newest first.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (profile_id, file_type)

        Returns:
            List of Document instances
        """
        stmt = select(Document).order_by(Document.created_at.desc(), Document.id.desc())
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Document, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_profile(self, profile_id: int) -> List[Document]:
        """Documents attached to a profile, newest first."""
        return await self.list(filters={"profile_id": profile_id})
