"""
Profile repository interface and implementation.

This module provides data access operations for profiles, including the
paginated search behind the main listing, the favorites and archive views,
and the flag toggles.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete as sa_delete
from sqlalchemy import func, or_
from sqlalchemy import select as sa_select
from sqlmodel import select

from ..base import _utc_now
from ..entities.custom_fields import CustomField
from ..entities.documents import Document
from ..entities.profiles import Profile
from .base import AsyncBaseRepository, QueryBuilder

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# Largest OFFSET a 64-bit database integer can hold
MAX_OFFSET = 2**63 - 1


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally (escape character is a backslash)."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ProfileRepository(AsyncBaseRepository[Profile]):
    """Repository for profile data access operations using SQLModel."""

    def __init__(self, session) -> None:
        super().__init__(session, Profile)

    async def update(self, profile: Profile) -> Profile:
        """Persist changes made to a profile and bump its update timestamp.

        Args:
            profile: Profile instance with updated fields

        Returns:
            Updated Profile instance
        """
        profile.updated_at = _utc_now()
        self.session.add(profile)
        await self.session.commit()
        await self.session.refresh(profile)
        return profile

    async def apply_changes(self, profile_id: int, changes: Dict[str, Any]) -> Optional[Profile]:
        """Apply a partial update to a profile.

        Args:
            profile_id: Profile primary key
            changes: Field values to set; keys that are not profile fields are ignored

        Returns:
            Updated Profile or None if not found
        """
        profile = await self.get_by_id(profile_id)
        if profile is None:
            return None
        for key, value in changes.items():
            if key in Profile.model_fields and key not in ("id", "created_at", "updated_at"):
                setattr(profile, key, value)
        return await self.update(profile)

    async def delete(self, profile_id: str | int) -> bool:
        """Delete a profile together with its documents and custom fields.

        Args:
            profile_id: Profile primary key

        Returns:
            True if deleted, False if not found
        """
        profile = await self.get_by_id(profile_id)
        if profile is None:
            return False
        await self.session.execute(sa_delete(Document).where(Document.profile_id == profile.id))
        await self.session.execute(sa_delete(CustomField).where(CustomField.profile_id == profile.id))
        await self.session.delete(profile)
        await self.session.commit()
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Profile]:
        """List profiles, most recently updated first.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Equality filters on profile fields (e.g. is_favorite, is_archived)

        Returns:
            List of Profile instances
        """
        stmt = select(Profile).order_by(Profile.updated_at.desc(), Profile.id.desc())
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Profile, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def search(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
        query: str = "",
        include_archived: bool = False,
    ) -> Tuple[List[Profile], int]:
        """Search profiles with pagination.

        The query matches case-insensitively anywhere in the first name,
        last name, email or special id. Archived profiles are left out unless
        ``include_archived`` is set.

        Args:
            page: 1-based page number
            limit: Page size, capped at MAX_PAGE_SIZE
            query: Free-text search term
            include_archived: Whether archived profiles are part of the result

        Returns:
            Tuple of the requested page and the total number of matches. A page
            past the largest representable offset is empty.
        """
        conditions = []
        if query:
            pattern = f"%{escape_like(query)}%"
            conditions.append(
                or_(
                    Profile.first_name.ilike(pattern, escape="\\"),
                    Profile.last_name.ilike(pattern, escape="\\"),
                    Profile.email.ilike(pattern, escape="\\"),
                    Profile.special_id.ilike(pattern, escape="\\"),
                )
            )
        if not include_archived:
            conditions.append(Profile.is_archived == False)  # noqa: E712

        count_stmt = sa_select(func.count(Profile.id))
        page_stmt = select(Profile).order_by(Profile.updated_at.desc(), Profile.id.desc())
        for condition in conditions:
            count_stmt = count_stmt.where(condition)
            page_stmt = page_stmt.where(condition)

        total = (await self.session.execute(count_stmt)).scalar_one()

        limit = min(limit, MAX_PAGE_SIZE)
        offset = (page - 1) * limit
        if offset > MAX_OFFSET:
            return [], int(total or 0)

        page_stmt = QueryBuilder.apply_pagination(page_stmt, limit, offset)
        result = await self.session.execute(page_stmt)
        return list(result.scalars().all()), int(total or 0)

    async def list_favorites(self) -> List[Profile]:
        """Favorite profiles that are not archived."""
        return await self.list(filters={"is_favorite": True, "is_archived": False})

    async def list_archived(self) -> List[Profile]:
        """Archived profiles."""
        return await self.list(filters={"is_archived": True})

    async def toggle_favorite(self, profile_id: int) -> Optional[Profile]:
        """Flip the favorite flag of a profile.

        Returns:
            Updated Profile or None if not found
        """
        profile = await self.get_by_id(profile_id)
        if profile is None:
            return None
        profile.is_favorite = not profile.is_favorite
        return await self.update(profile)

    async def toggle_archived(self, profile_id: int) -> Optional[Profile]:
        """Flip the archived flag of a profile.

        Returns:
            Updated Profile or None if not found
        """
        profile = await self.get_by_id(profile_id)
        if profile is None:
            return None
        profile.is_archived = not profile.is_archived
        return await self.update(profile)
