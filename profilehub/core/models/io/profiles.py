"""
Profile I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import EmailStr, Field

from .base import CamelModel, UtcDatetime

NULLABLE_FIELDS = frozenset({"phone", "description", "profile_pic_url"})


class ProfileCreate(CamelModel):
    """Schema for creating a profile."""

    profile_id: str = Field(min_length=1, description="Custom profile identifier")
    special_id: str = Field(min_length=2, description="Special identifier used for searching")
    first_name: str = Field(min_length=1, description="Given name")
    last_name: str = Field(min_length=1, description="Family name")
    email: EmailStr = Field(description="Contact email address")
    phone: Optional[str] = None
    description: Optional[str] = None
    profile_pic_url: Optional[str] = None
    is_favorite: bool = False
    is_archived: bool = False


class ProfileUpdate(CamelModel):
    """Schema for partially updating a profile. Only supplied fields change."""

    profile_id: Optional[str] = Field(default=None, min_length=1)
    special_id: Optional[str] = Field(default=None, min_length=2)
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    description: Optional[str] = None
    profile_pic_url: Optional[str] = None
    is_favorite: Optional[bool] = None
    is_archived: Optional[bool] = None

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly supplied by the client.

        An explicit null only clears columns that are nullable; for every other
        field it is treated as "not supplied".
        """
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }


class ProfileRead(CamelModel):
    """Schema for reading a profile."""

    id: int
    profile_id: str
    special_id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    description: Optional[str] = None
    profile_pic_url: Optional[str] = None
    is_favorite: bool
    is_archived: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime


class ProfilePage(CamelModel):
    """One page of the profile listing plus the total number of matches."""

    profiles: List[ProfileRead]
    total: int
