"""
Profile entity models.

A profile is a contact-like record carrying a user-chosen profile id, a
searchable special id, name and contact details, and two flags used by the
favorites and archive views.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import EmailStr
from sqlmodel import Field

from ..base import Base, _utc_now, utc_timestamp_column


class ProfileBase(Base):
    """Base fields for a profile."""

    profile_id: str = Field(description="Custom profile identifier")
    special_id: str = Field(min_length=2, index=True, description="Special identifier used for searching")
    first_name: str = Field(description="Given name")
    last_name: str = Field(description="Family name")
    email: EmailStr = Field(description="Contact email address")
    phone: Optional[str] = Field(default=None, description="Contact phone number")
    description: Optional[str] = Field(default=None, description="Free-form description")
    profile_pic_url: Optional[str] = Field(default=None, description="URL of the profile picture")
    is_favorite: bool = Field(default=False, description="Shown in the favorites view")
    is_archived: bool = Field(default=False, description="Hidden from the default listing")


class Profile(ProfileBase, table=True):
    """Persistent profile record.

    Table: profiles
    """

    __tablename__ = "profiles"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    # Plain str column; validation happens on the Base model and the API schemas
    email: str = Field(description="Contact email address")

    created_at: datetime = Field(default_factory=_utc_now, sa_type=utc_timestamp_column())
    updated_at: datetime = Field(default_factory=_utc_now, index=True, sa_type=utc_timestamp_column())

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"Profile(id={self.id}, profile_id={self.profile_id}, name={self.full_name})"
