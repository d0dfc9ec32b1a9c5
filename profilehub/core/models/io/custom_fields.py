"""
Custom field I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import CamelModel


class CustomFieldCreate(CamelModel):
    """Schema for adding a custom field to a profile.

    The owning profile comes from the URL path.
    """

    field_name: str = Field(min_length=1, description="Name of the field")
    field_value: Optional[str] = Field(default=None, description="Value of the field")
    field_type: str = Field(default="text", description="Input type hint for the client")


class CustomFieldValueUpdate(CamelModel):
    """Schema for changing the value of a custom field."""

    field_value: Optional[str] = None


class CustomFieldRead(CamelModel):
    """Schema for reading a custom field."""

    id: int
    profile_id: int
    field_name: str
    field_value: Optional[str] = None
    field_type: str
