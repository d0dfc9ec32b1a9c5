"""
Custom field entity models.

Custom fields extend a profile with arbitrary name/value pairs.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class CustomFieldBase(Base):
    """Base fields for a custom field."""

    profile_id: int = Field(foreign_key="profiles.id", index=True, description="Owning profile")
    field_name: str = Field(min_length=1, description="Name of the field")
    field_value: Optional[str] = Field(default=None, description="Value of the field")
    field_type: str = Field(default="text", description="Input type hint for the client (text, number, date...)")


class CustomField(CustomFieldBase, table=True):
    """Persistent custom field.

    Table: custom_fields
    """

    __tablename__ = "custom_fields"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"CustomField(id={self.id}, profile_id={self.profile_id}, field_name={self.field_name})"
