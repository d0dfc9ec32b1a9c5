"""
Document entity models.

Documents are files uploaded for a profile. The bytes live in the upload
directory; the row keeps the public URL and file metadata.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, _utc_now, utc_timestamp_column


class DocumentBase(Base):
    """Base fields for a document."""

    profile_id: int = Field(foreign_key="profiles.id", index=True, description="Owning profile")
    name: str = Field(description="Display name of the document")
    file_type: str = Field(description="MIME type declared by the uploader")
    file_url: str = Field(description="Public URL of the stored file")
    file_size: Optional[int] = Field(default=None, ge=0, description="Size in bytes")


class Document(DocumentBase, table=True):
    """Persistent document record.

    Table: documents
    """

    __tablename__ = "documents"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=_utc_now, sa_type=utc_timestamp_column())

    @property
    def stored_filename(self) -> str:
        """Name of the file inside the upload directory."""
        return self.file_url.rstrip("/").rsplit("/", 1)[-1]

    def __repr__(self) -> str:
        return f"Document(id={self.id}, profile_id={self.profile_id}, name={self.name})"
