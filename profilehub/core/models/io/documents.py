"""
Document I/O models for API responses.

Documents are created from multipart uploads, so there is no JSON create schema.
"""

from __future__ import annotations

from typing import Optional

from .base import CamelModel, UtcDatetime


class DocumentRead(CamelModel):
    """Schema for reading a document."""

    id: int
    profile_id: int
    name: str
    file_type: str
    file_url: str
    file_size: Optional[int] = None
    created_at: UtcDatetime
