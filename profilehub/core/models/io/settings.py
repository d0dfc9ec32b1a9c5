"""
Setting I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Any

from .base import CamelModel, UtcDatetime


class SettingValue(CamelModel):
    """Schema for writing a setting. ``value`` may be any JSON value."""

    value: Any = None


class SettingRead(CamelModel):
    """Schema for reading a setting."""

    id: int
    key: str
    value: Any = None
    updated_at: UtcDatetime
