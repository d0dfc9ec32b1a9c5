"""
Common base for API I/O models.

The browser client speaks camelCase JSON while the Python side uses
snake_case attributes; every I/O model accepts both spellings on input and
serializes with the camelCase aliases. Timestamps are always rendered as
UTC with an explicit offset, whatever the database driver hands back.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from profilehub.core.database.base import as_utc

UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """Base class for request and response schemas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
