"""
Document Upload Storage.

Stores uploaded files in a local directory under collision-free names of the
form ``<epoch-ms>-<uuid4><original extension>`` and exposes them under a
public URL prefix.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from profilehub.core.logging_config import get_logger

logger = get_logger(__name__)

CHUNK_SIZE = 64 * 1024


class UploadTooLargeError(Exception):
    """The uploaded file exceeds the configured size limit."""

    def __init__(self, max_bytes: int) -> None:
        super().__init__(f"File exceeds the {max_bytes} byte limit")
        self.max_bytes = max_bytes


@dataclass(frozen=True)
class StoredFile:
    """Result of storing an upload."""

    filename: str
    url: str
    size: int
    content_type: str
    original_name: str


class UploadStorage:
    """Local directory storage for uploaded documents."""

    def __init__(self, directory: str | Path, max_bytes: int, url_prefix: str = "/uploads") -> None:
        self.directory = Path(directory)
        self.max_bytes = max_bytes
        self.url_prefix = url_prefix.rstrip("/")

    def ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def unique_name(original_name: str) -> str:
        """Build a collision-free file name keeping the original extension."""
        return f"{int(time.time() * 1000)}-{uuid.uuid4()}{Path(original_name).suffix}"

    async def save(self, upload: UploadFile) -> StoredFile:
        """Write an upload to the storage directory.

        Args:
            upload: Incoming multipart file

        Returns:
            Description of the stored file

        Raises:
            UploadTooLargeError: the file is larger than ``max_bytes``; nothing is kept on disk
        """
        self.ensure_directory()
        original_name = upload.filename or "upload"
        filename = self.unique_name(original_name)
        target = self.directory / filename

        size = 0
        try:
            with target.open("wb") as out:
                while chunk := await upload.read(CHUNK_SIZE):
                    size += len(chunk)
                    if size > self.max_bytes:
                        raise UploadTooLargeError(self.max_bytes)
                    out.write(chunk)
        except BaseException:
            target.unlink(missing_ok=True)
            raise

        logger.debug(f"Stored upload '{original_name}' as {filename} ({size} bytes)")
        return StoredFile(
            filename=filename,
            url=f"{self.url_prefix}/{filename}",
            size=size,
            content_type=upload.content_type or "application/octet-stream",
            original_name=original_name,
        )

    def path_for_url(self, file_url: str) -> Optional[Path]:
        """Map a public file URL back to its path inside the storage directory.

        Returns:
            Path of the file, or None if the URL does not belong to this storage
        """
        if not file_url.startswith(f"{self.url_prefix}/"):
            return None
        name = file_url[len(self.url_prefix) + 1 :]
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            return None
        return self.directory / name

    def remove(self, file_url: str) -> bool:
        """Delete the file behind a public URL.

        A file that is already gone is logged and otherwise ignored.

        Returns:
            True if a file was deleted
        """
        path = self.path_for_url(file_url)
        if path is None:
            logger.warning(f"Not removing file outside the upload directory: {file_url}")
            return False
        try:
            path.unlink()
            return True
        except FileNotFoundError:
            logger.warning(f"Document file already missing: {path}")
            return False
        except OSError as e:
            logger.error(f"Error deleting document file {path}: {e}")
            return False
