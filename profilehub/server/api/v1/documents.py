"""
API endpoints for documents attached to profiles.

Uploads arrive as multipart form data (field ``file``, optional ``name``).
Files are written to the upload directory and served under ``/uploads``.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from profilehub.core.database.entities.documents import Document
from profilehub.core.logging_config import get_logger
from profilehub.core.models.io.documents import DocumentRead
from profilehub.server.services.deps import (
    ReposDep,
    UploadStorageDep,
    require_admin,
    require_authenticated,
)
from profilehub.server.services.uploads import UploadTooLargeError

logger = get_logger(__name__)

router = APIRouter(tags=["documents"])


@router.get(
    "/profiles/{profile_id}/documents",
    response_model=list[DocumentRead],
    summary="List Profile Documents",
    description="Retrieve the documents attached to a profile, newest first.",
    dependencies=[Depends(require_authenticated)],
)
async def list_documents(profile_id: int, repos: ReposDep) -> list[DocumentRead]:
    documents = await repos.documents.list_by_profile(profile_id)
    return [DocumentRead.model_validate(d) for d in documents]


@router.post(
    "/profiles/{profile_id}/documents",
    response_model=DocumentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Upload Document",
    description="Attach a file to a profile.",
    responses={
        400: {"description": "No file uploaded"},
        404: {"description": "Profile not found"},
        413: {"description": "File too large"},
    },
    dependencies=[Depends(require_admin)],
)
async def upload_document(
    profile_id: int,
    repos: ReposDep,
    storage: UploadStorageDep,
    file: Optional[UploadFile] = File(default=None),
    name: Optional[str] = Form(default=None),
) -> DocumentRead:
    """
    Upload a document for a profile.

    - **file**: The file to attach.
    - **name**: Optional display name, defaults to the original file name.
    """
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")
    if await repos.profiles.get_by_id(profile_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")

    try:
        stored = await storage.save(file)
    except UploadTooLargeError as e:
        raise HTTPException(status_code=status.HTTP_413_CONTENT_TOO_LARGE, detail=str(e)) from e

    try:
        document = await repos.documents.create(
            Document(
                profile_id=profile_id,
                name=(name or "").strip() or stored.original_name,
                file_type=stored.content_type,
                file_url=stored.url,
                file_size=stored.size,
            )
        )
    except Exception:
        storage.remove(stored.url)
        raise

    logger.info(f"Uploaded document {document.id} for profile {profile_id} ({stored.size} bytes)")
    return DocumentRead.model_validate(document)


@router.delete(
    "/documents/{document_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Document",
    description="Delete a document and its stored file.",
    responses={404: {"description": "Document not found"}},
    dependencies=[Depends(require_admin)],
)
async def delete_document(document_id: int, repos: ReposDep, storage: UploadStorageDep) -> None:
    document = await repos.documents.get_by_id(document_id)
    if document is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")

    file_url = document.file_url
    await repos.documents.delete(document_id)
    # A missing file is logged by the storage and does not fail the request
    storage.remove(file_url)
