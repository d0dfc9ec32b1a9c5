"""
API endpoints for custom fields attached to profiles.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from profilehub.core.database.entities.custom_fields import CustomField
from profilehub.core.logging_config import get_logger
from profilehub.core.models.io.custom_fields import (
    CustomFieldCreate,
    CustomFieldRead,
    CustomFieldValueUpdate,
)
from profilehub.server.services.deps import ReposDep, require_admin, require_authenticated

logger = get_logger(__name__)

router = APIRouter(tags=["custom-fields"])

CUSTOM_FIELD_NOT_FOUND = "Custom field not found"


@router.get(
    "/profiles/{profile_id}/custom-fields",
    response_model=list[CustomFieldRead],
    summary="List Custom Fields",
    dependencies=[Depends(require_authenticated)],
)
async def list_custom_fields(profile_id: int, repos: ReposDep) -> list[CustomFieldRead]:
    fields = await repos.custom_fields.list_by_profile(profile_id)
    return [CustomFieldRead.model_validate(f) for f in fields]


@router.post(
    "/profiles/{profile_id}/custom-fields",
    response_model=CustomFieldRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add Custom Field",
    description="Add a custom field to a profile. The profile is taken from the URL.",
    responses={400: {"description": "Invalid custom field data"}, 404: {"description": "Profile not found"}},
    dependencies=[Depends(require_admin)],
)
async def create_custom_field(profile_id: int, payload: CustomFieldCreate, repos: ReposDep) -> CustomFieldRead:
    if await repos.profiles.get_by_id(profile_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    field = await repos.custom_fields.create(CustomField(profile_id=profile_id, **payload.model_dump()))
    return CustomFieldRead.model_validate(field)


@router.put(
    "/custom-fields/{field_id}",
    response_model=CustomFieldRead,
    summary="Update Custom Field Value",
    responses={404: {"description": "Custom field not found"}},
    dependencies=[Depends(require_admin)],
)
async def update_custom_field(field_id: int, payload: CustomFieldValueUpdate, repos: ReposDep) -> CustomFieldRead:
    field = await repos.custom_fields.update_value(field_id, payload.field_value)
    if field is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CUSTOM_FIELD_NOT_FOUND)
    return CustomFieldRead.model_validate(field)


@router.delete(
    "/custom-fields/{field_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Custom Field",
    responses={404: {"description": "Custom field not found"}},
    dependencies=[Depends(require_admin)],
)
async def delete_custom_field(field_id: int, repos: ReposDep) -> None:
    if not await repos.custom_fields.delete(field_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CUSTOM_FIELD_NOT_FOUND)
