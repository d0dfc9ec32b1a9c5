"""
API endpoints for managing profiles.

Provides the paginated and searchable profile listing, the favorites and
archive views, CRUD operations and the favorite/archive toggles.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from profilehub.core.database.entities.profiles import Profile
from profilehub.core.database.repositories.profiles import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from profilehub.core.logging_config import get_logger
from profilehub.core.models.io.profiles import (
    ProfileCreate,
    ProfilePage,
    ProfileRead,
    ProfileUpdate,
)
from profilehub.server.services.deps import (
    ReposDep,
    UploadStorageDep,
    require_admin,
    require_authenticated,
)

logger = get_logger(__name__)

router = APIRouter(tags=["profiles"])

PROFILE_NOT_FOUND = "Profile not found"


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """Parse a query value as a positive integer, falling back to ``default``."""
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value > 0 else default


@router.get(
    "",
    response_model=ProfilePage,
    summary="List Profiles",
    description="Retrieve one page of profiles, optionally filtered by a search term. Archived profiles are hidden unless requested.",
    response_description="The requested page and the total number of matching profiles.",
    dependencies=[Depends(require_authenticated)],
)
async def list_profiles(
    repos: ReposDep,
    page: Optional[str] = Query(default=None, description="1-based page number"),
    limit: Optional[str] = Query(default=None, description="Page size"),
    query: str = Query(default="", description="Matches first name, last name, email or special id"),
    include_archived: bool = Query(default=False, alias="includeArchived"),
    profile_type: Optional[str] = Query(default=None, alias="profileType", include_in_schema=False),
    profile_status: Optional[str] = Query(default=None, alias="status", include_in_schema=False),
) -> ProfilePage:
    """
    List profiles.

    - **page**: Page number, defaults to 1.
    - **limit**: Page size, defaults to 10 and is capped at 100.
    - **query**: Case-insensitive search term.
    - **includeArchived**: Include archived profiles in the result.
    """
    if profile_type or profile_status:
        # Profiles carry no type or status column
        logger.debug(f"Ignoring unsupported filters profileType={profile_type} status={profile_status}")

    profiles, total = await repos.profiles.search(
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_positive_int(limit, DEFAULT_PAGE_SIZE),
        query=query.strip(),
        include_archived=include_archived,
    )
    return ProfilePage(profiles=[ProfileRead.model_validate(p) for p in profiles], total=total)


@router.get(
    "/favorites",
    response_model=list[ProfileRead],
    summary="List Favorite Profiles",
    description="Retrieve all favorite profiles that are not archived, most recently updated first.",
    dependencies=[Depends(require_authenticated)],
)
async def list_favorite_profiles(repos: ReposDep) -> list[ProfileRead]:
    profiles = await repos.profiles.list_favorites()
    return [ProfileRead.model_validate(p) for p in profiles]


@router.get(
    "/archived",
    response_model=list[ProfileRead],
    summary="List Archived Profiles",
    description="Retrieve all archived profiles, most recently updated first.",
    dependencies=[Depends(require_authenticated)],
)
async def list_archived_profiles(repos: ReposDep) -> list[ProfileRead]:
    profiles = await repos.profiles.list_archived()
    return [ProfileRead.model_validate(p) for p in profiles]


@router.get(
    "/{profile_id}",
    response_model=ProfileRead,
    summary="Get Profile",
    responses={404: {"description": "Profile not found"}},
    dependencies=[Depends(require_authenticated)],
)
async def get_profile(profile_id: int, repos: ReposDep) -> ProfileRead:
    profile = await repos.profiles.get_by_id(profile_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROFILE_NOT_FOUND)
    return ProfileRead.model_validate(profile)


@router.post(
    "",
    response_model=ProfileRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Profile",
    responses={400: {"description": "Invalid profile data"}},
    dependencies=[Depends(require_admin)],
)
async def create_profile(payload: ProfileCreate, repos: ReposDep) -> ProfileRead:
    """
    Create a new profile.

    - **profileId**, **specialId** (at least 2 characters), **firstName**, **lastName** and a valid **email** are required.
    """
    profile = await repos.profiles.create(Profile(**payload.model_dump()))
    logger.info(f"Created profile {profile.id}")
    return ProfileRead.model_validate(profile)


@router.put(
    "/{profile_id}",
    response_model=ProfileRead,
    summary="Update Profile",
    description="Partially update a profile. Only the supplied fields change.",
    responses={400: {"description": "Invalid profile data"}, 404: {"description": "Profile not found"}},
    dependencies=[Depends(require_admin)],
)
async def update_profile(profile_id: int, payload: ProfileUpdate, repos: ReposDep) -> ProfileRead:
    profile = await repos.profiles.apply_changes(profile_id, payload.changes())
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROFILE_NOT_FOUND)
    return ProfileRead.model_validate(profile)


@router.delete(
    "/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Profile",
    description="Permanently delete a profile together with its documents and custom fields.",
    responses={404: {"description": "Profile not found"}},
    dependencies=[Depends(require_admin)],
)
async def delete_profile(profile_id: int, repos: ReposDep, storage: UploadStorageDep) -> None:
    documents = await repos.documents.list_by_profile(profile_id)
    if not await repos.profiles.delete(profile_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROFILE_NOT_FOUND)
    for document in documents:
        storage.remove(document.file_url)
    logger.info(f"Deleted profile {profile_id} and {len(documents)} document(s)")


@router.put(
    "/{profile_id}/favorite",
    response_model=ProfileRead,
    summary="Toggle Favorite",
    responses={404: {"description": "Profile not found"}},
    dependencies=[Depends(require_admin)],
)
async def toggle_favorite(profile_id: int, repos: ReposDep) -> ProfileRead:
    profile = await repos.profiles.toggle_favorite(profile_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROFILE_NOT_FOUND)
    return ProfileRead.model_validate(profile)


@router.put(
    "/{profile_id}/archive",
    response_model=ProfileRead,
    summary="Toggle Archived",
    responses={404: {"description": "Profile not found"}},
    dependencies=[Depends(require_admin)],
)
async def toggle_archived(profile_id: int, repos: ReposDep) -> ProfileRead:
    profile = await repos.profiles.toggle_archived(profile_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROFILE_NOT_FOUND)
    return ProfileRead.model_validate(profile)
