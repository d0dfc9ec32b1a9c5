"""
API endpoints for global application settings.

Settings are JSON values stored under a unique key. Writing a key that does
not exist yet creates it.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from profilehub.core.logging_config import get_logger
from profilehub.core.models.io.settings import SettingRead, SettingValue
from profilehub.server.services.deps import ReposDep, require_admin, require_authenticated

logger = get_logger(__name__)

router = APIRouter(tags=["settings"])


@router.get(
    "",
    response_model=list[SettingRead],
    summary="List Settings",
    dependencies=[Depends(require_authenticated)],
)
async def list_settings(repos: ReposDep) -> list[SettingRead]:
    return [SettingRead.model_validate(s) for s in await repos.settings.list()]


@router.get(
    "/{key}",
    response_model=SettingRead,
    summary="Get Setting",
    responses={404: {"description": "Setting not found"}},
    dependencies=[Depends(require_authenticated)],
)
async def get_setting(key: str, repos: ReposDep) -> SettingRead:
    setting = await repos.settings.get_by_key(key)
    if setting is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Setting not found")
    return SettingRead.model_validate(setting)


@router.put(
    "/{key}",
    response_model=SettingRead,
    summary="Set Setting",
    description="Create the setting or replace its value.",
    dependencies=[Depends(require_admin)],
)
async def put_setting(key: str, payload: SettingValue, repos: ReposDep) -> SettingRead:
    setting = await repos.settings.set_value(key, payload.value)
    logger.info(f"Setting '{key}' updated")
    return SettingRead.model_validate(setting)
