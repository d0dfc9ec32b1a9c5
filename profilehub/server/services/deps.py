"""
API Dependencies.

Provides the FastAPI dependencies shared by the API routers: database session,
repository bundle, settings, upload storage and the role switch guards.
"""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from profilehub.core.database import get_session
from profilehub.core.database.entities.users import UserRole
from profilehub.core.database.repositories.bundle import SqlRepoBundle, build_sql_repos_from_session
from profilehub.server.core.config import Settings, get_settings
from profilehub.server.services.auth import AuthService
from profilehub.server.services.uploads import UploadStorage

SessionDep = Annotated[AsyncSession, Depends(get_session)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_repos(session: SessionDep) -> SqlRepoBundle:
    """Repository bundle bound to the request's database session."""
    return build_sql_repos_from_session(session=session)


ReposDep = Annotated[SqlRepoBundle, Depends(get_repos)]


def get_upload_storage(settings: SettingsDep) -> UploadStorage:
    uploads = settings.uploads
    return UploadStorage(uploads.directory, uploads.max_bytes, uploads.url_prefix)


UploadStorageDep = Annotated[UploadStorage, Depends(get_upload_storage)]


def get_auth_service(repos: ReposDep, settings: SettingsDep) -> AuthService:
    return AuthService(repos, settings.auth)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


def extract_session_id(request: Request, settings: Settings) -> Optional[str]:
    """Read the session id from a bearer token or, failing that, the session cookie."""
    authorization = request.headers.get("Authorization", "")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    return request.cookies.get(settings.auth.cookie_name)


async def get_current_role(
    request: Request,
    settings: SettingsDep,
    auth_service: AuthServiceDep,
) -> Optional[UserRole]:
    """
    Role of the caller.

    With the role switch disabled every caller acts as admin. Otherwise the
    role comes from the presented session, or None when there is no valid one.
    """
    if not settings.auth.enabled:
        return UserRole.ADMIN
    login_session = await auth_service.resolve(extract_session_id(request, settings))
    if login_session is None or login_session.role is None:
        return None
    return UserRole(login_session.role)


CurrentRoleDep = Annotated[Optional[UserRole], Depends(get_current_role)]


async def require_authenticated(role: CurrentRoleDep) -> UserRole:
    """Guard for read endpoints: any logged-in role."""
    if role is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    return role


async def require_admin(role: CurrentRoleDep) -> UserRole:
    """Guard for mutating endpoints: admin role only."""
    if role is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    if role != UserRole.ADMIN:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return role
