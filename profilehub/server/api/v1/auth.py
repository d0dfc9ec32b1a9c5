"""
API endpoints for the admin/viewer role switch.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response, status

from profilehub.core.logging_config import get_logger
from profilehub.core.models.io.auth import AuthStatus, LoginRequest, LoginResponse, LogoutResponse
from profilehub.server.services.auth import InvalidCredentialsError, PasswordRequiredError
from profilehub.server.services.deps import AuthServiceDep, CurrentRoleDep, SettingsDep, extract_session_id

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log In",
    description="Log in as viewer, or as admin with the admin password.",
    responses={400: {"description": "Password required"}, 401: {"description": "Invalid password"}},
)
async def login(
    payload: LoginRequest,
    response: Response,
    auth_service: AuthServiceDep,
    settings: SettingsDep,
) -> LoginResponse:
    try:
        login_session = await auth_service.login(payload.role, payload.password)
    except PasswordRequiredError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e

    response.set_cookie(
        key=settings.auth.cookie_name,
        value=login_session.sid,
        max_age=settings.auth.session_ttl_seconds,
        httponly=True,
        samesite="lax",
    )
    return LoginResponse(role=payload.role, token=login_session.sid)


@router.post("/logout", response_model=LogoutResponse, summary="Log Out")
async def logout(
    request: Request,
    response: Response,
    auth_service: AuthServiceDep,
    settings: SettingsDep,
) -> LogoutResponse:
    await auth_service.logout(extract_session_id(request, settings))
    response.delete_cookie(settings.auth.cookie_name)
    return LogoutResponse()


@router.get("/me", response_model=AuthStatus, summary="Current Role")
async def me(role: CurrentRoleDep) -> AuthStatus:
    return AuthStatus(authenticated=role is not None, role=role)
