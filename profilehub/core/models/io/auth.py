"""
Role switch I/O models.
"""

from __future__ import annotations

from typing import Optional

from profilehub.core.database.entities.users import UserRole

from .base import CamelModel


class LoginRequest(CamelModel):
    """Login with a role; the admin role requires the admin password."""

    role: UserRole
    password: Optional[str] = None


class LoginResponse(CamelModel):
    success: bool = True
    role: UserRole
    token: str


class LogoutResponse(CamelModel):
    success: bool = True
    message: str = "Logged out successfully"


class AuthStatus(CamelModel):
    """Who the caller is according to the presented session."""

    authenticated: bool
    role: Optional[UserRole] = None
