"""
Role Switch Service.

Implements the admin/viewer role switch. Viewers log in without a password.
The admin role is backed by a single seeded account whose password is kept
as a bcrypt hash in the ``users`` table. A successful login creates a row in
``sessions`` whose id is handed to the client as an opaque token.
"""

from __future__ import annotations

import secrets
from datetime import timedelta
from typing import Optional

import bcrypt

from profilehub.core.database.base import _utc_now
from profilehub.core.database.entities.sessions import LoginSession
from profilehub.core.database.entities.users import User, UserRole
from profilehub.core.database.repositories.bundle import SqlRepoBundle
from profilehub.core.logging_config import get_logger
from profilehub.server.core.config import AuthConfig

logger = get_logger(__name__)

BCRYPT_ROUNDS = 10


class AuthError(Exception):
    """Base class for role switch failures."""


class PasswordRequiredError(AuthError):
    """The admin role was requested without a password."""


class InvalidCredentialsError(AuthError):
    """The supplied admin password does not match."""


def hash_password(password: str) -> str:
    """Hash a password with bcrypt.

    Args:
        password: Plain-text password

    Returns:
        bcrypt hash as text
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plain-text password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed hash or a password bcrypt refuses to process
        return False


class AuthService:
    """Login, logout and session lookup for the role switch."""

    def __init__(self, repos: SqlRepoBundle, config: AuthConfig) -> None:
        self.repos = repos
        self.config = config

    async def ensure_admin_user(self) -> User:
        """Create the admin account if it does not exist yet.

        Returns:
            The admin User
        """
        user = await self.repos.users.get_by_username(self.config.admin_username)
        if user is not None:
            return user
        user = await self.repos.users.create(
            User(
                username=self.config.admin_username,
                password=hash_password(self.config.admin_password),
                role=UserRole.ADMIN.value,
            )
        )
        logger.info(f"Admin user '{user.username}' created")
        return user

    async def login(self, role: UserRole, password: Optional[str] = None) -> LoginSession:
        """Open a session for the requested role.

        Expired sessions are pruned before the new one is stored.

        Args:
            role: Role to log in as
            password: Admin password, ignored for viewers

        Returns:
            The persisted LoginSession

        Raises:
            PasswordRequiredError: admin requested without a password
            InvalidCredentialsError: admin password does not match
        """
        username: Optional[str] = None
        if role == UserRole.ADMIN:
            if not password:
                raise PasswordRequiredError("Password required")
            admin = await self.ensure_admin_user()
            if not verify_password(password, admin.password):
                logger.warning("Rejected admin login with an invalid password")
                raise InvalidCredentialsError("Invalid password")
            username = admin.username

        purged = await self.repos.sessions.purge_expired()
        if purged:
            logger.debug(f"Purged {purged} expired session(s)")

        login_session = LoginSession(
            sid=secrets.token_urlsafe(32),
            sess={"role": role.value, "username": username},
            expire=_utc_now() + timedelta(seconds=self.config.session_ttl_seconds),
        )
        login_session = await self.repos.sessions.create(login_session)
        logger.info(f"Opened {role.value} session")
        return login_session

    async def logout(self, sid: Optional[str]) -> bool:
        """Close a session.

        Returns:
            True if a session was deleted
        """
        if not sid:
            return False
        return await self.repos.sessions.delete(sid)

    async def resolve(self, sid: Optional[str]) -> Optional[LoginSession]:
        """Look up a non-expired session by id."""
        if not sid:
            return None
        return await self.repos.sessions.get_active(sid)
