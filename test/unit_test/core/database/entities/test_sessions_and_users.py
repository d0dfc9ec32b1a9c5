"""Unit tests for user and login session entity models."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from profilehub.core.database.entities.sessions import LoginSession
from profilehub.core.database.entities.users import User, UserRole


def test_user_defaults_to_viewer():
    user = User(username="someone", password="hash")
    assert user.role == UserRole.VIEWER.value
    assert user.is_admin is False


def test_admin_user():
    assert User(username="admin", password="hash", role=UserRole.ADMIN.value).is_admin is True


def test_login_session_expiry():
    now = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    login_session = LoginSession(sid="abc123456789", sess={"role": "admin"}, expire=now + timedelta(minutes=5))

    assert login_session.role == "admin"
    assert login_session.is_expired(now) is False
    assert login_session.is_expired(now + timedelta(minutes=5)) is True


def test_login_session_without_role():
    login_session = LoginSession(sid="abc", sess={}, expire=datetime(2026, 1, 1, tzinfo=timezone.utc))
    assert login_session.role is None
