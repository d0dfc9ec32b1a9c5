"""Initial schema and seed data for ProfileHub

Revision ID: 20261017_000000
Revises: None
Create Date: 2026-10-17 00:00:00.000000

This is the initial migration that creates all tables and seeds default data:
- profiles, documents, custom_fields, settings, users, sessions
- The admin account of the role switch
- Default application settings

Revision format: YYYYMMDD_HHMMSS_description

"""

import os
from datetime import datetime, timezone
from typing import Sequence, Union

import bcrypt
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261017_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_SETTINGS = {
    "accentColor": "blue",
    "defaultItemsPerPage": 10,
    "defaultSortOrder": "newest",
    "showArchivedByDefault": False,
    "emailNotifications": False,
}

JSON_TYPE = sa.JSON().with_variant(JSONB(), "postgresql")


def upgrade() -> None:
    """Create all tables and seed initial data."""

    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("profile_id", sa.String(), nullable=False),
        sa.Column("special_id", sa.String(), nullable=False),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("profile_pic_url", sa.String(), nullable=True),
        sa.Column("is_favorite", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_archived", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_profiles_special_id", "special_id"),
        sa.Index("ix_profiles_updated_at", "updated_at"),
    )

    op.create_table(
        "documents",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("file_type", sa.String(), nullable=False),
        sa.Column("file_url", sa.String(), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"]),
        sa.Index("ix_documents_profile_id", "profile_id"),
    )

    op.create_table(
        "custom_fields",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("field_name", sa.String(), nullable=False),
        sa.Column("field_value", sa.String(), nullable=True),
        sa.Column("field_type", sa.String(), nullable=False, server_default="text"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"]),
        sa.Index("ix_custom_fields_profile_id", "profile_id"),
    )

    settings_table = op.create_table(
        "settings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("key", sa.String(255), nullable=False),
        sa.Column("value", JSON_TYPE, nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_settings_key", "key", unique=True),
    )

    users_table = op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(128), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        sa.Column("role", sa.String(32), nullable=False, server_default="viewer"),
        sa.Column("profile_image_url", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_users_username", "username", unique=True),
    )

    op.create_table(
        "sessions",
        sa.Column("sid", sa.String(128), nullable=False),
        sa.Column("sess", JSON_TYPE, nullable=False),
        sa.Column("expire", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("sid"),
        sa.Index("ix_sessions_expire", "expire"),
    )

    # ========================================================================
    # Seed data
    # ========================================================================
    now = datetime.now(timezone.utc)

    admin_password = os.getenv("ADMIN_PASSWORD", "201099")
    op.bulk_insert(
        users_table,
        [
            {
                "username": os.getenv("ADMIN_USERNAME", "admin"),
                "password": bcrypt.hashpw(admin_password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8"),
                "role": "admin",
                "created_at": now,
                "updated_at": now,
            }
        ],
    )

    op.bulk_insert(
        settings_table,
        [{"key": key, "value": value, "updated_at": now} for key, value in DEFAULT_SETTINGS.items()],
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("sessions")
    op.drop_table("users")
    op.drop_table("settings")
    op.drop_table("custom_fields")
    op.drop_table("documents")
    op.drop_table("profiles")
