"""
Database entity models.

Each module represents one database table:
- profiles: Contact-like profile records with favorite/archive flags
- documents: Files attached to a profile
- custom_fields: Ad-hoc name/value pairs attached to a profile
- settings: Global key/value application settings
- users: Accounts backing the admin/viewer role switch
- sessions: Login sessions issued by the role switch
"""

from . import (
    custom_fields,
    documents,
    profiles,
    sessions,
    settings,
    users,
)

__all__ = [
    "custom_fields",
    "documents",
    "profiles",
    "sessions",
    "settings",
    "users",
]
