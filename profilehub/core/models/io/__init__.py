"""
I/O models for API requests and responses.

These Pydantic schemas define the contract between API endpoints and clients.
They are separate from database entities so the two can evolve independently.

Modules:
- profiles: Profile create/update/read models and the listing page
- documents: Document read model
- custom_fields: Custom field create/update/read models
- settings: Setting write/read models
- auth: Role switch login/logout models
"""

from .auth import AuthStatus, LoginRequest, LoginResponse, LogoutResponse
from .custom_fields import CustomFieldCreate, CustomFieldRead, CustomFieldValueUpdate
from .documents import DocumentRead
from .profiles import ProfileCreate, ProfilePage, ProfileRead, ProfileUpdate
from .settings import SettingRead, SettingValue

__all__ = [
    "AuthStatus",
    "CustomFieldCreate",
    "CustomFieldRead",
    "CustomFieldValueUpdate",
    "DocumentRead",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "ProfileCreate",
    "ProfilePage",
    "ProfileRead",
    "ProfileUpdate",
    "SettingRead",
    "SettingValue",
]
