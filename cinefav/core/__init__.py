# cinefav/core/__init__.py

from .config import get_settings, Settings
from .auth import (
    verify_password,
    get_password_hash,
    create_access_token,
    create_user_token,
    verify_token,
)

__all__ = [
    "get_settings",
    "Settings",
    "verify_password",
    "get_password_hash",
    "create_access_token",
    "create_user_token",
    "verify_token",
]
