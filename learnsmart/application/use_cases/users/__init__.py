"""Use cases for managing user accounts."""

from .authenticate_user import authenticate_user
from .register_user import create_account, ensure_valid_password, register_user
from .reset_password import reset_password

__all__ = [
    "authenticate_user",
    "create_account",
    "ensure_valid_password",
    "register_user",
    "reset_password",
]
