"""Use cases reserved to administrators."""

from .roles import (
    add_sub_admin,
    is_content_manager,
    is_main_admin,
    is_sub_admin,
    list_sub_admins,
    remove_sub_admin,
)
from .users import delete_auth_user, list_auth_users

__all__ = [
    "add_sub_admin",
    "delete_auth_user",
    "is_content_manager",
    "is_main_admin",
    "is_sub_admin",
    "list_auth_users",
    "list_sub_admins",
    "remove_sub_admin",
]
