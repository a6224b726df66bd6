"""Domain entity representing an elevated role granted to a user."""

from dataclasses import dataclass
from datetime import datetime

ROLE_SUB_ADMIN = "sub_admin"


@dataclass
class AdminRole:
    """Role row linking a user to an administrative capability."""

    id: int | None
    user_id: str
    role: str
    created_by: str | None
    created_at: datetime | None = None
    email: str | None = None


__all__ = ["AdminRole", "ROLE_SUB_ADMIN"]
