"""Domain entity representing a registered user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Identity exposed by the credential provider."""

    id: str | None
    email: str
    password: str
    created_at: datetime | None = None

    def matches_email(self, email: str | None) -> bool:
        """Return ``True`` when ``email`` designates this user."""

        if not email:
            return False
        return self.email.strip().lower() == email.strip().lower()


__all__ = ["User"]
