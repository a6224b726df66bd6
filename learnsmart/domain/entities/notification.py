"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_TYPE_NOTE = "note"
NOTIFICATION_TYPE_QUIZ = "quiz"


@dataclass
class Notification:
    """Information message delivered to exactly one recipient."""

    id: int | None
    user_id: str
    title: str
    content: str
    type: str
    read: bool = False
    created_at: datetime | None = None


__all__ = ["Notification", "NOTIFICATION_TYPE_NOTE", "NOTIFICATION_TYPE_QUIZ"]
