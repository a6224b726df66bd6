"""Use cases for reading notifications and flipping their read flag."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from learnsmart.domain.entities import Notification
from learnsmart.domain.errors import NotFoundError
from learnsmart.infrastructure.repositories import NotificationRepository


def list_unread_notifications(
    session: Session, user_id: str, *, skip: int = 0, limit: int | None = 50
) -> Sequence[Notification]:
    """Return unread notifications of ``user_id``, newest first."""

    return NotificationRepository(session).list_unread_for_user(
        user_id, skip=skip, limit=limit
    )


def mark_notification_read(
    session: Session, notification_id: int, *, user_id: str | None = None
) -> None:
    """Mark one notification as read.

    Marking an already read notification is a no-op. When ``user_id`` is
    given the notification must belong to it.
    """

    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None or (user_id is not None and notification.user_id != user_id):
        raise NotFoundError("Notification not found")
    repository.mark_read(notification_id, user_id=user_id)


def mark_all_notifications_read(session: Session, user_id: str) -> int:
    """Mark every currently unread notification of ``user_id`` as read."""

    return NotificationRepository(session).mark_all_read(user_id)


def unread_notification_count(session: Session, user_id: str) -> int:
    return NotificationRepository(session).unread_count(user_id)


__all__ = [
    "list_unread_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "unread_notification_count",
]
