"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from anyio import from_thread

from learnsmart.domain.entities import Notification
from learnsmart.utils import isoformat_or_none

from .manager import NotificationConnectionManager, notification_manager

logger = logging.getLogger(__name__)


class NotificationPublisher:
    """Serialize notifications and schedule their delivery to the owner."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager

    def dispatch(self, notification: Notification) -> None:
        """Schedule ``notification`` to be delivered to its user."""

        if not notification.user_id:
            return
        message = {"type": "notification", "data": serialize_notification(notification)}
        self._schedule(notification.user_id, message)

    def _schedule(self, user_id: str, message: dict[str, Any]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            loop.create_task(self._manager.send_to_user(user_id, message))
            return

        bound_loop = self._manager.loop
        if bound_loop is not None and bound_loop.is_running():
            asyncio.run_coroutine_threadsafe(
                self._manager.send_to_user(user_id, message), bound_loop
            )
            return

        try:
            from_thread.run(self._manager.send_to_user, user_id, message)
        except RuntimeError:
            logger.debug("No event loop available; realtime push for %s skipped", user_id)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return {
        "id": notification.id,
        "user_id": notification.user_id,
        "title": notification.title,
        "content": notification.content,
        "type": notification.type,
        "read": notification.read,
        "created_at": isoformat_or_none(notification.created_at),
    }


notification_publisher = NotificationPublisher(notification_manager)


def dispatch_notification(notification: Notification) -> None:
    """Public helper that delegates to the shared publisher instance."""

    notification_publisher.dispatch(notification)


__all__ = [
    "NotificationPublisher",
    "dispatch_notification",
    "notification_publisher",
    "serialize_notification",
]
