"""Create one notification per recipient and email each of them."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from learnsmart.config import get_settings
from learnsmart.domain.entities import Notification, User
from learnsmart.domain.errors import UpstreamError, ValidationError
from learnsmart.infrastructure.database import SessionLocal
from learnsmart.infrastructure.email import send_templated_email
from learnsmart.infrastructure.email_templates import template_for_notification_type
from learnsmart.infrastructure.notifications import FanOutQueue, dispatch_notification
from learnsmart.infrastructure.repositories import NotificationRepository, UserRepository

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]
MailSender = Callable[..., None]
Publisher = Callable[[Notification], None]


@dataclass(frozen=True)
class FanOutJob:
    """A content-creation event waiting to be announced to every other user."""

    exclude_user_id: str | None
    title: str
    content: str
    type: str
    email_details: str | None = None


@dataclass(frozen=True)
class FanOutResult:
    attempted: int
    succeeded: int


def _list_recipients(session_factory: SessionFactory, exclude_user_id: str | None) -> list[User]:
    session = session_factory()
    try:
        users = UserRepository(session).list()
    except SQLAlchemyError as exc:
        logger.error("Could not enumerate notification recipients: %s", exc)
        raise UpstreamError(f"Could not list users: {exc}") from exc
    finally:
        session.close()
    return [user for user in users if user.id != exclude_user_id]


def _insert_notification(
    session_factory: SessionFactory,
    notification: Notification,
    *,
    max_attempts: int,
) -> Notification | None:
    for attempt in range(1, max_attempts + 1):
        session = session_factory()
        try:
            return NotificationRepository(session).create(notification)
        except SQLAlchemyError as exc:
            session.rollback()
            logger.warning(
                "Attempt %s/%s to notify user %s failed: %s",
                attempt,
                max_attempts,
                notification.user_id,
                exc,
            )
        finally:
            session.close()
    return None


def notify_all(
    *,
    exclude_user_id: str | None,
    title: str,
    content: str,
    type: str,
    email_details: str | None = None,
    session_factory: SessionFactory | None = None,
    send_mail: MailSender = send_templated_email,
    publish: Publisher = dispatch_notification,
    concurrency: int | None = None,
    max_attempts: int | None = None,
) -> FanOutResult:
    """Notify every user except ``exclude_user_id``.

    Each recipient gets its own unread row, a realtime push and a best-effort
    email sent to the address stored for that user. Recipients are handled
    independently: a failure for one is logged and never stops the others,
    so a partial fan-out is a normal outcome.
    """

    settings = get_settings()
    session_factory = session_factory or SessionLocal
    concurrency = concurrency or settings.fanout_concurrency
    max_attempts = max_attempts or settings.fanout_max_attempts

    try:
        template = template_for_notification_type(type)
    except ValidationError:
        template = None

    recipients = _list_recipients(session_factory, exclude_user_id)
    if not recipients:
        return FanOutResult(attempted=0, succeeded=0)

    def deliver(recipient: User) -> bool:
        saved = _insert_notification(
            session_factory,
            Notification(
                id=None,
                user_id=recipient.id,
                title=title,
                content=content,
                type=type,
            ),
            max_attempts=max_attempts,
        )
        if saved is None:
            logger.error("Giving up on notification for user %s", recipient.id)
            return False

        publish(saved)

        if template is None or not recipient.email:
            return True
        try:
            send_mail(
                recipient.email,
                template,
                title=title,
                details=email_details or content,
            )
        except (UpstreamError, ValidationError) as exc:
            logger.warning("Notification email to %s failed: %s", recipient.email, exc)
        return True

    with ThreadPoolExecutor(max_workers=concurrency, thread_name_prefix="fan-out") as pool:
        outcomes = list(pool.map(deliver, recipients))

    result = FanOutResult(attempted=len(recipients), succeeded=sum(outcomes))
    logger.info(
        "Fan-out '%s' delivered %s/%s notifications",
        title,
        result.succeeded,
        result.attempted,
    )
    return result


def run_fan_out_job(job: FanOutJob) -> FanOutResult:
    return notify_all(
        exclude_user_id=job.exclude_user_id,
        title=job.title,
        content=job.content,
        type=job.type,
        email_details=job.email_details,
    )


fan_out_queue = FanOutQueue(run_fan_out_job)


def enqueue_fan_out(job: FanOutJob) -> None:
    """Queue ``job`` so the request path does not wait for every recipient."""

    fan_out_queue.enqueue(job)


__all__ = [
    "FanOutJob",
    "FanOutResult",
    "enqueue_fan_out",
    "fan_out_queue",
    "notify_all",
    "run_fan_out_job",
]
