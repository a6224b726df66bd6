"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from learnsmart.domain.entities import Notification
from learnsmart.infrastructure.models import NotificationModel
from learnsmart.utils import ensure_app_naive_datetime, ensure_app_timezone


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list_unread_for_user(
        self, user_id: str, *, skip: int = 0, limit: int | None = 50
    ) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.read.is_(False))
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        return self._paginate(query, skip=skip, limit=limit)

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            user_id=notification.user_id,
            title=notification.title,
            content=notification.content,
            type=notification.type,
            read=False,
        )
        if notification.created_at is not None:
            model.created_at = ensure_app_naive_datetime(notification.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_read(self, notification_id: int, *, user_id: str | None = None) -> int:
        """Flip ``read`` to true; rows that are already read are left untouched."""

        query = self.session.query(NotificationModel).filter(
            NotificationModel.id == notification_id,
            NotificationModel.read.is_(False),
        )
        if user_id is not None:
            query = query.filter(NotificationModel.user_id == user_id)
        updated = query.update({NotificationModel.read: True}, synchronize_session=False)
        self.session.commit()
        return updated

    def mark_many_read(self, notification_ids: Sequence[int], *, user_id: str) -> int:
        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        if not ids:
            return 0
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.user_id == user_id,
                NotificationModel.read.is_(False),
            )
            .update({NotificationModel.read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    def mark_all_read(self, user_id: str) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.read.is_(False),
            )
            .update({NotificationModel.read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    def unread_count(self, user_id: str) -> int:
        return (
            self.session.query(func.count(NotificationModel.id))
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.read.is_(False),
            )
            .scalar()
            or 0
        )

    def _paginate(self, query, *, skip: int, limit: int | None) -> list[Notification]:
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            content=model.content,
            type=model.type,
            read=bool(model.read),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]
