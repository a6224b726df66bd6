"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from learnsmart.domain.entities import User
from learnsmart.infrastructure.models import (
    AdminRoleModel,
    NotificationModel,
    UserModel,
)
from learnsmart.utils import ensure_app_timezone


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, skip: int = 0, limit: int | None = None) -> Sequence[User]:
        query = self.session.query(UserModel).order_by(UserModel.created_at.asc())
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(email=user.email.strip().lower(), password=user.password)
        if user.id is not None:
            model.id = user.id
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_password(self, user_id: str, hashed_password: str) -> User:
        model = self.session.get(UserModel, user_id)
        if model is None:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        model.password = hashed_password
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_id: str) -> bool:
        """Delete the user and everything owned by it. Return ``False`` if absent."""

        model = self.session.get(UserModel, user_id)
        if model is None:
            return False
        self.session.query(AdminRoleModel).filter(
            AdminRoleModel.user_id == user_id
        ).delete(synchronize_session=False)
        self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        ).delete(synchronize_session=False)
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password=model.password,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
