"""Persistence layer for administrative role assignments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from learnsmart.domain.entities import AdminRole
from learnsmart.infrastructure.models import AdminRoleModel
from learnsmart.utils import ensure_app_timezone


class AdminRoleRepository:
    """Read and write rows of the ``admin_roles`` collection."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_by_role(self, role: str) -> Sequence[AdminRole]:
        query = (
            self.session.query(AdminRoleModel)
            .filter(AdminRoleModel.role == role)
            .order_by(AdminRoleModel.created_at.asc(), AdminRoleModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: str, role: str) -> AdminRole | None:
        model = (
            self.session.query(AdminRoleModel)
            .filter(AdminRoleModel.user_id == user_id, AdminRoleModel.role == role)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, role: AdminRole) -> AdminRole:
        model = AdminRoleModel(
            user_id=role.user_id,
            role=role.role,
            created_by=role.created_by,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_id: str, role: str) -> int:
        deleted = (
            self.session.query(AdminRoleModel)
            .filter(AdminRoleModel.user_id == user_id, AdminRoleModel.role == role)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted

    @staticmethod
    def _to_entity(model: AdminRoleModel) -> AdminRole:
        return AdminRole(
            id=model.id,
            user_id=model.user_id,
            role=model.role,
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            email=model.user.email if model.user is not None else None,
        )


__all__ = ["AdminRoleRepository"]
