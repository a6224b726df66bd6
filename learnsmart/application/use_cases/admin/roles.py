"""Use cases for the main admin and sub-admin roles."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from learnsmart.config import get_settings
from learnsmart.domain.entities import ROLE_SUB_ADMIN, AdminRole, User
from learnsmart.domain.errors import AlreadyExistsError, ForbiddenError, NotFoundError
from learnsmart.infrastructure.repositories import AdminRoleRepository, UserRepository


def is_main_admin(user: User | None) -> bool:
    """Return ``True`` when ``user`` is the configured owner account."""

    return user is not None and user.matches_email(get_settings().main_admin_email)


def is_sub_admin(session: Session, user: User | None) -> bool:
    if user is None or user.id is None:
        return False
    return AdminRoleRepository(session).get(user.id, ROLE_SUB_ADMIN) is not None


def is_content_manager(session: Session, user: User | None) -> bool:
    """Main admin and sub-admins may create and edit course content."""

    return is_main_admin(user) or is_sub_admin(session, user)


def _ensure_main_admin(actor: User) -> None:
    if not is_main_admin(actor):
        raise ForbiddenError("Only the main admin can manage sub-admins")


def list_sub_admins(session: Session) -> Sequence[AdminRole]:
    return AdminRoleRepository(session).list_by_role(ROLE_SUB_ADMIN)


def add_sub_admin(session: Session, *, actor: User, target_user_id: str) -> AdminRole:
    """Grant the sub-admin role to ``target_user_id``."""

    _ensure_main_admin(actor)

    if UserRepository(session).get(target_user_id) is None:
        raise NotFoundError("User not found")

    repository = AdminRoleRepository(session)
    if repository.get(target_user_id, ROLE_SUB_ADMIN) is not None:
        raise AlreadyExistsError("User is already a sub-admin")

    try:
        return repository.create(
            AdminRole(
                id=None,
                user_id=target_user_id,
                role=ROLE_SUB_ADMIN,
                created_by=actor.id,
            )
        )
    except IntegrityError as exc:
        session.rollback()
        raise AlreadyExistsError("User is already a sub-admin") from exc


def remove_sub_admin(session: Session, *, actor: User, target_user_id: str) -> None:
    """Revoke the sub-admin role. Removing a missing role is not an error."""

    _ensure_main_admin(actor)
    AdminRoleRepository(session).delete(target_user_id, ROLE_SUB_ADMIN)


__all__ = [
    "add_sub_admin",
    "is_content_manager",
    "is_main_admin",
    "is_sub_admin",
    "list_sub_admins",
    "remove_sub_admin",
]
