"""Administrative listing and removal of registered accounts."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from learnsmart.domain.entities import User
from learnsmart.domain.errors import UpstreamError
from learnsmart.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


def list_auth_users(session: Session) -> Sequence[User]:
    try:
        return UserRepository(session).list()
    except SQLAlchemyError as exc:
        logger.error("Error listing users: %s", exc)
        raise UpstreamError(str(exc)) from exc


def delete_auth_user(session: Session, user_id: str) -> bool:
    """Delete the account and the rows it owns. Returns ``False`` if it was absent."""

    try:
        deleted = UserRepository(session).delete(user_id)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Error deleting user %s: %s", user_id, exc)
        raise UpstreamError(str(exc)) from exc
    if deleted:
        logger.info("Deleted user %s", user_id)
    return deleted


__all__ = ["delete_auth_user", "list_auth_users"]
