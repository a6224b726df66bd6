"""SQLAlchemy model for the user table."""

import uuid

from sqlalchemy import Column, DateTime, String

from learnsmart.infrastructure.database import Base
from learnsmart.utils import now_in_app_naive_datetime


def _new_user_id() -> str:
    return str(uuid.uuid4())


class UserModel(Base):
    """Database representation of a registered user."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_user_id)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UserModel"]
