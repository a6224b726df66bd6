"""SQLAlchemy model for administrative role assignments."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from learnsmart.infrastructure.database import Base
from learnsmart.utils import now_in_app_naive_datetime


class AdminRoleModel(Base):
    """Database representation of the ``admin_roles`` collection."""

    __tablename__ = "admin_roles"
    __table_args__ = (UniqueConstraint("user_id", "role", name="uq_admin_roles_user_role"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role = Column(String(30), nullable=False)
    created_by = Column(String(36), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    user = relationship("UserModel", lazy="joined")


__all__ = ["AdminRoleModel"]
