"""SQLAlchemy model for study notes."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from learnsmart.infrastructure.database import Base
from learnsmart.utils import now_in_app_naive_datetime


class NoteModel(Base):
    """Database representation of the ``notes`` collection."""

    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False, default="")
    pdf_path = Column(String(255), nullable=True)
    course = Column(String(50), nullable=False, index=True)
    branch = Column(String(50), nullable=False, index=True)
    semester = Column(String(20), nullable=False, index=True)
    user_id = Column(String(36), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["NoteModel"]
