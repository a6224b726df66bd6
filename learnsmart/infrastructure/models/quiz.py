"""SQLAlchemy models for quiz questions and results."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, JSON, String, Text

from learnsmart.infrastructure.database import Base
from learnsmart.utils import now_in_app_naive_datetime


class QuizQuestionModel(Base):
    """Database representation of the ``quiz_questions`` collection."""

    __tablename__ = "quiz_questions"

    id = Column(Integer, primary_key=True, index=True)
    question = Column(Text, nullable=False)
    options = Column(JSON, nullable=False, default=list)
    correct_option = Column(Integer, nullable=False)
    course = Column(String(50), nullable=False, index=True)
    branch = Column(String(50), nullable=False, index=True)
    semester = Column(String(20), nullable=False, index=True)
    user_id = Column(String(36), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


class QuizResultModel(Base):
    """Database representation of the append-only ``quiz_results`` collection."""

    __tablename__ = "quiz_results"
    __table_args__ = (
        CheckConstraint("total_questions > 0", name="ck_quiz_results_total_positive"),
        CheckConstraint(
            "score >= 0 AND score <= total_questions", name="ck_quiz_results_score_range"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), nullable=False, index=True)
    course = Column(String(50), nullable=False)
    branch = Column(String(50), nullable=False)
    semester = Column(String(20), nullable=False)
    score = Column(Integer, nullable=False)
    total_questions = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["QuizQuestionModel", "QuizResultModel"]
