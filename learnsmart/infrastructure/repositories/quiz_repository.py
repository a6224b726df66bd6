"""Persistence layer for quiz questions and recorded attempts."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from learnsmart.domain.entities import QuizQuestion, QuizResult
from learnsmart.infrastructure.models import QuizQuestionModel, QuizResultModel
from learnsmart.utils import ensure_app_timezone


class QuizQuestionRepository:
    """Provide CRUD operations for :class:`QuizQuestion` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_by_scope(
        self, *, course: str, branch: str, semester: str
    ) -> Sequence[QuizQuestion]:
        query = (
            self.session.query(QuizQuestionModel)
            .filter(
                QuizQuestionModel.course == course,
                QuizQuestionModel.branch == branch,
                QuizQuestionModel.semester == semester,
            )
            .order_by(QuizQuestionModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, question_id: int) -> QuizQuestion | None:
        model = self.session.get(QuizQuestionModel, question_id)
        return self._to_entity(model) if model else None

    def create(self, question: QuizQuestion) -> QuizQuestion:
        model = QuizQuestionModel()
        self._apply_entity_to_model(model, question)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, question: QuizQuestion) -> QuizQuestion:
        model = self.session.get(QuizQuestionModel, question.id)
        if model is None:
            msg = f"Quiz question with id {question.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, question)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, question_id: int) -> None:
        model = self.session.get(QuizQuestionModel, question_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: QuizQuestionModel, question: QuizQuestion) -> None:
        model.question = question.question
        model.options = list(question.options)
        model.correct_option = question.correct_option
        model.course = question.course
        model.branch = question.branch
        model.semester = question.semester
        model.user_id = question.user_id

    @staticmethod
    def _to_entity(model: QuizQuestionModel) -> QuizQuestion:
        return QuizQuestion(
            id=model.id,
            question=model.question,
            options=list(model.options or []),
            correct_option=model.correct_option,
            course=model.course,
            branch=model.branch,
            semester=model.semester,
            user_id=model.user_id,
            created_at=ensure_app_timezone(model.created_at),
        )


class QuizResultRepository:
    """Append and read quiz attempts. Rows are never updated."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def append(self, result: QuizResult) -> QuizResult:
        model = QuizResultModel(
            user_id=result.user_id,
            course=result.course,
            branch=result.branch,
            semester=result.semester,
            score=result.score,
            total_questions=result.total_questions,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_user(
        self, user_id: str, *, course: str, branch: str, semester: str
    ) -> Sequence[QuizResult]:
        query = (
            self.session.query(QuizResultModel)
            .filter(
                QuizResultModel.user_id == user_id,
                QuizResultModel.course == course,
                QuizResultModel.branch == branch,
                QuizResultModel.semester == semester,
            )
            .order_by(QuizResultModel.created_at.asc(), QuizResultModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: QuizResultModel) -> QuizResult:
        return QuizResult(
            id=model.id,
            user_id=model.user_id,
            course=model.course,
            branch=model.branch,
            semester=model.semester,
            score=model.score,
            total_questions=model.total_questions,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["QuizQuestionRepository", "QuizResultRepository"]
