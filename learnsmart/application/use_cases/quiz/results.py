"""Use cases for scoring quiz attempts and reading the history."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from sqlalchemy.orm import Session

from learnsmart.application.use_cases.scope import ensure_scope
from learnsmart.domain.entities import QuizResult, QuizResultHistory, User
from learnsmart.domain.errors import ValidationError
from learnsmart.domain.quiz_engine import score_quiz
from learnsmart.infrastructure.repositories import (
    QuizQuestionRepository,
    QuizResultRepository,
)

logger = logging.getLogger(__name__)


def submit_quiz(
    session: Session,
    *,
    user: User,
    course: str,
    branch: str,
    semester: str,
    answers: Mapping[int, int],
) -> QuizResult:
    """Score ``answers`` against the scope's questions and record one attempt.

    Answers for questions outside the scope are ignored; unanswered questions
    score zero.
    """

    course, branch, semester = ensure_scope(course, branch, semester)
    questions = QuizQuestionRepository(session).list_by_scope(
        course=course, branch=branch, semester=semester
    )
    if not questions:
        raise ValidationError("No questions available for this selection")

    score = score_quiz(questions, answers)
    result = QuizResultRepository(session).append(
        QuizResult(
            id=None,
            user_id=user.id,
            course=course,
            branch=branch,
            semester=semester,
            score=score,
            total_questions=len(questions),
        )
    )
    logger.info(
        "User %s scored %s/%s in %s - %s (%s)",
        user.id,
        score,
        len(questions),
        course,
        branch,
        semester,
    )
    return result


def list_results(
    session: Session, *, user: User, course: str, branch: str, semester: str
) -> QuizResultHistory:
    course, branch, semester = ensure_scope(course, branch, semester)
    results = QuizResultRepository(session).list_for_user(
        user.id, course=course, branch=branch, semester=semester
    )
    return QuizResultHistory(results=list(results))


__all__ = ["list_results", "submit_quiz"]
