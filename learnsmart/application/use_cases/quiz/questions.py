"""Use cases for authoring quiz questions."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from learnsmart.application.use_cases.admin import is_content_manager
from learnsmart.application.use_cases.notifications import notify_quiz_question_created
from learnsmart.application.use_cases.scope import ensure_scope, ensure_text
from learnsmart.domain.entities import OPTIONS_PER_QUESTION, QuizQuestion, User
from learnsmart.domain.errors import ForbiddenError, NotFoundError, ValidationError
from learnsmart.infrastructure.repositories import QuizQuestionRepository


def _ensure_manager(session: Session, actor: User) -> None:
    if not is_content_manager(session, actor):
        raise ForbiddenError("Only admins can manage quiz questions")


def validate_options(options: Sequence[str], correct_option: int) -> list[str]:
    """Return the stripped options after checking shape and answer index."""

    cleaned = [(option or "").strip() for option in options]
    if len(cleaned) != OPTIONS_PER_QUESTION:
        raise ValidationError(f"A question needs exactly {OPTIONS_PER_QUESTION} options")
    if not all(cleaned):
        raise ValidationError("Options cannot be empty")
    if not 0 <= correct_option < OPTIONS_PER_QUESTION:
        raise ValidationError(
            f"Correct option must be between 0 and {OPTIONS_PER_QUESTION - 1}"
        )
    return cleaned


def list_questions(
    session: Session, *, course: str, branch: str, semester: str
) -> Sequence[QuizQuestion]:
    course, branch, semester = ensure_scope(course, branch, semester)
    return QuizQuestionRepository(session).list_by_scope(
        course=course, branch=branch, semester=semester
    )


def get_question(session: Session, question_id: int) -> QuizQuestion:
    question = QuizQuestionRepository(session).get(question_id)
    if question is None:
        raise NotFoundError("Quiz question not found")
    return question


def create_question(
    session: Session,
    *,
    actor: User,
    question: str,
    options: Sequence[str],
    correct_option: int,
    course: str,
    branch: str,
    semester: str,
    notify: Callable[[QuizQuestion], None] = notify_quiz_question_created,
) -> QuizQuestion:
    """Store a question and announce it to every other user."""

    _ensure_manager(session, actor)
    text = ensure_text(question, "Question")
    cleaned = validate_options(options, correct_option)
    course, branch, semester = ensure_scope(course, branch, semester)

    created = QuizQuestionRepository(session).create(
        QuizQuestion(
            id=None,
            question=text,
            options=cleaned,
            correct_option=correct_option,
            course=course,
            branch=branch,
            semester=semester,
            user_id=actor.id,
        )
    )
    notify(created)
    return created


def update_question(
    session: Session,
    question_id: int,
    *,
    actor: User,
    question: str | None = None,
    options: Sequence[str] | None = None,
    correct_option: int | None = None,
) -> QuizQuestion:
    _ensure_manager(session, actor)
    current = get_question(session, question_id)

    text = current.question if question is None else ensure_text(question, "Question")
    new_correct = current.correct_option if correct_option is None else correct_option
    new_options = validate_options(
        current.options if options is None else options, new_correct
    )
    return QuizQuestionRepository(session).update(
        replace(current, question=text, options=new_options, correct_option=new_correct)
    )


def delete_question(session: Session, question_id: int, *, actor: User) -> None:
    _ensure_manager(session, actor)
    get_question(session, question_id)
    QuizQuestionRepository(session).delete(question_id)


__all__ = [
    "create_question",
    "delete_question",
    "get_question",
    "list_questions",
    "update_question",
    "validate_options",
]
