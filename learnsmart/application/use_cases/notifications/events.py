"""Announce newly created course content to every other user."""

from __future__ import annotations

from learnsmart.domain.entities import (
    NOTIFICATION_TYPE_NOTE,
    NOTIFICATION_TYPE_QUIZ,
    Note,
    QuizQuestion,
)

from .fan_out import FanOutJob, enqueue_fan_out


def _scope_label(course: str, branch: str, semester: str) -> str:
    return f"{course} - {branch} ({semester} Semester)"


def note_created_job(note: Note) -> FanOutJob:
    scope = _scope_label(note.course, note.branch, note.semester)
    return FanOutJob(
        exclude_user_id=note.user_id,
        title="New Study Material Available",
        content=f'A new note "{note.title}" has been added for {scope}',
        type=NOTIFICATION_TYPE_NOTE,
        email_details=(
            f'A new note titled "{note.title}" has been added to your course materials '
            f"for {scope}. Log in to LearnSmart to access the new content."
        ),
    )


def quiz_question_created_job(question: QuizQuestion) -> FanOutJob:
    scope = _scope_label(question.course, question.branch, question.semester)
    return FanOutJob(
        exclude_user_id=question.user_id,
        title="New Quiz Question Available",
        content=f"A new quiz question has been added for {scope}",
        type=NOTIFICATION_TYPE_QUIZ,
    )


def notify_note_created(note: Note) -> None:
    enqueue_fan_out(note_created_job(note))


def notify_quiz_question_created(question: QuizQuestion) -> None:
    enqueue_fan_out(quiz_question_created_job(question))


__all__ = [
    "note_created_job",
    "notify_note_created",
    "notify_quiz_question_created",
    "quiz_question_created_job",
]
