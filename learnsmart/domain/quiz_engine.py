"""Quiz scoring and the attempt state machine."""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence

from .entities import QuizQuestion
from .errors import ValidationError


def score_quiz(
    questions: Sequence[QuizQuestion], answers: Mapping[int, int]
) -> int:
    """Return one point for every question answered with its correct option."""

    return sum(
        1
        for question in questions
        if question.id in answers and answers[question.id] == question.correct_option
    )


class QuizState(str, enum.Enum):
    LISTING = "listing"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class QuizSession:
    """Track navigation and answers while a user takes a quiz.

    The session starts in ``LISTING`` with the questions of one
    course/branch/semester scope. ``start`` moves it to ``IN_PROGRESS``,
    ``submit`` to ``COMPLETED`` with the final score.
    """

    def __init__(self, questions: Sequence[QuizQuestion]) -> None:
        self.questions = list(questions)
        self.state = QuizState.LISTING
        self.index = 0
        self.answers: dict[int, int] = {}
        self.score: int | None = None

    def start(self) -> None:
        if not self.questions:
            raise ValidationError("No questions available for this selection")
        self.state = QuizState.IN_PROGRESS
        self.index = 0
        self.answers = {}
        self.score = None

    @property
    def current(self) -> QuizQuestion:
        self._require(QuizState.IN_PROGRESS)
        return self.questions[self.index]

    def next(self) -> int:
        self._require(QuizState.IN_PROGRESS)
        self.index = min(self.index + 1, len(self.questions) - 1)
        return self.index

    def previous(self) -> int:
        self._require(QuizState.IN_PROGRESS)
        self.index = max(self.index - 1, 0)
        return self.index

    def select(self, question_id: int, option: int) -> None:
        self._require(QuizState.IN_PROGRESS)
        self.answers[question_id] = option

    @property
    def can_submit(self) -> bool:
        return self.state is QuizState.IN_PROGRESS and all(
            question.id in self.answers for question in self.questions
        )

    def submit(self) -> int:
        self._require(QuizState.IN_PROGRESS)
        self.score = score_quiz(self.questions, self.answers)
        self.state = QuizState.COMPLETED
        return self.score

    def _require(self, state: QuizState) -> None:
        if self.state is not state:
            raise ValidationError(f"Quiz is {self.state.value}, expected {state.value}")


__all__ = ["QuizSession", "QuizState", "score_quiz"]
