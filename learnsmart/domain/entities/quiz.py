"""Domain entities for quiz questions and recorded attempts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

OPTIONS_PER_QUESTION = 4


@dataclass
class QuizQuestion:
    """Multiple choice question with exactly four options."""

    id: int | None
    question: str
    options: list[str]
    correct_option: int
    course: str
    branch: str
    semester: str
    user_id: str
    created_at: datetime | None = None


@dataclass
class QuizResult:
    """Immutable record of one completed quiz attempt."""

    id: int | None
    user_id: str
    course: str
    branch: str
    semester: str
    score: int
    total_questions: int
    created_at: datetime | None = None

    @property
    def percentage(self) -> float:
        return self.score / self.total_questions * 100


@dataclass
class QuizResultHistory:
    """Attempts for one scope, oldest first."""

    results: list[QuizResult] = field(default_factory=list)

    @property
    def first_attempt_id(self) -> int | None:
        return self.results[0].id if self.results else None

    @property
    def average_percentage(self) -> int:
        if not self.results:
            return 0
        total = sum(result.percentage for result in self.results)
        return round(total / len(self.results))


__all__ = ["OPTIONS_PER_QUESTION", "QuizQuestion", "QuizResult", "QuizResultHistory"]
