"""Schemas for quiz questions and attempts."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class QuizQuestionCreate(BaseModel):
    question: str = Field(..., min_length=1)
    options: list[str]
    correct_option: int
    course: str = Field(..., min_length=1)
    branch: str = Field(..., min_length=1)
    semester: str = Field(..., min_length=1)


class QuizQuestionUpdate(BaseModel):
    question: str | None = None
    options: list[str] | None = None
    correct_option: int | None = None


class QuizQuestionRead(BaseModel):
    """Question as authored, including the answer key."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    question: str
    options: list[str]
    correct_option: int
    course: str
    branch: str
    semester: str
    user_id: str
    created_at: datetime | None = None


class QuizSubmission(BaseModel):
    course: str = Field(..., min_length=1)
    branch: str = Field(..., min_length=1)
    semester: str = Field(..., min_length=1)
    answers: dict[int, int] = Field(
        default_factory=dict, description="Selected option index keyed by question id"
    )


class QuizResultRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course: str
    branch: str
    semester: str
    score: int
    total_questions: int
    percentage: float
    created_at: datetime | None = None


class QuizResultHistoryRead(BaseModel):
    results: list[QuizResultRead]
    first_attempt_id: int | None
    average_percentage: int
