"""Use cases for quiz questions and attempts."""

from .questions import (
    create_question,
    delete_question,
    get_question,
    list_questions,
    update_question,
    validate_options,
)
from .results import list_results, submit_quiz

__all__ = [
    "create_question",
    "delete_question",
    "get_question",
    "list_questions",
    "list_results",
    "submit_quiz",
    "update_question",
    "validate_options",
]
