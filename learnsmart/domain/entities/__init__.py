"""Domain entities."""

from .admin_role import ROLE_SUB_ADMIN, AdminRole
from .note import Note
from .notification import NOTIFICATION_TYPE_NOTE, NOTIFICATION_TYPE_QUIZ, Notification
from .quiz import OPTIONS_PER_QUESTION, QuizQuestion, QuizResult, QuizResultHistory
from .user import User

__all__ = [
    "AdminRole",
    "ROLE_SUB_ADMIN",
    "Note",
    "Notification",
    "NOTIFICATION_TYPE_NOTE",
    "NOTIFICATION_TYPE_QUIZ",
    "OPTIONS_PER_QUESTION",
    "QuizQuestion",
    "QuizResult",
    "QuizResultHistory",
    "User",
]
