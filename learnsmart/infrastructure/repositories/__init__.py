"""Repository implementations for infrastructure layer."""

from .admin_role_repository import AdminRoleRepository
from .note_repository import NoteRepository
from .notification_repository import NotificationRepository
from .quiz_repository import QuizQuestionRepository, QuizResultRepository
from .user_repository import UserRepository

__all__ = [
    "AdminRoleRepository",
    "NoteRepository",
    "NotificationRepository",
    "QuizQuestionRepository",
    "QuizResultRepository",
    "UserRepository",
]
