"""ORM models used by the application infrastructure."""

from .admin_role import AdminRoleModel
from .note import NoteModel
from .notification import NotificationModel
from .quiz import QuizQuestionModel, QuizResultModel
from .user import UserModel

__all__ = [
    "AdminRoleModel",
    "NoteModel",
    "NotificationModel",
    "QuizQuestionModel",
    "QuizResultModel",
    "UserModel",
]
