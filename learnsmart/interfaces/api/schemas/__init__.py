from .auth import MessageResponse, ResetPasswordRequest, SignupRequest, Token
from .glue import (
    ChatRequest,
    ChatResponse,
    HealthResponse,
    NotificationEmailRequest,
    SendOtpRequest,
    SuccessResponse,
    VerifyOtpRequest,
)
from .note import NoteCreate, NoteRead, NoteUpdate
from .notification import MarkAllReadResponse, NotificationRead, UnreadCountResponse
from .quiz import (
    QuizQuestionCreate,
    QuizQuestionRead,
    QuizQuestionUpdate,
    QuizResultHistoryRead,
    QuizResultRead,
    QuizSubmission,
)
from .user import CurrentUserRead, SubAdminCreate, SubAdminRead, UserRead

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "CurrentUserRead",
    "HealthResponse",
    "MarkAllReadResponse",
    "MessageResponse",
    "NoteCreate",
    "NoteRead",
    "NoteUpdate",
    "NotificationEmailRequest",
    "NotificationRead",
    "QuizQuestionCreate",
    "QuizQuestionRead",
    "QuizQuestionUpdate",
    "QuizResultHistoryRead",
    "QuizResultRead",
    "QuizSubmission",
    "ResetPasswordRequest",
    "SendOtpRequest",
    "SignupRequest",
    "SubAdminCreate",
    "SubAdminRead",
    "SuccessResponse",
    "Token",
    "UnreadCountResponse",
    "UserRead",
    "VerifyOtpRequest",
]
