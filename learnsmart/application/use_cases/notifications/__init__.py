"""Public helpers for creating and reading notifications."""

from .events import (
    note_created_job,
    notify_note_created,
    notify_quiz_question_created,
    quiz_question_created_job,
)
from .fan_out import (
    FanOutJob,
    FanOutResult,
    enqueue_fan_out,
    fan_out_queue,
    notify_all,
    run_fan_out_job,
)
from .read_state import (
    list_unread_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    unread_notification_count,
)

__all__ = [
    "FanOutJob",
    "FanOutResult",
    "enqueue_fan_out",
    "fan_out_queue",
    "list_unread_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "note_created_job",
    "notify_all",
    "notify_note_created",
    "notify_quiz_question_created",
    "quiz_question_created_job",
    "run_fan_out_job",
    "unread_notification_count",
]
