"""Domain entity representing a study note."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Note:
    """Course-scoped study material, optionally backed by a PDF."""

    id: int | None
    title: str
    content: str
    course: str
    branch: str
    semester: str
    user_id: str
    pdf_path: str | None = None
    created_at: datetime | None = None


__all__ = ["Note"]
