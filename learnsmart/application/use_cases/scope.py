"""Validation shared by course-scoped content."""

from learnsmart.domain.errors import ValidationError


def ensure_scope(course: str, branch: str, semester: str) -> tuple[str, str, str]:
    """Return the stripped (course, branch, semester) triple or raise."""

    values = tuple((value or "").strip() for value in (course, branch, semester))
    if not all(values):
        raise ValidationError("Course, branch and semester are required")
    return values


def ensure_text(value: str | None, field: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field} is required")
    return text
