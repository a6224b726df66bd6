"""Use cases for course notes and their PDF attachments."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace
from pathlib import PurePath

from sqlalchemy.orm import Session

from learnsmart.application.use_cases.admin import is_content_manager
from learnsmart.application.use_cases.notifications import notify_note_created
from learnsmart.application.use_cases.scope import ensure_scope, ensure_text
from learnsmart.domain.entities import Note, User
from learnsmart.domain.errors import (
    ForbiddenError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from learnsmart.infrastructure import storage
from learnsmart.infrastructure.repositories import NoteRepository

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def _ensure_manager(session: Session, actor: User) -> None:
    if not is_content_manager(session, actor):
        raise ForbiddenError("Only admins can manage notes")


def list_notes(
    session: Session, *, course: str, branch: str, semester: str
) -> Sequence[Note]:
    """Return the notes of one scope, newest first."""

    course, branch, semester = ensure_scope(course, branch, semester)
    return NoteRepository(session).list_by_scope(
        course=course, branch=branch, semester=semester
    )


def get_note(session: Session, note_id: int) -> Note:
    note = NoteRepository(session).get(note_id)
    if note is None:
        raise NotFoundError("Note not found")
    return note


def create_note(
    session: Session,
    *,
    actor: User,
    title: str,
    content: str,
    course: str,
    branch: str,
    semester: str,
    notify: Callable[[Note], None] = notify_note_created,
) -> Note:
    """Create a note and announce it to every other user."""

    _ensure_manager(session, actor)
    course, branch, semester = ensure_scope(course, branch, semester)
    note = NoteRepository(session).create(
        Note(
            id=None,
            title=ensure_text(title, "Title"),
            content=(content or "").strip(),
            course=course,
            branch=branch,
            semester=semester,
            user_id=actor.id,
        )
    )
    notify(note)
    return note


def update_note(
    session: Session,
    note_id: int,
    *,
    actor: User,
    title: str | None = None,
    content: str | None = None,
) -> Note:
    _ensure_manager(session, actor)
    note = get_note(session, note_id)
    changes = {}
    if title is not None:
        changes["title"] = ensure_text(title, "Title")
    if content is not None:
        changes["content"] = content.strip()
    if not changes:
        return note
    return NoteRepository(session).update(replace(note, **changes))


def delete_note(session: Session, note_id: int, *, actor: User) -> None:
    """Delete the note together with its stored PDF."""

    _ensure_manager(session, actor)
    note = get_note(session, note_id)
    if note.pdf_path:
        storage.delete_blob(note.pdf_path)
    NoteRepository(session).delete(note_id)


def attach_pdf(
    session: Session,
    note_id: int,
    *,
    actor: User,
    filename: str,
    data: bytes,
    content_type: str | None = None,
) -> Note:
    """Store ``data`` under a fresh blob name and link it to the note.

    A previously attached file is removed once the new one is linked.
    """

    _ensure_manager(session, actor)
    note = get_note(session, note_id)

    if not data:
        raise ValidationError("The uploaded file is empty")
    is_pdf = PurePath(filename or "").suffix.lower() == ".pdf" or (
        content_type or ""
    ).lower() == PDF_CONTENT_TYPE
    if not is_pdf:
        raise ValidationError("Only PDF files can be attached to notes")

    blob_path = storage.build_blob_name(filename)
    storage.upload_blob(blob_path, data, content_type=PDF_CONTENT_TYPE)
    updated = NoteRepository(session).update(replace(note, pdf_path=blob_path))

    if note.pdf_path and note.pdf_path != blob_path:
        try:
            storage.delete_blob(note.pdf_path)
        except UpstreamError as exc:
            logger.warning("Could not remove replaced PDF %s: %s", note.pdf_path, exc)
    return updated


def download_pdf(session: Session, note_id: int) -> tuple[Note, bytes]:
    """Return the note and the exact bytes of its attached PDF."""

    note = get_note(session, note_id)
    if not note.pdf_path:
        raise NotFoundError("This note has no PDF attached")
    return note, storage.download_blob(note.pdf_path)


__all__ = [
    "attach_pdf",
    "create_note",
    "delete_note",
    "download_pdf",
    "get_note",
    "list_notes",
    "update_note",
]
