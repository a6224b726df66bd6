"""Persistence layer for study notes."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from learnsmart.domain.entities import Note
from learnsmart.infrastructure.models import NoteModel
from learnsmart.utils import ensure_app_timezone


class NoteRepository:
    """Provide CRUD operations for :class:`Note` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_by_scope(self, *, course: str, branch: str, semester: str) -> Sequence[Note]:
        query = (
            self.session.query(NoteModel)
            .filter(
                NoteModel.course == course,
                NoteModel.branch == branch,
                NoteModel.semester == semester,
            )
            .order_by(NoteModel.created_at.desc(), NoteModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, note_id: int) -> Note | None:
        model = self.session.get(NoteModel, note_id)
        return self._to_entity(model) if model else None

    def create(self, note: Note) -> Note:
        model = NoteModel()
        self._apply_entity_to_model(model, note)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, note: Note) -> Note:
        model = self.session.get(NoteModel, note.id)
        if model is None:
            msg = f"Note with id {note.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, note)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, note_id: int) -> None:
        model = self.session.get(NoteModel, note_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: NoteModel, note: Note) -> None:
        model.title = note.title
        model.content = note.content
        model.pdf_path = note.pdf_path
        model.course = note.course
        model.branch = note.branch
        model.semester = note.semester
        model.user_id = note.user_id

    @staticmethod
    def _to_entity(model: NoteModel) -> Note:
        return Note(
            id=model.id,
            title=model.title,
            content=model.content,
            pdf_path=model.pdf_path,
            course=model.course,
            branch=model.branch,
            semester=model.semester,
            user_id=model.user_id,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NoteRepository"]
