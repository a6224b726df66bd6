"""Endpoints for course notes and their PDF attachments."""

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status
from sqlalchemy.orm import Session

from learnsmart.application.use_cases.notes import (
    attach_pdf,
    create_note as create_note_uc,
    delete_note as delete_note_uc,
    download_pdf,
    list_notes as list_notes_uc,
    update_note as update_note_uc,
)
from learnsmart.domain.entities import User
from learnsmart.domain.errors import (
    AuthError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from learnsmart.infrastructure.database import get_db
from learnsmart.interfaces.api.dependencies import get_current_user
from learnsmart.interfaces.api.routes_helpers import to_http_exception
from learnsmart.interfaces.api.schemas import NoteCreate, NoteRead, NoteUpdate

router = APIRouter(prefix="/notes", tags=["notes"])

_NOTE_ERRORS = (AuthError, NotFoundError, UpstreamError, ValidationError)


@router.get("/", response_model=list[NoteRead])
def list_notes(
    course: str = Query(...),
    branch: str = Query(...),
    semester: str = Query(...),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> list[NoteRead]:
    try:
        notes = list_notes_uc(db, course=course, branch=branch, semester=semester)
    except ValidationError as exc:
        raise to_http_exception(exc) from exc
    return [NoteRead.model_validate(note) for note in notes]


@router.post("/", response_model=NoteRead, status_code=status.HTTP_201_CREATED)
def create_note(
    payload: NoteCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NoteRead:
    """Create a note; every other user is notified in the background."""

    try:
        note = create_note_uc(db, actor=current_user, **payload.model_dump())
    except _NOTE_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return NoteRead.model_validate(note)


@router.put("/{note_id}", response_model=NoteRead)
def update_note(
    note_id: int,
    payload: NoteUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NoteRead:
    try:
        note = update_note_uc(
            db,
            note_id,
            actor=current_user,
            title=payload.title,
            content=payload.content,
        )
    except _NOTE_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return NoteRead.model_validate(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(
    note_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    try:
        delete_note_uc(db, note_id, actor=current_user)
    except _NOTE_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{note_id}/pdf", response_model=NoteRead)
def upload_note_pdf(
    note_id: int,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NoteRead:
    try:
        data = file.file.read()
    finally:
        file.file.seek(0)

    try:
        note = attach_pdf(
            db,
            note_id,
            actor=current_user,
            filename=file.filename or "",
            data=data,
            content_type=file.content_type,
        )
    except _NOTE_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return NoteRead.model_validate(note)


@router.get("/{note_id}/pdf")
def download_note_pdf(
    note_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> Response:
    """Return the attached PDF unchanged."""

    try:
        note, data = download_pdf(db, note_id)
    except (NotFoundError, UpstreamError) as exc:
        raise to_http_exception(exc) from exc
    return Response(
        content=data,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{note.pdf_path}"'},
    )


__all__ = ["router"]
