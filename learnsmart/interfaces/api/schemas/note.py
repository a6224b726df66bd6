"""Schemas for note endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = ""
    course: str = Field(..., min_length=1)
    branch: str = Field(..., min_length=1)
    semester: str = Field(..., min_length=1)


class NoteUpdate(BaseModel):
    title: str | None = None
    content: str | None = None


class NoteRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    course: str
    branch: str
    semester: str
    user_id: str
    pdf_path: str | None = None
    created_at: datetime | None = None
