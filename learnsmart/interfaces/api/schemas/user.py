"""Schemas describing registered accounts."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    created_at: datetime | None = None


class CurrentUserRead(UserRead):
    is_main_admin: bool
    is_sub_admin: bool


class SubAdminCreate(BaseModel):
    user_id: str


class SubAdminRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    email: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None
