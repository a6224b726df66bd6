"""Request bodies of the ``/api`` endpoints.

Fields are optional so that missing values reach the handlers and are
reported with the ``{success: false, error}`` body rather than a 422.
"""

from typing import Any

from pydantic import BaseModel, field_validator


class SendOtpRequest(BaseModel):
    email: str | None = None
    type: str | None = None


class VerifyOtpRequest(BaseModel):
    email: str | None = None
    otp: str | None = None
    type: str | None = None

    @field_validator("otp", mode="before")
    @classmethod
    def _stringify_otp(cls, value: Any) -> Any:
        # A numeric body value is compared as text.
        if value is None or isinstance(value, str):
            return value
        return str(value)


class NotificationEmailRequest(BaseModel):
    email: str | None = None
    type: str | None = None
    title: str | None = None
    details: str | None = None


class ChatRequest(BaseModel):
    question: str | None = None


class SuccessResponse(BaseModel):
    success: bool = True
    message: str


class ChatResponse(BaseModel):
    response: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
