"""Helper utilities shared across API route handlers."""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from learnsmart.domain.errors import (
    AlreadyExistsError,
    AuthError,
    ForbiddenError,
    NotFoundError,
    UpstreamError,
)


def http_status_for(exc: Exception) -> int:
    """Return the HTTP status matching a domain error."""

    if isinstance(exc, ForbiddenError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, AuthError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, AlreadyExistsError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, UpstreamError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


def to_http_exception(exc: Exception) -> HTTPException:
    return HTTPException(status_code=http_status_for(exc), detail=str(exc))


def api_error(
    status_code: int,
    error: str,
    details: str | None = None,
    *,
    with_success_flag: bool = True,
) -> JSONResponse:
    """Build the ``{success: false, error, details?}`` body of the ``/api`` endpoints."""

    body: dict[str, Any] = {"success": False} if with_success_flag else {}
    body["error"] = error
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


__all__ = ["api_error", "http_status_for", "to_http_exception"]
