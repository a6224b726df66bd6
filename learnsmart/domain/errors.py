"""Error taxonomy shared by the use cases and the API layer."""

from __future__ import annotations


class ValidationError(ValueError):
    """A required field is missing or malformed."""


class AuthError(PermissionError):
    """Missing or invalid credentials."""


class ForbiddenError(AuthError):
    """The authenticated identity may not perform the action."""


class NotFoundError(LookupError):
    """No record matches the request."""


class ExpiredError(ValidationError):
    """A one-time passcode was used after its expiry."""


class MismatchError(ValidationError):
    """A one-time passcode did not match the stored value."""


class AlreadyExistsError(ValueError):
    """The record being created already exists."""


class UpstreamError(RuntimeError):
    """A credential, storage, mail or AI provider failed."""


class EmailDeliveryError(UpstreamError):
    """The mail transport rejected or failed to deliver a message."""


__all__ = [
    "ValidationError",
    "AuthError",
    "ForbiddenError",
    "NotFoundError",
    "ExpiredError",
    "MismatchError",
    "AlreadyExistsError",
    "UpstreamError",
    "EmailDeliveryError",
]
