"""Issue and verify one-time passcodes sent by email."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from learnsmart.config import get_settings
from learnsmart.domain.errors import (
    ExpiredError,
    MismatchError,
    NotFoundError,
    ValidationError,
)
from learnsmart.infrastructure.email import send_templated_email
from learnsmart.infrastructure.email_templates import (
    TEMPLATE_OTP_RESET,
    TEMPLATE_OTP_SIGNUP,
)
from learnsmart.infrastructure.otp_store import InMemoryKeyValueStore, KeyValueStore
from learnsmart.infrastructure.security import generate_otp_code

logger = logging.getLogger(__name__)


class OtpFlow(str, enum.Enum):
    SIGNUP = "signup"
    RESET = "reset"

    @classmethod
    def parse(cls, value: "OtpFlow | str | None") -> "OtpFlow":
        """Return the flow named by ``value``.

        Only ``reset`` (or ``password-reset``) selects the reset flow; any
        other value, ``None`` included, is a signup.
        """

        if isinstance(value, cls):
            return value
        normalized = (value or "").strip().lower()
        if normalized in (cls.RESET.value, "password-reset"):
            return cls.RESET
        return cls.SIGNUP

    @property
    def template(self) -> str:
        return TEMPLATE_OTP_SIGNUP if self is OtpFlow.SIGNUP else TEMPLATE_OTP_RESET


class VerifyResult(str, enum.Enum):
    VERIFIED = "verified"


@dataclass(frozen=True)
class OtpEntry:
    code: str
    expires_at: float


CodeSender = Callable[..., None]


def _normalize_email(email: str | None) -> str:
    normalized = (email or "").strip().lower()
    if not normalized:
        raise ValidationError("Email is required")
    return normalized


class OtpService:
    """Hold at most one live passcode per (flow, email) pair.

    Entries stay in the store for ``retention`` seconds past their expiry so a
    late attempt is reported as expired rather than unknown.
    """

    def __init__(
        self,
        store: KeyValueStore,
        send_code: CodeSender,
        *,
        ttl: float = 300,
        retention: float = 3600,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.send_code = send_code
        self.ttl = ttl
        self.retention = retention
        self.clock = clock

    @staticmethod
    def key_for(email: str, flow: OtpFlow | str) -> str:
        return f"otp:{OtpFlow.parse(flow).value}:{_normalize_email(email)}"

    def issue(self, email: str, flow: OtpFlow | str = OtpFlow.SIGNUP) -> OtpEntry:
        """Store a fresh code for ``email`` and mail it.

        Any previous code for the same flow is replaced. A mail failure is
        propagated to the caller; the stored code is left in place.
        """

        flow = OtpFlow.parse(flow)
        recipient = _normalize_email(email)
        entry = OtpEntry(code=generate_otp_code(), expires_at=self.clock() + self.ttl)
        self.store.set(
            self.key_for(recipient, flow),
            entry,
            ttl_seconds=self.ttl + self.retention,
        )
        self.send_code(recipient, flow.template, code=entry.code)
        logger.info("Issued %s passcode for %s", flow.value, recipient)
        return entry

    def verify(
        self, email: str, flow: OtpFlow | str, code: str | None
    ) -> VerifyResult:
        flow = OtpFlow.parse(flow)
        if not (code or "").strip():
            raise ValidationError("OTP is required")
        key = self.key_for(email, flow)

        entry = self.store.get(key)
        if entry is None:
            raise NotFoundError("OTP not found or expired")
        if self.clock() > entry.expires_at:
            self.store.delete(key)
            raise ExpiredError("OTP has expired")
        if str(code).strip() != entry.code:
            raise MismatchError("Invalid OTP")

        self.store.delete(key)
        return VerifyResult.VERIFIED


_default_service: OtpService | None = None


def get_otp_service() -> OtpService:
    """Return the process-wide service built from the application settings."""

    global _default_service
    if _default_service is None:
        settings = get_settings()
        _default_service = OtpService(
            InMemoryKeyValueStore(clock=time.time),
            send_templated_email,
            ttl=settings.otp_ttl_seconds,
            retention=settings.otp_retention_seconds,
        )
    return _default_service


__all__ = [
    "OtpEntry",
    "OtpFlow",
    "OtpService",
    "VerifyResult",
    "get_otp_service",
]
