"""Use case to replace a forgotten password."""

from sqlalchemy.orm import Session

from learnsmart.application.use_cases.otp import OtpFlow, OtpService
from learnsmart.domain.entities import User
from learnsmart.domain.errors import NotFoundError
from learnsmart.infrastructure.repositories import UserRepository
from learnsmart.infrastructure.security import get_password_hash

from .register_user import ensure_valid_password


def reset_password(
    session: Session,
    otp_service: OtpService,
    *,
    email: str,
    otp: str,
    new_password: str,
) -> User:
    """Consume the reset passcode of ``email`` and store ``new_password``."""

    ensure_valid_password(new_password)
    repository = UserRepository(session)
    user = repository.get_by_email(email)
    if user is None:
        raise NotFoundError("User not found")

    otp_service.verify(email, OtpFlow.RESET, otp)
    return repository.update_password(user.id, get_password_hash(new_password))
