"""Use cases for creating accounts."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from learnsmart.application.use_cases.otp import OtpFlow, OtpService
from learnsmart.domain.entities import User
from learnsmart.domain.errors import AlreadyExistsError, ValidationError
from learnsmart.infrastructure.repositories import UserRepository
from learnsmart.infrastructure.security import get_password_hash

MIN_PASSWORD_LENGTH = 6


def ensure_valid_password(password: str) -> str:
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    return password


def create_account(session: Session, *, email: str, password: str) -> User:
    """Create an account ensuring unique email addresses."""

    ensure_valid_password(password)
    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise AlreadyExistsError("Email is already registered")

    try:
        return repository.create(
            User(id=None, email=email, password=get_password_hash(password))
        )
    except IntegrityError as exc:
        session.rollback()
        raise AlreadyExistsError("Email is already registered") from exc


def register_user(
    session: Session,
    otp_service: OtpService,
    *,
    email: str,
    password: str,
    otp: str,
) -> User:
    """Consume the signup passcode of ``email`` and create the account."""

    ensure_valid_password(password)
    if UserRepository(session).get_by_email(email):
        raise AlreadyExistsError("Email is already registered")

    otp_service.verify(email, OtpFlow.SIGNUP, otp)
    return create_account(session, email=email, password=password)
