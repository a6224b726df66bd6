"""Use case for authenticating a user."""

from sqlalchemy.orm import Session

from learnsmart.domain.entities import User
from learnsmart.infrastructure.repositories import UserRepository
from learnsmart.infrastructure.security import verify_password


def authenticate_user(session: Session, email: str, password: str) -> User | None:
    """Return the user when ``password`` matches, otherwise ``None``."""

    user = UserRepository(session).get_by_email(email)
    if user is None or not verify_password(password, user.password):
        return None
    return user
