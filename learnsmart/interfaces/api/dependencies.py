"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from learnsmart.application.use_cases.admin import is_content_manager, is_main_admin
from learnsmart.domain.entities import User
from learnsmart.infrastructure.database import get_db
from learnsmart.infrastructure.repositories import UserRepository
from learnsmart.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def _credentials_exception(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    user_id = payload.get("uid")
    email = payload.get("sub")
    if not isinstance(user_id, str) or not isinstance(email, str):
        raise _credentials_exception()

    user = UserRepository(db).get(user_id)
    if user is None or not user.matches_email(email):
        raise _credentials_exception("User not found")
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def require_content_manager(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> User:
    """Ensure the user is the main admin or a sub-admin."""

    if not is_content_manager(db, current_user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )
    return current_user


def require_main_admin(current_user: User = Depends(get_current_user)) -> User:
    if not is_main_admin(current_user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the main admin can perform this action",
        )
    return current_user


__all__ = [
    "get_current_user",
    "oauth2_scheme",
    "require_content_manager",
    "require_main_admin",
    "resolve_current_user",
]
