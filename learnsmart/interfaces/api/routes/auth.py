"""Endpoints for signup, login and password recovery."""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from learnsmart.application.use_cases.admin import is_main_admin, is_sub_admin
from learnsmart.application.use_cases.otp import OtpService, get_otp_service
from learnsmart.application.use_cases.users import (
    authenticate_user,
    register_user,
    reset_password,
)
from learnsmart.config import get_settings
from learnsmart.domain.entities import User
from learnsmart.domain.errors import AlreadyExistsError, NotFoundError, ValidationError
from learnsmart.infrastructure.database import get_db
from learnsmart.infrastructure.security import create_access_token
from learnsmart.interfaces.api.dependencies import get_current_user
from learnsmart.interfaces.api.routes_helpers import to_http_exception
from learnsmart.interfaces.api.schemas import (
    CurrentUserRead,
    MessageResponse,
    ResetPasswordRequest,
    SignupRequest,
    Token,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    settings = get_settings()
    return create_access_token(
        data={"sub": user.email, "uid": user.id},
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )


@router.post("/signup", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def signup(
    payload: SignupRequest,
    db: Session = Depends(get_db),
    otp_service: OtpService = Depends(get_otp_service),
) -> UserRead:
    """Create an account once the signup passcode has been confirmed."""

    try:
        user = register_user(
            db,
            otp_service,
            email=payload.email,
            password=payload.password,
            otp=payload.otp,
        )
    except (AlreadyExistsError, ValidationError) as exc:
        raise to_http_exception(exc) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    logger.info("Registered user %s", user.email)
    return UserRead.model_validate(user)


# The form signature is the one expected by OAuth2PasswordRequestForm.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
) -> Token:
    user = authenticate_user(db, form_data.username, form_data.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=issue_token(user), token_type="bearer")


@router.post("/reset-password", response_model=MessageResponse)
def reset_forgotten_password(
    payload: ResetPasswordRequest,
    db: Session = Depends(get_db),
    otp_service: OtpService = Depends(get_otp_service),
) -> MessageResponse:
    try:
        reset_password(
            db,
            otp_service,
            email=payload.email,
            otp=payload.otp,
            new_password=payload.new_password,
        )
    except (NotFoundError, ValidationError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return MessageResponse(message="Password updated successfully")


@router.get("/me", response_model=CurrentUserRead)
def read_current_user(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> CurrentUserRead:
    return CurrentUserRead(
        id=current_user.id,
        email=current_user.email,
        created_at=current_user.created_at,
        is_main_admin=is_main_admin(current_user),
        is_sub_admin=is_sub_admin(db, current_user),
    )


__all__ = ["issue_token", "router"]
