"""Administrative endpoints: account directory and sub-admin roles."""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from learnsmart.application.use_cases.admin import (
    add_sub_admin,
    delete_auth_user,
    list_auth_users,
    list_sub_admins,
    remove_sub_admin,
)
from learnsmart.domain.entities import User
from learnsmart.domain.errors import (
    AlreadyExistsError,
    AuthError,
    NotFoundError,
    UpstreamError,
)
from learnsmart.infrastructure.database import get_db
from learnsmart.interfaces.api.dependencies import (
    get_current_user,
    require_content_manager,
    require_main_admin,
)
from learnsmart.interfaces.api.routes_helpers import api_error, to_http_exception
from learnsmart.interfaces.api.schemas import (
    SubAdminCreate,
    SubAdminRead,
    SuccessResponse,
    UserRead,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"])


@router.get("/api/admin/users", response_model=list[UserRead])
def list_users(
    db: Session = Depends(get_db),
    _: User = Depends(require_content_manager),
):
    """Return every registered account as ``{id, email, created_at}``."""

    try:
        users = list_auth_users(db)
    except UpstreamError as exc:
        return api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to fetch users",
            str(exc),
            with_success_flag=False,
        )
    if not users:
        return api_error(
            status.HTTP_404_NOT_FOUND, "No users found", with_success_flag=False
        )
    return [UserRead.model_validate(user) for user in users]


@router.delete("/api/admin/users/{user_id}", response_model=SuccessResponse)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(require_main_admin),
):
    try:
        delete_auth_user(db, user_id)
    except UpstreamError as exc:
        return api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to delete user",
            str(exc),
            with_success_flag=False,
        )
    return SuccessResponse(message="User deleted successfully")


@router.get("/admin/sub-admins", response_model=list[SubAdminRead])
def get_sub_admins(
    db: Session = Depends(get_db),
    _: User = Depends(require_content_manager),
) -> list[SubAdminRead]:
    return [SubAdminRead.model_validate(role) for role in list_sub_admins(db)]


@router.post(
    "/admin/sub-admins",
    response_model=SubAdminRead,
    status_code=status.HTTP_201_CREATED,
)
def create_sub_admin(
    payload: SubAdminCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SubAdminRead:
    """Grant the sub-admin role. Only the main admin may call this."""

    try:
        role = add_sub_admin(db, actor=current_user, target_user_id=payload.user_id)
    except (AuthError, NotFoundError, AlreadyExistsError) as exc:
        raise to_http_exception(exc) from exc
    logger.info("User %s granted sub-admin to %s", current_user.id, payload.user_id)
    return SubAdminRead.model_validate(role)


@router.delete("/admin/sub-admins/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sub_admin(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    try:
        remove_sub_admin(db, actor=current_user, target_user_id=user_id)
    except AuthError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
