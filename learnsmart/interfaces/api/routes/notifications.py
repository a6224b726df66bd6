"""Endpoints and websocket handler for realtime notifications."""

from __future__ import annotations

import logging

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Response,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from sqlalchemy.orm import Session

from learnsmart.application.use_cases.notifications import (
    list_unread_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    unread_notification_count,
)
from learnsmart.domain.entities import User
from learnsmart.domain.errors import NotFoundError
from learnsmart.infrastructure.database import SessionLocal, get_db
from learnsmart.infrastructure.notifications import (
    notification_manager,
    serialize_notification,
)
from learnsmart.infrastructure.repositories import NotificationRepository
from learnsmart.interfaces.api.dependencies import get_current_user, resolve_current_user
from learnsmart.interfaces.api.routes_helpers import to_http_exception
from learnsmart.interfaces.api.schemas import (
    MarkAllReadResponse,
    NotificationRead,
    UnreadCountResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[NotificationRead]:
    """Return the unread notifications of the authenticated user, newest first."""

    notifications = list_unread_notifications(
        db, current_user.id, skip=skip, limit=limit
    )
    return [NotificationRead.model_validate(item) for item in notifications]


@router.get("/unread-count", response_model=UnreadCountResponse)
def get_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UnreadCountResponse:
    return UnreadCountResponse(count=unread_notification_count(db, current_user.id))


@router.post("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    try:
        mark_notification_read(db, notification_id, user_id=current_user.id)
    except NotFoundError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/read-all", response_model=MarkAllReadResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MarkAllReadResponse:
    return MarkAllReadResponse(updated=mark_all_notifications_read(db, current_user.id))


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint that streams notifications to the authenticated user."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
        pending = NotificationRepository(session).list_unread_for_user(user.id)
    except HTTPException:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    finally:
        session.close()

    await notification_manager.connect(user.id, websocket)
    try:
        await websocket.send_json(
            {"type": "init", "data": [serialize_notification(item) for item in pending]}
        )
        while True:
            try:
                message = await websocket.receive_json()
            except ValueError:
                continue
            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
            elif message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list) and ids:
                    ack_session = SessionLocal()
                    try:
                        NotificationRepository(ack_session).mark_many_read(
                            [item for item in ids if isinstance(item, int)],
                            user_id=user.id,
                        )
                    finally:
                        ack_session.close()
    except WebSocketDisconnect:
        logger.debug("Notification socket closed for %s", user.id)
    finally:
        notification_manager.disconnect(user.id, websocket)


__all__ = ["router"]
