"""Endpoint sending a content notification email to one address."""

import logging

from fastapi import APIRouter, status

from learnsmart.domain.errors import UpstreamError, ValidationError
from learnsmart.infrastructure import email as email_transport
from learnsmart.infrastructure.email_templates import template_for_notification_type
from learnsmart.interfaces.api.routes_helpers import api_error
from learnsmart.interfaces.api.schemas import NotificationEmailRequest, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["mail"])


@router.post("/send-notification-email", response_model=SuccessResponse)
def send_notification_email(payload: NotificationEmailRequest):
    try:
        if not (payload.email or "").strip():
            raise ValidationError("Email is required")
        email_transport.send_templated_email(
            payload.email.strip(),
            template_for_notification_type(payload.type),
            title=payload.title,
            details=payload.details,
        )
    except (UpstreamError, ValidationError) as exc:
        logger.error("Error sending notification email: %s", exc)
        return api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to send notification email"
        )
    return SuccessResponse(message="Notification email sent successfully")
