"""Endpoints issuing and checking email passcodes."""

import logging

from fastapi import APIRouter, Depends, status

from learnsmart.application.use_cases.otp import OtpFlow, OtpService, get_otp_service
from learnsmart.domain.errors import (
    EmailDeliveryError,
    ExpiredError,
    MismatchError,
    NotFoundError,
    ValidationError,
)
from learnsmart.interfaces.api.routes_helpers import api_error
from learnsmart.interfaces.api.schemas import (
    SendOtpRequest,
    SuccessResponse,
    VerifyOtpRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["otp"])


@router.post("/send-otp", response_model=SuccessResponse)
def send_otp(
    payload: SendOtpRequest,
    otp_service: OtpService = Depends(get_otp_service),
):
    """Email a fresh six digit code.

    ``type`` selects the reset flow only when it is ``reset``; anything else,
    including a missing or null value, issues a signup code.
    """

    if not (payload.email or "").strip():
        return api_error(status.HTTP_400_BAD_REQUEST, "Email is required")
    try:
        otp_service.issue(payload.email, OtpFlow.parse(payload.type))
    except EmailDeliveryError as exc:
        logger.error("Error sending OTP to %s: %s", payload.email, exc)
        return api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to send OTP", str(exc)
        )
    return SuccessResponse(message="OTP sent successfully")


@router.post("/verify-otp", response_model=SuccessResponse)
def verify_otp(
    payload: VerifyOtpRequest,
    otp_service: OtpService = Depends(get_otp_service),
):
    if not (payload.email or "").strip() or not (payload.otp or "").strip():
        return api_error(status.HTTP_400_BAD_REQUEST, "Email and OTP are required")

    try:
        otp_service.verify(payload.email, payload.type, payload.otp)
    except NotFoundError:
        return api_error(status.HTTP_400_BAD_REQUEST, "No OTP found for this email")
    except ExpiredError:
        return api_error(status.HTTP_400_BAD_REQUEST, "OTP has expired")
    except MismatchError:
        return api_error(status.HTTP_400_BAD_REQUEST, "Invalid OTP")
    except ValidationError as exc:
        return api_error(status.HTTP_400_BAD_REQUEST, str(exc))
    return SuccessResponse(message="Email verified successfully")
