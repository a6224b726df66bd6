"""Liveness probe."""

from fastapi import APIRouter

from learnsmart.interfaces.api.schemas import HealthResponse
from learnsmart.utils import now_in_app_timezone

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=now_in_app_timezone().isoformat())
