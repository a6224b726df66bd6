"""Study assistant chat endpoint."""

import logging

from fastapi import APIRouter, Header, status

from learnsmart.infrastructure.openai_client import (
    OpenAIConfigurationError,
    OpenAIServiceError,
    StudyAssistantService,
    resolve_api_key,
)
from learnsmart.interfaces.api.routes_helpers import api_error
from learnsmart.interfaces.api.schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["assistant"])


@router.post("/chat", response_model=ChatResponse)
def chat(
    payload: ChatRequest,
    authorization: str | None = Header(default=None),
):
    """Answer one student question with the study assistant."""

    api_key = resolve_api_key(authorization)
    if not api_key:
        return api_error(
            status.HTTP_401_UNAUTHORIZED, "API key is required", with_success_flag=False
        )
    question = (payload.question or "").strip()
    if not question:
        return api_error(
            status.HTTP_400_BAD_REQUEST, "Question is required", with_success_flag=False
        )

    try:
        answer = StudyAssistantService(api_key).ask(question)
    except (OpenAIConfigurationError, OpenAIServiceError) as exc:
        return api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to get response from AI",
            str(exc),
            with_success_flag=False,
        )
    return ChatResponse(response=answer)
