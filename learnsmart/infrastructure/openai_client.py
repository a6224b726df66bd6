"""Client for the study assistant backed by the OpenAI chat completions API."""

from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI, OpenAIError

from learnsmart.config import get_settings
from learnsmart.domain.errors import UpstreamError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful AI study assistant for the LearnSmart e-learning platform. "
    "You help students with their academic questions, explain concepts, and provide "
    "learning guidance. Keep your answers educational, accurate, and helpful."
)


class OpenAIConfigurationError(RuntimeError):
    """Raised when no API key is available for the assistant."""


class OpenAIServiceError(UpstreamError):
    """Raised when the OpenAI API does not answer as expected."""


class StudyAssistantService:
    """Single-turn question answering for students."""

    def __init__(self, api_key: str | None = None) -> None:
        settings = get_settings()

        resolved_key = (api_key or "").strip()
        if not resolved_key:
            raise OpenAIConfigurationError("API key is required")

        client_kwargs: dict[str, Any] = {"api_key": resolved_key}
        base_url = (settings.openai_base_url or "").strip()
        if base_url:
            client_kwargs["base_url"] = base_url

        self._client = OpenAI(**client_kwargs)
        self._model = (settings.openai_model or "").strip() or "gpt-3.5-turbo"
        self._temperature = float(settings.openai_temperature)
        self._max_tokens = settings.openai_max_tokens

    def ask(self, question: str) -> str:
        """Return the assistant's answer to ``question``."""

        try:
            completion = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": question},
                ],
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except OpenAIError as exc:
            logger.error("Error calling OpenAI API: %s", exc)
            raise OpenAIServiceError(str(exc)) from exc

        choices = getattr(completion, "choices", None) or []
        if not choices or choices[0].message is None:
            raise OpenAIServiceError("The assistant returned an empty response")
        return choices[0].message.content or ""


def resolve_api_key(authorization: str | None) -> str | None:
    """Pick the key used for a chat request.

    The server-side key always wins; a bearer key sent by the client is only
    honoured when the server has none configured.
    """

    server_key = (get_settings().openai_api_key or "").strip()
    if server_key:
        return server_key
    if not authorization:
        return None
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return credentials.strip() or None


__all__ = [
    "OpenAIConfigurationError",
    "OpenAIServiceError",
    "StudyAssistantService",
    "SYSTEM_PROMPT",
    "resolve_api_key",
]
