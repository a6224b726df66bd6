"""Utility helpers for sending transactional email via SendGrid."""

from __future__ import annotations

import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from learnsmart.config import get_settings
from learnsmart.domain.errors import EmailDeliveryError

from .email_templates import render_email

logger = logging.getLogger(__name__)


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                help_link = item.get("help")
                if message and help_link:
                    messages.append(f"{message} (help: {help_link})")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _describe_failure(status_code: Any, details: str | None) -> str:
    if status_code and details:
        return f"SendGrid request failed with status {status_code}: {details}"
    if status_code:
        return f"SendGrid request failed with status {status_code}"
    if details:
        return f"SendGrid request failed: {details}"
    return "SendGrid request failed"


def _build_client(api_key: str, timeout: float) -> SendGridAPIClient:
    client = SendGridAPIClient(api_key)
    # python_http_client forwards this to every urlopen call.
    client.client.timeout = timeout
    return client


def send_email(subject: str, html_content: str, recipient: str) -> None:
    """Send an email using the configured SendGrid credentials.

    Raises :class:`EmailDeliveryError` when email is not configured, the
    transport raises (network, authentication, quota, timeout), or SendGrid
    answers with a non-2xx status.
    """

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.error("SendGrid configuration incomplete; cannot email %s", recipient)
        raise EmailDeliveryError("Email delivery is not configured")

    message = Mail(
        from_email=(settings.sendgrid_sender, settings.sendgrid_sender_name),
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        client = _build_client(settings.sendgrid_api_key, settings.mail_timeout_seconds)
        response = client.send(message)
    except Exception as exc:
        description = _describe_failure(
            getattr(exc, "status_code", None),
            _extract_sendgrid_error_details(getattr(exc, "body", None)) or str(exc) or None,
        )
        logger.error("Error sending email to %s: %s", recipient, description)
        raise EmailDeliveryError(description) from exc

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        description = _describe_failure(
            status_code, _extract_sendgrid_error_details(getattr(response, "body", None))
        )
        logger.error("SendGrid rejected email to %s: %s", recipient, description)
        raise EmailDeliveryError(description)

    logger.info("Sent '%s' email to %s", subject, recipient)


def send_templated_email(
    recipient: str,
    kind: str,
    *,
    title: str | None = None,
    details: str | None = None,
    code: str | None = None,
) -> None:
    """Render the ``kind`` template and send it to ``recipient``."""

    rendered = render_email(kind, title=title, details=details, code=code)
    send_email(rendered.subject, rendered.html, recipient)


__all__ = ["send_email", "send_templated_email"]
