"""Unit tests for the SendGrid email helper utilities."""

from __future__ import annotations

import json

import pytest

from learnsmart.config import reset_settings_cache
from learnsmart.domain.errors import EmailDeliveryError
from learnsmart.infrastructure import email


class _Response:
    def __init__(self, status_code: int, body=b"") -> None:
        self.status_code = status_code
        self.body = body


class _RecordingClient:
    instances: list["_RecordingClient"] = []
    response = _Response(202)
    error: Exception | None = None

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key
        self.messages = []
        self.client = type("HttpClient", (), {"timeout": None})()
        _RecordingClient.instances.append(self)

    def send(self, message):
        self.messages.append(message)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture()
def sendgrid(monkeypatch):
    monkeypatch.setenv("SENDGRID_API_KEY", "SG.test")
    monkeypatch.setenv("SENDGRID_SENDER", "noreply@example.com")
    monkeypatch.setenv("MAIL_TIMEOUT_SECONDS", "3")
    reset_settings_cache()

    _RecordingClient.instances = []
    _RecordingClient.response = _Response(202)
    _RecordingClient.error = None
    monkeypatch.setattr(email, "SendGridAPIClient", _RecordingClient)
    yield _RecordingClient
    reset_settings_cache()


def test_send_email_uses_configured_sender_and_timeout(sendgrid) -> None:
    email.send_email("Subject", "<p>Hello</p>", "student@example.com")

    (client,) = sendgrid.instances
    assert client.api_key == "SG.test"
    assert client.client.timeout == 3
    message = client.messages[0].get()
    assert message["from"]["email"] == "noreply@example.com"
    assert message["from"]["name"] == "LearnSmart"
    assert message["subject"] == "Subject"
    assert message["personalizations"][0]["to"][0]["email"] == "student@example.com"


def test_send_email_raises_on_rejected_status(sendgrid) -> None:
    sendgrid.response = _Response(
        400, json.dumps({"errors": [{"message": "Bad sender", "help": "https://x"}]})
    )

    with pytest.raises(EmailDeliveryError) as exc_info:
        email.send_email("Subject", "<p>Hello</p>", "student@example.com")

    assert "400" in str(exc_info.value)
    assert "Bad sender (help: https://x)" in str(exc_info.value)


def test_send_email_raises_on_transport_error(sendgrid) -> None:
    sendgrid.error = TimeoutError("timed out")

    with pytest.raises(EmailDeliveryError, match="timed out"):
        email.send_email("Subject", "<p>Hello</p>", "student@example.com")


def test_send_email_requires_configuration(monkeypatch) -> None:
    monkeypatch.delenv("SENDGRID_API_KEY", raising=False)
    monkeypatch.delenv("SENDGRID_SENDER", raising=False)
    reset_settings_cache()
    try:
        with pytest.raises(EmailDeliveryError, match="not configured"):
            email.send_email("Subject", "<p>Hello</p>", "student@example.com")
    finally:
        reset_settings_cache()


def test_send_templated_email_renders_otp(sendgrid) -> None:
    email.send_templated_email("student@example.com", "otp-reset", code="123456")

    message = sendgrid.instances[0].messages[0].get()
    assert message["subject"] == "LearnSmart - Password Reset OTP"
    assert "123456" in message["content"][0]["value"]


def test_extract_sendgrid_error_details_handles_plain_text() -> None:
    assert email._extract_sendgrid_error_details(b"  quota exceeded ") == "quota exceeded"
    assert email._extract_sendgrid_error_details(None) is None
