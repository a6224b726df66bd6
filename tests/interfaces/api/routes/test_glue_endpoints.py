"""Response bodies of the ``/api`` and ``/health`` endpoints."""

from __future__ import annotations

from learnsmart.domain.errors import EmailDeliveryError
from learnsmart.interfaces.api.routes import chat as chat_routes
from learnsmart.interfaces.api.routes import mail as mail_routes


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["timestamp"]


def test_send_otp_requires_email(client, otp_sender) -> None:
    response = client.post("/api/send-otp", json={})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Email is required"}
    assert otp_sender.sent == []


def test_send_otp_treats_unknown_type_as_signup(client, otp_sender) -> None:
    response = client.post("/api/send-otp", json={"email": "a@example.com", "type": "verify"})

    assert response.status_code == 200
    assert otp_sender.sent[-1]["kind"] == "otp-signup"

    response = client.post(
        "/api/verify-otp", json={"email": "a@example.com", "otp": otp_sender.last_code()}
    )
    assert response.status_code == 200


def test_send_otp_accepts_null_type(client, otp_sender) -> None:
    response = client.post("/api/send-otp", json={"email": "a@example.com", "type": None})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "OTP sent successfully"}
    assert otp_sender.sent[-1]["kind"] == "otp-signup"


def test_verify_otp_with_numeric_code_is_a_mismatch(client, otp_sender) -> None:
    client.post("/api/send-otp", json={"email": "a@example.com", "type": None})
    wrong = 100000 if otp_sender.last_code() != "100000" else 100001

    response = client.post(
        "/api/verify-otp", json={"email": "a@example.com", "otp": wrong, "type": None}
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid OTP"}


def test_send_and_verify_otp(client, otp_sender) -> None:
    response = client.post("/api/send-otp", json={"email": "a@example.com"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "OTP sent successfully"}
    code = otp_sender.last_code()

    wrong = "100000" if code != "100000" else "100001"
    response = client.post(
        "/api/verify-otp", json={"email": "a@example.com", "otp": wrong}
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid OTP"}

    response = client.post("/api/verify-otp", json={"email": "a@example.com", "otp": code})
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Email verified successfully"}

    response = client.post("/api/verify-otp", json={"email": "a@example.com", "otp": code})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "No OTP found for this email"}


def test_verify_otp_reports_expiry(client, otp_sender, clock) -> None:
    client.post("/api/send-otp", json={"email": "a@example.com", "type": "reset"})
    clock.advance(301)

    response = client.post(
        "/api/verify-otp",
        json={"email": "a@example.com", "otp": otp_sender.last_code(), "type": "reset"},
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "OTP has expired"}


def test_verify_otp_requires_fields(client) -> None:
    response = client.post("/api/verify-otp", json={"email": "a@example.com"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Email and OTP are required"}


def test_send_otp_reports_mail_failure(client, otp_sender) -> None:
    otp_sender.error = EmailDeliveryError("SendGrid request failed with status 401")

    response = client.post("/api/send-otp", json={"email": "a@example.com"})

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Failed to send OTP",
        "details": "SendGrid request failed with status 401",
    }


def test_send_notification_email(client, monkeypatch) -> None:
    sent = []
    monkeypatch.setattr(
        mail_routes.email_transport,
        "send_templated_email",
        lambda recipient, kind, **fields: sent.append((recipient, kind, fields)),
    )

    response = client.post(
        "/api/send-notification-email",
        json={"email": "s@example.com", "type": "quiz", "title": "T", "details": "D"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Notification email sent successfully",
    }
    assert sent == [("s@example.com", "quiz-notify", {"title": "T", "details": "D"})]


def test_send_notification_email_failure(client, monkeypatch) -> None:
    def fail(*args, **kwargs):
        raise EmailDeliveryError("boom")

    monkeypatch.setattr(mail_routes.email_transport, "send_templated_email", fail)

    response = client.post(
        "/api/send-notification-email",
        json={"email": "s@example.com", "type": "note", "title": "T", "details": "D"},
    )

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to send notification email"}


def test_send_notification_email_unknown_type(client) -> None:
    response = client.post(
        "/api/send-notification-email",
        json={"email": "s@example.com", "type": "other"},
    )

    assert response.status_code == 500


class _Assistant:
    keys: list[str] = []

    def __init__(self, api_key: str) -> None:
        _Assistant.keys.append(api_key)

    def ask(self, question: str) -> str:
        return f"answer to {question}"


def test_chat_requires_a_key(client) -> None:
    response = client.post("/api/chat", json={"question": "What is a set?"})

    assert response.status_code == 401
    assert response.json() == {"error": "API key is required"}


def test_chat_requires_a_question(client) -> None:
    response = client.post(
        "/api/chat", json={}, headers={"Authorization": "Bearer sk-client"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Question is required"}


def test_chat_rejects_other_methods(client) -> None:
    assert client.get("/api/chat").status_code == 405


def test_chat_uses_client_key_without_server_key(client, monkeypatch) -> None:
    _Assistant.keys = []
    monkeypatch.setattr(chat_routes, "StudyAssistantService", _Assistant)

    response = client.post(
        "/api/chat",
        json={"question": "What is a set?"},
        headers={"Authorization": "Bearer sk-client"},
    )

    assert response.status_code == 200
    assert response.json() == {"response": "answer to What is a set?"}
    assert _Assistant.keys == ["sk-client"]


def test_chat_prefers_server_key(client, monkeypatch) -> None:
    from learnsmart.config import reset_settings_cache

    _Assistant.keys = []
    monkeypatch.setattr(chat_routes, "StudyAssistantService", _Assistant)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-server")
    reset_settings_cache()
    try:
        response = client.post(
            "/api/chat",
            json={"question": "Q"},
            headers={"Authorization": "Bearer sk-client"},
        )
    finally:
        monkeypatch.delenv("OPENAI_API_KEY")
        reset_settings_cache()

    assert response.status_code == 200
    assert _Assistant.keys == ["sk-server"]


def test_chat_reports_upstream_failure(client, monkeypatch) -> None:
    from learnsmart.infrastructure.openai_client import OpenAIServiceError

    class _Failing(_Assistant):
        def ask(self, question: str) -> str:
            raise OpenAIServiceError("rate limited")

    monkeypatch.setattr(chat_routes, "StudyAssistantService", _Failing)

    response = client.post(
        "/api/chat", json={"question": "Q"}, headers={"Authorization": "Bearer k"}
    )

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to get response from AI",
        "details": "rate limited",
    }


def test_admin_user_directory(client, main_admin, make_user, auth_headers) -> None:
    student = make_user("student@example.com")

    assert client.get("/api/admin/users").status_code == 401
    assert client.get("/api/admin/users", headers=auth_headers(student)).status_code == 403

    response = client.get("/api/admin/users", headers=auth_headers(main_admin))
    assert response.status_code == 200
    emails = sorted(item["email"] for item in response.json())
    assert emails == ["admin@example.com", "student@example.com"]
    assert set(response.json()[0]) == {"id", "email", "created_at"}

    response = client.delete(
        f"/api/admin/users/{student.id}", headers=auth_headers(main_admin)
    )
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "User deleted successfully"}

    response = client.get("/api/admin/users", headers=auth_headers(main_admin))
    assert [item["email"] for item in response.json()] == ["admin@example.com"]
