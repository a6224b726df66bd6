"""Tests for the transactional email templates."""

import pytest

from learnsmart.domain.errors import ValidationError
from learnsmart.infrastructure.email_templates import (
    TEMPLATE_NOTE_NOTIFY,
    TEMPLATE_OTP_RESET,
    TEMPLATE_OTP_SIGNUP,
    TEMPLATE_QUIZ_NOTIFY,
    render_email,
    template_for_notification_type,
)


def test_otp_templates_include_code_and_subject() -> None:
    signup = render_email(TEMPLATE_OTP_SIGNUP, code="123456")
    reset = render_email(TEMPLATE_OTP_RESET, code="654321")

    assert signup.subject == "LearnSmart - Email Verification OTP"
    assert "123456" in signup.html
    assert reset.subject == "LearnSmart - Password Reset OTP"
    assert "654321" in reset.html


def test_notification_subjects() -> None:
    assert (
        render_email(TEMPLATE_NOTE_NOTIFY, title="t", details="d").subject
        == "New Study Material Available - LearnSmart"
    )
    assert (
        render_email(TEMPLATE_QUIZ_NOTIFY, title="t", details="d").subject
        == "New Quiz Available - LearnSmart"
    )


def test_interpolated_values_are_escaped() -> None:
    rendered = render_email(
        TEMPLATE_NOTE_NOTIFY,
        title="<script>alert(1)</script>",
        details='Tom & "Jerry"',
    )

    assert "<script>" not in rendered.html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in rendered.html
    assert "Tom &amp; &quot;Jerry&quot;" in rendered.html


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValidationError):
        render_email("welcome")


def test_otp_template_requires_code() -> None:
    with pytest.raises(ValidationError):
        render_email(TEMPLATE_OTP_SIGNUP)


def test_template_for_notification_type() -> None:
    assert template_for_notification_type("note") == TEMPLATE_NOTE_NOTIFY
    assert template_for_notification_type("quiz") == TEMPLATE_QUIZ_NOTIFY
    with pytest.raises(ValidationError):
        template_for_notification_type("other")
