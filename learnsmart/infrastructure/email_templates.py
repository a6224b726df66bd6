"""HTML templates for every kind of transactional email."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from learnsmart.domain.errors import ValidationError

TEMPLATE_OTP_SIGNUP = "otp-signup"
TEMPLATE_OTP_RESET = "otp-reset"
TEMPLATE_NOTE_NOTIFY = "note-notify"
TEMPLATE_QUIZ_NOTIFY = "quiz-notify"

_FOOTER = (
    '<div style="text-align: center; margin-top: 20px;">'
    '<p style="color: #94a3b8; font-size: 12px;">'
    "This is an automated message from LearnSmart Learning Platform.<br>"
    "Please do not reply to this email."
    "</p></div>"
)


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    html: str


def _render_otp(code: str, *, reset: bool) -> RenderedEmail:
    heading = "Password Reset" if reset else "Email Verification"
    subject = (
        "LearnSmart - Password Reset OTP" if reset else "LearnSmart - Email Verification OTP"
    )
    html = (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        f'<h2 style="color: #2563eb;">LearnSmart {heading}</h2>'
        "<p>Your verification code is:</p>"
        '<h1 style="color: #1d4ed8; font-size: 32px; letter-spacing: 5px;">'
        f"{escape(code)}</h1>"
        "<p>This code will expire in 5 minutes.</p>"
        '<p style="color: #64748b; font-size: 12px;">'
        "If you didn't request this code, please ignore this email.</p>"
        "</div>"
    )
    return RenderedEmail(subject=subject, html=html)


def _render_content(
    *, heading: str, subject: str, title: str, details: str, extra: str
) -> RenderedEmail:
    html = (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; '
        'padding: 20px; background-color: #f8fafc; border-radius: 10px;">'
        '<div style="text-align: center; margin-bottom: 30px;">'
        f'<h1 style="color: #2563eb; margin: 0;">{heading}</h1>'
        "</div>"
        '<div style="background-color: white; padding: 20px; border-radius: 8px;">'
        f'<h2 style="color: #1e40af; margin-top: 0;">{escape(title)}</h2>'
        f'<p style="color: #475569; line-height: 1.6;">{escape(details)}</p>'
        f"{extra}"
        "</div>"
        f"{_FOOTER}"
        "</div>"
    )
    return RenderedEmail(subject=subject, html=html)


def render_email(
    kind: str,
    *,
    title: str | None = None,
    details: str | None = None,
    code: str | None = None,
) -> RenderedEmail:
    """Render the template ``kind``; user supplied values are HTML-escaped."""

    if kind in (TEMPLATE_OTP_SIGNUP, TEMPLATE_OTP_RESET):
        if not code:
            raise ValidationError("A passcode is required for OTP emails")
        return _render_otp(code, reset=kind == TEMPLATE_OTP_RESET)

    if kind == TEMPLATE_NOTE_NOTIFY:
        return _render_content(
            heading="&#128218; New Study Material Available",
            subject="New Study Material Available - LearnSmart",
            title=title or "",
            details=details or "",
            extra=(
                '<div style="margin-top: 20px; padding-top: 20px; border-top: 1px solid #e2e8f0;">'
                '<p style="color: #64748b; margin: 0;">'
                "Access your learning materials anytime on LearnSmart platform.</p></div>"
            ),
        )

    if kind == TEMPLATE_QUIZ_NOTIFY:
        return _render_content(
            heading="&#127919; New Quiz Available",
            subject="New Quiz Available - LearnSmart",
            title=title or "",
            details=details or "",
            extra=(
                '<div style="margin-top: 20px; padding: 15px; background-color: #f0f9ff; border-radius: 6px;">'
                '<p style="color: #0369a1; margin: 0;">'
                "Test your knowledge and track your progress with our latest quiz!</p></div>"
                '<div style="margin-top: 20px; padding-top: 20px; border-top: 1px solid #e2e8f0;">'
                '<p style="color: #64748b; margin: 0;">'
                "Login to LearnSmart platform to take the quiz.</p></div>"
            ),
        )

    raise ValidationError(f"Unknown email template '{kind}'")


def template_for_notification_type(notification_type: str) -> str:
    """Map a notification ``type`` tag to its email template kind."""

    if notification_type == "note":
        return TEMPLATE_NOTE_NOTIFY
    if notification_type == "quiz":
        return TEMPLATE_QUIZ_NOTIFY
    raise ValidationError(f"No email template for notification type '{notification_type}'")


__all__ = [
    "RenderedEmail",
    "TEMPLATE_NOTE_NOTIFY",
    "TEMPLATE_OTP_RESET",
    "TEMPLATE_OTP_SIGNUP",
    "TEMPLATE_QUIZ_NOTIFY",
    "render_email",
    "template_for_notification_type",
]
