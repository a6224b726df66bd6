"""Tests for passcode issuance and verification."""

from __future__ import annotations

import pytest

from learnsmart.application.use_cases.otp import OtpFlow, VerifyResult
from learnsmart.domain.errors import (
    EmailDeliveryError,
    ExpiredError,
    MismatchError,
    NotFoundError,
    ValidationError,
)


def test_issue_sends_six_digit_code_once(otp_service, otp_sender) -> None:
    entry = otp_service.issue("Student@Example.com", "signup")

    assert len(otp_sender.sent) == 1
    mail = otp_sender.sent[0]
    assert mail["recipient"] == "student@example.com"
    assert mail["kind"] == "otp-signup"
    assert mail["code"] == entry.code
    assert entry.code.isdigit() and 100000 <= int(entry.code) <= 999999


def test_code_verifies_exactly_once(otp_service, otp_sender) -> None:
    otp_service.issue("a@example.com", OtpFlow.SIGNUP)
    code = otp_sender.last_code()

    assert otp_service.verify("a@example.com", "signup", code) is VerifyResult.VERIFIED
    with pytest.raises(NotFoundError):
        otp_service.verify("a@example.com", "signup", code)


def test_wrong_code_keeps_the_entry(otp_service, otp_sender) -> None:
    otp_service.issue("a@example.com")
    code = otp_sender.last_code()
    wrong = "100000" if code != "100000" else "100001"

    with pytest.raises(MismatchError):
        otp_service.verify("a@example.com", "signup", wrong)
    assert otp_service.verify("a@example.com", "signup", code) is VerifyResult.VERIFIED


def test_expired_code_is_reported_then_removed(otp_service, otp_sender, clock) -> None:
    otp_service.issue("a@example.com")
    code = otp_sender.last_code()

    clock.advance(301)
    with pytest.raises(ExpiredError):
        otp_service.verify("a@example.com", "signup", code)
    with pytest.raises(NotFoundError):
        otp_service.verify("a@example.com", "signup", code)


def test_code_is_valid_until_the_deadline(otp_service, otp_sender, clock) -> None:
    otp_service.issue("a@example.com")
    clock.advance(300)

    assert otp_service.verify("a@example.com", "signup", otp_sender.last_code())


def test_entries_are_evicted_after_retention(otp_service, otp_sender, clock) -> None:
    otp_service.issue("a@example.com")
    clock.advance(300 + 3600)

    with pytest.raises(NotFoundError):
        otp_service.verify("a@example.com", "signup", otp_sender.last_code())


def test_flows_do_not_share_codes(otp_service, otp_sender) -> None:
    otp_service.issue("a@example.com", "signup")
    signup_code = otp_sender.last_code()
    otp_service.issue("a@example.com", "password-reset")
    reset_code = otp_sender.last_code()
    assert otp_sender.sent[-1]["kind"] == "otp-reset"

    with pytest.raises(NotFoundError):
        otp_service.verify("b@example.com", "reset", reset_code)
    assert otp_service.verify("a@example.com", "reset", reset_code)
    assert otp_service.verify("a@example.com", "signup", signup_code)


def test_reissue_replaces_previous_code(otp_service, otp_sender) -> None:
    otp_service.issue("a@example.com")
    first = otp_sender.last_code()
    otp_service.issue("a@example.com")
    second = otp_sender.last_code()

    if first != second:
        with pytest.raises(MismatchError):
            otp_service.verify("a@example.com", "signup", first)
    assert otp_service.verify("a@example.com", "signup", second)


def test_only_reset_selects_the_reset_flow() -> None:
    assert OtpFlow.parse("reset") is OtpFlow.RESET
    assert OtpFlow.parse("password-reset") is OtpFlow.RESET
    assert OtpFlow.parse(None) is OtpFlow.SIGNUP
    assert OtpFlow.parse("login") is OtpFlow.SIGNUP


def test_unknown_flow_shares_the_signup_code(otp_service, otp_sender) -> None:
    otp_service.issue("a@example.com", "login")

    assert otp_sender.sent[-1]["kind"] == "otp-signup"
    assert otp_service.verify("a@example.com", "signup", otp_sender.last_code())


def test_missing_email_is_rejected(otp_service, otp_sender) -> None:
    with pytest.raises(ValidationError):
        otp_service.issue("  ", "signup")
    assert otp_sender.sent == []


def test_mail_failure_propagates(otp_service, otp_sender) -> None:
    otp_sender.error = EmailDeliveryError("SendGrid request failed with status 401")

    with pytest.raises(EmailDeliveryError):
        otp_service.issue("a@example.com")
