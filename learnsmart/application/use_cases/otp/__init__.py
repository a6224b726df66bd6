"""One-time passcode issuance and verification."""

from .service import OtpEntry, OtpFlow, OtpService, VerifyResult, get_otp_service

__all__ = ["OtpEntry", "OtpFlow", "OtpService", "VerifyResult", "get_otp_service"]
