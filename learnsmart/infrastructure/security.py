"""Security helpers for hashing, token generation and passcodes."""

from datetime import datetime, timedelta, timezone
import secrets

from jose import JWTError, jwt
from passlib.context import CryptContext

from learnsmart.config import get_settings

OTP_MIN = 100_000
OTP_MAX = 999_999

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=310_000,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm="HS256")


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, get_settings().secret_key, algorithms=["HS256"])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def generate_otp_code() -> str:
    """Return a six digit code drawn uniformly from 100000-999999."""

    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


__all__ = [
    "create_access_token",
    "decode_access_token",
    "generate_otp_code",
    "get_password_hash",
    "verify_password",
]
