"""Shared fixtures. Environment variables are set before the package is imported."""

from __future__ import annotations

import os
import tempfile
from datetime import timedelta
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.mkdtemp(prefix="learnsmart-tests-")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["MAIN_ADMIN_EMAIL"] = "admin@example.com"
for _name in ("SENDGRID_API_KEY", "SENDGRID_SENDER", "OPENAI_API_KEY"):
    os.environ.pop(_name, None)

MAIN_ADMIN_EMAIL = "admin@example.com"
PASSWORD = "Secret123"


@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate every table so each test starts from an empty database."""

    from learnsmart.application.use_cases.notifications import fan_out_queue
    from learnsmart.infrastructure.database import Base, engine, initialize_database

    initialize_database()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    fan_out_queue.drain()


@pytest.fixture()
def db_session():
    from learnsmart.infrastructure.database import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def make_user(db_session):
    """Return a factory creating accounts directly in the database."""

    from learnsmart.application.use_cases.users import create_account

    def factory(email: str, password: str = PASSWORD):
        return create_account(db_session, email=email, password=password)

    return factory


@pytest.fixture()
def main_admin(make_user):
    return make_user(MAIN_ADMIN_EMAIL)


class RecordingSender:
    """Collects the mails an :class:`OtpService` would send."""

    def __init__(self) -> None:
        self.sent: list[dict] = []
        self.error: Exception | None = None

    def __call__(self, recipient: str, kind: str, **fields) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append({"recipient": recipient, "kind": kind, **fields})

    def last_code(self) -> str:
        return self.sent[-1]["code"]


class FakeClock:
    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def otp_sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture()
def otp_service(clock, otp_sender):
    from learnsmart.application.use_cases.otp import OtpService
    from learnsmart.infrastructure.otp_store import InMemoryKeyValueStore

    return OtpService(
        InMemoryKeyValueStore(clock=clock),
        otp_sender,
        ttl=300,
        retention=3600,
        clock=clock,
    )


@pytest.fixture()
def client(otp_service):
    from fastapi.testclient import TestClient

    from learnsmart.application.use_cases.otp import get_otp_service
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_otp_service] = lambda: otp_service
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    """Return a function building bearer headers for a user."""

    from learnsmart.interfaces.api.routes.auth import issue_token

    def build(user) -> dict[str, str]:
        return {"Authorization": f"Bearer {issue_token(user)}"}

    return build


@pytest.fixture()
def expired_token():
    from learnsmart.infrastructure.security import create_access_token

    def build(user) -> str:
        return create_access_token(
            {"sub": user.email, "uid": user.id}, expires_delta=timedelta(seconds=-1)
        )

    return build
