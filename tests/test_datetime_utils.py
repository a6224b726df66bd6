"""Tests for the application timezone helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from learnsmart.config import reset_settings_cache
from learnsmart.utils import datetime as app_datetime


@pytest.fixture()
def app_timezone(monkeypatch):
    def _set(name: str) -> None:
        monkeypatch.setenv("APP_TIMEZONE", name)
        reset_settings_cache()
        app_datetime._app_timezone.cache_clear()

    yield _set
    monkeypatch.delenv("APP_TIMEZONE", raising=False)
    reset_settings_cache()
    app_datetime._app_timezone.cache_clear()


def test_naive_values_are_read_back_in_app_timezone(app_timezone) -> None:
    app_timezone("Asia/Kolkata")
    stored = datetime(2024, 1, 1, 12, 0)

    aware = app_datetime.ensure_app_timezone(stored)

    assert aware.utcoffset() == timedelta(hours=5, minutes=30)
    assert app_datetime.ensure_app_naive_datetime(aware) == stored


def test_aware_values_are_converted_before_storing(app_timezone) -> None:
    app_timezone("Asia/Kolkata")
    value = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)

    assert app_datetime.ensure_app_naive_datetime(value) == datetime(2024, 1, 1, 5, 30)


def test_unknown_timezone_falls_back_to_utc(app_timezone) -> None:
    app_timezone("Mars/Olympus")

    assert app_datetime.now_in_app_timezone().utcoffset() == timedelta(0)
    assert app_datetime.ensure_app_timezone(None) is None
    assert app_datetime.isoformat_or_none(None) is None
