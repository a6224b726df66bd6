"""Tests for the blob storage helpers using an in-memory container."""

from __future__ import annotations

import pytest
from azure.core.exceptions import ResourceNotFoundError, ServiceRequestError

from learnsmart.domain.errors import NotFoundError, UpstreamError
from learnsmart.infrastructure import storage


class _Download:
    def __init__(self, data: bytes) -> None:
        self._data = data

    def readall(self) -> bytes:
        return self._data


class _BlobClient:
    def __init__(self, container: "_Container", name: str) -> None:
        self._container = container
        self._name = name

    def upload_blob(self, data, overwrite=False, content_settings=None):
        self._container.blobs[self._name] = bytes(data)
        self._container.content_types[self._name] = (
            content_settings.content_type if content_settings else None
        )

    def download_blob(self):
        if self._name not in self._container.blobs:
            raise ResourceNotFoundError("missing")
        return _Download(self._container.blobs[self._name])

    def delete_blob(self):
        if self._name not in self._container.blobs:
            raise ResourceNotFoundError("missing")
        del self._container.blobs[self._name]


class _Container:
    def __init__(self) -> None:
        self.blobs: dict[str, bytes] = {}
        self.content_types: dict[str, str | None] = {}

    def get_blob_client(self, name: str) -> _BlobClient:
        return _BlobClient(self, name)


@pytest.fixture()
def container(monkeypatch) -> _Container:
    fake = _Container()
    monkeypatch.setattr(storage, "_get_container_client", lambda: fake)
    return fake


def test_upload_then_download_returns_same_bytes(container) -> None:
    payload = b"%PDF-1.4\n\x00\xff binary \x10 content"

    storage.upload_blob("notes/a.pdf", payload, content_type="application/pdf")

    assert storage.download_blob("notes/a.pdf") == payload
    assert container.content_types["notes/a.pdf"] == "application/pdf"


def test_download_missing_blob_raises_not_found(container) -> None:
    with pytest.raises(NotFoundError):
        storage.download_blob("missing.pdf")


def test_delete_is_idempotent(container) -> None:
    storage.upload_blob("a.pdf", b"data")

    storage.delete_blob("a.pdf")
    storage.delete_blob("a.pdf")

    assert container.blobs == {}


def test_build_blob_name_keeps_extension_and_is_unique() -> None:
    first = storage.build_blob_name("Lecture 1.PDF")
    second = storage.build_blob_name("Lecture 1.PDF")

    assert first.endswith(".pdf")
    assert first != second
    assert storage.build_blob_name("no-extension").endswith(".pdf")


class _UnreachableService:
    def create_container(self, name: str) -> None:
        raise ServiceRequestError("connection refused")


def test_unreachable_storage_raises_upstream_error(monkeypatch) -> None:
    monkeypatch.setattr(storage, "_get_blob_service_client", lambda: _UnreachableService())
    storage._get_container_client.cache_clear()

    with pytest.raises(UpstreamError):
        storage.upload_blob("a.pdf", b"data")

    storage._get_container_client.cache_clear()
