"""Azure Blob Storage utilities for note attachments."""

from __future__ import annotations

import logging
import secrets
import time
from functools import lru_cache
from pathlib import PurePath
from typing import Optional

from azure.core.exceptions import AzureError, ResourceExistsError, ResourceNotFoundError
from azure.storage.blob import BlobServiceClient, ContentSettings

from learnsmart.config import get_settings
from learnsmart.domain.errors import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)


@lru_cache
def _get_blob_service_client() -> BlobServiceClient:
    settings = get_settings()
    if not settings.azure_storage_connection_string:
        msg = "Azure storage connection string is not configured"
        raise UpstreamError(msg)
    return BlobServiceClient.from_connection_string(
        settings.azure_storage_connection_string
    )


@lru_cache
def _get_container_client():
    service_client = _get_blob_service_client()
    container_name = get_settings().azure_storage_container_name
    try:
        service_client.create_container(container_name)
    except ResourceExistsError:
        pass
    except AzureError as exc:
        logger.error("Failed to prepare container %s: %s", container_name, exc)
        raise UpstreamError(f"Storage is unavailable: {exc}") from exc
    return service_client.get_container_client(container_name)


def build_blob_name(filename: str) -> str:
    """Return a random blob name that keeps the extension of ``filename``."""

    suffix = PurePath(filename or "").suffix.lower() or ".pdf"
    return f"{secrets.token_hex(8)}{int(time.time() * 1000)}{suffix}"


def upload_blob(
    blob_path: str,
    data: bytes,
    *,
    content_type: Optional[str] = None,
) -> None:
    """Upload ``data`` to the configured storage container at ``blob_path``."""

    container_client = _get_container_client()
    blob_client = container_client.get_blob_client(blob_path)
    content_settings = None
    if content_type is not None:
        content_settings = ContentSettings(content_type=content_type)
    try:
        blob_client.upload_blob(
            data,
            overwrite=True,
            content_settings=content_settings,
        )
    except AzureError as exc:
        logger.error("Failed to upload blob %s: %s", blob_path, exc)
        raise UpstreamError(f"Could not upload file: {exc}") from exc


def download_blob(blob_path: str) -> bytes:
    """Return the exact bytes stored at ``blob_path``."""

    container_client = _get_container_client()
    blob_client = container_client.get_blob_client(blob_path)
    try:
        stream = blob_client.download_blob()
    except ResourceNotFoundError as exc:
        raise NotFoundError(f"File '{blob_path}' not found") from exc
    except AzureError as exc:
        logger.error("Failed to download blob %s: %s", blob_path, exc)
        raise UpstreamError(f"Could not download file: {exc}") from exc
    return stream.readall()


def delete_blob(blob_path: str) -> None:
    """Delete the blob located at ``blob_path`` if it exists."""

    container_client = _get_container_client()
    blob_client = container_client.get_blob_client(blob_path)
    try:
        blob_client.delete_blob()
    except ResourceNotFoundError:
        return
    except AzureError as exc:
        logger.error("Failed to delete blob %s: %s", blob_path, exc)
        raise UpstreamError(f"Could not delete file: {exc}") from exc


__all__ = [
    "build_blob_name",
    "delete_blob",
    "download_blob",
    "upload_blob",
]
