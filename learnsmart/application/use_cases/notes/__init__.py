"""Use cases for course notes."""

from .manage_notes import (
    attach_pdf,
    create_note,
    delete_note,
    download_pdf,
    get_note,
    list_notes,
    update_note,
)

__all__ = [
    "attach_pdf",
    "create_note",
    "delete_note",
    "download_pdf",
    "get_note",
    "list_notes",
    "update_note",
]
