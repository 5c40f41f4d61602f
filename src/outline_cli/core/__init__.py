"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from outline_cli.core.document_service import DocumentService
from outline_cli.core.documents import (
    content_to_bytes,
    display_header,
    resolve_filename,
    summarize_for_display,
)
from outline_cli.core.models import DisplayRow, DocumentContent, DocumentSummary, UserInfo
from outline_cli.core.protocols import DocumentReader, DocumentSaver

__all__: list[str] = [
    "DisplayRow",
    "DocumentContent",
    "DocumentReader",
    "DocumentSaver",
    "DocumentService",
    "DocumentSummary",
    "UserInfo",
    "content_to_bytes",
    "display_header",
    "resolve_filename",
    "summarize_for_display",
]
