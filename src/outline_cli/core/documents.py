"""Pure document transformations.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic, and trivially unit-testable with
fixture data.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime, timezone

from outline_cli.core.models import (
    ID_WIDTH,
    TITLE_WIDTH,
    UPDATED_WIDTH,
    DisplayRow,
    DocumentContent,
    DocumentSummary,
)

MARKDOWN_EXTENSION: str = ".md"
FALLBACK_STEM: str = "untitled"

_UNSAFE_RUN = re.compile(r"[^A-Za-z0-9]+")


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------

def _truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"


def _format_timestamp(value: datetime | None) -> str:
    if value is None:
        return "-"
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%d %H:%M")


def display_header() -> str:
    """Return the header line matching :meth:`DisplayRow.render`."""
    return (
        f"{'ID':<{ID_WIDTH}}  {'TITLE':<{TITLE_WIDTH}}  {'UPDATED':<{UPDATED_WIDTH}}"
    ).rstrip()


def summarize_for_display(docs: Sequence[DocumentSummary]) -> list[DisplayRow]:
    """Map each summary to a :class:`DisplayRow`, preserving input order."""
    return [
        DisplayRow(
            id=doc.id,
            title=_truncate(doc.title, TITLE_WIDTH),
            updated=_format_timestamp(doc.updated_at),
        )
        for doc in docs
    ]


# ---------------------------------------------------------------------------
# Downloading
# ---------------------------------------------------------------------------

def resolve_filename(doc: DocumentContent, suggested: str | None = None) -> str:
    """Derive a filesystem-safe ``.md`` file name for *doc*.

    The title is reduced to ASCII alphanumerics with every other run of
    characters collapsed to ``_``.  Titles that differ only by
    punctuation therefore map to the same name.

    A *suggested* name is used verbatim, gaining the extension only when
    it does not already end with it.
    """
    if suggested is not None and suggested.strip():
        name = suggested.strip()
        if name.lower().endswith(MARKDOWN_EXTENSION):
            return name
        return name + MARKDOWN_EXTENSION

    stem = _UNSAFE_RUN.sub("_", doc.title).strip("_") or FALLBACK_STEM
    return stem + MARKDOWN_EXTENSION


def content_to_bytes(doc: DocumentContent) -> bytes:
    """Encode the markdown body as UTF-8, byte-for-byte."""
    return doc.body_markdown.encode("utf-8")
