"""Domain models for outline-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and live only for a single command invocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DocumentSummary:
    """One entry of the document list."""

    id: str
    """getOutline document ID."""

    title: str
    """Human-readable document title."""

    updated_at: datetime | None
    """Last modification time, or ``None`` if the API omitted it."""


@dataclass(frozen=True, slots=True)
class DocumentContent:
    """Full content of a single document, fetched for download."""

    id: str
    title: str
    body_markdown: str
    """Markdown body exactly as returned by the API."""


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class UserInfo:
    """The user that owns the configured API token."""

    id: str
    name: str


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------

ID_WIDTH: int = 36
TITLE_WIDTH: int = 40
UPDATED_WIDTH: int = 16


@dataclass(frozen=True, slots=True)
class DisplayRow:
    """A document-table row with every cell already formatted."""

    id: str
    title: str
    updated: str

    def render(self) -> str:
        """Return the row as one fixed-width line."""
        return (
            f"{self.id:<{ID_WIDTH}}  "
            f"{self.title:<{TITLE_WIDTH}}  "
            f"{self.updated:<{UPDATED_WIDTH}}"
        ).rstrip()
