"""Command values produced by argument parsing and consumed by the router.

Each command is a frozen dataclass; :data:`Command` is the closed union
of all of them.  Nothing here depends on the parsing library, so the
router can be driven by any front end that yields a :data:`Command`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union


@dataclass(frozen=True, slots=True)
class ListDocuments:
    """``list-documents`` — print a table of available documents."""

    mine_only: bool = False


@dataclass(frozen=True, slots=True)
class DownloadDocument:
    """``download-document`` — save one document as markdown."""

    id: str
    file_name: str | None = None
    """Explicit output name; ``None`` derives one from the title."""

    output_dir: Path = field(default_factory=lambda: Path("."))


@dataclass(frozen=True, slots=True)
class WhoAmI:
    """``whoami`` — show the user that owns the API token."""


@dataclass(frozen=True, slots=True)
class Doctor:
    """``doctor`` — environment diagnostics."""


Command = Union[ListDocuments, DownloadDocument, WhoAmI, Doctor]
