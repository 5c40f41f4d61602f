"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed without error."""

GENERAL_ERROR: int = 1
"""A known OutlineCliError was caught. User-facing message was displayed."""

NOT_FOUND: int = 1
"""``download-document`` was asked for a document that does not exist."""

DOWNLOAD_FAILED: int = 2
"""``download-document`` failed for any reason other than a missing document."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
