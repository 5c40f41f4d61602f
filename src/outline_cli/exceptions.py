"""Custom exception hierarchy for outline-cli.

All exceptions that cross layer boundaries must inherit from
:class:`OutlineCliError`.  Raw third-party exceptions (e.g. from httpx)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
OutlineCliError
├── ConfigurationError
├── ApiError
│   ├── UnauthorizedError
│   ├── DocumentNotFoundError
│   ├── NetworkError
│   └── DecodeError
├── InvalidDocumentIdError
└── DocumentSaveError
    └── TargetExistsError
"""

from __future__ import annotations


class OutlineCliError(Exception):
    """Base exception for all outline-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(OutlineCliError):
    """Raised when required settings are missing or invalid."""


# --- Remote API ------------------------------------------------------------

class ApiError(OutlineCliError):
    """Base for every failure reported by the getOutline API client."""


class UnauthorizedError(ApiError):
    """Raised when getOutline rejects the configured API token."""

    def __init__(self, message: str = "getOutline rejected the API token.") -> None:
        super().__init__(
            message,
            hint="Check GETOUTLINE_API_KEY or generate a new token in getOutline.",
        )


class DocumentNotFoundError(ApiError):
    """Raised when the requested document does not exist."""

    def __init__(self, document_id: str) -> None:
        super().__init__(
            f'getOutline could not find a document with the ID "{document_id}".',
            hint="Run 'outline-cli list-documents' to see available IDs.",
        )
        self.document_id: str = document_id


class NetworkError(ApiError):
    """Raised on connection failures, timeouts, and unexpected HTTP statuses."""


class DecodeError(ApiError):
    """Raised when a response body is not the JSON shape we expect."""


# --- Input validation ------------------------------------------------------

class InvalidDocumentIdError(OutlineCliError):
    """Raised when a document ID is empty or blank."""


# --- Local filesystem ------------------------------------------------------

class DocumentSaveError(OutlineCliError):
    """Raised when a downloaded document cannot be written to disk."""


class TargetExistsError(DocumentSaveError):
    """Raised instead of overwriting an existing file."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f'A file with the same name already exists ("{path}").',
            hint="Choose a different name with --file-name.",
        )
        self.path: str = path
