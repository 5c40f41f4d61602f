"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from outline_cli.core.models import DocumentContent, DocumentSummary, UserInfo


class DocumentReader(Protocol):
    """Contract for getOutline API backends.

    Any object that implements these methods with the correct
    signatures satisfies this protocol structurally (no explicit
    inheritance required).  Implementations must map all
    backend-specific exceptions to
    :class:`~outline_cli.exceptions.ApiError` subclasses.
    """

    def list_documents(self, *, user_id: str | None = None) -> list[DocumentSummary]:
        """Return every visible document, in API order.

        Implementations must exhaust pagination before returning; a
        partial list is never returned silently.

        Raises
        ------
        UnauthorizedError
            When the token is rejected.
        NetworkError
            On transport failure or an unexpected status.
        DecodeError
            When a page cannot be parsed.
        """
        ...  # pragma: no cover

    def fetch_document(self, document_id: str) -> DocumentContent:
        """Return the full content of *document_id*.

        Raises
        ------
        DocumentNotFoundError
            When no document has that ID.
        UnauthorizedError, NetworkError, DecodeError
            As for :meth:`list_documents`.
        """
        ...  # pragma: no cover

    def current_user(self) -> UserInfo:
        """Return the user owning the configured token."""
        ...  # pragma: no cover


class DocumentSaver(Protocol):
    """Contract for persisting a downloaded document."""

    def save(self, content: bytes, file_name: str, directory: Path) -> Path:
        """Write *content* to ``directory / file_name`` and return the path.

        Raises
        ------
        TargetExistsError
            When the target file already exists.
        DocumentSaveError
            For any other write failure.
        """
        ...  # pragma: no cover
