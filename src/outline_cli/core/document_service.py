"""Core document service — orchestrates reads against getOutline.

This service delegates the remote calls to a
:class:`~outline_cli.core.protocols.DocumentReader` injected at
construction time.  It is responsible for:

* Resolving the current user for ``--mine-only`` listings.
* Validating document IDs before a request is made.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no filesystem access.
* No httpx import.
* Reader errors propagate unchanged.
"""

from __future__ import annotations

import logging

from outline_cli.core.models import DocumentContent, DocumentSummary, UserInfo
from outline_cli.core.protocols import DocumentReader
from outline_cli.exceptions import InvalidDocumentIdError

logger = logging.getLogger(__name__)


class DocumentService:
    """Stateless service in front of a document reader.

    Parameters
    ----------
    reader:
        Any object satisfying the :class:`DocumentReader` protocol.
    """

    def __init__(self, reader: DocumentReader) -> None:
        self._reader: DocumentReader = reader

    def list_documents(self, *, mine_only: bool = False) -> list[DocumentSummary]:
        """Return all visible documents, or only the caller's own."""
        user_id: str | None = None
        if mine_only:
            user = self._reader.current_user()
            logger.debug("Restricting listing to documents of user %s", user.id)
            user_id = user.id
        return self._reader.list_documents(user_id=user_id)

    def fetch_document(self, document_id: str) -> DocumentContent:
        """Fetch one document.

        Raises
        ------
        InvalidDocumentIdError
            If *document_id* is empty or blank.
        """
        stripped = document_id.strip()
        if not stripped:
            raise InvalidDocumentIdError("Document ID must not be empty.")
        return self._reader.fetch_document(stripped)

    def current_user(self) -> UserInfo:
        return self._reader.current_user()
