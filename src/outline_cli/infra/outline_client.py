"""httpx backed implementation of :class:`~outline_cli.core.protocols.DocumentReader`.

This module is the **only** place in the codebase that imports ``httpx``.
All transport, status, and decoding failures are caught here and
re-raised as typed :class:`~outline_cli.exceptions.ApiError` subclasses —
nothing raw escapes the infrastructure boundary.

getOutline exposes an RPC-style API: every method is a ``POST`` to
``<base>/<method>`` with a JSON body, and every response wraps its
payload in ``{"data": ...}``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from types import TracebackType
from typing import Any

import httpx

from outline_cli.config import Settings
from outline_cli.core.models import DocumentContent, DocumentSummary, UserInfo
from outline_cli.exceptions import (
    DecodeError,
    DocumentNotFoundError,
    NetworkError,
    UnauthorizedError,
)
from outline_cli.version import __version__

logger = logging.getLogger(__name__)

_UNAUTHORIZED_STATUSES: frozenset[int] = frozenset({401, 403})


class OutlineClient:
    """Concrete :class:`DocumentReader` backed by an ``httpx.Client``.

    Usage::

        with OutlineClient(load_settings()) as client:
            docs = client.list_documents()

    Parameters
    ----------
    settings:
        Connection settings; the API key is required.
    transport:
        Optional httpx transport, used by tests to serve canned
        responses without touching the network.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        token = settings.require_api_key()
        self._page_size: int = settings.page_size
        self._http: httpx.Client = httpx.Client(
            base_url=settings.base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
                "User-Agent": f"outline-cli/{__version__}",
            },
            timeout=httpx.Timeout(settings.timeout_seconds),
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Resource management
    # ------------------------------------------------------------------

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> OutlineClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def list_documents(self, *, user_id: str | None = None) -> list[DocumentSummary]:
        """Return every document visible to the token, in API order.

        Pages are requested sequentially until one comes back shorter
        than the page size.
        """
        documents: list[DocumentSummary] = []
        offset = 0
        while True:
            payload: dict[str, Any] = {"offset": offset, "limit": self._page_size}
            if user_id is not None:
                payload["user"] = user_id

            data = self._post("documents.list", payload)
            if not isinstance(data, list):
                raise DecodeError("documents.list returned a non-list payload.")

            page = [self._parse_summary(entry) for entry in data]
            logger.debug("Fetched %d documents at offset %d", len(page), offset)
            documents.extend(page)

            if len(page) < self._page_size:
                return documents
            offset += self._page_size

    def fetch_document(self, document_id: str) -> DocumentContent:
        data = self._post("documents.info", {"id": document_id}, document_id=document_id)
        if not isinstance(data, dict):
            raise DecodeError("documents.info returned a non-object payload.")
        return DocumentContent(
            id=_require_str(data, "id"),
            title=_require_str(data, "title"),
            body_markdown=_require_str(data, "text"),
        )

    def current_user(self) -> UserInfo:
        data = self._post("auth.info", {})
        user = data.get("user") if isinstance(data, dict) else None
        if not isinstance(user, dict):
            raise DecodeError("auth.info response has no user object.")
        return UserInfo(id=_require_str(user, "id"), name=_require_str(user, "name"))

    # ------------------------------------------------------------------
    # Transport (safe boundary)
    # ------------------------------------------------------------------

    def _post(
        self,
        method: str,
        payload: dict[str, Any],
        *,
        document_id: str | None = None,
    ) -> Any:
        """Call *method* and return the unwrapped ``data`` member.

        A 404 maps to :class:`DocumentNotFoundError` only when the call
        targets a specific *document_id*.
        """
        logger.debug("POST %s %s", method, payload)
        try:
            response = self._http.post(method, json=payload)
        except httpx.TimeoutException as exc:
            raise NetworkError(
                f"Request to {method} timed out.",
                hint="Check your connection or raise GETOUTLINE_TIMEOUT_SECONDS.",
            ) from exc
        except httpx.TransportError as exc:
            raise NetworkError(
                f"Could not reach getOutline ({method}): {exc}",
                hint="Check your network connection and GETOUTLINE_BASE_URL.",
            ) from exc

        status = response.status_code
        logger.debug("%s -> HTTP %d", method, status)
        if status in _UNAUTHORIZED_STATUSES:
            raise UnauthorizedError()
        if status == 404 and document_id is not None:
            raise DocumentNotFoundError(document_id)
        if response.is_error:
            raise NetworkError(f"getOutline answered {method} with HTTP {status}.")

        try:
            body = response.json()
        except ValueError as exc:
            raise DecodeError(f"{method} returned invalid JSON: {exc}") from exc

        if not isinstance(body, dict) or "data" not in body:
            raise DecodeError(f"{method} response is missing the 'data' envelope.")
        return body["data"]

    # ------------------------------------------------------------------
    # Raw-dict → domain-model parsers (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_summary(entry: object) -> DocumentSummary:
        if not isinstance(entry, dict):
            raise DecodeError("documents.list entry is not an object.")
        return DocumentSummary(
            id=_require_str(entry, "id"),
            title=_require_str(entry, "title"),
            updated_at=_parse_timestamp(entry.get("updatedAt")),
        )


def _require_str(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise DecodeError(f"Expected string field '{key}', got {type(value).__name__}.")
    return value


def _parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``."""
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise DecodeError(f"Expected timestamp string, got {type(raw).__name__}.")
    text = raw[:-1] + "+00:00" if raw.endswith("Z") else raw
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise DecodeError(f"Malformed timestamp: {raw!r}") from exc
