"""Shared pytest fixtures and configuration for the outline-cli test suite.

Guidelines
----------
* No internet access in any test.
* getOutline is served by ``httpx.MockTransport`` at the infra boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on the developer's environment or ``.env`` file.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from outline_cli.config import Settings

Handler = Callable[[httpx.Request], httpx.Response]

_SETTINGS_ENV_VARS: tuple[str, ...] = (
    "GETOUTLINE_API_KEY",
    "GETOUTLINE_BASE_URL",
    "GETOUTLINE_TIMEOUT_SECONDS",
    "GETOUTLINE_PAGE_SIZE",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Clear GETOUTLINE_* variables and run from an empty directory."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-token", page_size=2)


def request_json(request: httpx.Request) -> dict[str, Any]:
    """Decode the JSON body of a captured request."""
    return json.loads(request.content or b"{}")


def envelope(data: Any, status: int = 200) -> httpx.Response:
    """Build a getOutline-shaped ``{"data": ...}`` response."""
    return httpx.Response(status, json={"ok": True, "data": data})


def raw_document(
    doc_id: str,
    title: str = "A document",
    *,
    updated_at: str | None = "2024-03-01T09:30:00.000Z",
    text: str = "# Heading\nBody",
) -> dict[str, Any]:
    """Factory for a document object matching the API output shape."""
    raw: dict[str, Any] = {"id": doc_id, "title": title, "text": text}
    if updated_at is not None:
        raw["updatedAt"] = updated_at
    return raw


def list_handler(documents: list[dict[str, Any]], calls: list[dict[str, Any]] | None = None) -> Handler:
    """Serve ``documents.list`` by slicing *documents* with offset/limit."""

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/documents.list")
        body = request_json(request)
        if calls is not None:
            calls.append(body)
        offset, limit = body["offset"], body["limit"]
        return envelope(documents[offset:offset + limit])

    return handler
