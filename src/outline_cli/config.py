"""Runtime configuration read from the environment.

Settings are loaded with pydantic-settings from ``GETOUTLINE_*``
environment variables, falling back to a ``.env`` file in the working
directory.  The API token is only required by commands that talk to
getOutline, so its absence is reported lazily via
:meth:`Settings.require_api_key`.
"""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from outline_cli.exceptions import ConfigurationError

DEFAULT_BASE_URL: str = "https://app.getoutline.com/api"


class Settings(BaseSettings):
    """Configuration for the getOutline connection."""

    model_config = SettingsConfigDict(
        env_prefix="GETOUTLINE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="Bearer token used for every API request.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Root of the getOutline RPC API.",
    )
    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    page_size: int = Field(
        default=25,
        ge=1,
        le=100,
        description="Documents requested per page while listing.",
    )

    def require_api_key(self) -> str:
        """Return the API key or raise :class:`ConfigurationError`."""
        if self.api_key is None or not self.api_key.strip():
            raise ConfigurationError(
                "No getOutline API key configured.",
                hint="Set GETOUTLINE_API_KEY in your environment or in a .env file.",
            )
        return self.api_key.strip()


def load_settings() -> Settings:
    """Build :class:`Settings`, mapping validation failures to our hierarchy."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid configuration: {exc.errors()[0].get('msg', exc)}",
            hint="Check the GETOUTLINE_* environment variables.",
        ) from exc
