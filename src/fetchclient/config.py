"""
Client configuration.

Settings are read from FETCH_CLIENT_* environment variables or a local .env
file. None of them are required: a client built with defaults enforces no
timeout and sends no extra headers.
"""

from __future__ import annotations

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Settings for a `FetchClient` and the httpx client behind it."""

    model_config = SettingsConfigDict(
        env_prefix="FETCH_CLIENT_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="",
        description="Prefix prepended verbatim to every endpoint.",
    )
    timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Transport timeout in seconds. None disables timeouts.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow redirects, as fetch does by default.",
    )
    user_agent: str | None = Field(
        default=None,
        min_length=1,
        description="User-Agent sent with every request.",
    )
    default_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers sent with every request (JSON object in env vars).",
    )


def build_async_client(settings: ClientSettings | None = None) -> httpx.AsyncClient:
    """Create the `httpx.AsyncClient` a `FetchClient` owns by default."""
    settings = settings or ClientSettings()
    headers: dict[str, str] = dict(settings.default_headers)
    if settings.user_agent:
        headers["User-Agent"] = settings.user_agent
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
    )
