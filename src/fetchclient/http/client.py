"""
FetchClient - async verb helpers over a fetch primitive.

Each verb performs exactly one round trip:
  build request -> fetch -> decode body -> return payload or raise FetchClientError

Status failures become `FetchClientError`. Everything else (connection errors,
malformed JSON on a 2xx response, unserializable bodies) propagates as-is.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from ..config import ClientSettings, build_async_client
from .headers import InboundRequest
from .request import RequestConfig, RequestInit, build_bodiless_init, build_request_init
from .response import handle_response
from .transport import Fetch, HttpxFetch


logger = logging.getLogger(__name__)

Endpoint = str | httpx.URL


class FetchClient:
    """
    HTTP request helper bound to a base URL.

    The endpoint is appended to the base URL verbatim; no joining, no encoding.
    When no `fetch` is given the client creates and owns an `httpx.AsyncClient`,
    which `aclose()` (or leaving `async with`) shuts down. A supplied fetch
    primitive is never closed by this class.
    """

    def __init__(
        self,
        base_url: str,
        *,
        fetch: Fetch | None = None,
        settings: ClientSettings | None = None,
    ):
        self._base_url = base_url
        self._owned_client: httpx.AsyncClient | None = None
        if fetch is None:
            self._owned_client = build_async_client(settings)
            fetch = HttpxFetch(self._owned_client)
        self._fetch = fetch

    @classmethod
    def from_settings(cls, settings: ClientSettings | None = None) -> "FetchClient":
        settings = settings or ClientSettings()
        return cls(settings.base_url, settings=settings)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        if self._owned_client is not None:
            await self._owned_client.aclose()

    async def __aenter__(self) -> "FetchClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # --- Verbs ---

    async def get(
        self,
        endpoint: Endpoint,
        config: RequestConfig | None = None,
        request: InboundRequest | None = None,
    ) -> Any:
        """Perform a GET request."""
        init = build_bodiless_init("GET", config, request)
        return await self._dispatch(endpoint, init, config)

    async def post(
        self,
        endpoint: Endpoint,
        data: Any = None,
        config: RequestConfig | None = None,
        request: InboundRequest | None = None,
    ) -> Any:
        """Perform a POST request with a JSON (or multipart) body."""
        init = build_request_init("POST", data, config, request)
        return await self._dispatch(endpoint, init, config)

    async def put(
        self,
        endpoint: Endpoint,
        data: Any = None,
        config: RequestConfig | None = None,
        request: InboundRequest | None = None,
    ) -> Any:
        """Perform a PUT request with a JSON (or multipart) body."""
        init = build_request_init("PUT", data, config, request)
        return await self._dispatch(endpoint, init, config)

    async def patch(
        self,
        endpoint: Endpoint,
        data: Any = None,
        config: RequestConfig | None = None,
        request: InboundRequest | None = None,
    ) -> Any:
        """Perform a PATCH request with a JSON (or multipart) body."""
        init = build_request_init("PATCH", data, config, request)
        return await self._dispatch(endpoint, init, config)

    async def delete(
        self,
        endpoint: Endpoint,
        config: RequestConfig | None = None,
        request: InboundRequest | None = None,
    ) -> Any:
        """Perform a DELETE request."""
        init = build_bodiless_init("DELETE", config, request)
        return await self._dispatch(endpoint, init, config)

    async def _dispatch(
        self,
        endpoint: Endpoint,
        init: RequestInit,
        config: RequestConfig | None,
    ) -> Any:
        url = f"{self._base_url}{endpoint}"
        logger.debug("dispatching %s %s", init.method, url)
        response = await self._fetch(url, init)
        return await handle_response(response, config or {})
