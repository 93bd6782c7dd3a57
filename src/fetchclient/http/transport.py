"""The fetch primitive: one round trip from URL + RequestInit to a response."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from .form import FormData
from .request import RequestInit


logger = logging.getLogger(__name__)

# Options that httpx takes at send time rather than when building the request.
_SEND_OPTIONS = ("follow_redirects",)


class Fetch(Protocol):
    async def __call__(self, url: str, init: RequestInit) -> httpx.Response: ...


class HttpxFetch:
    """
    Fetch primitive backed by an `httpx.AsyncClient`.

    Transport failures (httpx.TransportError and friends) are not caught here.
    Pooling, redirects and timeouts are whatever the wrapped client does.
    """

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def __call__(self, url: str, init: RequestInit) -> httpx.Response:
        options = dict(init.options)
        send_kwargs = {key: options.pop(key) for key in _SEND_OPTIONS if key in options}

        headers = init.headers
        body_kwargs: dict[str, Any] = {}
        if isinstance(init.body, FormData) and len(init.body) == 0:
            content_type, body_kwargs["content"] = init.body.empty_multipart()
            if "content-type" not in headers:
                headers = httpx.Headers(headers)
                headers["Content-Type"] = content_type
        elif isinstance(init.body, FormData):
            body_kwargs["files"] = init.body.to_httpx()
        elif init.body is not None:
            body_kwargs["content"] = init.body

        request = self._client.build_request(
            init.method,
            url,
            headers=headers,
            **body_kwargs,
            **options,
        )
        response = await self._client.send(request, **send_kwargs)
        logger.debug("%s %s -> %d", request.method, request.url, response.status_code)
        return response
