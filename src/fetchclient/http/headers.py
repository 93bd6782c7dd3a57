"""Header construction and credential forwarding."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, Union, runtime_checkable

import httpx


HeaderTypes = Union[httpx.Headers, Mapping[str, str], Sequence[tuple[str, str]]]

# Inbound headers copied onto outgoing requests, with the casing they are sent with.
FORWARDED_HEADERS: tuple[tuple[str, str], ...] = (
    ("cookie", "Cookie"),
    ("authorization", "Authorization"),
)


@runtime_checkable
class InboundRequest(Protocol):
    """Anything carrying request headers: httpx.Request, Starlette Request, ..."""

    @property
    def headers(self) -> Any: ...


def build_headers(
    base_headers: HeaderTypes | None = None,
    request: InboundRequest | None = None,
) -> httpx.Headers:
    """
    Build a case-insensitive header collection.

    Starts from `base_headers`, then copies the inbound request's cookie and
    authorization values over any same-named header. Content-Type is left alone.
    """
    headers = httpx.Headers(base_headers) if base_headers else httpx.Headers()

    if request is not None:
        for source, target in FORWARDED_HEADERS:
            value = request.headers.get(source)
            if value:
                headers[target] = value

    return headers
