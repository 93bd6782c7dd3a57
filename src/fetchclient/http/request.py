"""Request descriptors and the builders that produce them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, TypedDict, Union

import httpx

from ..serialization import dumps
from .form import FormData, is_form_data
from .headers import HeaderTypes, InboundRequest, build_headers


logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

# Fields the verb methods decide; caller configuration may not override them.
VERB_OWNED_FIELDS = frozenset({"method", "body", "content", "data", "json", "files"})

Body = Union[bytes, str, FormData]


class RequestConfig(TypedDict, total=False):
    """Caller configuration, passed through to the transport."""
    headers: HeaderTypes
    params: Mapping[str, Any]
    cookies: Mapping[str, str]
    timeout: Any  # float | httpx.Timeout | None
    follow_redirects: bool
    extensions: dict[str, Any]


@dataclass(frozen=True, slots=True)
class RequestInit:
    """A fully built request, minus the URL. Built per call, never reused."""
    method: str
    headers: httpx.Headers
    body: Body | None = None
    options: dict[str, Any] = field(default_factory=dict)


def build_request_init(
    method: str,
    data: Any = None,
    config: RequestConfig | None = None,
    request: InboundRequest | None = None,
) -> RequestInit:
    """
    Build a request with a body.

    Multipart payloads are passed through untouched and get no forced
    Content-Type. Anything else is serialized to JSON and, unless the caller
    already chose a Content-Type, labelled application/json. A `None`
    payload means no body at all.
    """
    config = config or {}
    is_form = is_form_data(data)

    headers = build_headers(config.get("headers"), request)
    if not is_form and "content-type" not in headers:
        headers["Content-Type"] = JSON_CONTENT_TYPE

    body: Body | None = None
    if data is not None:
        body = data if is_form else dumps(data)

    return RequestInit(
        method=method,
        headers=headers,
        body=body,
        options=_passthrough_options(method, config),
    )


def build_bodiless_init(
    method: str,
    config: RequestConfig | None = None,
    request: InboundRequest | None = None,
) -> RequestInit:
    """Build a GET/DELETE style request: headers only."""
    config = config or {}
    return RequestInit(
        method=method,
        headers=build_headers(config.get("headers"), request),
        options=_passthrough_options(method, config),
    )


def _passthrough_options(method: str, config: Mapping[str, Any]) -> dict[str, Any]:
    options: dict[str, Any] = {}
    for key, value in config.items():
        if key == "headers":
            continue
        if key in VERB_OWNED_FIELDS:
            logger.warning("ignoring config field %r on %s request", key, method)
            continue
        options[key] = value
    return options
