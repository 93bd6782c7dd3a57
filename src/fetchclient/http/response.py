"""Response decoding and status-error shaping."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from ..errors import FetchClientError
from .request import JSON_CONTENT_TYPE, RequestConfig


logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Fetch error"


async def decode_body(response: httpx.Response) -> Any:
    """Decode the body as JSON when Content-Type says so, else as text."""
    await response.aread()
    content_type = response.headers.get("content-type", "")
    if JSON_CONTENT_TYPE in content_type:
        return response.json()
    return response.text


async def handle_response(response: httpx.Response, config: RequestConfig | None) -> Any:
    """
    Return the decoded payload of a 2xx response.

    The body is decoded before the status is looked at, so error responses
    carry their decoded body as `FetchClientError.data`. Malformed JSON on a
    2xx response propagates as json.JSONDecodeError; on an error response the
    raw text is used instead.
    """
    try:
        data = await decode_body(response)
    except json.JSONDecodeError:
        if response.is_success:
            raise
        data = response.text

    if not response.is_success:
        logger.info("request failed with status %d", response.status_code)
        raise FetchClientError(
            FETCH_ERROR_MESSAGE,
            status_code=str(response.status_code),
            config=config,
            request=None,
            response=response,
            data=data,
        )

    return data
