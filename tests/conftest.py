"""Shared fixtures."""

from __future__ import annotations

import json
from contextlib import asynccontextmanager

import httpx
import pytest

from fetchclient import FetchClient, HttpxFetch


BASE_URL = "https://api.test"


@pytest.fixture
def anyio_backend():
    return "asyncio"


class Recorder:
    """Mock backend: records every request and answers with a handler."""

    def __init__(self, handler):
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@asynccontextmanager
async def mock_client(handler, base_url: str = BASE_URL):
    """Yield (FetchClient, Recorder) wired to an httpx.MockTransport."""
    recorder = Recorder(handler)
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as http:
        yield FetchClient(base_url, fetch=HttpxFetch(http)), recorder


@pytest.fixture
def backend():
    """Factory fixture: `async with backend(handler) as (client, recorder): ...`"""
    return mock_client
