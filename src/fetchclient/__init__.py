"""Minimal async HTTP request helper with structured errors and JSON-safe bodies."""

import logging

from .config import ClientSettings, build_async_client
from .errors import FetchClientError, is_fetch_client_error
from .http import (
    FetchClient,
    Fetch,
    HttpxFetch,
    FormData,
    FilePart,
    RequestConfig,
    RequestInit,
)
from .serialization import CIRCULAR_REFERENCE, dumps, transform_for_serialization

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Client
    "FetchClient",
    "Fetch",
    "HttpxFetch",
    "RequestConfig",
    "RequestInit",
    "FormData",
    "FilePart",
    # Errors
    "FetchClientError",
    "is_fetch_client_error",
    # Serialization
    "CIRCULAR_REFERENCE",
    "dumps",
    "transform_for_serialization",
    # Configuration
    "ClientSettings",
    "build_async_client",
]
