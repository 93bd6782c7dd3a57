"""HTTP request helpers built on a pluggable fetch primitive (httpx by default)."""

from .client import FetchClient
from .form import FilePart, FormData, is_form_data
from .headers import InboundRequest, build_headers
from .request import RequestConfig, RequestInit, build_bodiless_init, build_request_init
from .response import decode_body, handle_response
from .transport import Fetch, HttpxFetch

__all__ = [
    "FetchClient",
    "Fetch",
    "HttpxFetch",
    "FormData",
    "FilePart",
    "is_form_data",
    "InboundRequest",
    "build_headers",
    "RequestConfig",
    "RequestInit",
    "build_request_init",
    "build_bodiless_init",
    "decode_body",
    "handle_response",
]
