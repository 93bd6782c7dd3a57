"""Structured error raised for HTTP-status failures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic

from typing_extensions import TypeVar

if TYPE_CHECKING:
    import httpx

    from .http.request import RequestConfig


D = TypeVar("D", default=Any)

_FIELDS = frozenset({"message", "status_code", "config", "request", "response", "data"})


class FetchClientError(Exception, Generic[D]):
    """
    Raised when a response is received but its status is not 2xx.

    Attributes:
        message: Human-readable message ("Fetch error" for status failures)
        status_code: The failing status code as a string, e.g. "404"
        config: The caller-supplied request configuration
        request: The originating request, if any (always None for status failures)
        response: The received `httpx.Response`
        data: The decoded error body (JSON value or text)

    The fields are read-only once the error is constructed. Callers that catch
    broad exceptions can tell this one apart via `is_http_error` or `name`.
    """

    name: str = "FetchClientError"
    is_http_error: bool = True

    def __init__(
        self,
        message: str,
        *,
        data: D,
        status_code: str | None = None,
        config: RequestConfig | None = None,
        request: httpx.Request | None = None,
        response: httpx.Response | None = None,
    ):
        super().__init__(message)
        values = {
            "message": message,
            "status_code": status_code,
            "config": config,
            "request": request,
            "response": response,
            "data": data,
        }
        for key, value in values.items():
            object.__setattr__(self, key, value)

    def __setattr__(self, key: str, value: Any) -> None:
        if key in _FIELDS:
            raise AttributeError(f"{self.name}.{key} is read-only")
        super().__setattr__(key, value)

    def __delattr__(self, key: str) -> None:
        if key in _FIELDS:
            raise AttributeError(f"{self.name}.{key} is read-only")
        super().__delattr__(key)

    def __reduce__(self):
        # BaseException.__reduce__ replays __init__ with positional args only.
        fields = {key: getattr(self, key) for key in _FIELDS if key != "message"}
        return (_rebuild, (self.message, fields))

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code})"

    def __repr__(self) -> str:
        return f"{self.name}(message={self.message!r}, status_code={self.status_code!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly summary of the error."""
        response = None
        if self.response is not None:
            response = {
                "status_code": self.response.status_code,
                "headers": dict(self.response.headers),
                "url": str(self.response.request.url) if _has_request(self.response) else None,
            }
        request = None
        if self.request is not None:
            request = {"method": self.request.method, "url": str(self.request.url)}
        return {
            "name": self.name,
            "message": self.message,
            "status_code": self.status_code,
            "config": self.config,
            "request": request,
            "response": response,
            "data": self.data,
        }


def _rebuild(message: str, fields: dict[str, Any]) -> FetchClientError:
    return FetchClientError(message, **fields)


def _has_request(response: httpx.Response) -> bool:
    # httpx raises RuntimeError when a Response was built without a request.
    try:
        response.request
    except RuntimeError:
        return False
    return True


def is_fetch_client_error(exc: BaseException) -> bool:
    """True when `exc` carries the HTTP-error marker flag."""
    return getattr(exc, "is_http_error", False) is True
