"""Multipart form payloads."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import IO, Any, Iterator, Union


@dataclass(frozen=True, slots=True)
class FilePart:
    filename: str
    content: Union[bytes, str, IO[bytes]]
    content_type: str | None = None


FormValue = Union[str, FilePart]


class FormData:
    """
    Ordered multipart payload of text fields and file parts.

    A name may appear more than once. The payload is handed to the transport
    as-is; the transport builds the multipart body and its boundary header.
    """

    def __init__(self, fields: dict[str, Any] | None = None):
        self._entries: list[tuple[str, FormValue]] = []
        for name, value in (fields or {}).items():
            self.append(name, value)

    def append(
        self,
        name: str,
        value: Any,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> None:
        """Add a field. Bytes, file objects, or a filename make it a file part."""
        self._entries.append((name, _coerce(name, value, filename, content_type)))

    def set(
        self,
        name: str,
        value: Any,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> None:
        """Replace every entry called `name` with a single one."""
        self.delete(name)
        self.append(name, value, filename, content_type)

    def get(self, name: str) -> FormValue | None:
        for key, value in self._entries:
            if key == name:
                return value
        return None

    def get_all(self, name: str) -> list[FormValue]:
        return [value for key, value in self._entries if key == name]

    def delete(self, name: str) -> None:
        self._entries = [(key, value) for key, value in self._entries if key != name]

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._entries)

    def __iter__(self) -> Iterator[tuple[str, FormValue]]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FormData({[key for key, _ in self._entries]!r})"

    def to_httpx(self) -> list[tuple[str, tuple[Any, ...]]]:
        """
        Render as httpx `files=` entries.

        Text fields become `(None, text)` parts so httpx encodes them without a
        filename. Everything goes through `files=`, which keeps the body
        multipart even when no file is attached.
        """
        parts: list[tuple[str, tuple[Any, ...]]] = []
        for name, value in self._entries:
            if isinstance(value, FilePart):
                parts.append((name, (value.filename, value.content, value.content_type)))
            else:
                parts.append((name, (None, value)))
        return parts

    def empty_multipart(self) -> tuple[str, bytes]:
        """
        Content-Type and body for a payload with no entries.

        httpx treats an empty `files=` as "no files" and sends nothing, so the
        closing delimiter is written by hand to keep the request multipart.
        """
        boundary = os.urandom(16).hex()
        return f"multipart/form-data; boundary={boundary}", f"--{boundary}--\r\n".encode("ascii")


def _coerce(name: str, value: Any, filename: str | None, content_type: str | None) -> FormValue:
    if isinstance(value, FilePart):
        return value
    if filename is not None or isinstance(value, (bytes, bytearray)) or hasattr(value, "read"):
        if isinstance(value, bytearray):
            value = bytes(value)
        return FilePart(filename=filename or name, content=value, content_type=content_type)
    return str(value)


def is_form_data(value: Any) -> bool:
    """True when `value` is a multipart payload that must be sent unencoded."""
    return isinstance(value, FormData)
