"""
Basic usage

Talks to a public echo service, showing JSON bodies, multipart uploads and
status errors.

Run:
  uv run python examples/01_basic_usage.py
"""

from __future__ import annotations

import datetime
import logging

import anyio

from fetchclient import FetchClient, FetchClientError, FormData


async def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    async with FetchClient("https://httpbin.org") as client:
        # Dates, big integers, sets and maps are made JSON-safe before sending.
        echoed = await client.post(
            "/anything",
            {
                "when": datetime.datetime.now(datetime.timezone.utc),
                "big": 2**64,
                "tags": {"a", "b"},
                "lookup": {1: "one"},
            },
        )
        print("sent json:", echoed["json"])

        form = FormData({"name": "example"})
        form.append("file", b"hello", filename="hello.txt", content_type="text/plain")
        echoed = await client.post("/anything", form)
        print("sent form:", echoed["form"], list(echoed["files"]))

        try:
            await client.get("/status/404")
        except FetchClientError as err:
            print("failed:", err.status_code, repr(err.data))


if __name__ == "__main__":
    anyio.run(main)
