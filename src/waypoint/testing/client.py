"""In-process client for exercising a waypoint App.

Requests go straight into the ASGI callable; nothing binds a socket.
Redirects are returned as-is and never followed, so a test sees exactly
which layer answered.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from waypoint.app import App
from waypoint.http.response import Response


def _scope(method: str, target: str, headers: dict[str, str] | None) -> dict[str, Any]:
    parts = urlsplit(target)
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method.upper(),
        "path": parts.path,
        "raw_path": parts.path.encode("utf-8"),
        "query_string": parts.query.encode("latin-1"),
        "root_path": "",
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ],
        "server": ("testserver", 80),
        "client": ("127.0.0.1", 0),
    }


def _response(start: dict[str, Any], chunks: list[bytes]) -> Response:
    """Rebuild a Response from the messages the app sent."""
    content_type = "text/plain; charset=utf-8"
    headers: list[tuple[str, str]] = []
    for raw_name, raw_value in start.get("headers", ()):
        name, value = raw_name.decode("latin-1"), raw_value.decode("latin-1")
        if name == "content-type":
            content_type = value
        elif name != "content-length":
            headers.append((name, value))
    return Response(
        body=b"".join(chunks),
        status=start["status"],
        content_type=content_type,
        headers=tuple(headers),
    )


class TestClient:
    """Drive a waypoint App through its ASGI interface.

    Entering the client builds the redirect chain, so a broken source
    fails at ``async with`` rather than on the first request::

        async with TestClient(app) as client:
            response = await client.get("/docs")
            assert response.status == 302
            assert await client.resolve("/missing") is None
    """

    __test__ = False  # not a pytest test class
    __slots__ = ("app",)

    def __init__(self, app: App) -> None:
        self.app = app

    async def __aenter__(self) -> TestClient:
        self.app._ensure_frozen()
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def get(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        return await self.request("GET", path, headers=headers)

    async def head(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        return await self.request("HEAD", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> Response:
        return await self.request("POST", path, headers=headers, body=body)

    async def resolve(self, path: str) -> str | None:
        """``Location`` of a GET to *path*, or None if it was not redirected."""
        response = await self.get(path)
        if 300 <= response.status < 400:
            return response.location
        return None

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> Response:
        """Send one request; *path* may carry a query string."""
        pending = [{"type": "http.request", "body": body or b"", "more_body": False}]
        start: dict[str, Any] = {}
        chunks: list[bytes] = []

        async def receive() -> dict[str, Any]:
            return pending.pop() if pending else {"type": "http.disconnect"}

        async def send(message: dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                start.update(message)
            elif message["type"] == "http.response.body":
                chunks.append(message.get("body", b""))

        await self.app(_scope(method, path, headers), receive, send)
        return _response(start, chunks)
