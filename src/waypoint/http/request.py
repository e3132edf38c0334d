"""Immutable HTTP request.

Only what redirect lookup and the default handler need: the request line,
headers, and the connection endpoints. The request is never modified on its
way down the chain; every handler sees the same object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from waypoint.http.headers import Headers
from waypoint.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the decoded URL path from the ASGI scope, without the query
    string. It is the lookup key for every redirect layer.
    """

    method: str
    path: str
    headers: Headers
    query_string: bytes = b""
    http_version: str = "1.1"
    server: tuple[str, int] | None = None
    client: tuple[str, int] | None = None

    @property
    def query(self) -> QueryParams:
        """Parsed query string parameters."""
        return QueryParams(self.query_string)

    @property
    def url(self) -> str:
        """Full request URL (path + query string)."""
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b""),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
        )
