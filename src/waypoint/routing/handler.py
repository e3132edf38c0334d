"""Redirect handlers — one lookup table plus one fallback.

A ``RedirectHandler`` answers a request whose path is in its table with a
``302 Found`` redirect and hands every other request, unchanged, to its
fallback. Handlers link into a chain through ``fallback``; the chain is
walked by a single loop rather than by nested calls, so a deep chain costs
one frame no matter how many layers it has.

Tables are read-only after construction and handlers hold no other state,
so one handler serves concurrent requests without locking.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from waypoint._internal.invoke import invoke
from waypoint._internal.types import Handler
from waypoint.http.request import Request
from waypoint.http.response import Redirect


@dataclass(frozen=True, slots=True)
class RedirectHandler:
    """Redirect on a table hit, delegate to ``fallback`` on a miss.

    ``name`` labels the layer in logs and in ``waypoint routes`` output.
    """

    table: Mapping[str, str]
    fallback: Handler
    name: str = "<static>"

    async def __call__(self, request: Request) -> Any:
        node: Handler = self
        while isinstance(node, RedirectHandler):
            target = node.table.get(request.path)
            if target is not None:
                return Redirect(target)
            node = node.fallback
        return await invoke(node, request)

    def resolve(self, path: str) -> str | None:
        """Target URL for *path* anywhere in this chain, or None on a full miss.

        Does not call the terminal handler.
        """
        node: Handler = self
        while isinstance(node, RedirectHandler):
            target = node.table.get(path)
            if target is not None:
                return target
            node = node.fallback
        return None


def make_handler(table: Mapping[str, str], fallback: Handler, name: str = "<static>") -> RedirectHandler:
    """Wrap *fallback* with a redirect layer backed by *table*."""
    return RedirectHandler(table=table, fallback=fallback, name=name)
