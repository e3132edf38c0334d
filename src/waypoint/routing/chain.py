"""Handler chain construction.

Folds route sources over a terminal default handler::

    H0 = default
    Hi = make_handler(build_lookup(Si.entries()), H(i-1))

and returns ``Hn``. Each new layer wraps the previous one, so the source
added last is checked first. Callers choose precedence purely through
source order.

Construction is all-or-nothing: the first source that fails to produce its
entries aborts the build and its error propagates to the caller.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from waypoint._internal.types import Handler
from waypoint.routing.entry import build_lookup
from waypoint.routing.handler import RedirectHandler, make_handler
from waypoint.routing.sources import RouteSource

logger = logging.getLogger("waypoint.chain")


@dataclass(frozen=True, slots=True)
class Layer:
    """One redirect layer of a built chain."""

    name: str
    table: Mapping[str, str]


def build_chain(sources: Iterable[RouteSource], default: Handler) -> Handler:
    """Build the composite handler for *sources* over *default*.

    With no sources the default handler itself is returned.

    Raises:
        ParseError: A source's data is malformed.
        SourceUnavailable: A source's file or store cannot be read.
    """
    handler = default
    for source in sources:
        table = build_lookup(source.entries())
        logger.info("loaded %d routes from %s", len(table), source.name)
        handler = make_handler(table, handler, name=source.name)
    return handler


def chain_layers(handler: Handler) -> list[Layer]:
    """Redirect layers of a built chain, in lookup order (highest precedence first)."""
    layers: list[Layer] = []
    node = handler
    while isinstance(node, RedirectHandler):
        layers.append(Layer(name=node.name, table=node.table))
        node = node.fallback
    return layers
