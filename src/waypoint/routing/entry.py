"""Entry and LookupTable — the atomic unit of route configuration.

An ``Entry`` is one ``(path, target)`` pair as read from a source. A
``LookupTable`` is the read-only mapping built from one source's entries.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias

# Read-only path -> target URL mapping
LookupTable: TypeAlias = Mapping[str, str]


@dataclass(frozen=True, slots=True)
class Entry:
    """A single redirect mapping.

    ``target`` is opaque: any string is accepted and passed through to the
    ``Location`` header unchanged.
    """

    path: str
    target: str


def build_lookup(entries: Iterable[Entry]) -> LookupTable:
    """Build a read-only lookup table from entries, in order.

    Later entries for the same path overwrite earlier ones, so the last
    entry in load order wins::

        table = build_lookup([Entry("/a", "u1"), Entry("/a", "u2")])
        assert table["/a"] == "u2"
    """
    table: dict[str, str] = {}
    for entry in entries:
        table[entry.path] = entry.target
    return MappingProxyType(table)
