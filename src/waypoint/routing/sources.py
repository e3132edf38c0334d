"""Route sources — anything that produces ordered entries.

A *source* is one layer of the redirect chain: a static mapping, a YAML or
JSON document (in memory or on disk), or a key-value store. The chain
builder only sees the protocol below and never special-cases a variant.

File-backed sources read lazily, when ``entries()`` is called during chain
construction, so a missing file surfaces as ``SourceUnavailable`` at startup
rather than at registration time.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from waypoint.errors import SourceUnavailable
from waypoint.routing.entry import Entry
from waypoint.routing.parse import parse_json, parse_yaml


@runtime_checkable
class RouteSource(Protocol):
    """A source of redirect entries.

    ``name`` identifies the source in logs and error messages.
    ``entries()`` returns entries in source order; it may raise
    ``ParseError`` or ``SourceUnavailable``.
    """

    @property
    def name(self) -> str: ...

    def entries(self) -> list[Entry]: ...


@dataclass(frozen=True, slots=True)
class StaticSource:
    """Routes given directly as a mapping or as ``(path, url)`` pairs."""

    routes: tuple[tuple[str, str], ...]
    name: str = "<static>"

    @classmethod
    def of(
        cls,
        routes: Mapping[str, str] | Iterable[tuple[str, str]],
        name: str = "<static>",
    ) -> StaticSource:
        pairs = routes.items() if isinstance(routes, Mapping) else routes
        return cls(routes=tuple((path, url) for path, url in pairs), name=name)

    def entries(self) -> list[Entry]:
        return [Entry(path=path, target=url) for path, url in self.routes]


@dataclass(frozen=True, slots=True)
class YAMLSource:
    """An in-memory YAML document."""

    data: bytes | str
    name: str = "<yaml>"

    def entries(self) -> list[Entry]:
        return parse_yaml(self.data, source=self.name)


@dataclass(frozen=True, slots=True)
class JSONSource:
    """An in-memory JSON document."""

    data: bytes | str
    name: str = "<json>"

    def entries(self) -> list[Entry]:
        return parse_json(self.data, source=self.name)


@dataclass(frozen=True, slots=True)
class FileSource:
    """A YAML or JSON document read from disk when the chain is built."""

    path: Path
    parser: Callable[..., list[Entry]]

    @property
    def name(self) -> str:
        return str(self.path)

    def entries(self) -> list[Entry]:
        try:
            data = self.path.read_bytes()
        except OSError as exc:
            detail = exc.strerror or str(exc)
            raise SourceUnavailable(self.name, f"could not open file: {detail}") from exc
        return self.parser(data, source=self.name)


def yaml_file(path: str | Path) -> FileSource:
    """Source reading a YAML route list from *path*."""
    return FileSource(path=Path(path), parser=parse_yaml)


def json_file(path: str | Path) -> FileSource:
    """Source reading a JSON route list from *path*."""
    return FileSource(path=Path(path), parser=parse_json)
