"""Entry parsing for the tagged-field list formats (YAML and JSON).

Both formats describe the same thing, an ordered list of records::

    - path: /some-path
      url: https://www.some-url.com/demo

    [{"path": "/some-path", "url": "https://www.some-url.com/demo"}]

Syntax errors and shape errors (top level not a list, an item that is not a
mapping, a field holding a non-string) raise ``ParseError``. A missing or
null ``path``/``url`` field is tolerated in both formats and read as the
empty string. Unknown fields are ignored.
"""

import json
from collections.abc import Mapping

import yaml

from waypoint.errors import ParseError
from waypoint.routing.entry import Entry

FIELDS = ("path", "url")


def parse_yaml(data: bytes | str, *, source: str = "<yaml>") -> list[Entry]:
    """Parse YAML route data into entries, preserving document order.

    An empty document yields no entries.
    """
    try:
        records = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ParseError(source, f"invalid YAML: {exc}") from exc
    if records is None:
        return []
    return parse_entries(records, source=source)


def parse_json(data: bytes | str, *, source: str = "<json>") -> list[Entry]:
    """Parse JSON route data into entries, preserving array order."""
    try:
        records = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(source, f"invalid JSON: {exc}") from exc
    return parse_entries(records, source=source)


def parse_entries(records: object, *, source: str) -> list[Entry]:
    """Convert already-decoded records into entries.

    Raises:
        ParseError: If *records* is not a list of mappings, or a field
            is present with a non-string value.
    """
    if not isinstance(records, list):
        msg = f"expected a list of path/url records, got {type(records).__name__}"
        raise ParseError(source, msg)

    entries: list[Entry] = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            msg = f"item {index}: expected a mapping, got {type(record).__name__}"
            raise ParseError(source, msg)
        path, url = (_field(record, name, index, source) for name in FIELDS)
        entries.append(Entry(path=path, target=url))
    return entries


def _field(record: Mapping[str, object], name: str, index: int, source: str) -> str:
    value = record.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"item {index}: field {name!r} must be a string, got {type(value).__name__}"
        raise ParseError(source, msg)
    return value
