"""Routing — layered redirect lookup.

Route sources produce entries, entries become read-only lookup tables, and
each table becomes a redirect layer wrapping the previous one.
"""

from waypoint.routing.chain import Layer, build_chain, chain_layers
from waypoint.routing.entry import Entry, LookupTable, build_lookup
from waypoint.routing.handler import RedirectHandler, make_handler
from waypoint.routing.parse import parse_entries, parse_json, parse_yaml
from waypoint.routing.sources import (
    FileSource,
    JSONSource,
    RouteSource,
    StaticSource,
    YAMLSource,
    json_file,
    yaml_file,
)

__all__ = [
    "Entry",
    "FileSource",
    "JSONSource",
    "Layer",
    "LookupTable",
    "RedirectHandler",
    "RouteSource",
    "StaticSource",
    "YAMLSource",
    "build_chain",
    "build_lookup",
    "chain_layers",
    "json_file",
    "make_handler",
    "parse_entries",
    "parse_json",
    "parse_yaml",
]
