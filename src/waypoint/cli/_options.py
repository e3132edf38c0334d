"""Source flags shared by ``waypoint run`` and ``waypoint routes``.

Every source flag is optional; an absent flag skips that layer.
"""

import argparse

from waypoint.config import AppConfig
from waypoint.errors import ConfigurationError


def add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--route",
        action="append",
        default=[],
        metavar="PATH=URL",
        help="Static redirect, lowest precedence (repeatable)",
    )
    parser.add_argument("--yaml", default=None, metavar="FILE", help="YAML file of path/url records")
    parser.add_argument("--json", default=None, metavar="FILE", help="JSON file of path/url records")
    parser.add_argument("--store", default=None, metavar="FILE", help="Key-value store file")
    parser.add_argument("--bucket", default="routes", help="Store bucket name (default: routes)")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Log level (default: info)",
    )


def parse_route(value: str) -> tuple[str, str]:
    """Split a ``PATH=URL`` flag value at the first ``=``."""
    path, sep, url = value.partition("=")
    if not sep or not path:
        msg = f"--route expects PATH=URL, got {value!r}"
        raise ConfigurationError(msg)
    return path, url


def config_from_args(args: argparse.Namespace, **overrides: object) -> AppConfig:
    """Build an AppConfig from the shared source flags plus *overrides*."""
    return AppConfig(
        default_routes=tuple(parse_route(value) for value in args.route),
        yaml_file=args.yaml,
        json_file=args.json,
        store_file=args.store,
        store_bucket=args.bucket,
        log_level=args.log_level,
        **overrides,  # type: ignore[arg-type]
    )
