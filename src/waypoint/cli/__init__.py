"""Waypoint CLI — serve redirects, inspect the chain, seed the store.

Entry point registered as ``waypoint`` in ``pyproject.toml``::

    [project.scripts]
    waypoint = "waypoint.cli:main"
"""

import argparse
import logging
import sys

from waypoint.cli._options import add_source_arguments


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypoint`` command."""
    parser = argparse.ArgumentParser(
        prog="waypoint",
        description="Waypoint — layered URL redirection service.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypoint run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Build the redirect chain and serve it")
    add_source_arguments(run_parser)
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--debug",
        action="store_true",
        help="Run the single-worker dev server with auto-reload",
    )
    run_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count (0=auto-detect, production only)",
    )

    # -- waypoint routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List effective redirects by layer")
    add_source_arguments(routes_parser)

    # -- waypoint store ---------------------------------------------------
    store_parser = subparsers.add_parser("store", help="Read or seed a key-value route store")
    store_sub = store_parser.add_subparsers(dest="store_command")

    put_parser = store_sub.add_parser("put", help="Map PATH to URL in the store")
    put_parser.add_argument("file", help="Store file (created if missing)")
    put_parser.add_argument("path", help="Request path, e.g. /gh")
    put_parser.add_argument("url", help="Redirect target URL")
    put_parser.add_argument("--bucket", default="routes", help="Bucket name (default: routes)")

    list_parser = store_sub.add_parser("list", help="Print every mapping in a bucket")
    list_parser.add_argument("file", help="Store file")
    list_parser.add_argument("--bucket", default="routes", help="Bucket name (default: routes)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command in ("run", "routes"):
        logging.basicConfig(
            level=args.log_level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if args.command == "run":
        from waypoint.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from waypoint.cli._routes import run_routes

        run_routes(args)
    elif args.command == "store":
        if args.store_command is None:
            store_parser.print_help()
            sys.exit(0)

        from waypoint.cli._store import run_store

        run_store(args)
