"""``waypoint run`` — build the redirect chain and start the server.

The chain is built before the server binds: a malformed or unreadable
source prints the error and exits 1 without serving anything.
"""

import argparse
import sys

from waypoint.app import App
from waypoint.cli._options import config_from_args
from waypoint.errors import WaypointError


def run_server(args: argparse.Namespace) -> None:
    """Start the waypoint server (dev or production mode).

    CLI flags override the config defaults for host, port, and workers.
    """
    overrides: dict[str, object] = {"debug": args.debug}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.workers is not None:
        overrides["workers"] = args.workers

    try:
        app = App.from_config(config_from_args(args, **overrides))
        app._ensure_frozen()
    except WaypointError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    app.run()
