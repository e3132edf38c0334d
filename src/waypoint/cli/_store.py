"""``waypoint store`` — seed and inspect a key-value route store."""

import argparse
import sys

from waypoint.data.store import KeyValueStore
from waypoint.errors import WaypointError


def run_store(args: argparse.Namespace) -> None:
    """Dispatch ``store put`` / ``store list``."""
    try:
        if args.store_command == "put":
            with KeyValueStore(args.file) as store:
                store.put(args.bucket, args.path, args.url)
            print(f"{args.path} -> {args.url}")
        elif args.store_command == "list":
            with KeyValueStore(args.file, readonly=True) as store:
                for key, value in store.items(args.bucket):
                    print(f"{key.decode('utf-8', 'replace')} -> {value.decode('utf-8', 'replace')}")
    except WaypointError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
