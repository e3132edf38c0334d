"""``waypoint routes`` — list effective redirects.

Builds the chain from the given source flags and prints every mapping,
highest-precedence layer first. Mappings hidden by a higher layer are
marked as shadowed.
"""

import argparse
import sys

from waypoint.app import App
from waypoint.cli._options import config_from_args
from waypoint.errors import WaypointError
from waypoint.routing.chain import chain_layers


def run_routes(args: argparse.Namespace) -> None:
    """Print a LAYER / PATH / TARGET table for the configured sources."""
    try:
        app = App.from_config(config_from_args(args))
        layers = chain_layers(app.chain)
    except WaypointError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows: list[tuple[str, str, str]] = []
    seen: set[str] = set()
    for layer in layers:
        for path, target in sorted(layer.table.items()):
            note = " (shadowed)" if path in seen else ""
            rows.append((layer.name, path, f"{target}{note}"))
            seen.add(path)

    if not rows:
        print("No routes configured.")
        return

    max_layer = max(max(len(r[0]) for r in rows), 5)  # "LAYER" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_layer}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("LAYER", "PATH", "TARGET"))
    sep_len = max_layer + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for layer_name, path, target in rows:
        print(fmt.format(layer_name, path, target))
