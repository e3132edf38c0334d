"""Key-value storage for redirect routes.

Basic usage::

    from waypoint.data import KeyValueStore, store_source

    with KeyValueStore("routes.db") as store:
        store.put("routes", "/gh", "https://github.com")

    app.add_source(store_source("routes.db", "routes"))
"""

from waypoint.data.store import KeyValueStore, StoreSource, store_source

__all__ = [
    "KeyValueStore",
    "StoreSource",
    "store_source",
]
