"""Single-file key-value store on stdlib ``sqlite3``.

Each *bucket* is one table of raw byte keys and values::

    CREATE TABLE "<bucket>" (key BLOB PRIMARY KEY, value BLOB NOT NULL)

The redirect service only ever reads a bucket once, at startup, with a full
scan; ``StoreSource`` opens the file read-only, copies every pair into
memory, and closes it before the chain is returned. ``put`` and ``delete``
exist for seeding the store from the ``waypoint store`` command.

Python 3.12+ ``autocommit=True``: each write statement commits on its own.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from waypoint.errors import ParseError, SourceUnavailable
from waypoint.routing.entry import Entry

logger = logging.getLogger("waypoint.store")


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


class KeyValueStore:
    """A bucketed byte-string store in one SQLite file.

    Use as a context manager; the connection is closed on exit::

        with KeyValueStore("routes.db") as store:
            store.put("routes", "/gh", "https://github.com")
    """

    __slots__ = ("_conn", "path", "readonly")

    def __init__(self, path: str | Path, *, readonly: bool = False) -> None:
        self.path = Path(path)
        self.readonly = readonly
        self._conn: sqlite3.Connection | None = None

    def __enter__(self) -> KeyValueStore:
        self.open()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def open(self) -> None:
        """Open the file. Read-only mode never creates it."""
        try:
            if self.readonly:
                uri = f"{self.path.resolve().as_uri()}?mode=ro"
                self._conn = sqlite3.connect(uri, uri=True, autocommit=True)
            else:
                self._conn = sqlite3.connect(self.path, autocommit=True)
        except sqlite3.Error as exc:
            raise SourceUnavailable(str(self.path), f"could not open store: {exc}") from exc

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            msg = f"store {self.path} is not open"
            raise RuntimeError(msg)
        return self._conn

    def buckets(self) -> list[str]:
        """Names of all buckets in the file."""
        rows = self._query("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name")
        return [name for (name,) in rows]

    def items(self, bucket: str) -> Iterator[tuple[bytes, bytes]]:
        """Every ``(key, value)`` pair in *bucket*, in key order.

        Raises:
            SourceUnavailable: The bucket does not exist or cannot be read.
        """
        rows = self._query(f"SELECT key, value FROM {self._table(bucket)} ORDER BY key")
        for key, value in rows:
            yield _as_bytes(key), _as_bytes(value)

    def put(self, bucket: str, key: str | bytes, value: str | bytes) -> None:
        """Set *key* to *value* in *bucket*, creating the bucket if needed."""
        table = self._table(bucket)
        self._execute(
            f"CREATE TABLE IF NOT EXISTS {table} (key BLOB PRIMARY KEY, value BLOB NOT NULL)"
        )
        self._execute(
            f"INSERT OR REPLACE INTO {table} (key, value) VALUES (?, ?)",
            (_as_bytes(key), _as_bytes(value)),
        )

    def delete(self, bucket: str, key: str | bytes) -> bool:
        """Remove *key* from *bucket*. Returns False if it was not there."""
        cursor = self._execute(f"DELETE FROM {self._table(bucket)} WHERE key = ?", (_as_bytes(key),))
        return cursor.rowcount > 0

    def _table(self, bucket: str) -> str:
        """Bucket name quoted as an SQL identifier."""
        if not bucket:
            raise SourceUnavailable(str(self.path), "bucket name must not be empty")
        return '"' + bucket.replace('"', '""') + '"'

    def _query(self, sql: str) -> list[tuple[object, ...]]:
        try:
            return self.conn.execute(sql).fetchall()
        except sqlite3.Error as exc:
            raise SourceUnavailable(str(self.path), f"could not read store: {exc}") from exc

    def _execute(self, sql: str, params: tuple[object, ...] = ()) -> sqlite3.Cursor:
        try:
            return self.conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise SourceUnavailable(str(self.path), f"could not write store: {exc}") from exc


@dataclass(frozen=True, slots=True)
class StoreSource:
    """Route source backed by one bucket of a ``KeyValueStore``.

    Keys are paths and values are target URLs, both UTF-8.
    """

    path: Path
    bucket: str = "routes"

    @property
    def name(self) -> str:
        return f"{self.path}[{self.bucket}]"

    def entries(self) -> list[Entry]:
        if not self.path.exists():
            raise SourceUnavailable(self.name, "store file does not exist")
        with KeyValueStore(self.path, readonly=True) as store:
            pairs = list(store.items(self.bucket))
        logger.debug("scanned %d pairs from %s", len(pairs), self.name)
        try:
            return [Entry(path=key.decode("utf-8"), target=value.decode("utf-8")) for key, value in pairs]
        except UnicodeDecodeError as exc:
            raise ParseError(self.name, f"key or value is not UTF-8: {exc}") from exc


def store_source(path: str | Path, bucket: str = "routes") -> StoreSource:
    """Source reading every pair of *bucket* in the store at *path*."""
    return StoreSource(path=Path(path), bucket=bucket)
