"""Waypoint application class.

Mutable during setup (source registration, default handler).
Frozen at runtime when app.run() or __call__() is first invoked, or when
the ASGI lifespan starts up.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path

import anyio

from waypoint._internal.asgi import Receive, Scope, Send
from waypoint._internal.types import Handler
from waypoint.config import AppConfig
from waypoint.data.store import store_source
from waypoint.errors import ConfigurationError
from waypoint.http.request import Request
from waypoint.routing.chain import build_chain
from waypoint.routing.sources import (
    JSONSource,
    RouteSource,
    StaticSource,
    YAMLSource,
    json_file,
    yaml_file,
)
from waypoint.server.handler import handle_request

logger = logging.getLogger("waypoint.app")


class App:
    """The waypoint application.

    Sources are layered in registration order: each source added wraps the
    ones before it, so the last source registered is checked first and the
    default handler answers only when every layer misses::

        app = App()
        app.add_routes({"/docs": "https://example.com/docs"})
        app.add_yaml_file("routes.yml")  # shadows the static routes

        @app.default
        def fallback(request: Request) -> str:
            return "Hello, world!"

    Thread safety:
        The setup phase is single-threaded. The freeze transition uses a
        Lock + double-check so exactly one thread builds the chain, even
        when several pounce workers call ``__call__()`` on first request.
        ``reload()`` swaps the whole chain in one assignment; in-flight
        requests finish on the chain they started with.
    """

    __slots__ = (
        "_chain",
        "_default",
        "_freeze_lock",
        "_frozen",
        "_sources",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._sources: list[RouteSource] = []
        self._default: Handler = self._greet
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set by _ensure_frozen()
        self._chain: Handler | None = None

    @classmethod
    def from_config(cls, config: AppConfig) -> App:
        """Create an app with every source named in *config*.

        Layer order, innermost first: ``default_routes``, ``yaml_file``,
        ``json_file``, ``store_file``. Unset sources are skipped.
        """
        app = cls(config)
        if config.default_routes:
            app.add_routes(config.default_routes, name="<defaults>")
        if config.yaml_file is not None:
            app.add_yaml_file(config.yaml_file)
        if config.json_file is not None:
            app.add_json_file(config.json_file)
        if config.store_file is not None:
            app.add_store(config.store_file, config.store_bucket)
        return app

    # -- Registration --

    def add_source(self, source: RouteSource) -> None:
        """Layer *source* over everything registered so far."""
        self._check_not_frozen()
        if not isinstance(source, RouteSource):
            msg = f"{source!r} is not a route source (needs .name and .entries())"
            raise ConfigurationError(msg)
        self._sources.append(source)

    def add_routes(
        self,
        routes: Mapping[str, str] | Iterable[tuple[str, str]],
        *,
        name: str = "<static>",
    ) -> None:
        """Add a layer of routes given directly as a mapping or pairs."""
        self.add_source(StaticSource.of(routes, name=name))

    def add_yaml(self, data: bytes | str, *, name: str = "<yaml>") -> None:
        """Add a layer parsed from an in-memory YAML document."""
        self.add_source(YAMLSource(data, name=name))

    def add_json(self, data: bytes | str, *, name: str = "<json>") -> None:
        """Add a layer parsed from an in-memory JSON document."""
        self.add_source(JSONSource(data, name=name))

    def add_yaml_file(self, path: str | Path) -> None:
        """Add a layer read from a YAML file when the chain is built."""
        self.add_source(yaml_file(path))

    def add_json_file(self, path: str | Path) -> None:
        """Add a layer read from a JSON file when the chain is built."""
        self.add_source(json_file(path))

    def add_store(self, path: str | Path, bucket: str = "routes") -> None:
        """Add a layer scanned from one bucket of a key-value store."""
        self.add_source(store_source(path, bucket))

    def default(self, func: Handler) -> Handler:
        """Register the terminal handler for paths no layer maps.

        Receives the request; may be sync or async and return a
        ``Response``, ``Redirect``, ``str``, or ``bytes``.
        """
        self._check_not_frozen()
        self._default = func
        return func

    @property
    def sources(self) -> tuple[RouteSource, ...]:
        """Registered sources, innermost (lowest precedence) first."""
        return tuple(self._sources)

    @property
    def chain(self) -> Handler:
        """The built redirect chain. Builds it on first access."""
        return self._ensure_frozen()

    # -- Lifecycle --

    def build(self) -> Handler:
        """Build a fresh chain from the registered sources.

        Does not install it. Raises the first ``SourceError`` encountered.
        """
        return build_chain(self._sources, self._default)

    def reload(self) -> None:
        """Re-read every source and swap in the new chain.

        If any source fails the current chain stays in place and the
        error propagates.
        """
        with self._freeze_lock:
            chain = self.build()
            self._chain = chain
            self._frozen = True
        logger.info("reloaded %d route sources", len(self._sources))

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Build the chain and start the server (dev or production based on config.debug).

        Building happens before the server binds, so a bad source stops
        the process before it accepts any connection.
        """
        self._ensure_frozen()

        _host = host or self.config.host
        _port = port or self.config.port

        if self.config.debug:
            from waypoint.server.dev import run_dev_server

            run_dev_server(
                self,
                _host,
                _port,
                reload=self.config.debug,
                reload_include=self.config.reload_include,
                reload_dirs=self.config.reload_dirs,
                log_level=self.config.log_level,
            )
        else:
            from waypoint.server.production import run_production_server

            run_production_server(
                self,
                host=_host,
                port=_port,
                workers=self.config.workers,
                log_level=self.config.log_level,
            )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes to
        the request handler.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            chain=self.chain,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Builds the chain at startup, before the server accepts traffic.
        Source reads are blocking file and sqlite I/O, so they run in a
        worker thread.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await anyio.to_thread.run_sync(self._ensure_frozen)
                except Exception as exc:
                    logger.error("startup failed: %s", exc)
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _greet(self, request: Request) -> str:  # noqa: ARG002
        return self.config.greeting

    def _ensure_frozen(self) -> Handler:
        """Thread-safe freeze with double-check locking. Returns the live chain."""
        chain = self._chain
        if chain is not None:
            return chain
        with self._freeze_lock:
            chain = self._chain
            if chain is None:
                chain = self.build()
                self._chain = chain
                self._frozen = True
            return chain

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register sources and the default handler before calling app.run()."
            )
            raise ConfigurationError(msg)
