"""Development server with hot reload.

Starts a pounce ASGI server with the live waypoint App object.
Uses single-worker mode with reload enabled for development.
"""


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = True,
    reload_include: tuple[str, ...] = (),
    reload_dirs: tuple[str, ...] = (),
    log_level: str = "info",
) -> None:
    """Start a pounce dev server with the given waypoint App.

    Pounce's ``run()`` takes an import string, but waypoint has a live
    ``App`` object, so ``pounce.Server`` is used directly with the ASGI
    callable.

    Args:
        app: ASGI callable (waypoint App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes (default True).
        reload_include: Extra file extensions to watch when reload is
            active (e.g. ``(".yml", ".json")`` to pick up route edits).
        reload_dirs: Extra directories to watch alongside cwd.
        log_level: Server log level.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_include=reload_include,
        reload_dirs=reload_dirs,
        log_level=log_level,
    )
    server = Server(config, app)
    server.run()
