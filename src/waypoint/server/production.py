"""Production server.

Starts a pounce server with multiple workers. The redirect chain is
read-only once built, so every worker thread shares the same App.
"""


def run_production_server(
    app: object,
    host: str = "0.0.0.0",
    port: int = 8080,
    workers: int = 0,  # 0 = auto-detect from CPU count
    *,
    log_level: str = "info",
) -> None:
    """Run a waypoint app in production mode.

    Args:
        app: Waypoint App instance.
        host: Bind address (default: 0.0.0.0 for all interfaces).
        port: Bind port (default: 8080).
        workers: Worker count (0 = auto-detect from CPU count).
        log_level: Log level (debug, info, warning, error, critical).

    Example:
        >>> from myapp import app
        >>> from waypoint.server.production import run_production_server
        >>> run_production_server(app, workers=4)
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
    )
    server = Server(config, app)
    server.run()
