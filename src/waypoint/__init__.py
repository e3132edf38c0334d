"""Waypoint — layered URL redirection.

Looks up each request path in a stack of route sources and answers with a
302 redirect, or hands the request to a default handler when no layer maps
it. Sources added later shadow earlier ones.

Basic usage::

    from waypoint import App

    app = App()
    app.add_routes({"/docs": "https://example.com/docs"})
    app.add_yaml(b"- path: /blog\\n  url: https://example.com/blog")

    @app.default
    def hello(request):
        return "Hello, world!"

    app.run()

Sources can also come from files and a key-value store::

    app.add_yaml_file("routes.yml")
    app.add_json_file("routes.json")
    app.add_store("routes.db", bucket="routes")
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "Entry",
    "ParseError",
    "Redirect",
    "Request",
    "Response",
    "SourceError",
    "SourceUnavailable",
    "WaypointError",
    "build_chain",
    "build_lookup",
    "make_handler",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    if name == "App":
        from waypoint.app import App

        return App

    if name == "AppConfig":
        from waypoint.config import AppConfig

        return AppConfig

    if name == "Request":
        from waypoint.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from waypoint.http import response as _resp

        return getattr(_resp, name)

    if name in ("Entry", "build_chain", "build_lookup", "make_handler"):
        from waypoint import routing as _routing

        return getattr(_routing, name)

    if name in (
        "ConfigurationError",
        "ParseError",
        "SourceError",
        "SourceUnavailable",
        "WaypointError",
    ):
        from waypoint import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
