"""Waypoint exception hierarchy.

Shared across sources, the chain builder, the app, and the CLI so every
module raises and catches the same types.
"""


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when app configuration is invalid.

    Typically raised during setup, before the chain is built.
    """


class SourceError(WaypointError):
    """A route source could not produce its entries.

    Carries the source name so the failing layer can be reported at
    startup without a traceback.
    """

    def __init__(self, source: str, detail: str) -> None:
        super().__init__(f"{source}: {detail}")
        self.source = source
        self.detail = detail


class ParseError(SourceError):
    """Structured route data is malformed or has the wrong shape."""


class SourceUnavailable(SourceError):  # noqa: N818
    """The file or key-value store behind a source cannot be opened or read."""
