"""Content negotiation — maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

from typing import Any
from urllib.parse import quote

from waypoint.errors import ConfigurationError
from waypoint.http.response import Redirect, Response


def negotiate(value: Any) -> Response:
    """Convert a handler's return value to a Response.

    Dispatch order:

    1. ``Response``  -> pass through
    2. ``Redirect``  -> redirect status with Location header, empty body;
       characters not allowed in a URL are percent-encoded
    3. ``str``       -> 200, text/plain
    4. ``bytes``     -> 200, application/octet-stream
    5. ``(value, int)`` -> negotiate value, override status
    """
    match value:
        case Response():
            return value
        case Redirect():
            return (
                Response(body="")
                .with_status(value.status)
                .with_header("Location", _location(value.url))
                .with_headers(dict(value.headers))
            )
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case (inner, int(status)):
            return negotiate(inner).with_status(status)
        case _:
            msg = (
                f"Default handler returned {type(value).__name__!r}, which waypoint "
                "cannot convert to a response. Return a Response, Redirect, str, or bytes."
            )
            raise ConfigurationError(msg)


# Reserved and sub-delim characters plus "%" pass through, so targets that are
# already encoded are not encoded twice.
_LOCATION_SAFE = ":/?#[]@!$&'()*+,;=%~"


def _location(url: str) -> str:
    """Header-safe form of a redirect target."""
    return quote(url, safe=_LOCATION_SAFE)
