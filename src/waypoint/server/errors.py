"""Error handling for requests that escape the redirect chain.

Lookup itself cannot fail; only a user-supplied default handler can raise.
Those failures become a logged 500 instead of a dropped connection.
"""

import logging
import traceback

from waypoint.http.request import Request
from waypoint.http.response import Response

logger = logging.getLogger("waypoint.server")


def handle_internal_error(exc: Exception, request: Request, debug: bool) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    if debug:
        body = "".join(traceback.format_exception(exc))
        return Response(body=body, status=500)

    return Response(body="Internal Server Error", status=500)
