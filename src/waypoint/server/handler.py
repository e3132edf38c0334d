"""ASGI handler — translates ASGI scope/messages to waypoint types.

The only component that touches raw ASGI HTTP messages directly. Converts
the scope to a typed Request, runs it through the redirect chain, and sends
the Response back through ASGI send().
"""

from waypoint._internal.asgi import Receive, Scope, Send
from waypoint._internal.invoke import invoke
from waypoint._internal.types import Handler
from waypoint.http.request import Request
from waypoint.server.errors import handle_internal_error
from waypoint.server.negotiation import negotiate
from waypoint.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001
    send: Send,
    *,
    chain: Handler,
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the redirect chain."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = negotiate(await invoke(chain, request))
    except Exception as exc:
        response = handle_internal_error(exc, request, debug)

    await send_response(response, send)
