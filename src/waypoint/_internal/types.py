"""Shared type aliases used across waypoint modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Request handler: ``(Request) -> Response | Redirect | str | bytes``, sync or async
Handler: TypeAlias = Callable[..., Any]
