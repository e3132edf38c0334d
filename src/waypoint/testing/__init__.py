"""Test utilities for waypoint applications::

    from waypoint.testing import TestClient
"""

from waypoint.testing.client import TestClient

__all__ = ["TestClient"]
