"""Test utilities for salute applications::

    from salute.testing import TestClient
"""

from salute.testing.client import ClientResponse, TestClient

__all__ = ["ClientResponse", "TestClient"]
