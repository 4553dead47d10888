"""Routing — exact-match route table keyed by (path, verb).

Routes are registered during setup and read-only once the app starts
serving.
"""

from salute.routing.router import Router, not_found

__all__ = ["Router", "not_found"]
