"""Shared type aliases used across salute modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: takes a RequestContext, returns a Response
# (or an awaitable resolving to one)
Handler: TypeAlias = Callable[..., Any]
