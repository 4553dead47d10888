"""Invoke helper — call sync or async handlers uniformly.

Handlers can be ``def`` or ``async def``. The router returns whatever the
handler returns, so the front-end awaits the result here when needed.

Usage::

    from salute._internal.invoke import resolve

    response = await resolve(router.route(path, context, method))
"""

import inspect
from typing import Any


async def resolve(result: Any) -> Any:
    """Await *result* if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(result):
        result = await result
    return result
