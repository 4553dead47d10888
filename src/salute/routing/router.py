"""Exact-match router with a built-in 404 fallback.

Paths are matched as whole strings after stripping leading and trailing
slashes; there are no path parameters or wildcards. Anything that misses
goes to the default handler.
"""

import logging
from collections.abc import Callable

from salute._internal.types import Handler
from salute.http.request import RequestContext, normalize_path
from salute.http.response import Response

logger = logging.getLogger("salute.routing")


def not_found() -> Response:
    """Default handler: 404 with a JSON ``Not Found`` message."""
    return Response(body={"message": "Not Found", "statusCode": 404}, status_code=404)


class Router:
    """Maps (path, HTTP verb) pairs to handlers.

    Usage::

        router = Router()
        router.register("/hello", "POST", hello)
        response = router.route("hello", context, "post")

    Registering the same path and verb twice replaces the earlier
    handler; there is no error for it.
    """

    __slots__ = ("_default", "_routes")

    def __init__(self, default: Callable[[], Response] = not_found) -> None:
        self._routes: dict[str, dict[str, Handler]] = {}
        self._default = default

    def register(self, path: str, method: str, handler: Handler) -> None:
        """Bind *handler* to *path* and *method*, replacing any previous binding."""
        self._routes.setdefault(normalize_path(path), {})[method.lower()] = handler

    def route(self, path: str, context: RequestContext | None, method: str = "get") -> object:
        """Invoke the handler for *path* and *method*, or the default handler.

        The matched handler is called with *context*; the default handler
        is called with no arguments. Returns whatever the handler returns
        (a ``Response``, or an awaitable for async handlers).
        """
        verb = method.lower()
        key = normalize_path(path)

        logger.info("Routing to /%s using verb %s", key, verb)
        handler = self._routes.get(key, {}).get(verb)

        if callable(handler):
            return handler(context)
        return self._default()

    @property
    def routes(self) -> list[tuple[str, str]]:
        """All registered (path, verb) keys, sorted."""
        return sorted((path, verb) for path, verbs in self._routes.items() for verb in verbs)

    def __len__(self) -> int:
        return sum(len(verbs) for verbs in self._routes.values())
