"""ASGI handler — translates ASGI scope/messages to salute types.

The only component that touches raw ASGI request messages. Each request
runs through a ``Connection`` that buffers the body, builds the
``RequestContext``, dispatches through the router, and sends the
``Response`` back through ASGI ``send()``.
"""

import codecs
import logging
from enum import Enum

from salute._internal.asgi import Receive, Scope, Send
from salute._internal.invoke import resolve
from salute.http.request import RequestContext
from salute.http.response import INTERNAL_ERROR, Response
from salute.routing.router import Router
from salute.server.sender import send_response

logger = logging.getLogger("salute.server")


class ConnectionState(Enum):
    """Lifecycle of one request on the wire."""

    AWAITING_BODY = "awaiting_body"
    BODY_COMPLETE = "body_complete"
    RESPONDING = "responding"
    CLOSED = "closed"


class Connection:
    """Per-request state machine: ``AWAITING_BODY -> BODY_COMPLETE -> RESPONDING -> CLOSED``.

    Owns the body buffer and the incremental UTF-8 decoder. A multi-byte
    character split across chunks is held by the decoder until the rest
    arrives; whatever is still held at end of stream is flushed as U+FFFD.
    """

    __slots__ = ("_buffer", "_decoder", "scope", "state")

    def __init__(self, scope: Scope) -> None:
        self.scope = scope
        self.state = ConnectionState.AWAITING_BODY
        self._buffer: list[str] = []
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def body(self) -> str:
        """Text received so far."""
        return "".join(self._buffer)

    def feed(self, chunk: bytes, *, more_body: bool) -> None:
        """Append a body chunk. The last chunk (``more_body=False``) flushes the decoder."""
        if self.state is not ConnectionState.AWAITING_BODY:
            msg = f"Cannot accept body data in state {self.state.name}"
            raise RuntimeError(msg)
        self._buffer.append(self._decoder.decode(chunk, final=not more_body))
        if not more_body:
            self.state = ConnectionState.BODY_COMPLETE

    def close(self) -> None:
        self.state = ConnectionState.CLOSED

    async def read_body(self, receive: Receive) -> bool:
        """Consume ``http.request`` messages until the body is complete.

        Returns False if the client disconnected first.
        """
        while self.state is ConnectionState.AWAITING_BODY:
            message = await receive()
            if message["type"] == "http.disconnect":
                self.close()
                return False
            self.feed(message.get("body", b""), more_body=message.get("more_body", False))
        return True

    def context(self) -> RequestContext:
        """Build the request context once the body is complete."""
        if self.state is not ConnectionState.BODY_COMPLETE:
            msg = f"Request body is not complete (state {self.state.name})"
            raise RuntimeError(msg)
        return RequestContext.build(
            method=self.scope["method"],
            path=self.scope["path"],
            query_string=self.scope.get("query_string", b""),
            raw_headers=self.scope.get("headers", ()),
            request_body=self.body,
        )

    async def respond(self, response: Response, send: Send) -> int:
        self.state = ConnectionState.RESPONDING
        try:
            return await send_response(response, send)
        finally:
            self.close()


async def dispatch(router: Router, context: RequestContext) -> Response:
    """Route *context* and return the handler's response.

    A handler that raises, or returns something other than a ``Response``,
    is answered with the fixed internal-error response.
    """
    try:
        response = await resolve(router.route(context.path, context, context.method))
        if not isinstance(response, Response):
            msg = f"Handler returned {type(response).__name__}, not a Response"
            raise TypeError(msg)
    except Exception:
        logger.exception("500 %s /%s", context.method.upper(), context.path)
        return INTERNAL_ERROR
    return response


async def handle_request(scope: Scope, receive: Receive, send: Send, *, router: Router) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    connection = Connection(scope)
    if not await connection.read_body(receive):
        logger.debug("Client disconnected before body completed: %s", scope.get("path"))
        return

    context = connection.context()
    response = await dispatch(router, context)
    status = await connection.respond(response, send)
    logger.debug("%d %s /%s", status, context.method.upper(), context.path)
