"""ASGI response sending — translates a handler Response to ASGI messages."""

import logging

from salute._internal.asgi import Send
from salute.http.response import INTERNAL_ERROR, JSON_CONTENT_TYPE, Response, is_valid_status

logger = logging.getLogger("salute.server")


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


async def send_response(response: Response, send: Send) -> int:
    """Write *response* as a JSON reply and return the status actually sent.

    The status is resolved (and a non-integer one replaced by 500) before
    the response head goes out.
    """
    try:
        status, body = response.render()
    except (TypeError, ValueError):
        logger.exception("Response body is not JSON-serializable; responding 500")
        status, body = INTERNAL_ERROR.render()
    else:
        if not is_valid_status(response.status_code):
            logger.error(
                "Handler returned invalid status %r; responding 500",
                response.status_code,
            )

    if not _body_allowed(status):
        body = b""

    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": [
                (b"content-type", JSON_CONTENT_TYPE.encode("latin-1")),
                (b"content-length", str(len(body)).encode("latin-1")),
            ],
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
    return status
