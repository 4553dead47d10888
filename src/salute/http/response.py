"""Handler response object and its wire serialization.

A handler returns ``Response(body, status_code)``. The front-end turns
it into status, content type, and body bytes via ``render()``, which is
also where the non-integer status rule is enforced.
"""

import json
from dataclasses import dataclass
from typing import Any

JSON_CONTENT_TYPE = "application/json"

INTERNAL_ERROR_BODY: dict[str, str] = {
    "error": "Internal Server Error",
    "message": "A non-numeric HTTP status code was returned.",
}


def is_valid_status(status: object) -> bool:
    """True for integers in the HTTP status range 100-599.

    ``bool`` is an ``int`` subclass but not a status.
    """
    if not isinstance(status, int) or isinstance(status, bool):
        return False
    return 100 <= status <= 599


def serialize_body(body: Any) -> str:
    """Strings go out verbatim, everything else through ``json.dumps``."""
    if isinstance(body, str):
        return body
    return json.dumps(body)


@dataclass(frozen=True, slots=True)
class Response:
    """What a handler returns: a JSON-serializable body and a status code.

    ``body`` may also be an already-serialized JSON string. ``status_code``
    is typed ``int`` but not trusted; see ``render()``.
    """

    body: Any = None
    status_code: int = 200

    def render(self) -> tuple[int, bytes]:
        """Resolve the wire status and body bytes.

        A ``status_code`` that is not an integer in 100-599 is a handler defect: the result is
        a 500 with ``INTERNAL_ERROR_BODY`` no matter what body was given.
        """
        if not is_valid_status(self.status_code):
            return 500, serialize_body(INTERNAL_ERROR_BODY).encode("utf-8")
        return self.status_code, serialize_body(self.body).encode("utf-8")


INTERNAL_ERROR = Response(body=INTERNAL_ERROR_BODY, status_code=500)
