"""Route handlers.

Each handler takes the ``RequestContext`` and returns a ``Response``.
The response must carry an integer ``status_code``; anything else makes
the server answer 500.
"""

import json

from salute.http.request import RequestContext
from salute.http.response import Response
from salute.parse_json import parse_json

DEFAULT_NAME = "friend"


def _display_name(name: object) -> str:
    """Text to greet for a decoded ``name`` value.

    Strings are used as-is. Other values are shown as their JSON text
    (``true``, ``42``, ``[]``). Missing, ``null``, ``false``, ``0`` and
    ``""`` mean no name; arrays and objects count as a name even when empty.
    """
    if isinstance(name, (list, dict)):
        return json.dumps(name)
    if not name:
        return DEFAULT_NAME
    if isinstance(name, str):
        return name
    return json.dumps(name)


def hello(context: RequestContext) -> Response:
    """Greet the ``name`` from the JSON body, or ``friend`` without one.

    The body repeats ``statusCode``; existing clients read it from there.
    """
    payload = parse_json(context.request_body)
    name = payload.get("name") if isinstance(payload, dict) else None
    return Response(
        body={
            "message": f"Hello there, {_display_name(name)}!",
            "statusCode": 200,
        },
        status_code=200,
    )
