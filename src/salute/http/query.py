"""Immutable query string parameters."""

from urllib.parse import parse_qsl

from salute.http.multidict import MultiDict


class QueryParams(MultiDict):
    """Query string parameters, keeping every value of a repeated key.

    ``QueryParams("a=1&a=2")["a"]`` is ``"1"``; ``get_list("a")`` is
    ``["1", "2"]``. Blank values are kept.
    """

    __slots__ = ()

    @classmethod
    def parse(cls, query_string: bytes | str = b"") -> "QueryParams":
        """Parse a raw query string (ASGI hands it over as bytes)."""
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        return cls(parse_qsl(query_string, keep_blank_values=True))
