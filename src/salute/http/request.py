"""Per-request context handed to route handlers.

Built by the front-end once the body has fully arrived, owned by that
one request, and discarded after the response is written.
"""

from dataclasses import dataclass, field

from salute.http.headers import Headers
from salute.http.query import QueryParams


def normalize_path(path: str) -> str:
    """Strip leading and trailing slashes: ``"//hello/"`` -> ``"hello"``."""
    return path.strip("/")


@dataclass(frozen=True, slots=True)
class RequestContext:
    """An immutable summary of one HTTP request.

    ``method`` is lowercase and ``path`` has no leading or trailing
    slashes. ``request_body`` is the full decoded body text (empty for
    bodiless requests).
    """

    method: str
    path: str
    query: QueryParams = field(default_factory=QueryParams)
    headers: Headers = field(default_factory=Headers)
    request_body: str = ""

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @classmethod
    def build(
        cls,
        *,
        method: str,
        path: str,
        query_string: bytes | str = b"",
        raw_headers: tuple[tuple[bytes, bytes], ...] | list[tuple[bytes, bytes]] = (),
        request_body: str = "",
    ) -> "RequestContext":
        """Normalize raw request parts into a context."""
        return cls(
            method=method.lower(),
            path=normalize_path(path),
            query=QueryParams.parse(query_string),
            headers=Headers.from_raw(raw_headers),
            request_body=request_body,
        )
