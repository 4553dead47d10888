"""Case-insensitive request headers built from ASGI byte pairs."""

from salute.http.multidict import MultiDict


class Headers(MultiDict):
    """Immutable, case-insensitive HTTP headers.

    Names are stored lowercased and values decoded as latin-1, the
    encoding ASGI servers use for raw header bytes.
    """

    __slots__ = ()

    @classmethod
    def from_raw(cls, raw: tuple[tuple[bytes, bytes], ...] | list[tuple[bytes, bytes]]) -> "Headers":
        """Build headers from the ``scope["headers"]`` list."""
        return cls([(name.decode("latin-1"), value.decode("latin-1")) for name, value in raw])

    @staticmethod
    def _normalize(key: str) -> str:
        return key.lower()
