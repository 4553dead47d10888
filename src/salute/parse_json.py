"""Safe wrapper over ``json.loads``.

Decode failures are handled here, once, so callers can unpack the result
with a plain ``or {}`` fallback instead of their own try/except.
"""

import json
from typing import Any


def _reject_constant(name: str) -> Any:
    # RFC 8259 has no NaN or Infinity; json.loads accepts them by default.
    msg = f"Non-standard JSON constant: {name}"
    raise ValueError(msg)


def parse_json(text: str | bytes | None) -> Any | None:
    """Parse a JSON document, returning ``None`` if it cannot be decoded.

    Covers malformed syntax, the empty string, the non-standard
    ``NaN``/``Infinity``/``-Infinity`` literals, invalid UTF-8 in byte
    input, non-string input such as ``None``, and documents nested too
    deeply to decode.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)  # type: ignore[arg-type]
    except (TypeError, ValueError, RecursionError):
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        return None
