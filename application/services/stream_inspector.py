# application/services/stream_inspector.py
from __future__ import annotations

from typing import Any, Optional

from requests.utils import super_len


def available_bytes(stream: Any) -> Optional[int]:
    """
    Bytes left in ``stream`` without reading it.

    ``super_len`` checks ``__len__``, ``len``, ``fstat`` and finally a
    tell/seek pair that puts the position back where it was. Iterators and
    generators have no length and give ``None``.
    """
    if not (hasattr(stream, "read") or hasattr(stream, "__len__") or hasattr(stream, "len")):
        return None
    try:
        return super_len(stream)
    except (OSError, ValueError, TypeError, AttributeError):
        return None


def describe_stream(stream: Any) -> str:
    kind = type(stream).__name__
    size = available_bytes(stream)
    if size is None:
        return f"<{kind}>"
    return f"<{kind}: {size} bytes available>"
