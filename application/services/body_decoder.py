# application/services/body_decoder.py
from __future__ import annotations

import re
from typing import List, Mapping, Optional

from loguru import logger

from domain.degradation import Degradation

_CHARSET_RE = re.compile(r"charset\s*=\s*([^\s;]+)", re.I)


def charset_from_headers(headers: Optional[Mapping[str, str]]) -> Optional[str]:
    ctype = ""
    for key, value in (headers or {}).items():
        if key.lower() == "content-type":
            ctype = value or ""
            break
    m = _CHARSET_RE.search(ctype)
    if not m:
        return None
    return m.group(1).strip().strip('"').strip("'") or None


def undecodable_placeholder(data: bytes) -> str:
    return f"(undecodable body: {len(data)} bytes)"


def decode_body(data: bytes, headers: Optional[Mapping[str, str]] = None) -> str:
    """
    Decode body bytes for display.

    The Content-Type charset is tried first, then UTF-8. Bytes that decode
    with neither become a placeholder instead of an exception.
    """
    encodings: List[str] = []
    declared = charset_from_headers(headers)
    if declared:
        encodings.append(declared)
    if "utf-8" not in (e.lower() for e in encodings):
        encodings.append("utf-8")

    for enc in encodings:
        try:
            return data.decode(enc)
        except (LookupError, UnicodeDecodeError):
            continue

    logger.bind(degradation=Degradation.UNDECODABLE_BODY.value).debug(
        "body of {} bytes could not be decoded", len(data)
    )
    return undecodable_placeholder(data)
