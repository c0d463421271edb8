# application/ports/target.py
from __future__ import annotations

from typing import Any


def describe_target(target: Any) -> str:
    """
    Stable identifier of a target for contextual messages: its ``name`` when
    it has one, otherwise ``str(target)``.
    """
    if target is None:
        return "(unknown target)"
    name = getattr(target, "name", None)
    if isinstance(name, str) and name:
        return name
    return str(target)
