from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class EmittedRecord:
    label: str
    values: Tuple[str, ...]
