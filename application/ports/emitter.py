# application/ports/emitter.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence

# (label, values) -> None. label は "Request" / "Response"
Emitter = Callable[[str, Sequence[str]], None]


class EmitterPort(ABC):
    @abstractmethod
    def emit(self, label: str, values: Sequence[str]) -> None:
        """
        Write one log event. Values are already formatted and ordered.
        """
        ...

    def __call__(self, label: str, values: Sequence[str]) -> None:
        self.emit(label, values)
