# infrastructure/logging/buffer_emitter.py
from __future__ import annotations

from threading import Lock
from typing import List, Sequence

from application.ports.emitter import EmitterPort
from domain.emitted_record import EmittedRecord


class BufferEmitter(EmitterPort):
    def __init__(self) -> None:
        self._records: List[EmittedRecord] = []
        self._lock = Lock()

    def emit(self, label: str, values: Sequence[str]) -> None:
        record = EmittedRecord(label=label, values=tuple(str(v) for v in values))
        with self._lock:
            self._records.append(record)

    def records(self) -> List[EmittedRecord]:
        with self._lock:
            return list(self._records)

    def lines(self) -> List[str]:
        return [value for record in self.records() for value in record.values]

    def text(self, separator: str = "\n") -> str:
        return separator.join(self.lines())

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
