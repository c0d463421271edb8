# infrastructure/logging/console_emitter.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Sequence

from application.ports.emitter import EmitterPort

DATE_FORMAT = "%d/%m/%Y %H:%M:%S"


@dataclass(frozen=True)
class ConsoleEmitter(EmitterPort):
    logger_id: str = "NetworkLogger"
    terminator: str = "\n"
    clock: Callable[[], datetime] = field(default=datetime.now)

    def emit(self, label: str, values: Sequence[str]) -> None:
        stamp = self.clock().strftime(DATE_FORMAT)
        for value in values:
            print(f"{self.logger_id}: [{stamp}] {value}", end=self.terminator)
