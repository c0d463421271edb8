# infrastructure/logging/loguru_emitter.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from loguru import logger

from application.ports.emitter import EmitterPort


@dataclass(frozen=True)
class LoguruEmitter(EmitterPort):
    level: str = "INFO"

    def emit(self, label: str, values: Sequence[str]) -> None:
        bound = logger.bind(label=label)
        for value in values:
            # 本文に {} が含まれても format されないよう引数で渡す
            bound.log(self.level, "{}", value)
