from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from loguru import logger

from application.ports.emitter import Emitter, EmitterPort
from domain.degradation import Degradation


@dataclass(frozen=True)
class CompositeEmitter(EmitterPort):
    emitters: List[Emitter]

    def emit(self, label: str, values: Sequence[str]) -> None:
        # 1つの出力先が失敗しても残りには渡す
        for emitter in self.emitters:
            try:
                emitter(label, values)
            except Exception:
                logger.bind(degradation=Degradation.EMITTER_FAILURE.value).exception(
                    "emitter failed for {} event", label
                )
