# application/config.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from application.ports.emitter import Emitter

BodyFormatter = Callable[[bytes], bytes]


def _default_output() -> Emitter:
    from infrastructure.logging.console_emitter import ConsoleEmitter

    return ConsoleEmitter()


@dataclass(frozen=True)
class NetworkLoggerConfig:
    verbose: bool = False
    curl: bool = False
    curl_include_headers: bool = True
    redact_headers: bool = False
    response_body_formatter: Optional[BodyFormatter] = None
    output: Emitter = field(default_factory=_default_output)

    def format_response_body(self, data: bytes) -> bytes:
        if self.response_body_formatter is None:
            return data
        return self.response_body_formatter(data)
