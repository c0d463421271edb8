# domain/outcome.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from domain.http_message import HttpResponseView


@dataclass(frozen=True)
class Success:
    response: HttpResponseView

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: str
    response: Optional[HttpResponseView] = None

    @property
    def ok(self) -> bool:
        return False


ExchangeOutcome = Union[Success, Failure]
