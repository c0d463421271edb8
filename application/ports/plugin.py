# application/ports/plugin.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from domain.http_message import HttpRequestView
from domain.outcome import ExchangeOutcome


class PluginPort(ABC):
    @abstractmethod
    def will_send(self, request: Optional[HttpRequestView], target: Any) -> None:
        ...

    @abstractmethod
    def did_receive(self, outcome: ExchangeOutcome, target: Any) -> None:
        ...


class PluginChain(PluginPort):
    def __init__(self, plugins: Iterable[PluginPort]):
        self._plugins = list(plugins)

    def will_send(self, request: Optional[HttpRequestView], target: Any) -> None:
        for p in self._plugins:
            p.will_send(request, target)

    def did_receive(self, outcome: ExchangeOutcome, target: Any) -> None:
        for p in self._plugins:
            p.did_receive(outcome, target)
