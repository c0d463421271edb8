from __future__ import annotations

from typing import Any, List, Tuple

from application.ports.plugin import PluginChain, PluginPort
from domain.http_message import HttpRequestView
from domain.outcome import Failure


class RecordingPlugin(PluginPort):
    def __init__(self, name: str, calls: List[Tuple[str, str]]) -> None:
        self._name = name
        self._calls = calls

    def will_send(self, request: Any, target: Any) -> None:
        self._calls.append((self._name, "will_send"))

    def did_receive(self, outcome: Any, target: Any) -> None:
        self._calls.append((self._name, "did_receive"))


def test_plugin_chain_calls_plugins_in_order() -> None:
    calls: List[Tuple[str, str]] = []
    chain = PluginChain([RecordingPlugin("a", calls), RecordingPlugin("b", calls)])

    chain.will_send(HttpRequestView(method="GET", url="https://example.com"), "example")
    chain.did_receive(Failure(error="offline"), "example")

    assert calls == [
        ("a", "will_send"),
        ("b", "will_send"),
        ("a", "did_receive"),
        ("b", "did_receive"),
    ]
