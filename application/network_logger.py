# application/network_logger.py
from __future__ import annotations

from typing import Any, Callable, List, Optional

from loguru import logger

from application.config import NetworkLoggerConfig
from application.formatters.curl_formatter import CurlFormatter
from application.formatters.request_formatter import RequestFormatter
from application.formatters.response_formatter import ResponseFormatter
from application.ports.plugin import PluginPort
from application.ports.target import describe_target
from domain.degradation import Degradation
from domain.http_message import HttpRequestView
from domain.outcome import ExchangeOutcome

REQUEST_LABEL = "Request"
RESPONSE_LABEL = "Response"

UNFORMATTABLE_REQUEST_LINE = "Request: (unable to format request)"
UNFORMATTABLE_RESPONSE_LINE = "Response: (unable to format response)"


class NetworkLoggerPlugin(PluginPort):
    """
    Logs requests before they are sent and responses once they resolve.

    Formatting is a pure function of the configuration and the hook input;
    nothing raised while formatting or emitting reaches the caller.
    """

    def __init__(self, config: Optional[NetworkLoggerConfig] = None):
        self._config = config or NetworkLoggerConfig()
        self._requests = RequestFormatter(self._config)
        self._curl = CurlFormatter(self._config)
        self._responses = ResponseFormatter(self._config)

    @property
    def config(self) -> NetworkLoggerConfig:
        return self._config

    def will_send(self, request: Optional[HttpRequestView], target: Any) -> None:
        if self._config.curl:
            lines = self._safe_format(
                lambda: self._curl.format(request), UNFORMATTABLE_REQUEST_LINE, target
            )
            self._emit(REQUEST_LABEL, lines)
            return

        lines = self._safe_format(
            lambda: self._requests.format(request), UNFORMATTABLE_REQUEST_LINE, target
        )
        self._output_items(REQUEST_LABEL, lines)

    def did_receive(self, outcome: ExchangeOutcome, target: Any) -> None:
        lines = self._safe_format(
            lambda: self._responses.format(outcome, target), UNFORMATTABLE_RESPONSE_LINE, target
        )
        self._output_items(RESPONSE_LABEL, lines)

    # 別名
    log_request = will_send
    log_response = did_receive

    def _safe_format(self, fn: Callable[[], List[str]], fallback: str, target: Any) -> List[str]:
        try:
            return fn()
        except Exception:
            logger.bind(degradation=Degradation.FORMATTER_FAILURE.value).exception(
                "failed to format log event for {}", describe_target(target)
            )
            return [fallback]

    def _output_items(self, label: str, lines: List[str]) -> None:
        if self._config.verbose:
            for line in lines:
                self._emit(label, [line])
            return
        self._emit(label, lines)

    def _emit(self, label: str, values: List[str]) -> None:
        try:
            self._config.output(label, list(values))
        except Exception:
            logger.bind(degradation=Degradation.EMITTER_FAILURE.value).exception(
                "emitter failed for {} event", label
            )
