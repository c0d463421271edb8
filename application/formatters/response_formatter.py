# application/formatters/response_formatter.py
from __future__ import annotations

from typing import Any, List, Optional

from loguru import logger

from application.config import NetworkLoggerConfig
from application.formatters.request_formatter import headers_to_text
from application.ports.target import describe_target
from application.services.body_decoder import decode_body
from application.services.redactor import mask_dict
from domain.degradation import Degradation
from domain.http_message import HttpResponseView
from domain.outcome import ExchangeOutcome, Failure, Success


def empty_response_line(target: Any) -> str:
    return f"Response: Received empty network response for {describe_target(target)}."


def _usable_response(outcome: ExchangeOutcome) -> Optional[HttpResponseView]:
    if isinstance(outcome, (Success, Failure)):
        response = outcome.response
    else:
        response = None
    if response is None or not response.has_metadata:
        return None
    return response


class ResponseFormatter:
    def __init__(self, config: NetworkLoggerConfig):
        self._config = config

    def format(self, outcome: ExchangeOutcome, target: Any) -> List[str]:
        response = _usable_response(outcome)
        if response is None:
            logger.bind(degradation=Degradation.EMPTY_NETWORK_RESPONSE.value).debug(
                "no usable response for {}", describe_target(target)
            )
            return [empty_response_line(target)]

        if not self._config.verbose:
            return [f"Response: {response.status}"]

        lines = [f"Response: {{ URL: {response.url} }} {{ Status Code: {response.status} }}"]

        headers = dict(response.headers or {})
        if headers:
            if self._config.redact_headers:
                headers = mask_dict(headers)
            lines.append(f"Response Headers: {headers_to_text(headers)}")

        body = self._config.format_response_body(response.content or b"")
        if body:
            lines.append(decode_body(body, response.headers))

        return lines
