# application/formatters/request_formatter.py
from __future__ import annotations

import json
from typing import Dict, List, Mapping, Optional

from loguru import logger

from application.config import NetworkLoggerConfig
from application.services.body_decoder import decode_body
from application.services.redactor import mask_dict
from application.services.stream_inspector import describe_stream
from domain.degradation import Degradation
from domain.http_message import BufferBody, HttpRequestView, StreamBody

INVALID_REQUEST_LINE = "Request: (invalid request)"


def headers_to_text(headers: Mapping[str, str]) -> str:
    return json.dumps(dict(headers), ensure_ascii=False, sort_keys=True)


def invalid_request_lines() -> List[str]:
    logger.bind(degradation=Degradation.MISSING_REQUEST.value).debug("request has no URL")
    return [INVALID_REQUEST_LINE]


class RequestFormatter:
    def __init__(self, config: NetworkLoggerConfig):
        self._config = config

    def format(self, request: Optional[HttpRequestView]) -> List[str]:
        if request is None or not request.url:
            return invalid_request_lines()

        method = (request.method or "").upper()
        if not self._config.verbose:
            return [f"Request: {method} {request.url}"]

        lines = [f"Request: {request.url}"]

        headers = self._headers(request)
        if headers:
            lines.append(f"Request Headers: {headers_to_text(headers)}")

        lines.append(f"HTTP Request Method: {method}")

        body = request.body
        if isinstance(body, BufferBody):
            lines.append(f"Request Body: {decode_body(body.data, request.headers)}")
        elif isinstance(body, StreamBody):
            lines.append(f"Request Body Stream: {describe_stream(body.stream)}")

        return lines

    def _headers(self, request: HttpRequestView) -> Dict[str, str]:
        headers = dict(request.headers or {})
        if self._config.redact_headers:
            return mask_dict(headers)
        return headers
