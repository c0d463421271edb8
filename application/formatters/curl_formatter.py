# application/formatters/curl_formatter.py
from __future__ import annotations

from typing import List, Optional

from loguru import logger

from application.config import NetworkLoggerConfig
from application.formatters.request_formatter import invalid_request_lines
from application.services.body_decoder import decode_body
from application.services.redactor import mask_dict
from domain.degradation import Degradation
from domain.http_message import BufferBody, HttpRequestView, StreamBody

CURL_SEPARATOR = " \\\n\t"

# 二重引用符内で解釈される文字。バックスラッシュは先頭
_DOUBLE_QUOTE_SPECIALS = ("\\", '"', "$", "`")


def shell_quote(value: str) -> str:
    escaped = value
    for ch in _DOUBLE_QUOTE_SPECIALS:
        escaped = escaped.replace(ch, "\\" + ch)
    return f'"{escaped}"'


class CurlFormatter:
    """
    Renders a request as a ``curl`` command that replays it.

    Streamed bodies cannot be expressed on the command line, so the ``-d``
    token is left out for them.
    """

    def __init__(self, config: NetworkLoggerConfig):
        self._config = config

    def format(self, request: Optional[HttpRequestView]) -> List[str]:
        if request is None or not request.url:
            return invalid_request_lines()
        return [self.render(request)]

    def render(self, request: HttpRequestView) -> str:
        components = ["$ curl -i" if self._config.curl_include_headers else "$ curl"]

        method = (request.method or "GET").upper()
        body = request.body
        # -d 付きの GET は -X GET を明示（curl は -d で POST になる）
        if method != "GET" or isinstance(body, BufferBody):
            components.append(f"-X {method}")

        headers = dict(request.headers or {})
        if self._config.redact_headers:
            headers = mask_dict(headers)
        for key in sorted(headers):
            components.append(f"-H {shell_quote(f'{key}: {headers[key]}')}")

        if isinstance(body, BufferBody):
            components.append(f"-d {shell_quote(decode_body(body.data, request.headers))}")
        elif isinstance(body, StreamBody):
            logger.bind(degradation=Degradation.UNSUPPORTED_REPLAY_BODY.value).debug(
                "stream body left out of curl command for {}", request.url
            )

        components.append(shell_quote(request.url or ""))
        return CURL_SEPARATOR.join(components)
