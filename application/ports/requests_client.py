# application/ports/requests_client.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union
from urllib.parse import urlsplit

import requests
from requests.adapters import BaseAdapter

from application.ports.plugin import PluginChain, PluginPort
from domain.http_message import (
    EMPTY_BODY,
    BufferBody,
    HttpRequestView,
    HttpResponseView,
    RequestBody,
    StreamBody,
)
from domain.outcome import Failure, Success


@dataclass(frozen=True)
class UrlTarget:
    url: str

    @property
    def name(self) -> str:
        parts = urlsplit(self.url)
        return parts.path.strip("/") or parts.netloc or self.url

    def __str__(self) -> str:
        return self.name


def _to_body(body: Any) -> RequestBody:
    if body is None:
        return EMPTY_BODY
    if isinstance(body, (bytes, bytearray)):
        return BufferBody(data=bytes(body))
    if isinstance(body, str):
        return BufferBody(data=body.encode("utf-8"))
    # ファイル・ジェネレータ等はストリーム扱い（読まない）
    return StreamBody(stream=body)


def to_request_view(prepared: Optional[requests.PreparedRequest]) -> Optional[HttpRequestView]:
    if prepared is None:
        return None
    return HttpRequestView(
        method=prepared.method or "GET",
        url=prepared.url or None,
        headers=dict(prepared.headers or {}),
        body=_to_body(prepared.body),
    )


def to_response_view(resp: Optional[requests.Response]) -> Optional[HttpResponseView]:
    if resp is None:
        return None
    return HttpResponseView(
        status=resp.status_code,
        content=resp.content or b"",
        url=str(resp.url) if resp.url else None,
        headers=dict(resp.headers or {}),
    )


class PluginAdapter(BaseAdapter):
    """
    Transport adapter that runs plugins around one wire exchange.

    Redirect hops each go through the adapter, so every request is paired
    with its own response.
    """

    def __init__(self, inner: BaseAdapter, plugins: PluginPort, target: Any = None):
        super().__init__()
        self._inner = inner
        self._plugins = plugins
        self._target = target

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        target = self._target if self._target is not None else UrlTarget(request.url or "")
        self._plugins.will_send(to_request_view(request), target)

        try:
            resp = self._inner.send(request, **kwargs)
        except requests.RequestException as exc:
            self._plugins.did_receive(
                Failure(error=str(exc), response=to_response_view(exc.response)),
                target,
            )
            raise

        # stream=True の場合は本文を読まずに状態だけ記録する
        if kwargs.get("stream"):
            view = HttpResponseView(
                status=resp.status_code,
                url=str(resp.url) if resp.url else None,
                headers=dict(resp.headers or {}),
            )
        else:
            view = to_response_view(resp)
        self._plugins.did_receive(Success(response=view), target)
        return resp

    def close(self) -> None:
        self._inner.close()


class LoggingSession(requests.Session):
    """
    requests.Session whose adapters run plugins around every exchange.

    Transport errors are reported to the plugins as a Failure and then
    re-raised unchanged.
    """

    def __init__(
        self,
        plugins: Union[PluginPort, Iterable[PluginPort]],
        target: Any = None,
    ):
        super().__init__()
        if isinstance(plugins, PluginPort):
            plugins = [plugins]
        self._plugins = PluginChain(plugins)
        self._target = target

    def get_adapter(self, url: str) -> BaseAdapter:
        return PluginAdapter(super().get_adapter(url), self._plugins, self._target)
