# domain/http_message.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Dict, Optional, Union

HeaderDict = Dict[str, str]


@dataclass(frozen=True)
class EmptyBody:
    pass


@dataclass(frozen=True)
class BufferBody:
    data: bytes


@dataclass(frozen=True)
class StreamBody:
    # 送信前のストリーム。ここでは読まない（読むと実際の送信が壊れる）
    stream: BinaryIO


RequestBody = Union[EmptyBody, BufferBody, StreamBody]

EMPTY_BODY = EmptyBody()


@dataclass(frozen=True)
class HttpRequestView:
    method: str
    url: Optional[str]
    headers: HeaderDict = field(default_factory=dict)
    body: RequestBody = EMPTY_BODY

    def __post_init__(self) -> None:
        if not isinstance(self.body, (EmptyBody, BufferBody, StreamBody)):
            raise TypeError(f"Unsupported request body: {type(self.body).__name__}")


@dataclass(frozen=True)
class HttpResponseView:
    status: int
    content: bytes = b""
    url: Optional[str] = None
    headers: HeaderDict = field(default_factory=dict)

    @property
    def has_metadata(self) -> bool:
        """True when the response came with network metadata (a resolvable URL)."""
        return self.url is not None
