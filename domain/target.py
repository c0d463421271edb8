# domain/target.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Endpoint:
    name: str
    base_url: str
    path: str = ""

    @property
    def url(self) -> str:
        if self.path.startswith("http://") or self.path.startswith("https://"):
            return self.path
        if not self.path:
            return self.base_url
        return self.base_url.rstrip("/") + "/" + self.path.lstrip("/")

    def __str__(self) -> str:
        return self.name
