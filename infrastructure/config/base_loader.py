# infrastructure/config/base_loader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from application.config import BodyFormatter, NetworkLoggerConfig
from application.ports.emitter import Emitter

CONFIG_KEYS = ("verbose", "curl", "curl_include_headers", "redact_headers")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigLoadError(Exception):
    pass


def parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
    raise ConfigLoadError(f"Invalid boolean for {key}: {value!r}")


def build_config(
    flags: Dict[str, Any],
    output: Optional[Emitter] = None,
    response_body_formatter: Optional[BodyFormatter] = None,
) -> NetworkLoggerConfig:
    kwargs: Dict[str, Any] = {}
    for key in CONFIG_KEYS:
        if flags.get(key) not in (None, ""):
            kwargs[key] = parse_bool(key, flags[key])
    if output is not None:
        kwargs["output"] = output
    if response_body_formatter is not None:
        kwargs["response_body_formatter"] = response_body_formatter
    return NetworkLoggerConfig(**kwargs)


class ConfigLoaderBase(ABC):
    """設定ファイル（YAML / JSON）から NetworkLoggerConfig を生成する"""

    def load_from_file(
        self,
        path: str,
        output: Optional[Emitter] = None,
        response_body_formatter: Optional[BodyFormatter] = None,
    ) -> NetworkLoggerConfig:
        p = Path(path)
        if not p.exists():
            raise ConfigLoadError(f"Config file not found: {path}")

        try:
            data = self._load_file(p)
        except ConfigLoadError:
            raise
        except Exception as exc:
            raise ConfigLoadError(f"Config file is invalid: {path}: {exc}") from exc

        if data is None:
            raise ConfigLoadError(f"Config file is empty: {path}")

        if not isinstance(data, dict):
            raise ConfigLoadError(f"Config file is invalid: {path}")

        return self.load_from_dict(data, output=output, response_body_formatter=response_body_formatter)

    def load_from_dict(
        self,
        data: Dict[str, Any],
        output: Optional[Emitter] = None,
        response_body_formatter: Optional[BodyFormatter] = None,
    ) -> NetworkLoggerConfig:
        # network_logger: {...} の入れ子も許可
        section = data.get("network_logger", data)
        if not isinstance(section, dict):
            raise ConfigLoadError("network_logger section must be a mapping")
        return build_config(section, output=output, response_body_formatter=response_body_formatter)

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...
