# infrastructure/config/env_config_loader.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values

from application.config import BodyFormatter, NetworkLoggerConfig
from application.ports.emitter import Emitter
from infrastructure.config.base_loader import CONFIG_KEYS, build_config

ENV_PREFIX = "NETWORK_LOGGER_"


class EnvConfigLoader:
    """
    環境変数と.envファイルから NetworkLoggerConfig を生成する

    NETWORK_LOGGER_VERBOSE / NETWORK_LOGGER_CURL /
    NETWORK_LOGGER_CURL_INCLUDE_HEADERS / NETWORK_LOGGER_REDACT_HEADERS
    を参照する。.envファイルの値が環境変数より優先される。
    """

    def __init__(self, env_path: Optional[Union[str, Path]] = None):
        self._env_path = Path(env_path) if env_path is not None else Path.cwd() / ".env"

    def values(self) -> Dict[str, Optional[str]]:
        if self._env_path.exists():
            env_vars = dict(dotenv_values(self._env_path))
        else:
            env_vars = {}

        for key, value in os.environ.items():
            if key not in env_vars:
                env_vars[key] = value

        return {key: env_vars.get(ENV_PREFIX + key.upper()) for key in CONFIG_KEYS}

    def load(
        self,
        output: Optional[Emitter] = None,
        response_body_formatter: Optional[BodyFormatter] = None,
    ) -> NetworkLoggerConfig:
        return build_config(self.values(), output=output, response_body_formatter=response_body_formatter)
