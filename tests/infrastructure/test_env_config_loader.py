# tests/infrastructure/test_env_config_loader.py
from pathlib import Path

import pytest

from infrastructure.config.base_loader import ConfigLoadError
from infrastructure.config.env_config_loader import EnvConfigLoader
from infrastructure.logging.buffer_emitter import BufferEmitter


def _clear(monkeypatch):
    for key in ("VERBOSE", "CURL", "CURL_INCLUDE_HEADERS", "REDACT_HEADERS"):
        monkeypatch.delenv(f"NETWORK_LOGGER_{key}", raising=False)


def test_defaults_without_env(monkeypatch, tmp_path: Path):
    _clear(monkeypatch)

    config = EnvConfigLoader(env_path=tmp_path / ".env").load()

    assert config.verbose is False
    assert config.curl is False
    assert config.curl_include_headers is True
    assert config.redact_headers is False


def test_reads_environment(monkeypatch, tmp_path: Path):
    _clear(monkeypatch)
    monkeypatch.setenv("NETWORK_LOGGER_VERBOSE", "yes")
    monkeypatch.setenv("NETWORK_LOGGER_CURL_INCLUDE_HEADERS", "0")
    output = BufferEmitter()

    config = EnvConfigLoader(env_path=tmp_path / ".env").load(output=output)

    assert config.verbose is True
    assert config.curl_include_headers is False
    assert config.output is output


def test_env_file_wins_over_environment(monkeypatch, tmp_path: Path):
    _clear(monkeypatch)
    monkeypatch.setenv("NETWORK_LOGGER_CURL", "false")
    env_file = tmp_path / ".env"
    env_file.write_text("NETWORK_LOGGER_CURL=true\nNETWORK_LOGGER_REDACT_HEADERS=on\n", encoding="utf-8")

    config = EnvConfigLoader(env_path=env_file).load()

    assert config.curl is True
    assert config.redact_headers is True


def test_invalid_boolean(monkeypatch, tmp_path: Path):
    _clear(monkeypatch)
    monkeypatch.setenv("NETWORK_LOGGER_VERBOSE", "sometimes")

    with pytest.raises(ConfigLoadError):
        EnvConfigLoader(env_path=tmp_path / ".env").load()
