#!/usr/bin/env python3
"""
Send one HTTP request through a logging session

Usage:
  python scripts/smoke_run.py <METHOD> <URL> [-H 'Key: Value']... [-d <body>]
                              [--verbose] [--curl] [--no-include-headers]
                              [--redact] [--config <file>] [--log-level <level>]

Examples:
  python scripts/smoke_run.py GET https://api.github.com/zen --verbose
  python scripts/smoke_run.py POST https://httpbin.org/post -H 'Content-Type: application/json' -d '{"a": 1}' --curl
  python scripts/smoke_run.py GET https://api.github.com/zen --config network_logger.yaml
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Dict, List, Optional

import requests
from dotenv import load_dotenv

from application.config import NetworkLoggerConfig
from application.network_logger import NetworkLoggerPlugin
from application.ports.requests_client import LoggingSession
from infrastructure.config.base_loader import ConfigLoadError
from infrastructure.config.env_config_loader import EnvConfigLoader
from infrastructure.config.loader_registry import ConfigLoaderRegistry
from infrastructure.logging.console_emitter import ConsoleEmitter
from infrastructure.logging.log_setup import setup_console_logging

DEFAULT_TIMEOUT_SEC = 20


def _parse_headers(raw_headers: List[str]) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    for raw in raw_headers:
        key, sep, value = raw.partition(":")
        if not sep or not key.strip():
            raise ValueError(f"Invalid header (expected 'Key: Value'): {raw}")
        headers[key.strip()] = value.strip()
    return headers


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a request and log it")
    parser.add_argument("method", help="HTTP method")
    parser.add_argument("url", help="Absolute request URL")
    parser.add_argument("-H", "--header", action="append", default=[], help="Header as 'Key: Value'")
    parser.add_argument("-d", "--data", help="Request body")
    parser.add_argument("--verbose", action="store_true", default=None, help="Multi-line output")
    parser.add_argument("--curl", action="store_true", default=None, help="Log requests as curl commands")
    parser.add_argument(
        "--no-include-headers",
        dest="curl_include_headers",
        action="store_false",
        default=None,
        help="Leave -i out of curl commands",
    )
    parser.add_argument("--redact", dest="redact_headers", action="store_true", default=None)
    parser.add_argument("--config", help="YAML or JSON config file")
    parser.add_argument("--timeout-sec", type=int, default=DEFAULT_TIMEOUT_SEC)
    parser.add_argument("--log-level", default="WARNING")
    return parser


def _load_config(args: argparse.Namespace) -> NetworkLoggerConfig:
    output = ConsoleEmitter()
    if args.config:
        loader = ConfigLoaderRegistry().get_loader(args.config)
        config = loader.load_from_file(args.config, output=output)
    else:
        config = EnvConfigLoader().load(output=output)

    overrides = {
        key: getattr(args, key)
        for key in ("verbose", "curl", "curl_include_headers", "redact_headers")
        if getattr(args, key) is not None
    }
    return replace(config, **overrides)


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    args = _build_parser().parse_args(argv)
    setup_console_logging(level=args.log_level)

    try:
        headers = _parse_headers(args.header)
        config = _load_config(args)
    except (ValueError, ConfigLoadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    session = LoggingSession(NetworkLoggerPlugin(config))
    try:
        resp = session.request(
            method=args.method.upper(),
            url=args.url,
            headers=headers,
            data=args.data.encode("utf-8") if args.data is not None else None,
            timeout=args.timeout_sec,
        )
    except requests.RequestException as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        session.close()

    print(f"Status: {resp.status_code}")
    sys.exit(0)


if __name__ == "__main__":
    main()
