from __future__ import annotations

from datetime import datetime

from infrastructure.logging.console_emitter import ConsoleEmitter


def _clock() -> datetime:
    return datetime(2024, 3, 9, 14, 5, 7)


def test_console_emitter_prefixes_each_value(capsys) -> None:
    emitter = ConsoleEmitter(clock=_clock)

    emitter("Request", ["Request: https://api.github.com/zen", "HTTP Request Method: GET"])

    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "NetworkLogger: [09/03/2024 14:05:07] Request: https://api.github.com/zen",
        "NetworkLogger: [09/03/2024 14:05:07] HTTP Request Method: GET",
    ]


def test_console_emitter_custom_logger_id(capsys) -> None:
    emitter = ConsoleEmitter(logger_id="ApiLogger", clock=_clock)

    emitter.emit("Response", ["Response: 200 https://api.github.com/zen"])

    assert capsys.readouterr().out.startswith("ApiLogger: [09/03/2024 14:05:07] Response: 200")
