from __future__ import annotations

from infrastructure.logging.buffer_emitter import BufferEmitter
from infrastructure.logging.composite_emitter import CompositeEmitter


def test_composite_emitter_fans_out() -> None:
    first = BufferEmitter()
    second = BufferEmitter()
    seen = []

    CompositeEmitter([first, second, lambda label, values: seen.append(label)])("Request", ["Request: (invalid request)"])

    assert first.lines() == ["Request: (invalid request)"]
    assert second.lines() == ["Request: (invalid request)"]
    assert seen == ["Request"]


def test_failing_emitter_does_not_block_later_emitters() -> None:
    def broken(label, values) -> None:
        raise OSError("disk full")

    before = BufferEmitter()
    after = BufferEmitter()

    CompositeEmitter([before, broken, after])("Response", ["Response: 200"])

    assert before.lines() == ["Response: 200"]
    assert after.lines() == ["Response: 200"]
