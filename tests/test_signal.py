"""Tests for the Qt-free Signal used by the engine."""

import logging

import pytest

from canvas_image.core.signal import Signal


class TestSignal:
    def test_connect_and_emit(self):
        sig = Signal()
        received = []
        sig.connect(lambda v: received.append(v))

        sig.emit(42)

        assert received == [42]

    def test_duplicate_connect_is_ignored(self):
        sig = Signal()
        received = []
        handler = received.append
        sig.connect(handler)
        sig.connect(handler)

        sig.emit("x")

        assert received == ["x"]
        assert sig.handler_count == 1

    def test_disconnect(self):
        sig = Signal()
        received = []
        handler = received.append
        sig.connect(handler)
        sig.emit(1)
        sig.disconnect(handler)
        sig.emit(2)

        assert received == [1]

    def test_disconnect_missing_raises(self):
        sig = Signal()
        with pytest.raises(ValueError):
            sig.disconnect(lambda: None)

    def test_failing_handler_does_not_block_others(self, caplog):
        sig = Signal()
        received = []

        def broken(_value):
            raise RuntimeError("boom")

        sig.connect(broken)
        sig.connect(received.append)

        with caplog.at_level(logging.ERROR):
            sig.emit(7)

        assert received == [7]
        assert "failed" in caplog.text
