"""Minimal observer used by the engine to announce viewport changes.

The engine lives on a single cooperative event loop, so unlike Qt signals
these never cross threads: ``emit`` calls every handler synchronously, in
connection order.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class Signal:
    """Pure Python signal that does not depend on Qt.

    Exceptions raised by individual handlers are caught and logged so that one
    failing subscriber cannot interrupt a gesture half way through.
    """

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable[..., Any]) -> None:
        self._handlers.remove(handler)

    def emit(self, *args: Any) -> None:
        for handler in list(self._handlers):
            try:
                handler(*args)
            except Exception:
                _logger.exception("Signal handler %r failed", handler)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)
