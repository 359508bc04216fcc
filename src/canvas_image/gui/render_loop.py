"""Timer driven repaint scheduling."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, QTimer
from PySide6.QtWidgets import QWidget

from .. import config


class RenderLoop(QObject):
    """Repaint *surface* at most once per tick, and only when asked to.

    Gesture handlers may change the viewport many times between two display
    refreshes; :meth:`request_frame` only raises a flag and the next tick
    turns it into a single ``update()`` call.
    """

    def __init__(
        self,
        surface: QWidget,
        *,
        interval_ms: int = config.RENDER_INTERVAL_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._surface = surface
        self._dirty = False
        self._timer = QTimer(self)
        self._timer.setInterval(int(interval_ms))
        self._timer.timeout.connect(self.tick)

    def start(self) -> None:
        self._dirty = True
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def is_running(self) -> bool:
        return self._timer.isActive()

    def interval(self) -> int:
        return self._timer.interval()

    def request_frame(self) -> None:
        self._dirty = True

    def has_pending_frame(self) -> bool:
        return self._dirty

    def tick(self) -> bool:
        """Flush a pending frame; return ``True`` if a repaint was scheduled."""
        if not self._dirty:
            return False
        self._dirty = False
        self._surface.update()
        return True


__all__ = ["RenderLoop"]
