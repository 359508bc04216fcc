"""
Input event routing for the canvas image widget.

Qt delivers mouse, touch and wheel input through different event classes.
This module normalises all of them into the contact/wheel vocabulary of
:class:`~canvas_image.core.engine.GestureEngine`: every pointer becomes a
contact with a stable id and widget-local coordinates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtGui import QEventPoint, QMouseEvent, QTouchEvent, QWheelEvent

from .. import config

if TYPE_CHECKING:
    from ..core.engine import GestureEngine

# Touch point ids start at zero just like the mouse contact; shifting them
# keeps the two id spaces apart.
_TOUCH_ID_OFFSET = config.MOUSE_CONTACT_ID + 1


def touch_contact_id(point_id: int) -> int:
    return int(point_id) + _TOUCH_ID_OFFSET


class InputEventHandler:
    """Translate Qt input events into engine calls.

    Parameters
    ----------
    engine:
        Engine receiving the normalised events.
    """

    def __init__(self, engine: GestureEngine) -> None:
        self._engine = engine

    # ------------------------------------------------------------------
    # Mouse
    # ------------------------------------------------------------------
    def handle_mouse_press(self, event: QMouseEvent) -> bool:
        """Start a drag with the left button.

        Returns
        -------
        bool
            True if the event was consumed.
        """
        if event.button() != Qt.MouseButton.LeftButton:
            return False
        pos = event.position()
        self._engine.on_contact_start(config.MOUSE_CONTACT_ID, pos.x(), pos.y())
        return True

    def handle_mouse_move(self, event: QMouseEvent) -> bool:
        pos = event.position()
        return self._engine.on_contact_move(config.MOUSE_CONTACT_ID, pos.x(), pos.y()) is not None

    def handle_mouse_release(self, event: QMouseEvent) -> bool:
        if event.button() != Qt.MouseButton.LeftButton:
            return False
        self._engine.on_contact_end(config.MOUSE_CONTACT_ID)
        return True

    def handle_leave(self) -> None:
        """The pointer left the surface; treat the mouse contact as ended."""
        self._engine.on_contact_leave(config.MOUSE_CONTACT_ID)

    # ------------------------------------------------------------------
    # Touch
    # ------------------------------------------------------------------
    def handle_touch(self, event: QTouchEvent) -> bool:
        """Dispatch every changed touch point of *event*."""
        for point in event.points():
            self._dispatch_touch_point(point)
        return True

    def handle_touch_cancel(self) -> None:
        self._engine.cancel_all_contacts()

    def _dispatch_touch_point(self, point: QEventPoint) -> None:
        contact_id = touch_contact_id(point.id())
        pos = point.position()
        state = point.state()
        if state == QEventPoint.State.Pressed:
            self._engine.on_contact_start(contact_id, pos.x(), pos.y())
        elif state == QEventPoint.State.Updated:
            self._engine.on_contact_move(contact_id, pos.x(), pos.y())
        elif state == QEventPoint.State.Released:
            self._engine.on_contact_end(contact_id)

    # ------------------------------------------------------------------
    # Wheel
    # ------------------------------------------------------------------
    def handle_wheel(self, event: QWheelEvent) -> bool:
        """Zoom around the cursor.

        Qt reports a positive ``angleDelta().y()`` when the wheel rotates away
        from the user; the engine expects the opposite sign (negative means
        scroll up), so the value is negated.
        """
        angle = event.angleDelta().y()
        if angle == 0:
            return False
        pos = event.position()
        self._engine.on_wheel(-float(angle), pos.x(), pos.y())
        return True


__all__ = ["InputEventHandler", "touch_contact_id"]
