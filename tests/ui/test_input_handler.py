"""Tests for translating Qt input events into engine calls."""

from unittest.mock import Mock

import pytest
from PySide6.QtCore import QPoint, QPointF, Qt
from PySide6.QtGui import QEventPoint

from canvas_image.config import MOUSE_CONTACT_ID
from canvas_image.gui.input_handler import InputEventHandler, touch_contact_id


@pytest.fixture
def engine():
    return Mock()


@pytest.fixture
def handler(engine):
    return InputEventHandler(engine)


def _mouse_event(x, y, button=Qt.MouseButton.LeftButton):
    event = Mock()
    event.button.return_value = button
    event.position.return_value = QPointF(x, y)
    return event


def _touch_point(point_id, x, y, state):
    point = Mock()
    point.id.return_value = point_id
    point.position.return_value = QPointF(x, y)
    point.state.return_value = state
    return point


def test_left_press_starts_mouse_contact(handler, engine):
    assert handler.handle_mouse_press(_mouse_event(10, 20)) is True

    engine.on_contact_start.assert_called_once_with(MOUSE_CONTACT_ID, 10.0, 20.0)


def test_other_buttons_are_not_consumed(handler, engine):
    assert handler.handle_mouse_press(_mouse_event(10, 20, Qt.MouseButton.RightButton)) is False
    assert handler.handle_mouse_release(_mouse_event(10, 20, Qt.MouseButton.RightButton)) is False

    engine.on_contact_start.assert_not_called()
    engine.on_contact_end.assert_not_called()


def test_mouse_move_reports_whether_engine_tracked_it(handler, engine):
    engine.on_contact_move.return_value = None
    assert handler.handle_mouse_move(_mouse_event(1, 2)) is False

    engine.on_contact_move.return_value = object()
    assert handler.handle_mouse_move(_mouse_event(3, 4)) is True
    engine.on_contact_move.assert_called_with(MOUSE_CONTACT_ID, 3.0, 4.0)


def test_release_and_leave_end_mouse_contact(handler, engine):
    handler.handle_mouse_release(_mouse_event(0, 0))
    handler.handle_leave()

    engine.on_contact_end.assert_called_once_with(MOUSE_CONTACT_ID)
    engine.on_contact_leave.assert_called_once_with(MOUSE_CONTACT_ID)


def test_touch_points_are_dispatched_by_state(handler, engine):
    event = Mock()
    event.points.return_value = [
        _touch_point(0, 5, 5, QEventPoint.State.Pressed),
        _touch_point(1, 15, 5, QEventPoint.State.Updated),
        _touch_point(2, 25, 5, QEventPoint.State.Released),
        _touch_point(3, 35, 5, QEventPoint.State.Stationary),
    ]

    assert handler.handle_touch(event) is True

    engine.on_contact_start.assert_called_once_with(touch_contact_id(0), 5.0, 5.0)
    engine.on_contact_move.assert_called_once_with(touch_contact_id(1), 15.0, 5.0)
    engine.on_contact_end.assert_called_once_with(touch_contact_id(2))


def test_touch_ids_never_collide_with_mouse():
    assert touch_contact_id(0) != MOUSE_CONTACT_ID


def test_touch_cancel_drops_all_contacts(handler, engine):
    handler.handle_touch_cancel()

    engine.cancel_all_contacts.assert_called_once_with()


def test_wheel_sign_is_inverted_for_engine(handler, engine):
    event = Mock()
    event.angleDelta.return_value = QPoint(0, 120)
    event.position.return_value = QPointF(40, 50)

    assert handler.handle_wheel(event) is True

    engine.on_wheel.assert_called_once_with(-120.0, 40.0, 50.0)


def test_horizontal_only_wheel_is_ignored(handler, engine):
    event = Mock()
    event.angleDelta.return_value = QPoint(120, 0)

    assert handler.handle_wheel(event) is False
    engine.on_wheel.assert_not_called()
