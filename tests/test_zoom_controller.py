"""Tests for the anchor-preserving zoom math."""

import math

import pytest

from canvas_image.core.geometry import Size
from canvas_image.core.viewport import ViewportState
from canvas_image.core.zoom import ZoomController, compute_fit_to_view_scale


@pytest.fixture
def viewport():
    state = ViewportState()
    state.recenter_for(Size(1000, 500), Size(500, 500))
    return state


def test_wheel_ratio_maps_direction_to_fixed_steps():
    controller = ZoomController()

    assert controller.wheel_ratio(-100) == pytest.approx(1.1)
    assert controller.wheel_ratio(-3) == pytest.approx(1.1)
    assert controller.wheel_ratio(120) == pytest.approx(0.9)
    assert controller.wheel_ratio(0) == 1.0


def test_wheel_steps_are_configurable():
    controller = ZoomController(zoom_in_step=1.25, zoom_out_step=0.8)

    assert controller.wheel_ratio(-1) == pytest.approx(1.25)
    assert controller.wheel_ratio(1) == pytest.approx(0.8)


def test_apply_zoom_keeps_anchor_image_point(viewport):
    controller = ZoomController()
    anchor = (250.0, 250.0)
    image_point = viewport.surface_to_image(*anchor)

    result = controller.apply_zoom(viewport.zoom_factor, 1.1, *anchor, viewport)

    assert result.zoom == pytest.approx(0.495)
    new_offset_x = viewport.offset_x + result.pan_dx
    new_offset_y = viewport.offset_y + result.pan_dy
    assert new_offset_x + image_point[0] * result.zoom == pytest.approx(anchor[0])
    assert new_offset_y + image_point[1] * result.zoom == pytest.approx(anchor[1])


@pytest.mark.parametrize("ratio", [0.01, 0.5, 0.9, 1.1, 3.0, 1000.0])
def test_apply_zoom_result_stays_within_limits(viewport, ratio):
    controller = ZoomController()

    result = controller.apply_zoom(viewport.zoom_factor, ratio, 100.0, 100.0, viewport)

    assert viewport.min_zoom <= result.zoom <= viewport.max_zoom


def test_apply_zoom_is_noop_without_displayed_area():
    controller = ZoomController()
    empty = ViewportState()

    assert controller.apply_zoom(1.0, 1.1, 10.0, 10.0, empty) is None


@pytest.mark.parametrize("ratio", [0.0, -1.0, math.nan, math.inf])
def test_apply_zoom_rejects_invalid_ratio(viewport, ratio):
    controller = ZoomController()

    assert controller.apply_zoom(viewport.zoom_factor, ratio, 10.0, 10.0, viewport) is None


def test_fit_to_view_scale_uses_limiting_dimension():
    assert compute_fit_to_view_scale((1000, 500), 500, 500) == pytest.approx(0.5)
    assert compute_fit_to_view_scale((200, 400), 800, 600) == pytest.approx(1.5)


def test_fit_to_view_scale_degenerate_input():
    assert compute_fit_to_view_scale((0, 500), 500, 500) == 1.0
    assert compute_fit_to_view_scale((100, 100), 0, 500) == 1.0
