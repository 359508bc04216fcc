"""Gesture engine: the composition root of the pan/zoom core.

Every entry point runs to completion before returning, so a single input
event always leaves the viewport in a consistent state.  Events that cannot
apply (unknown contacts, no image yet, zero-sized geometry) are absorbed as
no-ops rather than raised.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .. import config
from .geometry import Frame, Size
from .pointer_tracker import GestureDelta, PointerSessionTracker
from .signal import Signal
from .viewport import ViewportState
from .zoom import ZoomController

LOGGER = logging.getLogger(__name__)


class GestureState(Enum):
    IDLE = "idle"
    PANNING = "panning"
    PINCHING = "pinching"


class ResizePolicy(Enum):
    """How a surface resize affects an image that is already laid out."""

    RESCALE = "rescale"
    RECENTER = "recenter"


class GestureEngine:
    """Dispatch pointer, wheel, resize and image events onto a viewport.

    Signals
    -------
    frame_changed():
        The rectangle returned by :meth:`current_frame` changed.
    zoom_changed(float):
        The zoom factor changed.
    state_changed(GestureState):
        The number of active contacts moved the state machine.
    """

    def __init__(
        self,
        *,
        zoom_in_step: float = config.WHEEL_ZOOM_IN_STEP,
        zoom_out_step: float = config.WHEEL_ZOOM_OUT_STEP,
        margin: float = config.CLAMP_MARGIN_PX,
        min_zoom_slack: float = config.MIN_ZOOM_SLACK,
        max_zoom: float = config.MAX_ZOOM,
        resize_policy: ResizePolicy = ResizePolicy(config.RESIZE_POLICY),
        pan_follows_pointer: bool = config.PAN_FOLLOWS_POINTER,
    ) -> None:
        self._tracker = PointerSessionTracker()
        self._zoom = ZoomController(zoom_in_step=zoom_in_step, zoom_out_step=zoom_out_step)
        self._viewport = ViewportState(
            self._zoom,
            margin=margin,
            min_zoom_slack=min_zoom_slack,
            max_zoom=max_zoom,
        )
        self._resize_policy = resize_policy
        self._pan_sign = -1.0 if pan_follows_pointer else 1.0

        self._source = Size(0, 0)
        self._surface = Size(0, 0)
        # Set while a loaded image still waits for its first layout.
        self._needs_recenter = False
        self._state = GestureState.IDLE

        self.frame_changed = Signal()
        self.zoom_changed = Signal()
        self.state_changed = Signal()

    @classmethod
    def from_settings(cls, settings) -> "GestureEngine":
        """Build an engine from a :class:`~canvas_image.settings.ViewerSettings`."""
        return cls(
            zoom_in_step=settings.zoom_in_step,
            zoom_out_step=settings.zoom_out_step,
            margin=settings.clamp_margin,
            min_zoom_slack=settings.min_zoom_slack,
            max_zoom=settings.max_zoom,
            resize_policy=ResizePolicy(settings.resize_policy),
            pan_follows_pointer=settings.pan_follows_pointer,
        )

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def viewport(self) -> ViewportState:
        return self._viewport

    @property
    def tracker(self) -> PointerSessionTracker:
        return self._tracker

    @property
    def zoom_controller(self) -> ZoomController:
        return self._zoom

    @property
    def state(self) -> GestureState:
        return self._state

    @property
    def resize_policy(self) -> ResizePolicy:
        return self._resize_policy

    def has_image(self) -> bool:
        return not self._source.is_empty()

    def current_frame(self) -> Optional[Frame]:
        """Return the rectangles the renderer should blit this frame."""
        return self._viewport.current_frame()

    # ------------------------------------------------------------------
    # Contact events
    # ------------------------------------------------------------------
    def on_contact_start(self, contact_id: int, x: float, y: float) -> None:
        self._tracker.on_contact_start(contact_id, x, y)
        self._sync_state()

    def on_contact_move(self, contact_id: int, x: float, y: float) -> Optional[GestureDelta]:
        delta = self._tracker.on_contact_move(contact_id, x, y)
        if delta is None:
            return None

        before = self._viewport.snapshot()
        if delta.zoom_ratio is not None and delta.zoom_ratio != 1.0:
            self._viewport.zoom_around(delta.anchor_x, delta.anchor_y, delta.zoom_ratio)
        self._viewport.pan_by(self._pan_sign * delta.pan_dx, self._pan_sign * delta.pan_dy)
        self._publish_changes(before)
        return delta

    def on_contact_end(self, contact_id: int) -> None:
        if self._tracker.on_contact_end(contact_id):
            self._sync_state()

    def on_contact_cancel(self, contact_id: int) -> None:
        self.on_contact_end(contact_id)

    def on_contact_leave(self, contact_id: int) -> None:
        self.on_contact_end(contact_id)

    def cancel_all_contacts(self) -> None:
        """Drop every active contact, e.g. when the surface loses focus."""
        if self._tracker.contact_count:
            self._tracker.reset()
            self._sync_state()

    # ------------------------------------------------------------------
    # Wheel events
    # ------------------------------------------------------------------
    def on_wheel(self, delta_y: float, x: float, y: float) -> bool:
        """Zoom one wheel step around ``(x, y)``."""
        ratio = self._zoom.wheel_ratio(delta_y)
        if ratio == 1.0:
            return False
        before = self._viewport.snapshot()
        changed = self._viewport.zoom_around(x, y, ratio)
        self._publish_changes(before)
        return changed

    # ------------------------------------------------------------------
    # Surface and image lifecycle
    # ------------------------------------------------------------------
    def on_resize(self, width: float, height: float) -> None:
        previous = self._surface
        self._surface = Size(float(width), float(height))
        if self._surface == previous:
            return
        before = self._viewport.snapshot()
        if (
            self._needs_recenter
            or previous.is_empty()
            or self._resize_policy is ResizePolicy.RECENTER
        ):
            self._layout_image()
        else:
            self._viewport.rescale_for(self._surface)
        self._publish_changes(before)

    def on_image_loaded(self, width: float, height: float) -> None:
        """Adopt a freshly decoded image and fit it once to the surface."""
        LOGGER.info("Image ready: %sx%s", width, height)
        self._source = Size(float(width), float(height))
        self._needs_recenter = True
        before = self._viewport.snapshot()
        self._layout_image()
        self._publish_changes(before)

    def on_image_cleared(self) -> None:
        self._source = Size(0, 0)
        self._needs_recenter = False
        before = self._viewport.snapshot()
        self._viewport.clear()
        self._publish_changes(before)

    def on_image_failed(self, identifier: str, message: str) -> None:
        LOGGER.warning("Could not load image %s: %s", identifier, message)
        self.on_image_cleared()

    def reset_view(self) -> None:
        """Fit and centre the current image again."""
        before = self._viewport.snapshot()
        self._viewport.recenter_for(self._source, self._surface)
        self._publish_changes(before)

    # ------------------------------------------------------------------
    def _layout_image(self) -> None:
        if self._viewport.recenter_for(self._source, self._surface):
            self._needs_recenter = False
            LOGGER.debug(
                "Recentered at zoom %.4f (limits %.4f..%.4f)",
                self._viewport.zoom_factor,
                self._viewport.min_zoom,
                self._viewport.max_zoom,
            )

    def _publish_changes(self, before) -> None:
        after = self._viewport.snapshot()
        if after == before:
            return
        if after.zoom_factor != before.zoom_factor:
            self.zoom_changed.emit(after.zoom_factor)
        self.frame_changed.emit()

    def _sync_state(self) -> None:
        count = self._tracker.contact_count
        if count == 0:
            state = GestureState.IDLE
        elif count == 2:
            state = GestureState.PINCHING
        else:
            state = GestureState.PANNING
        if state is not self._state:
            LOGGER.debug("Gesture state %s -> %s", self._state.value, state.value)
            self._state = state
            self.state_changed.emit(state)
