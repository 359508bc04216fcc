"""Anchor-preserving zoom math."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .. import config
from .geometry import clamp

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from .viewport import ViewportState

_LOGGER = logging.getLogger(__name__)


def compute_fit_to_view_scale(
    source_size: tuple[float, float],
    view_width: float,
    view_height: float,
) -> float:
    """Return the scale that fits *source_size* inside the surface dimensions."""

    src_w, src_h = source_size
    if src_w <= 0 or src_h <= 0:
        return 1.0
    if view_width <= 0.0 or view_height <= 0.0:
        return 1.0
    scale = min(view_width / float(src_w), view_height / float(src_h))
    return 1.0 if scale <= 0.0 else scale


@dataclass(frozen=True)
class ZoomResult:
    """Zoom factor and the offset shift that keeps the anchor stationary."""

    zoom: float
    pan_dx: float
    pan_dy: float


class ZoomController:
    """Compute zoom steps around a fixed surface point.

    Parameters
    ----------
    zoom_in_step:
        Multiplier applied for a wheel notch that scrolls up.
    zoom_out_step:
        Multiplier applied for a wheel notch that scrolls down.
    """

    def __init__(
        self,
        *,
        zoom_in_step: float = config.WHEEL_ZOOM_IN_STEP,
        zoom_out_step: float = config.WHEEL_ZOOM_OUT_STEP,
    ) -> None:
        self._zoom_in_step = float(zoom_in_step)
        self._zoom_out_step = float(zoom_out_step)

    def wheel_ratio(self, delta_y: float) -> float:
        """Map a wheel delta onto a multiplicative zoom step.

        Negative deltas scroll up and zoom in.  A zero delta (pure horizontal
        scroll on some trackpads) leaves the zoom alone.
        """
        if delta_y < 0:
            return self._zoom_in_step
        if delta_y > 0:
            return self._zoom_out_step
        return 1.0

    def apply_zoom(
        self,
        current_zoom: float,
        ratio: float,
        anchor_x: float,
        anchor_y: float,
        viewport: "ViewportState",
    ) -> Optional[ZoomResult]:
        """Return the zoom for ``current_zoom * ratio`` anchored at the point.

        The image point under ``(anchor_x, anchor_y)`` keeps its surface
        position: its fractional position inside the displayed image is the
        same before and after, so the offset moves by that fraction of the
        growth in display size.  ``None`` means nothing should change.
        """
        current_width = viewport.display_width
        current_height = viewport.display_height
        if current_width <= 0.0 or current_height <= 0.0:
            _LOGGER.debug("Zoom skipped: displayed image has no area")
            return None
        if not math.isfinite(ratio) or ratio <= 0.0:
            _LOGGER.debug("Zoom skipped: invalid ratio %r", ratio)
            return None

        new_zoom = clamp(current_zoom * ratio, viewport.min_zoom, viewport.max_zoom)
        new_width = viewport.source_width * new_zoom
        new_height = viewport.source_height * new_zoom

        fraction_x = (anchor_x - viewport.offset_x) / current_width
        fraction_y = (anchor_y - viewport.offset_y) / current_height
        return ZoomResult(
            zoom=new_zoom,
            pan_dx=-(new_width - current_width) * fraction_x,
            pan_dy=-(new_height - current_height) * fraction_y,
        )
