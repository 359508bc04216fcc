"""Mutable pan/zoom state of the image inside the display surface.

Coordinates follow the surface convention: origin at the top-left corner,
``y`` growing downwards, all values in display pixels.  ``offset_x`` and
``offset_y`` locate the image's top-left corner on the surface and
``zoom_factor`` converts source pixels into display pixels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .. import config
from .geometry import Frame, Rect, Size, clamp
from .zoom import ZoomController, compute_fit_to_view_scale

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewportSnapshot:
    """Immutable copy of every field that defines a viewport."""

    offset_x: float
    offset_y: float
    zoom_factor: float
    min_zoom: float
    max_zoom: float
    source_size: Size
    surface_size: Size


class ViewportState:
    """Pan offset, zoom factor and the clamp policy that bounds them.

    Parameters
    ----------
    zoom_controller:
        Strategy used by :meth:`zoom_around`.  A default controller is built
        when omitted.
    margin:
        Number of display pixels of the image that must stay reachable inside
        the surface on each axis.
    min_zoom_slack:
        Factor applied to the fit scale to obtain ``min_zoom``.
    max_zoom:
        Absolute upper zoom limit.
    """

    def __init__(
        self,
        zoom_controller: Optional[ZoomController] = None,
        *,
        margin: float = config.CLAMP_MARGIN_PX,
        min_zoom_slack: float = config.MIN_ZOOM_SLACK,
        max_zoom: float = config.MAX_ZOOM,
    ) -> None:
        self._zoom_controller = zoom_controller or ZoomController()
        self._margin = float(margin)
        self._min_zoom_slack = float(min_zoom_slack)
        self._max_zoom_limit = float(max_zoom)

        self.offset_x: float = 0.0
        self.offset_y: float = 0.0
        self.zoom_factor: float = 1.0
        self.min_zoom: float = 1.0
        self.max_zoom: float = 1.0
        self._source = Size(0, 0)
        self._surface = Size(0, 0)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    @property
    def margin(self) -> float:
        return self._margin

    @property
    def source_width(self) -> float:
        return float(self._source.width)

    @property
    def source_height(self) -> float:
        return float(self._source.height)

    @property
    def surface_width(self) -> float:
        return float(self._surface.width)

    @property
    def surface_height(self) -> float:
        return float(self._surface.height)

    @property
    def display_width(self) -> float:
        return self.source_width * self.zoom_factor

    @property
    def display_height(self) -> float:
        return self.source_height * self.zoom_factor

    @property
    def has_image(self) -> bool:
        return not self._source.is_empty()

    @property
    def is_ready(self) -> bool:
        """Return ``True`` once both the image and the surface have an area."""
        return self.has_image and not self._surface.is_empty()

    def offset_bounds(self) -> tuple[float, float, float, float]:
        """Return ``(min_x, max_x, min_y, max_y)`` allowed for the offsets."""
        min_x, max_x = self._axis_bounds(self.display_width, self.surface_width)
        min_y, max_y = self._axis_bounds(self.display_height, self.surface_height)
        return min_x, max_x, min_y, max_y

    def snapshot(self) -> ViewportSnapshot:
        return ViewportSnapshot(
            offset_x=self.offset_x,
            offset_y=self.offset_y,
            zoom_factor=self.zoom_factor,
            min_zoom=self.min_zoom,
            max_zoom=self.max_zoom,
            source_size=self._source,
            surface_size=self._surface,
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def recenter_for(self, source_size: Size, surface_size: Size) -> bool:
        """Fit the image to the surface and centre it.

        Returns ``False`` and leaves the pan/zoom untouched when either size
        is degenerate; the sizes are still recorded so a later resize can
        complete the layout.
        """
        self._source = source_size
        self._surface = surface_size
        if not self.is_ready:
            _LOGGER.debug(
                "Recenter deferred: source=%s surface=%s", source_size, surface_size
            )
            return False

        self._update_zoom_limits()
        self.zoom_factor = self.min_zoom
        self.offset_x = self.surface_width / 2.0 - self.display_width / 2.0
        self.offset_y = self.surface_height / 2.0 - self.display_height / 2.0
        return True

    def rescale_for(self, surface_size: Size) -> bool:
        """Adapt the zoom limits to a new surface size without recentering."""
        self._surface = surface_size
        if not self.is_ready:
            return False
        self._update_zoom_limits()
        self.zoom_factor = clamp(self.zoom_factor, self.min_zoom, self.max_zoom)
        self._clamp_offsets()
        return True

    def pan_by(self, dx: float, dy: float) -> bool:
        """Translate the image by ``(dx, dy)`` display pixels, then clamp."""
        if not self.is_ready:
            return False
        before = (self.offset_x, self.offset_y)
        self.offset_x += dx
        self.offset_y += dy
        self._clamp_offsets()
        return (self.offset_x, self.offset_y) != before

    def zoom_around(self, anchor_x: float, anchor_y: float, ratio: float) -> bool:
        """Multiply the zoom by *ratio* keeping the anchor point stationary.

        The zoom factor and the matching pan correction are applied together
        so that no intermediate state is ever observable.
        """
        if not self.is_ready:
            return False
        result = self._zoom_controller.apply_zoom(
            self.zoom_factor, ratio, anchor_x, anchor_y, self
        )
        if result is None:
            return False
        before = self.snapshot()
        self.zoom_factor = result.zoom
        self.offset_x += result.pan_dx
        self.offset_y += result.pan_dy
        self._clamp_offsets()
        return self.snapshot() != before

    def clear(self) -> None:
        """Forget the current image; the surface size is kept."""
        self._source = Size(0, 0)
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_factor = 1.0
        self.min_zoom = 1.0
        self.max_zoom = 1.0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def current_frame(self) -> Optional[Frame]:
        """Return the rectangles to blit, or ``None`` if nothing can be drawn."""
        if not self.is_ready:
            return None
        return Frame(
            source_rect=Rect(0.0, 0.0, self.source_width, self.source_height),
            dest_rect=Rect(
                self.offset_x, self.offset_y, self.display_width, self.display_height
            ),
        )

    def surface_to_image(self, x: float, y: float) -> tuple[float, float]:
        """Convert surface coordinates into source image pixels."""
        if self.zoom_factor <= 0.0:
            return (0.0, 0.0)
        return (
            (x - self.offset_x) / self.zoom_factor,
            (y - self.offset_y) / self.zoom_factor,
        )

    def image_to_surface(self, x: float, y: float) -> tuple[float, float]:
        """Convert source image pixels into surface coordinates."""
        return (
            self.offset_x + x * self.zoom_factor,
            self.offset_y + y * self.zoom_factor,
        )

    # ------------------------------------------------------------------
    def _update_zoom_limits(self) -> None:
        fit = compute_fit_to_view_scale(
            (self.source_width, self.source_height),
            self.surface_width,
            self.surface_height,
        )
        self.min_zoom = fit * self._min_zoom_slack
        # Tiny images on huge surfaces fit above the absolute cap; the upper
        # bound then follows the lower one so the interval stays valid.
        self.max_zoom = max(self._max_zoom_limit, self.min_zoom)

    def _axis_bounds(self, displayed: float, surface: float) -> tuple[float, float]:
        low = -displayed + self._margin
        high = surface - self._margin
        if low > high:
            low = high = (low + high) / 2.0
        return low, high

    def _clamp_offsets(self) -> None:
        min_x, max_x, min_y, max_y = self.offset_bounds()
        self.offset_x = clamp(self.offset_x, min_x, max_x)
        self.offset_y = clamp(self.offset_y, min_y, max_y)
