"""Default configuration values for canvas-image."""

from __future__ import annotations

from typing import Final

# Wheel input is mapped to a fixed multiplicative step regardless of the
# magnitude reported by the device.  Scrolling up zooms in.
WHEEL_ZOOM_IN_STEP: Final[float] = 1.1
WHEEL_ZOOM_OUT_STEP: Final[float] = 0.9

# The smallest zoom is the fit-to-surface scale reduced by this factor so the
# fitted image is framed by a little empty space.
MIN_ZOOM_SLACK: Final[float] = 0.9
MAX_ZOOM: Final[float] = 10.0

# Minimum number of display pixels of the image that must stay inside the
# surface on each axis after a pan.
CLAMP_MARGIN_PX: Final[float] = 10.0

# ``rescale`` keeps the user's pan across window resizes, ``recenter`` fits
# the image again every time the surface changes size.
RESIZE_POLICY: Final[str] = "rescale"

# Drags move the image against the pointer travel, like scrollbars.  When
# true the image follows the dragging pointer instead.
PAN_FOLLOWS_POINTER: Final[bool] = False

# ~60 Hz display refresh for the render loop.
RENDER_INTERVAL_MS: Final[int] = 16

# Pixel art and scans are easier to inspect without interpolation.
SMOOTH_SCALING: Final[bool] = False

# Contact id used for the mouse, which only ever provides a single pointer.
MOUSE_CONTACT_ID: Final[int] = 0
