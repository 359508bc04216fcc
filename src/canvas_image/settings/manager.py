"""Loading of the optional viewer settings file."""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import ValidationError

from ..errors import SettingsLoadError, SettingsValidationError
from .schema import merge_with_defaults

_LOGGER = logging.getLogger(__name__)


def default_settings_path() -> Path:
    """Return the default settings.json location for the current platform."""

    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "canvas-image" / "settings.json"
        return Path.home() / "AppData" / "Roaming" / "canvas-image" / "settings.json"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "canvas-image" / "settings.json"
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / "canvas-image" / "settings.json"
    return Path.home() / ".config" / "canvas-image" / "settings.json"


@dataclass(frozen=True)
class ViewerSettings:
    """Typed view of a validated settings document."""

    zoom_in_step: float
    zoom_out_step: float
    min_zoom_slack: float
    max_zoom: float
    clamp_margin: float
    pan_follows_pointer: bool
    render_interval_ms: int
    smooth_scaling: bool
    resize_policy: str

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "ViewerSettings":
        zoom = data["zoom"]
        pan = data["pan"]
        render = data["render"]
        return cls(
            zoom_in_step=float(zoom["wheel_in_step"]),
            zoom_out_step=float(zoom["wheel_out_step"]),
            min_zoom_slack=float(zoom["min_slack"]),
            max_zoom=float(zoom["max"]),
            clamp_margin=float(pan["margin"]),
            pan_follows_pointer=bool(pan["follows_pointer"]),
            render_interval_ms=int(render["interval_ms"]),
            smooth_scaling=bool(render["smooth_scaling"]),
            resize_policy=str(render["resize_policy"]),
        )

    @classmethod
    def defaults(cls) -> "ViewerSettings":
        return cls.from_mapping(merge_with_defaults(None))


def load_settings(path: Path | None = None) -> ViewerSettings:
    """Return the settings stored at *path*, or the defaults if it is missing.

    The file is only ever read; the viewer has no state worth persisting.
    """

    path = path or default_settings_path()
    payload = None
    if path.exists():
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SettingsLoadError(f"{path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise SettingsValidationError(f"{path}: top-level value must be an object")
    else:
        _LOGGER.debug("No settings file at %s, using defaults", path)
    try:
        merged = merge_with_defaults(payload)
    except ValidationError as exc:
        raise SettingsValidationError(f"{path}: {exc.message}") from exc
    return ViewerSettings.from_mapping(merged)
