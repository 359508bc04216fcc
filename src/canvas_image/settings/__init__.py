"""Viewer settings: schema, defaults and loading."""

from __future__ import annotations

from .manager import ViewerSettings, default_settings_path, load_settings
from .schema import DEFAULT_SETTINGS, SETTINGS_SCHEMA, merge_with_defaults

__all__ = [
    "DEFAULT_SETTINGS",
    "SETTINGS_SCHEMA",
    "ViewerSettings",
    "default_settings_path",
    "load_settings",
    "merge_with_defaults",
]
