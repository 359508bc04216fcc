"""Schema helpers for the viewer settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from .. import config

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "canvas-image/settings.schema.json",
    "type": "object",
    "required": ["schema", "zoom", "pan", "render"],
    "properties": {
        "schema": {"const": "canvas-image/settings@1"},
        "zoom": {
            "type": "object",
            "properties": {
                "wheel_in_step": {"type": "number", "exclusiveMinimum": 1},
                "wheel_out_step": {
                    "type": "number",
                    "exclusiveMinimum": 0,
                    "exclusiveMaximum": 1,
                },
                "min_slack": {"type": "number", "exclusiveMinimum": 0, "maximum": 1},
                "max": {"type": "number", "exclusiveMinimum": 0},
            },
            "additionalProperties": False,
        },
        "pan": {
            "type": "object",
            "properties": {
                "margin": {"type": "number", "minimum": 0},
                "follows_pointer": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
        "render": {
            "type": "object",
            "properties": {
                "interval_ms": {"type": "integer", "minimum": 1},
                "smooth_scaling": {"type": "boolean"},
                "resize_policy": {"type": "string", "enum": ["rescale", "recenter"]},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "canvas-image/settings@1",
    "zoom": {
        "wheel_in_step": config.WHEEL_ZOOM_IN_STEP,
        "wheel_out_step": config.WHEEL_ZOOM_OUT_STEP,
        "min_slack": config.MIN_ZOOM_SLACK,
        "max": config.MAX_ZOOM,
    },
    "pan": {
        "margin": config.CLAMP_MARGIN_PX,
        "follows_pointer": config.PAN_FOLLOWS_POINTER,
    },
    "render": {
        "interval_ms": config.RENDER_INTERVAL_MS,
        "smooth_scaling": config.SMOOTH_SCALING,
        "resize_policy": config.RESIZE_POLICY,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* section by section over :data:`DEFAULT_SETTINGS` and validate."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            target = merged.get(key)
            if isinstance(target, dict) and isinstance(value, dict):
                target.update(value)
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults"]
