from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from loguru import logger

# Anything closer makes the fov/size coupling divide by ~zero.
MIN_DISTANCE_EPSILON = 0.0001

DEFAULT_LAYER = 1 << 0


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class RigConfig:
    # Zoom.
    zoom_speed: float = 10.0
    min_distance: float = 1.0
    max_distance: float = 100.0
    initial_distance: float = 20.0

    # Orbit. Pointer pixels are scaled to axis units before sensitivity.
    rotate_sensitivity: float = 5.0
    pointer_axis_scale: float = 0.1

    # Magnifier.
    fov_sensitivity: float = 0.05
    min_fov: float = 20.0
    max_fov: float = 135.0
    min_ortho_size: float = 1.0
    max_ortho_size: float = 8.0
    magnifier_size_step: float = 0.01

    # Focus and picking.
    focus_speed: float = 3.0
    focus_distance: float = 3.0
    raycast_max_distance: float = 1000.0
    pick_layer_mask: int = DEFAULT_LAYER
    linecast_probe_distance: float = 1000.0

    # View mode cross-fade, progress per second.
    blend_rate: float = 2.0

    def __post_init__(self) -> None:
        if self.min_distance < MIN_DISTANCE_EPSILON:
            raise ConfigError(
                f"min_distance must be >= {MIN_DISTANCE_EPSILON}, got {self.min_distance}"
            )
        if self.max_distance < self.min_distance:
            raise ConfigError(
                f"max_distance ({self.max_distance}) is below min_distance ({self.min_distance})"
            )
        if not 0.0 < self.min_fov <= self.max_fov < 180.0:
            raise ConfigError(
                f"fov range must satisfy 0 < min_fov <= max_fov < 180, "
                f"got [{self.min_fov}, {self.max_fov}]"
            )
        if not 0.0 < self.min_ortho_size <= self.max_ortho_size:
            raise ConfigError(
                f"ortho size range must satisfy 0 < min <= max, "
                f"got [{self.min_ortho_size}, {self.max_ortho_size}]"
            )
        for name in (
            "zoom_speed",
            "rotate_sensitivity",
            "pointer_axis_scale",
            "fov_sensitivity",
            "magnifier_size_step",
            "focus_speed",
            "focus_distance",
            "raycast_max_distance",
            "linecast_probe_distance",
            "blend_rate",
        ):
            if getattr(self, name) <= 0.0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> RigConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(path: str | Path) -> RigConfig:
    """Load a RigConfig from a JSON object; missing keys keep their defaults."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path}: invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")

    config = RigConfig.from_mapping(data)
    logger.debug(f"Loaded rig config from {path}")
    return config
