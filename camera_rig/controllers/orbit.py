from __future__ import annotations

from typing import Callable

from camera_rig.core.config import RigConfig
from camera_rig.core.mathutil import (
    FORWARD,
    add,
    clamp_angle,
    euler_to_quat,
    quat_to_euler,
    rotate,
    scale,
)
from camera_rig.input.edges import InputSnapshot
from camera_rig.rig.state import CursorKind, RigState

ANGLE_MIN = -365.0
ANGLE_MAX = 365.0

# name -> (yaw, pitch)
PRESET_VIEWS: dict[str, tuple[float, float]] = {
    "front": (180.0, 0.0),
    "back": (0.0, 0.0),
    "left": (90.0, 0.0),
    "right": (-90.0, 0.0),
    "top": (0.0, 90.0),
    "bottom": (0.0, -90.0),
}


def facing_backward(pitch: float) -> bool:
    return 90.0 < pitch < 270.0 or -270.0 < pitch < -90.0


def place_on_orbit(rig: RigState) -> None:
    rig.rotation = euler_to_quat(rig.pitch, rig.yaw, rig.roll)
    rig.position = add(rig.pivot, rotate(rig.rotation, scale(FORWARD, -rig.distance)))


class OrbitController:
    """Alt + left drag, or plain right drag, rotates the camera about the pivot."""

    def __init__(self, config: RigConfig, set_cursor: Callable[[int], None]):
        self.config = config
        self._set_cursor = set_cursor

    @staticmethod
    def is_active(snap: InputSnapshot) -> bool:
        # Alt + right drag belongs to the magnifier.
        return (
            (snap.left_alt.held and snap.left_mouse.held)
            or (snap.right_alt.held and snap.left_mouse.held)
            or (not snap.left_alt.held and not snap.right_alt.held and snap.right_mouse.held)
        )

    def capture_angles(self, rig: RigState) -> None:
        rig.pitch, rig.yaw, rig.roll = quat_to_euler(rig.rotation)

    def update(self, snap: InputSnapshot, rig: RigState) -> None:
        if snap.left_alt.down or snap.right_alt.down or snap.right_mouse.down:
            self._set_cursor(CursorKind.EYE)
            self.capture_angles(rig)

        if self.is_active(snap):
            k = self.config.pointer_axis_scale * self.config.rotate_sensitivity
            dx = snap.pointer_delta[0] * k
            dy = snap.pointer_delta[1] * k

            # Upside down: horizontal drag direction flips.
            if facing_backward(rig.pitch):
                rig.yaw -= dx
            else:
                rig.yaw += dx
            rig.pitch -= dy

            rig.yaw = clamp_angle(rig.yaw, ANGLE_MIN, ANGLE_MAX)
            rig.pitch = clamp_angle(rig.pitch, ANGLE_MIN, ANGLE_MAX)
            place_on_orbit(rig)

        if snap.left_alt.up or snap.right_alt.up or snap.right_mouse.up:
            self._set_cursor(CursorKind.DEFAULT)

    def show_preset(self, rig: RigState, name: str) -> None:
        try:
            yaw, pitch = PRESET_VIEWS[name]
        except KeyError:
            raise ValueError(
                f"unknown preset view {name!r}; expected one of {', '.join(PRESET_VIEWS)}"
            ) from None
        rig.yaw = yaw
        rig.pitch = pitch
        place_on_orbit(rig)
