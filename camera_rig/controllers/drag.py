from __future__ import annotations

from math import radians, tan
from typing import Callable

from camera_rig.core.mathutil import RIGHT, UP, Vec2, Vec3, add, rotate, scale
from camera_rig.input.edges import InputSnapshot
from camera_rig.rig.state import CursorKind, RigState


def drag_offset(rig: RigState, delta: Vec2, screen_size: tuple[int, int]) -> Vec3:
    """World-space translation for a pointer move of `delta` pixels.

    The view plane through the pivot is mapped onto the screen so the scene
    under the pointer follows it.
    """
    sw, sh = screen_size
    if rig.orthographic:
        height = 2.0 * rig.ortho_size
    else:
        height = 2.0 * rig.distance * tan(radians(rig.field_of_view) * 0.5)
    width = sw * height / sh

    right = rotate(rig.rotation, RIGHT)
    up = rotate(rig.rotation, UP)
    return add(
        scale(right, -width / sw * delta[0]),
        scale(up, -height / sh * delta[1]),
    )


class DragController:
    def __init__(self, set_cursor: Callable[[int], None]):
        self._set_cursor = set_cursor
        self.dragging = False
        self.last_pointer: Vec2 = (0.0, 0.0)

    def update(self, snap: InputSnapshot, rig: RigState) -> None:
        if snap.middle_mouse.held:
            if not self.dragging:
                self.dragging = True
                self._set_cursor(CursorKind.HAND)
                self.last_pointer = snap.pointer
            else:
                delta = (
                    snap.pointer[0] - self.last_pointer[0],
                    snap.pointer[1] - self.last_pointer[1],
                )
                rig.position = add(rig.position, drag_offset(rig, delta, snap.screen_size))
                self.last_pointer = snap.pointer
                rig.reset_pivot()

        if snap.middle_mouse.up:
            self.dragging = False
            self._set_cursor(CursorKind.DEFAULT)
