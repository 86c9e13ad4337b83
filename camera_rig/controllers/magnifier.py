from __future__ import annotations

from typing import Callable

from camera_rig.core.config import RigConfig
from camera_rig.core.mathutil import Vec2, clamp
from camera_rig.input.edges import InputSnapshot
from camera_rig.rig.state import CursorKind, RigState

# The anchor uses the screen origin as "unset". A pointer sitting exactly on
# the origin therefore re-anchors every frame and produces no change.
UNSET_ANCHOR: Vec2 = (0.0, 0.0)


class MagnifierController:
    """Alt + right drag widens or narrows the view horizontally."""

    def __init__(self, config: RigConfig, set_cursor: Callable[[int], None]):
        self.config = config
        self._set_cursor = set_cursor
        self.anchor: Vec2 = UNSET_ANCHOR

    @staticmethod
    def is_active(snap: InputSnapshot) -> bool:
        return snap.any_alt_held and snap.right_mouse.held

    def update(self, snap: InputSnapshot, rig: RigState) -> None:
        c = self.config
        if self.is_active(snap):
            if self.anchor == UNSET_ANCHOR:
                self.anchor = snap.pointer
                self._set_cursor(CursorKind.MAGNIFIER)

            delta = self.anchor[0] - snap.pointer[0]
            if rig.orthographic:
                rig.ortho_size = clamp(
                    rig.ortho_size + delta * c.magnifier_size_step,
                    c.min_ortho_size,
                    c.max_ortho_size,
                )
                rig.couple_fov_to_size()
            else:
                rig.field_of_view = clamp(
                    rig.field_of_view + delta * c.fov_sensitivity, c.min_fov, c.max_fov
                )
                rig.couple_size_to_fov()

            # Frame-to-frame delta, not cumulative from the first anchor.
            self.anchor = snap.pointer

        if snap.right_mouse.up:
            self._set_cursor(CursorKind.DEFAULT)
            self.anchor = UNSET_ANCHOR
            rig.rebuild_projection()
