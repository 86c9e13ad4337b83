from __future__ import annotations

from camera_rig.core.config import RigConfig
from camera_rig.core.mathutil import FORWARD, clamp, is_equal, rotate, scale, sub
from camera_rig.input.edges import InputSnapshot
from camera_rig.rig.state import RigState


class ZoomController:
    def __init__(self, config: RigConfig):
        self.config = config

    def update(self, snap: InputSnapshot, rig: RigState) -> None:
        wheel = snap.scroll
        if is_equal(wheel, 0.0):
            return

        # Wheel up (+) pulls the camera in.
        c = self.config
        rig.distance = clamp(rig.distance - wheel * c.zoom_speed, c.min_distance, c.max_distance)
        rig.position = sub(rig.pivot, rotate(rig.rotation, scale(FORWARD, rig.distance)))

        # A later mode switch must blend from values that match the new distance.
        rig.rebuild_projection()
