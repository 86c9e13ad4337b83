from __future__ import annotations

from loguru import logger

from camera_rig.core.config import RigConfig
from camera_rig.core.mathutil import (
    EPSILON,
    look_rotation,
    lerp_vec,
    normalize,
    scale,
    sub,
)
from camera_rig.input.edges import InputSnapshot
from camera_rig.rig.picking import screen_point_to_ray
from camera_rig.rig.state import CollisionBackend, FocusState, RigState, SelectionState


class FocusController:
    """Left click selects, the focus key flies the camera to the selection."""

    def __init__(self, config: RigConfig, collisions: CollisionBackend):
        self.config = config
        self.collisions = collisions
        self.selection = SelectionState()
        self.state = FocusState()

    def select(self, snap: InputSnapshot, rig: RigState) -> None:
        origin, direction = screen_point_to_ray(rig, snap.pointer, snap.screen_size)
        hit = self.collisions.pick(
            origin, direction, self.config.raycast_max_distance, self.config.pick_layer_mask
        )
        if hit is not None:
            if hit.obj is not self.selection.selected:
                logger.debug(f"Selected {hit.obj!r} at {hit.distance:.2f}")
            self.selection.selected = hit.obj
        else:
            self.selection.selected = None
            rig.reset_pivot()

    def start(self, rig: RigState) -> None:
        target = self.selection.selected
        if target is None:
            return
        # Overwrites whatever distance zoom left behind.
        rig.distance = self.config.focus_distance
        rig.rebuild_projection()
        target_forward = normalize(sub(target.position, rig.position))
        self.state = FocusState(
            active=True,
            t=0.0,
            initial_forward=rig.forward,
            target_forward=target_forward,
            initial_position=rig.position,
            target_position=sub(target.position, scale(target_forward, rig.distance)),
        )
        logger.debug(f"Focusing on {target!r}")

    def update(self, snap: InputSnapshot, rig: RigState) -> None:
        if snap.left_mouse.down:
            self.select(snap, rig)

        if self.selection.selected is not None and snap.focus_key.down:
            self.start(rig)

        f = self.state
        if not f.active:
            return

        f.t = min(1.0, f.t + snap.dt * self.config.focus_speed)
        # Linear blend can shorten the vector; look_rotation normalises it.
        forward = lerp_vec(f.initial_forward, f.target_forward, f.t)
        rig.rotation = look_rotation(forward)
        rig.position = lerp_vec(f.initial_position, f.target_position, f.t)

        if f.t >= 1.0 - EPSILON:
            f.t = 1.0
            f.active = False
            rig.rotation = look_rotation(f.target_forward)
            rig.position = f.target_position
            if self.selection.selected is not None:
                rig.pivot = self.selection.selected.position
            logger.debug("Focus finished")
