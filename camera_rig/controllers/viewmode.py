from __future__ import annotations

from loguru import logger

from camera_rig.core.config import RigConfig
from camera_rig.input.edges import InputSnapshot
from camera_rig.projection.blend import VIEW_MODE_NAMES
from camera_rig.projection.matrices import lerp_matrix
from camera_rig.rig.state import RigState


class ViewModeController:
    """Cross-fades the applied projection matrix toward the requested mode."""

    def __init__(self, config: RigConfig):
        self.config = config

    def request(self, rig: RigState, mode: int) -> bool:
        started = rig.blend.request(mode)
        if started:
            logger.debug(
                f"View mode blend {VIEW_MODE_NAMES[rig.blend.mode]} -> {VIEW_MODE_NAMES[mode]}"
            )
        return started

    def update(self, snap: InputSnapshot, rig: RigState) -> None:
        blend = rig.blend
        if not blend.blending:
            return

        target = blend.target
        # Source is the matrix applied last frame, not the default of the old mode.
        current = rig.projection_matrix
        done = blend.advance(snap.dt, self.config.blend_rate)
        rig.projection_override = lerp_matrix(
            current, rig.default_matrix_for(target), blend.progress
        )

        if done:
            # Native fov/size path from here on.
            rig.projection_override = None
            logger.debug(f"View mode is now {VIEW_MODE_NAMES[rig.view_mode]}")
