from __future__ import annotations

from camera_rig.core.mathutil import EPSILON


class ViewMode:
    ORTHOGRAPHIC = 0
    PERSPECTIVE = 1


VIEW_MODE_NAMES = {
    ViewMode.ORTHOGRAPHIC: "orthographic",
    ViewMode.PERSPECTIVE: "perspective",
}


class ViewModeBlend:
    """Stable(mode) or Blending(mode -> target, progress)."""

    def __init__(self, mode: int):
        self.mode = mode
        self.target: int | None = None
        self.progress: float = 0.0

    @property
    def blending(self) -> bool:
        return self.target is not None

    def request(self, target: int) -> bool:
        if target not in VIEW_MODE_NAMES:
            raise ValueError(f"unknown view mode: {target!r}")
        if self.target is None and self.mode == target:
            return False
        self.target = target
        self.progress = 0.0
        return True

    def advance(self, dt: float, rate: float) -> bool:
        """Step the blend; True on the frame it completes."""
        if self.target is None:
            return False
        self.progress += dt * rate
        # Summed frame times land a rounding step short of 1.
        if self.progress >= 1.0 - EPSILON:
            self.progress = 1.0
            self.mode = self.target
            self.target = None
            return True
        return False
