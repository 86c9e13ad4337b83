from __future__ import annotations

from dataclasses import dataclass

from camera_rig.core.mathutil import (
    FORWARD,
    IDENTITY_QUAT,
    RIGHT,
    UP,
    Quat,
    Vec3,
    dot,
    rotate,
    sub,
)
from camera_rig.projection.matrices import (
    Mat4,
    build_orthographic,
    build_perspective,
    transform,
)


@dataclass(frozen=True)
class CameraFrame:
    w: int
    h: int
    near: float
    cam_pos: Vec3
    right: Vec3
    up: Vec3
    forward: Vec3
    proj: Mat4

    def project(self, p: Vec3) -> tuple[float, float, float] | None:
        """Pixel position (top-left origin) and view depth, or None if clipped."""
        d = sub(p, self.cam_pos)
        cx = dot(d, self.right)
        cy = dot(d, self.up)
        cz = dot(d, self.forward)

        if cz <= self.near:
            return None

        # View space looks down -Z.
        clip = transform(self.proj, (cx, cy, -cz, 1.0))
        w = clip[3]
        if w <= 0.0:
            return None

        sx = (self.w * 0.5) * (1.0 + clip[0] / w)
        sy = (self.h * 0.5) * (1.0 - clip[1] / w)
        return (sx, sy, cz)


@dataclass
class ViewCamera:
    """Minimal host camera the rig reads at startup and writes every tick."""

    position: Vec3 = (0.0, 5.0, -20.0)
    rotation: Quat = IDENTITY_QUAT
    field_of_view: float = 60.0
    ortho_size: float = 5.0
    orthographic: bool = False
    aspect: float = 16.0 / 9.0
    near: float = 0.3
    far: float = 1000.0
    projection_matrix: Mat4 | None = None

    def applied_projection(self) -> Mat4:
        if self.projection_matrix is not None:
            return self.projection_matrix
        if self.orthographic:
            return build_orthographic(self.ortho_size, self.aspect, self.near, self.far)
        return build_perspective(self.field_of_view, self.aspect, self.near, self.far)

    def frame(self, viewport: tuple[int, int]) -> CameraFrame:
        w, h = viewport
        return CameraFrame(
            w=w,
            h=h,
            near=self.near,
            cam_pos=self.position,
            right=rotate(self.rotation, RIGHT),
            up=rotate(self.rotation, UP),
            forward=rotate(self.rotation, FORWARD),
            proj=self.applied_projection(),
        )
