from __future__ import annotations

from math import radians, tan

from camera_rig.core.mathutil import FORWARD, RIGHT, UP, Vec2, Vec3, add, normalize, rotate, scale
from camera_rig.rig.state import RigState


def screen_to_ndc(pointer: Vec2, screen_size: tuple[int, int]) -> Vec2:
    sw, sh = screen_size
    return (2.0 * pointer[0] / sw - 1.0, 2.0 * pointer[1] / sh - 1.0)


def screen_point_to_ray(
    rig: RigState, pointer: Vec2, screen_size: tuple[int, int]
) -> tuple[Vec3, Vec3]:
    """(origin, unit direction) of the ray under a screen pixel (origin bottom-left)."""
    nx, ny = screen_to_ndc(pointer, screen_size)
    right = rotate(rig.rotation, RIGHT)
    up = rotate(rig.rotation, UP)
    forward = rotate(rig.rotation, FORWARD)

    if rig.orthographic:
        offset = add(
            scale(right, nx * rig.ortho_size * rig.aspect),
            scale(up, ny * rig.ortho_size),
        )
        return add(rig.position, offset), forward

    t = tan(radians(rig.field_of_view) * 0.5)
    local = normalize((nx * t * rig.aspect, ny * t, 1.0))
    return rig.position, normalize(rotate(rig.rotation, local))
