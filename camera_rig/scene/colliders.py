from __future__ import annotations

from dataclasses import dataclass
from math import sqrt

from camera_rig.core.config import DEFAULT_LAYER
from camera_rig.core.mathutil import Vec3, dot, norm, normalize, sub
from camera_rig.rig.state import RayHit


@dataclass(eq=False)
class SphereCollider:
    name: str
    position: Vec3
    radius: float = 0.5
    layer: int = DEFAULT_LAYER

    def __repr__(self) -> str:
        return f"SphereCollider({self.name!r})"

    def intersect(self, origin: Vec3, direction: Vec3) -> float | None:
        # direction must be unit length.
        oc = sub(origin, self.position)
        b = dot(oc, direction)
        c = dot(oc, oc) - self.radius * self.radius
        disc = b * b - c
        if disc < 0.0:
            return None
        s = sqrt(disc)
        t = -b - s
        if t < 0.0:
            # Origin inside the sphere.
            t = -b + s
        if t < 0.0:
            return None
        return t


class ColliderWorld:
    """Sphere-only collision backend for picking and line casts."""

    def __init__(self, colliders: list[SphereCollider] | None = None):
        self.colliders: list[SphereCollider] = list(colliders or [])

    def add(self, collider: SphereCollider) -> SphereCollider:
        self.colliders.append(collider)
        return collider

    def pick(
        self, origin: Vec3, direction: Vec3, max_distance: float, layer_mask: int
    ) -> RayHit | None:
        d = normalize(direction)
        if d == (0.0, 0.0, 0.0):
            return None
        best: RayHit | None = None
        for col in self.colliders:
            if not col.layer & layer_mask:
                continue
            t = col.intersect(origin, d)
            if t is None or t > max_distance:
                continue
            if best is None or t < best.distance:
                best = RayHit(col, t)
        return best

    def linecast(self, start: Vec3, end: Vec3) -> RayHit | None:
        seg = sub(end, start)
        return self.pick(start, seg, norm(seg), ~0)
