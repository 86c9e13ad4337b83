from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple, Protocol

from camera_rig.core.mathutil import (
    FORWARD,
    IDENTITY_QUAT,
    Quat,
    Vec3,
    add,
    clamp,
    rotate,
    scale,
)
from camera_rig.projection.blend import ViewMode, ViewModeBlend
from camera_rig.projection.matrices import (
    IDENTITY,
    Mat4,
    build_orthographic,
    build_perspective,
    fov_from_size,
    size_from_fov,
)


class CursorKind:
    DEFAULT = 0
    HAND = 1
    EYE = 2
    MAGNIFIER = 3


CURSOR_KINDS = frozenset(
    (CursorKind.DEFAULT, CursorKind.HAND, CursorKind.EYE, CursorKind.MAGNIFIER)
)


class Pickable(Protocol):
    position: Vec3


class RayHit(NamedTuple):
    obj: Any
    distance: float


class CollisionBackend(Protocol):
    def pick(
        self, origin: Vec3, direction: Vec3, max_distance: float, layer_mask: int
    ) -> RayHit | None: ...

    def linecast(self, start: Vec3, end: Vec3) -> RayHit | None: ...


class CursorSink(Protocol):
    def set_cursor(self, kind: int) -> None: ...


class CameraSink(Protocol):
    """Host camera: read once at startup, written back after every tick."""

    position: Vec3
    rotation: Quat
    field_of_view: float
    ortho_size: float
    orthographic: bool
    aspect: float
    near: float
    far: float
    # None means the host builds the matrix natively from fov/size.
    projection_matrix: Mat4 | None


@dataclass
class RigState:
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Quat = IDENTITY_QUAT
    pivot: Vec3 = (0.0, 0.0, 0.0)
    distance: float = 20.0
    field_of_view: float = 60.0
    ortho_size: float = 5.0
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0
    aspect: float = 16.0 / 9.0
    near: float = 0.3
    far: float = 1000.0
    min_fov: float = 20.0
    max_fov: float = 135.0
    min_ortho_size: float = 1.0
    blend: ViewModeBlend = field(default_factory=lambda: ViewModeBlend(ViewMode.PERSPECTIVE))
    default_perspective: Mat4 = IDENTITY
    default_orthographic: Mat4 = IDENTITY
    projection_override: Mat4 | None = None

    @property
    def view_mode(self) -> int:
        return self.blend.mode

    @property
    def orthographic(self) -> bool:
        return self.blend.mode == ViewMode.ORTHOGRAPHIC

    @property
    def forward(self) -> Vec3:
        return rotate(self.rotation, FORWARD)

    def default_matrix_for(self, mode: int) -> Mat4:
        if mode == ViewMode.ORTHOGRAPHIC:
            return self.default_orthographic
        return self.default_perspective

    def native_matrix(self) -> Mat4:
        if self.orthographic:
            return build_orthographic(self.ortho_size, self.aspect, self.near, self.far)
        return build_perspective(self.field_of_view, self.aspect, self.near, self.far)

    @property
    def projection_matrix(self) -> Mat4:
        if self.projection_override is not None:
            return self.projection_override
        return self.native_matrix()

    def couple_fov_to_size(self) -> None:
        self.field_of_view = clamp(
            fov_from_size(self.ortho_size, self.distance), self.min_fov, self.max_fov
        )

    def couple_size_to_fov(self) -> None:
        # Only floored; the upper size bound belongs to the magnifier.
        self.ortho_size = max(self.min_ortho_size, size_from_fov(self.field_of_view, self.distance))

    def rebuild_projection(self) -> None:
        """Re-couple fov and ortho size to the current distance and regenerate
        both default matrices."""
        if self.orthographic:
            self.couple_fov_to_size()
        else:
            self.couple_size_to_fov()
        self.default_perspective = build_perspective(
            self.field_of_view, self.aspect, self.near, self.far
        )
        self.default_orthographic = build_orthographic(
            self.ortho_size, self.aspect, self.near, self.far
        )

    def reset_pivot(self) -> None:
        self.pivot = add(self.position, rotate(self.rotation, scale(FORWARD, self.distance)))


@dataclass
class SelectionState:
    selected: Pickable | None = None


@dataclass
class FocusState:
    active: bool = False
    t: float = 0.0
    initial_forward: Vec3 = FORWARD
    target_forward: Vec3 = FORWARD
    initial_position: Vec3 = (0.0, 0.0, 0.0)
    target_position: Vec3 = (0.0, 0.0, 0.0)
