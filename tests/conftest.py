from __future__ import annotations

import pytest

from camera_rig.core.config import RigConfig
from camera_rig.render.camera import ViewCamera
from camera_rig.rig.engine import CameraRig
from camera_rig.scene.colliders import ColliderWorld

SCREEN = (1000, 500)


class RecordingCursor:
    def __init__(self) -> None:
        self.kinds: list[int] = []

    def set_cursor(self, kind: int) -> None:
        self.kinds.append(kind)


@pytest.fixture
def cursor() -> RecordingCursor:
    return RecordingCursor()


@pytest.fixture
def world() -> ColliderWorld:
    return ColliderWorld()


@pytest.fixture
def make_rig(cursor: RecordingCursor, world: ColliderWorld):
    """Rig at (0, 0, -20) looking down +Z; with an empty world the pivot is the origin."""

    def _make(config: RigConfig | None = None, **camera_kwargs) -> CameraRig:
        camera_kwargs.setdefault("position", (0.0, 0.0, -20.0))
        camera_kwargs.setdefault("aspect", SCREEN[0] / SCREEN[1])
        return CameraRig(ViewCamera(**camera_kwargs), world, cursor, config)

    return _make
