from __future__ import annotations

from loguru import logger

from camera_rig.controllers.drag import DragController
from camera_rig.controllers.focus import FocusController
from camera_rig.controllers.magnifier import MagnifierController
from camera_rig.controllers.orbit import OrbitController
from camera_rig.controllers.viewmode import ViewModeController
from camera_rig.controllers.zoom import ZoomController
from camera_rig.core.config import RigConfig
from camera_rig.core.mathutil import FORWARD, add, clamp, rotate, scale
from camera_rig.input.edges import InputEdgeDetector, InputSnapshot, RawInput
from camera_rig.projection.blend import ViewMode, ViewModeBlend
from camera_rig.rig.state import (
    CURSOR_KINDS,
    CameraSink,
    CollisionBackend,
    CursorKind,
    CursorSink,
    FocusState,
    RigState,
    SelectionState,
)


class CameraRig:
    """Per-frame camera interaction engine.

    One `tick` per rendered frame runs the controllers in a fixed order:
    view mode blend, zoom, drag, orbit, magnifier, focus. Drag reads the
    distance zoom wrote in the same frame.
    """

    def __init__(
        self,
        camera: CameraSink,
        collisions: CollisionBackend,
        cursor: CursorSink,
        config: RigConfig | None = None,
    ):
        self.config = config or RigConfig()
        self.camera = camera
        self.collisions = collisions
        self.cursor = cursor

        self.input = InputEdgeDetector()
        self.view_mode = ViewModeController(self.config)
        self.zoom = ZoomController(self.config)
        self.drag = DragController(self.set_cursor)
        self.orbit = OrbitController(self.config, self.set_cursor)
        self.magnifier = MagnifierController(self.config, self.set_cursor)
        self.focuser = FocusController(self.config, collisions)

        self.state = self._initial_state()
        self.orbit.capture_angles(self.state)
        self._write_camera()

    def _initial_state(self) -> RigState:
        cam = self.camera
        c = self.config
        mode = ViewMode.ORTHOGRAPHIC if cam.orthographic else ViewMode.PERSPECTIVE
        rig = RigState(
            position=cam.position,
            rotation=cam.rotation,
            distance=c.initial_distance,
            field_of_view=clamp(cam.field_of_view, c.min_fov, c.max_fov),
            ortho_size=clamp(cam.ortho_size, c.min_ortho_size, c.max_ortho_size),
            aspect=cam.aspect,
            near=cam.near,
            far=cam.far,
            min_fov=c.min_fov,
            max_fov=c.max_fov,
            min_ortho_size=c.min_ortho_size,
            blend=ViewModeBlend(mode),
        )

        # Whatever sits dead ahead sets the starting orbit distance.
        line_end = add(rig.position, rotate(rig.rotation, scale(FORWARD, c.linecast_probe_distance)))
        hit = self.collisions.linecast(rig.position, line_end)
        if hit is not None:
            rig.distance = hit.distance
            if self.focuser.selection.selected is None:
                self.focuser.selection.selected = hit.obj
            logger.debug(f"Initial distance {hit.distance:.2f} from {hit.obj!r}")
        rig.distance = clamp(rig.distance, c.min_distance, c.max_distance)

        rig.rebuild_projection()
        rig.reset_pivot()
        return rig

    @property
    def selection(self) -> SelectionState:
        return self.focuser.selection

    @property
    def focus(self) -> FocusState:
        return self.focuser.state

    def set_cursor(self, kind: int) -> None:
        if kind not in CURSOR_KINDS:
            logger.error(f"Unknown cursor kind {kind!r}, using default")
            kind = CursorKind.DEFAULT
        self.cursor.set_cursor(kind)

    def set_view_mode(self, mode: int) -> bool:
        """Start a cross-fade to `mode`. False when already settled there."""
        return self.view_mode.request(self.state, mode)

    def show_preset(self, name: str) -> None:
        self.orbit.show_preset(self.state, name)
        self._write_camera()

    def tick(self, raw: RawInput) -> InputSnapshot:
        snap = self.input.update(raw)
        rig = self.state
        self.view_mode.update(snap, rig)
        self.zoom.update(snap, rig)
        self.drag.update(snap, rig)
        self.orbit.update(snap, rig)
        self.magnifier.update(snap, rig)
        self.focuser.update(snap, rig)
        self._write_camera()
        return snap

    def _write_camera(self) -> None:
        rig = self.state
        cam = self.camera
        cam.position = rig.position
        cam.rotation = rig.rotation
        cam.field_of_view = rig.field_of_view
        cam.ortho_size = rig.ortho_size
        cam.orthographic = rig.orthographic
        cam.projection_matrix = rig.projection_override
