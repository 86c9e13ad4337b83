from __future__ import annotations

import argparse
import sys

import pygame
from loguru import logger

from camera_rig.core.config import ConfigError, RigConfig, load_config
from camera_rig.core.mathutil import euler_to_quat
from camera_rig.input.edges import RawInput
from camera_rig.projection.blend import ViewMode
from camera_rig.render.camera import ViewCamera
from camera_rig.rig.engine import CameraRig
from camera_rig.rig.state import CursorKind
from camera_rig.scene.colliders import ColliderWorld, SphereCollider

# Axis units per wheel notch.
WHEEL_STEP = 0.1

_SYSTEM_CURSORS = {
    CursorKind.DEFAULT: pygame.SYSTEM_CURSOR_ARROW,
    CursorKind.HAND: pygame.SYSTEM_CURSOR_HAND,
    CursorKind.EYE: pygame.SYSTEM_CURSOR_SIZEALL,
    CursorKind.MAGNIFIER: pygame.SYSTEM_CURSOR_CROSSHAIR,
}

_PRESET_KEYS = {
    pygame.K_1: "front",
    pygame.K_2: "back",
    pygame.K_3: "left",
    pygame.K_4: "right",
    pygame.K_5: "top",
    pygame.K_6: "bottom",
}


class PygameCursor:
    def set_cursor(self, kind: int) -> None:
        pygame.mouse.set_cursor(_SYSTEM_CURSORS[kind])


def build_scene() -> ColliderWorld:
    world = ColliderWorld()
    world.add(SphereCollider("center", (0.0, 1.0, 0.0), radius=1.0))
    for i, x in enumerate((-8.0, -4.0, 4.0, 8.0)):
        world.add(SphereCollider(f"ball{i}", (x, 0.75, (i % 2) * 6.0 - 3.0), radius=0.75))
    world.add(SphereCollider("tower", (0.0, 6.0, 10.0), radius=1.5))
    return world


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive camera rig demo")
    parser.add_argument("--config", help="Path to a JSON rig config")
    parser.add_argument("--log-level", default="INFO", help="loguru level (default: INFO)")
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, format="<level>{level: <8}</level> | {message}", level=args.log_level)

    try:
        config = load_config(args.config) if args.config else RigConfig()
    except (ConfigError, OSError) as e:
        logger.error(f"Invalid rig config: {e}")
        raise SystemExit(2)

    pygame.init()
    pygame.display.set_caption("Camera Rig (Python + pygame)")

    screen = pygame.display.set_mode((1200, 800), pygame.RESIZABLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 18)

    world = build_scene()
    w, h = screen.get_size()
    camera = ViewCamera(
        position=(0.0, 8.0, -16.0),
        rotation=euler_to_quat(25.0, 0.0, 0.0),
        field_of_view=60.0,
        aspect=w / h,
    )
    rig = CameraRig(camera, world, PygameCursor(), config)

    running = True
    while running:
        dt = clock.tick(60) / 1000.0
        scroll = 0.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
            elif event.type == pygame.MOUSEWHEEL:
                scroll += event.y * WHEEL_STEP
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_o:
                    rig.set_view_mode(ViewMode.ORTHOGRAPHIC)
                elif event.key == pygame.K_p:
                    rig.set_view_mode(ViewMode.PERSPECTIVE)
                elif event.key in _PRESET_KEYS:
                    rig.show_preset(_PRESET_KEYS[event.key])

        w, h = screen.get_size()
        if camera.aspect != w / h:
            camera.aspect = w / h
            rig.state.aspect = camera.aspect
            rig.state.rebuild_projection()

        keys = pygame.key.get_pressed()
        left, middle, right = pygame.mouse.get_pressed(3)
        mx, my = pygame.mouse.get_pos()

        rig.tick(
            RawInput(
                # Rig expects a bottom-left origin.
                pointer=(float(mx), float(h - my)),
                scroll=scroll,
                dt=dt,
                screen_size=(w, h),
                left_alt=keys[pygame.K_LALT],
                right_alt=keys[pygame.K_RALT],
                left_mouse=left,
                middle_mouse=middle,
                right_mouse=right,
                focus_key=keys[pygame.K_f],
            )
        )

        _draw(screen, font, rig, camera, world)
        pygame.display.flip()

    pygame.quit()


def _draw(
    screen: pygame.Surface,
    font: pygame.font.Font,
    rig: CameraRig,
    camera: ViewCamera,
    world: ColliderWorld,
) -> None:
    screen.fill((18, 20, 28))
    frame = camera.frame(screen.get_size())

    # Ground grid.
    grid_col = (52, 58, 74)
    for i in range(-10, 11):
        for a, b in (
            ((i * 2.0, 0.0, -20.0), (i * 2.0, 0.0, 20.0)),
            ((-20.0, 0.0, i * 2.0), (20.0, 0.0, i * 2.0)),
        ):
            s0 = frame.project(a)
            s1 = frame.project(b)
            if s0 is None or s1 is None:
                continue
            pygame.draw.aaline(screen, grid_col, (s0[0], s0[1]), (s1[0], s1[1]))

    selected = rig.selection.selected
    # Far to near.
    order = sorted(
        world.colliders,
        key=lambda c: -((c.position[0] - camera.position[0]) ** 2
                        + (c.position[1] - camera.position[1]) ** 2
                        + (c.position[2] - camera.position[2]) ** 2),
    )
    for col in order:
        centre = frame.project(col.position)
        edge = frame.project(
            (col.position[0] + col.radius * frame.right[0],
             col.position[1] + col.radius * frame.right[1],
             col.position[2] + col.radius * frame.right[2])
        )
        if centre is None or edge is None:
            continue
        r = max(2, int(abs(edge[0] - centre[0])))
        colr = (235, 196, 64) if col is selected else (96, 160, 220)
        pygame.draw.circle(screen, colr, (int(centre[0]), int(centre[1])), r)

    st = rig.state
    mode = "ortho" if st.orthographic else "persp"
    if st.blend.blending:
        mode += f" (blend {st.blend.progress:.2f})"
    lines = [
        f"{mode}  fov {st.field_of_view:.1f}  size {st.ortho_size:.2f}  dist {st.distance:.2f}",
        f"yaw {st.yaw:.1f}  pitch {st.pitch:.1f}  selected {selected!r}",
        "RMB/Alt+LMB orbit  MMB pan  wheel zoom  Alt+RMB fov  F focus  O/P mode  1-6 views",
    ]
    for i, text in enumerate(lines):
        screen.blit(font.render(text, True, (220, 220, 230)), (8, 8 + i * 18))


if __name__ == "__main__":
    run()
