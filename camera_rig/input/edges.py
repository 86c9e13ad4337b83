from __future__ import annotations

from dataclasses import dataclass

from camera_rig.core.mathutil import Vec2

_TRACKED = (
    "left_alt",
    "right_alt",
    "left_mouse",
    "middle_mouse",
    "right_mouse",
    "focus_key",
)


@dataclass(frozen=True)
class RawInput:
    """What the host reports for one frame. Pointer is in pixels, origin bottom-left."""

    pointer: Vec2 = (0.0, 0.0)
    scroll: float = 0.0
    dt: float = 0.0
    screen_size: tuple[int, int] = (1280, 720)
    left_alt: bool = False
    right_alt: bool = False
    left_mouse: bool = False
    middle_mouse: bool = False
    right_mouse: bool = False
    focus_key: bool = False


@dataclass(frozen=True)
class ButtonState:
    down: bool = False
    held: bool = False
    up: bool = False


RELEASED = ButtonState()


@dataclass(frozen=True)
class InputSnapshot:
    pointer: Vec2 = (0.0, 0.0)
    pointer_delta: Vec2 = (0.0, 0.0)
    scroll: float = 0.0
    dt: float = 0.0
    screen_size: tuple[int, int] = (1280, 720)
    left_alt: ButtonState = RELEASED
    right_alt: ButtonState = RELEASED
    left_mouse: ButtonState = RELEASED
    middle_mouse: ButtonState = RELEASED
    right_mouse: ButtonState = RELEASED
    focus_key: ButtonState = RELEASED

    @property
    def any_alt_held(self) -> bool:
        return self.left_alt.held or self.right_alt.held


def edge(pressed: bool, prev_pressed: bool) -> ButtonState:
    return ButtonState(
        down=pressed and not prev_pressed,
        held=pressed,
        up=prev_pressed and not pressed,
    )


class InputEdgeDetector:
    def __init__(self) -> None:
        self._prev: dict[str, bool] = {name: False for name in _TRACKED}
        self._prev_pointer: Vec2 | None = None

    def update(self, raw: RawInput) -> InputSnapshot:
        buttons = {}
        for name in _TRACKED:
            pressed = bool(getattr(raw, name))
            buttons[name] = edge(pressed, self._prev[name])
            self._prev[name] = pressed

        prev_pointer = self._prev_pointer if self._prev_pointer is not None else raw.pointer
        delta = (raw.pointer[0] - prev_pointer[0], raw.pointer[1] - prev_pointer[1])
        self._prev_pointer = raw.pointer

        return InputSnapshot(
            pointer=raw.pointer,
            pointer_delta=delta,
            scroll=raw.scroll,
            dt=raw.dt,
            screen_size=raw.screen_size,
            **buttons,
        )
