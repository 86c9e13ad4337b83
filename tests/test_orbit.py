from __future__ import annotations

import pytest

from camera_rig.controllers.orbit import OrbitController, facing_backward
from camera_rig.core.mathutil import FORWARD, euler_to_quat, rotate
from camera_rig.input.edges import InputSnapshot, ButtonState, RawInput
from camera_rig.rig.state import CursorKind

SCREEN = (1000, 500)

HELD = ButtonState(held=True)


def test_activation_captures_angles_without_jumping(make_rig, cursor) -> None:
    rig = make_rig(rotation=euler_to_quat(20.0, 30.0, 0.0))
    start = rig.state.position

    rig.tick(RawInput(pointer=(200.0, 200.0), right_mouse=True, screen_size=SCREEN))

    assert cursor.kinds[-1] == CursorKind.EYE
    assert rig.state.yaw == pytest.approx(30.0)
    assert rig.state.pitch == pytest.approx(20.0)
    assert rig.state.position == pytest.approx(start)


def test_right_drag_rotates_about_pivot(make_rig) -> None:
    rig = make_rig()
    rig.tick(RawInput(pointer=(200.0, 200.0), right_mouse=True, screen_size=SCREEN))
    rig.tick(RawInput(pointer=(210.0, 200.0), right_mouse=True, screen_size=SCREEN))

    st = rig.state
    # 10 px * 0.1 axis scale * 5 sensitivity.
    assert st.yaw == pytest.approx(5.0)
    assert st.pitch == pytest.approx(0.0, abs=1e-9)
    assert st.pivot == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
    back = rotate(st.rotation, FORWARD)
    assert st.position == pytest.approx(tuple(-20.0 * c for c in back))


def test_vertical_drag_changes_pitch(make_rig) -> None:
    rig = make_rig()
    rig.tick(RawInput(pointer=(200.0, 200.0), right_mouse=True, screen_size=SCREEN))
    rig.tick(RawInput(pointer=(200.0, 220.0), right_mouse=True, screen_size=SCREEN))
    assert rig.state.pitch == pytest.approx(-10.0)


def test_alt_left_drag_orbits(make_rig) -> None:
    rig = make_rig()
    rig.tick(RawInput(pointer=(200.0, 200.0), left_alt=True, screen_size=SCREEN))
    rig.tick(RawInput(pointer=(200.0, 200.0), left_alt=True, left_mouse=True, screen_size=SCREEN))
    rig.tick(RawInput(pointer=(180.0, 200.0), left_alt=True, left_mouse=True, screen_size=SCREEN))
    assert rig.state.yaw == pytest.approx(-10.0)


def test_horizontal_drag_flips_when_upside_down(make_rig) -> None:
    rig = make_rig()
    rig.tick(RawInput(pointer=(200.0, 200.0), right_mouse=True, screen_size=SCREEN))
    rig.state.pitch = 120.0
    rig.tick(RawInput(pointer=(210.0, 200.0), right_mouse=True, screen_size=SCREEN))
    assert rig.state.yaw == pytest.approx(-5.0)


def test_facing_backward_ranges() -> None:
    assert facing_backward(120.0)
    assert facing_backward(-120.0)
    assert not facing_backward(90.0)
    assert not facing_backward(300.0)
    assert not facing_backward(-45.0)


def test_alt_right_drag_is_reserved_for_magnifier() -> None:
    snap = InputSnapshot(left_alt=HELD, right_mouse=HELD)
    assert not OrbitController.is_active(snap)
    assert OrbitController.is_active(InputSnapshot(right_mouse=HELD))
    assert OrbitController.is_active(InputSnapshot(right_alt=HELD, left_mouse=HELD))
    assert not OrbitController.is_active(InputSnapshot(left_mouse=HELD))


def test_angles_stay_bounded_under_huge_deltas(make_rig) -> None:
    rig = make_rig()
    rig.tick(RawInput(pointer=(0.0, 0.0), right_mouse=True, screen_size=SCREEN))
    pointer = 0.0
    for i in range(60):
        pointer += 5000.0 if i % 3 else -12000.0
        rig.tick(RawInput(pointer=(pointer, -pointer), right_mouse=True, screen_size=SCREEN))
        assert -365.0 <= rig.state.yaw <= 365.0
        assert -365.0 <= rig.state.pitch <= 365.0


def test_release_restores_default_cursor(make_rig, cursor) -> None:
    rig = make_rig()
    rig.tick(RawInput(right_mouse=True, screen_size=SCREEN))
    rig.tick(RawInput(right_mouse=False, screen_size=SCREEN))
    assert cursor.kinds[-1] == CursorKind.DEFAULT


def test_preset_views(make_rig) -> None:
    rig = make_rig()
    rig.show_preset("top")
    st = rig.state
    assert rotate(st.rotation, FORWARD) == pytest.approx((0.0, -1.0, 0.0), abs=1e-9)
    assert st.position == pytest.approx((0.0, 20.0, 0.0), abs=1e-9)
    assert rig.camera.position == st.position

    rig.show_preset("front")
    assert rotate(st.rotation, FORWARD) == pytest.approx((0.0, 0.0, -1.0), abs=1e-9)
    assert st.position == pytest.approx((0.0, 0.0, 20.0), abs=1e-9)


def test_unknown_preset_raises(make_rig) -> None:
    rig = make_rig()
    with pytest.raises(ValueError):
        rig.show_preset("diagonal")
