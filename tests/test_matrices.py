from __future__ import annotations

from math import tan, radians

import pytest

from camera_rig.projection.matrices import (
    IDENTITY,
    build_orthographic,
    build_perspective,
    fov_from_size,
    lerp_matrix,
    matrix_equal,
    size_from_fov,
)


def test_fov_size_round_trip() -> None:
    for distance in (1.0, 3.0, 20.0, 57.5, 100.0):
        for fov in (20.0, 45.0, 60.0, 90.0, 135.0):
            assert fov_from_size(size_from_fov(fov, distance), distance) == pytest.approx(fov)


def test_size_from_fov_values() -> None:
    assert size_from_fov(90.0, 10.0) == pytest.approx(10.0)
    assert fov_from_size(10.0, 10.0) == pytest.approx(90.0)


def test_perspective_matrix_entries() -> None:
    m = build_perspective(60.0, 2.0, 0.3, 1000.0)
    t = tan(radians(30.0))
    assert m[0][0] == pytest.approx(1.0 / (t * 2.0))
    assert m[1][1] == pytest.approx(1.0 / t)
    assert m[2][2] == pytest.approx(-(1000.3) / 999.7)
    assert m[2][3] == pytest.approx(-2.0 * 1000.0 * 0.3 / 999.7)
    assert m[3] == (0.0, 0.0, -1.0, 0.0)


def test_orthographic_matrix_entries() -> None:
    m = build_orthographic(5.0, 2.0, 0.3, 1000.0)
    assert m[0][0] == pytest.approx(0.1)
    assert m[1][1] == pytest.approx(0.2)
    assert m[2][2] == pytest.approx(-2.0 / 999.7)
    assert m[3] == (0.0, 0.0, 0.0, 1.0)


def test_lerp_matrix_endpoints_and_clamp() -> None:
    a = build_perspective(60.0, 1.5, 0.3, 1000.0)
    b = build_orthographic(5.0, 1.5, 0.3, 1000.0)
    assert matrix_equal(lerp_matrix(a, b, 0.0), a)
    assert matrix_equal(lerp_matrix(a, b, 1.0), b)
    assert matrix_equal(lerp_matrix(a, b, -2.0), a)
    assert matrix_equal(lerp_matrix(a, b, 7.0), b)


def test_lerp_matrix_entries_stay_between_inputs() -> None:
    a = build_perspective(75.0, 1.2, 0.1, 500.0)
    b = build_orthographic(3.0, 1.2, 0.1, 500.0)
    for t in (0.1, 0.25, 0.5, 0.9):
        m = lerp_matrix(a, b, t)
        for r in range(4):
            for c in range(4):
                lo = min(a[r][c], b[r][c])
                hi = max(a[r][c], b[r][c])
                assert lo - 1e-12 <= m[r][c] <= hi + 1e-12


def test_matrix_equal_detects_difference() -> None:
    other = (IDENTITY[0], IDENTITY[1], IDENTITY[2], (0.0, 0.0, 0.0, 2.0))
    assert not matrix_equal(IDENTITY, other)
