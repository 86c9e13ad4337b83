from __future__ import annotations

from math import atan, degrees, radians, tan

from camera_rig.core.mathutil import clamp01, lerp

Row = tuple[float, float, float, float]
Mat4 = tuple[Row, Row, Row, Row]

IDENTITY: Mat4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def build_perspective(fov: float, aspect: float, near: float, far: float) -> Mat4:
    t = tan(radians(fov) * 0.5)
    return (
        (1.0 / (t * aspect), 0.0, 0.0, 0.0),
        (0.0, 1.0 / t, 0.0, 0.0),
        (0.0, 0.0, -(far + near) / (far - near), -2.0 * far * near / (far - near)),
        (0.0, 0.0, -1.0, 0.0),
    )


def build_orthographic(size: float, aspect: float, near: float, far: float) -> Mat4:
    """`size` is half the view height, as with a camera's orthographic size."""
    return (
        (1.0 / (aspect * size), 0.0, 0.0, 0.0),
        (0.0, 1.0 / size, 0.0, 0.0),
        (0.0, 0.0, -2.0 / (far - near), -(far + near) / (far - near)),
        (0.0, 0.0, 0.0, 1.0),
    )


def size_from_fov(fov: float, distance: float) -> float:
    return distance * tan(radians(fov) * 0.5)


def fov_from_size(size: float, distance: float) -> float:
    return degrees(2.0 * atan(size / distance))


def lerp_matrix(a: Mat4, b: Mat4, t: float) -> Mat4:
    # Entry-wise blend. Intermediate matrices are not true frusta, but the
    # cross-fade reads fine on screen.
    tt = clamp01(t)
    return tuple(
        tuple(lerp(a[r][c], b[r][c], tt) for c in range(4)) for r in range(4)
    )  # type: ignore[return-value]


def matrix_equal(a: Mat4, b: Mat4, tol: float = 1e-9) -> bool:
    return all(abs(a[r][c] - b[r][c]) <= tol for r in range(4) for c in range(4))


def transform(m: Mat4, v: Row) -> Row:
    return tuple(
        m[r][0] * v[0] + m[r][1] * v[1] + m[r][2] * v[2] + m[r][3] * v[3]
        for r in range(4)
    )  # type: ignore[return-value]
