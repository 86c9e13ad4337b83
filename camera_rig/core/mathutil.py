from __future__ import annotations

from math import asin, atan2, cos, radians, degrees, sin, sqrt

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]
# (x, y, z, w)
Quat = tuple[float, float, float, float]

FORWARD: Vec3 = (0.0, 0.0, 1.0)
RIGHT: Vec3 = (1.0, 0.0, 0.0)
UP: Vec3 = (0.0, 1.0, 0.0)
IDENTITY_QUAT: Quat = (0.0, 0.0, 0.0, 1.0)

EPSILON = 0.000001


def is_equal(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON


def clamp(v: float, lo: float, hi: float) -> float:
    if v < lo:
        return lo
    if v > hi:
        return hi
    return v


def clamp01(v: float) -> float:
    return clamp(v, 0.0, 1.0)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def clamp_angle(angle: float, lo: float, hi: float) -> float:
    # Single wrap, not a modulo: anything beyond +/-720 still ends up clamped.
    if angle < -360.0:
        angle += 360.0
    if angle > 360.0:
        angle -= 360.0
    return clamp(angle, lo, hi)


def add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(v: Vec3, k: float) -> Vec3:
    return (v[0] * k, v[1] * k, v[2] * k)


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def norm(v: Vec3) -> float:
    return sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def normalize(v: Vec3) -> Vec3:
    n = norm(v)
    if n == 0.0:
        return (0.0, 0.0, 0.0)
    return (v[0] / n, v[1] / n, v[2] / n)


def lerp_vec(a: Vec3, b: Vec3, t: float) -> Vec3:
    tt = clamp01(t)
    return (lerp(a[0], b[0], tt), lerp(a[1], b[1], tt), lerp(a[2], b[2], tt))


def quat_mul(a: Quat, b: Quat) -> Quat:
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return (
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
        aw * bw - ax * bx - ay * by - az * bz,
    )


def quat_axis_angle(axis: Vec3, angle_deg: float) -> Quat:
    ax = normalize(axis)
    half = radians(angle_deg) * 0.5
    s = sin(half)
    return (ax[0] * s, ax[1] * s, ax[2] * s, cos(half))


def rotate(q: Quat, v: Vec3) -> Vec3:
    qx, qy, qz, qw = q
    # v' = v + 2w(q x v) + 2 q x (q x v)
    u = (qx, qy, qz)
    t = scale(cross(u, v), 2.0)
    return add(add(v, scale(t, qw)), cross(u, t))


def euler_to_quat(pitch: float, yaw: float, roll: float) -> Quat:
    """Degrees; roll about Z first, then pitch about X, then yaw about Y."""
    qx = quat_axis_angle(RIGHT, pitch)
    qy = quat_axis_angle(UP, yaw)
    qz = quat_axis_angle(FORWARD, roll)
    return quat_mul(quat_mul(qy, qx), qz)


def _rotation_rows(q: Quat) -> tuple[Vec3, Vec3, Vec3]:
    x, y, z, w = q
    return (
        (1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - z * w), 2.0 * (x * z + y * w)),
        (2.0 * (x * y + z * w), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - x * w)),
        (2.0 * (x * z - y * w), 2.0 * (y * z + x * w), 1.0 - 2.0 * (x * x + y * y)),
    )


def quat_to_euler(q: Quat) -> Vec3:
    """Inverse of euler_to_quat, as (pitch, yaw, roll) in [0, 360)."""
    r = _rotation_rows(q)
    sp = clamp(-r[1][2], -1.0, 1.0)
    pitch = asin(sp)
    if abs(sp) < 0.9999999:
        yaw = atan2(r[0][2], r[2][2])
        roll = atan2(r[1][0], r[1][1])
    else:
        # Gimbal lock: fold roll into yaw.
        yaw = atan2(-r[2][0], r[0][0])
        roll = 0.0
    return (_positive_degrees(pitch), _positive_degrees(yaw), _positive_degrees(roll))


def _positive_degrees(rad: float) -> float:
    d = degrees(rad) % 360.0
    # Rounding noise just below zero would otherwise come back as ~360.
    if 360.0 - d < 1e-9:
        return 0.0
    return d


def _quat_from_basis(right: Vec3, up: Vec3, forward: Vec3) -> Quat:
    # Columns of the rotation matrix are right, up, forward.
    m00, m01, m02 = right[0], up[0], forward[0]
    m10, m11, m12 = right[1], up[1], forward[1]
    m20, m21, m22 = right[2], up[2], forward[2]
    trace = m00 + m11 + m22
    if trace > 0.0:
        s = sqrt(trace + 1.0) * 2.0
        return ((m21 - m12) / s, (m02 - m20) / s, (m10 - m01) / s, 0.25 * s)
    if m00 > m11 and m00 > m22:
        s = sqrt(1.0 + m00 - m11 - m22) * 2.0
        return (0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s)
    if m11 > m22:
        s = sqrt(1.0 + m11 - m00 - m22) * 2.0
        return ((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s)
    s = sqrt(1.0 + m22 - m00 - m11) * 2.0
    return ((m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s)


def look_rotation(forward: Vec3, up: Vec3 = UP) -> Quat:
    f = normalize(forward)
    if f == (0.0, 0.0, 0.0):
        return IDENTITY_QUAT
    r = cross(up, f)
    if norm(r) < EPSILON:
        # Looking straight up or down.
        alt_up: Vec3 = (0.0, 0.0, -1.0 if f[1] > 0.0 else 1.0)
        r = cross(alt_up, f)
    r = normalize(r)
    u = cross(f, r)
    return _quat_from_basis(r, u, f)
