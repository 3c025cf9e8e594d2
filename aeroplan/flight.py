"""Yaw handling, orientation comparison and velocity commands for waypoint flight."""

from __future__ import annotations

import math
from typing import Iterable, Union

from aeroplan.geometry import Vector3

Quaternion = tuple[float, float, float, float]
VectorLike = Union[Vector3, Iterable[float]]

CRUISING_SPEED = 1.0
PX4_ORIENTATION_CONFUSION_LIMIT_DEGREES = 120.0
PX4_ORIENTATION_CONFUSION_LIMIT = math.radians(PX4_ORIENTATION_CONFUSION_LIMIT_DEGREES)
MAX_ACCEPTANCE_ORIENTATION = 3.0
MIN_ACCEPTANCE_ORIENTATION = 0.14
FLIGHT_LEVEL = 5.0
FRAME_ID = "uav_1_home"


def _as_vector(value: VectorLike) -> Vector3:
    if isinstance(value, Vector3):
        return value
    return Vector3(*value)


def yaw_diff(last_yaw: float, requested_yaw: float) -> float:
    """Angular amplitude between two yaw angles in (-pi, pi].

    When ``last_yaw`` is NaN there is no previous yaw, and the requested yaw
    itself is returned. A NaN ``requested_yaw`` raises ValueError.
    """
    if math.isnan(last_yaw):
        return requested_yaw
    if math.isnan(requested_yaw):
        raise ValueError(
            f"cannot compare yaw angles: last_yaw {last_yaw} - requested_yaw {requested_yaw}"
        )
    if (last_yaw >= 0) == (requested_yaw >= 0):
        return abs(last_yaw - requested_yaw)
    return abs(last_yaw) + abs(requested_yaw)


def to_degrees(radians: float) -> float:
    return radians * (180 / math.pi)


def limit_yaw(
    last_yaw: float, requested_yaw: float, limit: float = PX4_ORIENTATION_CONFUSION_LIMIT
) -> float:
    """The yaw to command next.

    A turn wider than ``limit`` is replaced by the limit itself, so the
    autopilot is never asked to turn by an ambiguous amount.
    """
    amplitude = yaw_diff(last_yaw, requested_yaw)
    if amplitude > limit:
        return limit
    if amplitude < -limit:
        return -limit
    return requested_yaw


def quaternion_from_yaw(yaw: float) -> Quaternion:
    """Quaternion (x, y, z, w) of a pure rotation about the z axis."""
    half = yaw / 2.0
    return (0.0, 0.0, math.sin(half), math.cos(half))


def yaw_from_quaternion(x: float, y: float, z: float, w: float) -> float:
    """Yaw angle of a quaternion, taken from its rotation matrix.

    Raises ValueError for the zero quaternion.
    """
    d = x * x + y * y + z * z + w * w
    if d == 0:
        raise ValueError("the zero quaternion has no orientation")
    s = 2.0 / d
    m20 = (x * z - w * y) * s
    if abs(m20) >= 1:
        return 0.0
    m10 = (x * y + w * z) * s
    m00 = 1.0 - (y * y + z * z) * s
    return math.atan2(m10, m00)


def angular_distance(q1: Iterable[float], q2: Iterable[float]) -> float:
    """Angle in radians of the rotation taking one (x, y, z, w) quaternion to the other."""
    d = abs(sum(a * b for a, b in zip(q1, q2, strict=True)))
    if d >= 1:
        return 0.0
    return 2.0 * math.acos(d)


def calculate_velocity(x0: VectorLike, x2: VectorLike, d: float) -> Vector3:
    """Velocity at cruising speed pointing from ``x0`` towards ``x2``.

    ``d`` is the distance between the points. Raises ValueError when no
    direction can be formed.
    """
    start = _as_vector(x0)
    target = _as_vector(x2)
    if d == 0:
        raise ValueError("distance to the target must not be zero")
    unit = (target - start) / d
    length = unit.norm()
    if length == 0 or math.isnan(length):
        raise ValueError(f"no direction from {start} to {target}")
    return (unit / length) * CRUISING_SPEED