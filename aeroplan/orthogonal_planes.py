"""Coordinate frames and offset planes around a flight segment."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

from aeroplan.geometry import Vector3, equal

DepthFunction = Callable[[float, float, float], float]

_X_AXIS = Vector3(1.0, 0.0, 0.0)
_Z_AXIS = Vector3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class CoordinateFrame:
    """An orthonormal frame whose first axis points along a segment."""

    direction: Vector3
    orthogonal_a: Vector3
    orthogonal_b: Vector3


def generate_coordinate_frame(start: Vector3, goal: Vector3) -> CoordinateFrame:
    """Build an orthonormal frame with ``direction`` pointing from start to goal.

    When start and goal coincide the world axes are returned.
    """
    if equal(start, goal):
        return CoordinateFrame(
            Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0)
        )
    direction = (goal - start).normalized()
    if abs(direction.dot(_Z_AXIS)) <= 0.9:
        orthogonal_a = _Z_AXIS.cross(direction)
    else:
        orthogonal_a = direction.cross(_X_AXIS)
    orthogonal_a = orthogonal_a.normalized()
    orthogonal_b = direction.cross(orthogonal_a)
    return CoordinateFrame(direction, orthogonal_a, orthogonal_b)


def calculate_goal_with_margin(start: Vector3, goal: Vector3, margin: float) -> Vector3:
    """The goal pushed further along the start-goal direction by half the margin."""
    direction = (goal - start).normalized()
    return goal + direction * (margin / 2)


def generate_rotation_translation_matrix(
    coordinate_frame: CoordinateFrame, translation_offset: Vector3
) -> np.ndarray:
    """Homogeneous 4x4 transform whose columns are the frame axes and the offset."""
    matrix = np.zeros((4, 4))
    matrix[:3, 0] = tuple(coordinate_frame.direction)
    matrix[:3, 1] = tuple(coordinate_frame.orthogonal_a)
    matrix[:3, 2] = tuple(coordinate_frame.orthogonal_b)
    matrix[:3, 3] = tuple(translation_offset)
    matrix[3, 3] = 1.0
    return matrix


def _disc_points(margin: float, resolution: float):
    """Yield (y, z) grid offsets lying inside a disc of radius ``margin``."""
    n = int(margin / resolution)
    radius_squared = (margin / resolution) * (margin / resolution)
    for i in range(-n, n + 1):
        for j in range(-n, n + 1):
            if i * i + j * j <= radius_squared:
                yield i * resolution, j * resolution


def _homogeneous(points: list[tuple[float, float, float]]) -> np.ndarray:
    matrix = np.ones((4, len(points)))
    if points:
        matrix[:3, :] = np.array(points, dtype=float).T
    return matrix


def generate_circle_plane_matrix(margin: float, resolution: float) -> np.ndarray:
    """4xN homogeneous points of a flat disc in the plane x = 0."""
    return _homogeneous([(0.0, y, z) for y, z in _disc_points(margin, resolution)])


def generate_offset_matrix(
    margin: float, resolution: float, calculate_depth: DepthFunction
) -> np.ndarray:
    """4xN homogeneous points of a disc whose x coordinate comes from ``calculate_depth``."""
    return _homogeneous(
        [(calculate_depth(margin, y, z), y, z) for y, z in _disc_points(margin, resolution)]
    )


# Normal of the plane through the origin facing along the segment direction.
_FLAT_PLANE_NORMAL = (1.0, 0.0, 0.0)


def _plane_depth(normal: tuple[float, float, float], y: float, z: float) -> float:
    """Depth x of the point (x, y, z) on the plane through the origin with ``normal``."""
    a, b, c = normal
    return -(b * y + c * z) / a + 0.0


def depth_zero(margin: float, y: float, z: float) -> float:
    """Depth of a flat plane perpendicular to the segment: zero everywhere."""
    return _plane_depth(_FLAT_PLANE_NORMAL, y, z)


def semi_sphere_out(margin: float, y: float, z: float) -> float:
    """Depth of a hemisphere of radius ``margin`` bulging forwards."""
    remainder = margin * margin - y * y - z * z
    if math.isnan(remainder) or remainder < 0:
        return 0.05
    return 0.05 + math.sqrt(remainder)


def semi_sphere_in(margin: float, y: float, z: float) -> float:
    """Depth of a hemisphere of radius ``margin`` bulging backwards."""
    return -semi_sphere_out(margin, y, z)