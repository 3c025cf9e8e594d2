"""Three-dimensional vectors and the comparison helpers used by the planner."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

HASH_SCALE = 0.0001


@dataclass(frozen=True)
class Vector3:
    """An immutable point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; a zero vector is returned unchanged."""
        length = self.norm()
        if length > 0:
            return self / length
        return self

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def distance(self, other: Vector3) -> float:
        return (self - other).norm()


def equal(a: Vector3, b: Vector3, theta: float = 1e-20) -> bool:
    """True when every coordinate differs by less than ``theta``."""
    return abs(a.x - b.x) < theta and abs(a.y - b.y) < theta and abs(a.z - b.z) < theta


def vector_less(lhs: Vector3, rhs: Vector3) -> bool:
    """Strict lexicographic ordering on (x, y, z)."""
    res = lhs.x - rhs.x
    if res == 0:
        res = lhs.y - rhs.y
    if res == 0:
        res = lhs.z - rhs.z
    return res < 0


def tolerant_key(v: Vector3) -> tuple[int, int, int]:
    """Coordinates truncated to a 0.0001 grid, for use as a hash key."""
    return tuple(int(c / HASH_SCALE) for c in v)  # type: ignore[return-value]