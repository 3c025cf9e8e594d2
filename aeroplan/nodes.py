"""Search nodes, voxels and search statistics for the Lazy Theta* planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from aeroplan.geometry import Vector3

FLOAT_MAX = 3.4028234663852886e38


def calculate_h(distance_from_initial_point: float, line_distance_to_final_point: float) -> float:
    """Heuristic: distance found so far plus straight-line distance to the goal."""
    return distance_from_initial_point + line_distance_to_final_point


@dataclass(eq=False)
class ThetaStarNode:
    """A node of the search graph; ``coordinates`` is always a cell centre."""

    coordinates: Vector3
    cell_size: float = 0.0
    distance_from_initial_point: float = FLOAT_MAX
    line_distance_to_final_point: float = FLOAT_MAX
    parent: Optional[ThetaStarNode] = None

    def calculate_h(self) -> float:
        """Heuristic value of this node, reduced by its cell size and never negative."""
        return max(
            0.0,
            (self.distance_from_initial_point + self.line_distance_to_final_point) - self.cell_size,
        )

    def has_same_coordinates(self, other: ThetaStarNode, tolerance: float) -> bool:
        return self.coordinates.distance(other.coordinates) < tolerance

    def __str__(self) -> str:
        c = self.coordinates
        parent = "none" if self.parent is None else f"0x{id(self.parent):x}"
        return (
            f"({c.x:f}; {c.y:f}; {c.z:f} ) @ {self.cell_size:f}"
            f"; g = {self.distance_from_initial_point:f}"
            f"; to final = {self.line_distance_to_final_point:f}"
            f"; parent is {parent}"
        )


@dataclass
class ResultSet:
    """Statistics gathered during a search."""

    cell_voxel_distribution: dict[float, int] = field(default_factory=dict)
    iterations_used: int = 0

    def add_occurrence(self, cell_voxel: float) -> None:
        self.cell_voxel_distribution[cell_voxel] = self.cell_voxel_distribution.get(cell_voxel, 0) + 1

    def size_of_largest_voxel(self) -> float:
        """Largest voxel size recorded; raises ValueError when nothing was recorded."""
        if not self.cell_voxel_distribution:
            raise ValueError("no voxel sizes recorded")
        return max(self.cell_voxel_distribution)

    def __str__(self) -> str:
        return (
            f"Used {self.iterations_used} iterations finding voxels as big as "
            f"{self.size_of_largest_voxel():f}"
        )


@dataclass
class Voxel:
    """A cubic cell: its centre and side length."""

    coordinates: Vector3 = field(default_factory=Vector3)
    size: float = 0.0

    def equal_coordinates_with_error_margin(self, other: Voxel, error: float) -> bool:
        return self.coordinates.distance(other.coordinates) <= error