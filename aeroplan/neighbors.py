"""Neighbour generation around octree cells and cell side-length lookup."""

from __future__ import annotations

import math
from typing import Iterator, Sequence

from aeroplan.geometry import Vector3


def _face_grid(
    center: Vector3, node_size: float, resolution: float, include_down: bool
) -> Iterator[Vector3]:
    """Yield the centres of the resolution-sized cells touching the faces of a cell.

    The cell is centred on ``center`` and has side ``node_size``; every face is
    covered by a square grid of ``int(node_size / resolution)`` cells per side.
    """
    count = int(node_size / resolution)
    offset = node_size / 2.0
    extra = resolution / 2.0

    x_start = center.x - offset + extra
    y_start = center.y - offset + extra
    z_start = center.z - offset + extra

    right_x = center.x + offset + extra
    left_x = center.x - offset - extra
    front_y = center.y + offset + extra
    back_y = center.y - offset - extra
    up_z = center.z + offset + extra
    down_z = center.z - offset - extra

    for i in range(count):
        along_i = i * resolution
        for j in range(count):
            along_j = j * resolution
            yield Vector3(left_x, y_start + along_i, z_start + along_j)
            yield Vector3(right_x, y_start + along_i, z_start + along_j)
            yield Vector3(x_start + along_i, front_y, z_start + along_j)
            yield Vector3(x_start + along_i, back_y, z_start + along_j)
            yield Vector3(x_start + along_i, y_start + along_j, up_z)
            if include_down:
                yield Vector3(x_start + along_i, y_start + along_j, down_z)


def generate_neighbors(center: Vector3, node_size: float, resolution: float) -> set[Vector3]:
    """Centres of all resolution-sized cells adjacent to the six faces of a cell."""
    return set(_face_grid(center, node_size, resolution, include_down=True))


def generate_frontier_neighbors(
    center: Vector3, node_size: float, resolution: float
) -> set[Vector3]:
    """Like :func:`generate_neighbors`, but without the cells below the bottom face.

    The space under the vehicle is a blind spot, so it never yields frontiers.
    """
    return set(_face_grid(center, node_size, resolution, include_down=False))


def distance_2d(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points in the plane."""
    return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)


def fill_lookup_table(resolution: float, tree_depth: int) -> list[float]:
    """Side lengths of cells per level above the leaves: the resolution, doubled each level.

    The table always holds at least the entry for the leaf level.
    """
    table = [resolution]
    side_length = resolution
    for _ in range(1, tree_depth):
        side_length += side_length
        table.append(side_length)
    return table


def find_side_length(
    octree_level_count: int, depth: int, lookup_table: Sequence[float]
) -> float:
    """Side length of a cell at ``depth`` in a tree of ``octree_level_count`` levels.

    Raises IndexError when the level lies outside the lookup table.
    """
    level = octree_level_count - depth
    if level < 0 or level >= len(lookup_table):
        raise IndexError(
            f"level {level} (tree levels {octree_level_count}, depth {depth}) "
            f"is outside a lookup table of {len(lookup_table)} entries"
        )
    return lookup_table[level]