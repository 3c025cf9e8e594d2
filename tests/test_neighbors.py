import math

import pytest

from aeroplan.geometry import Vector3
from aeroplan.neighbors import (
    distance_2d,
    fill_lookup_table,
    find_side_length,
    generate_frontier_neighbors,
    generate_neighbors,
)

ORIGIN = Vector3(0.0, 0.0, 0.0)


def test_unit_cell_has_six_face_neighbors():
    result = generate_neighbors(ORIGIN, 1.0, 1.0)
    expected = {
        Vector3(-1.0, 0.0, 0.0),
        Vector3(1.0, 0.0, 0.0),
        Vector3(0.0, 1.0, 0.0),
        Vector3(0.0, -1.0, 0.0),
        Vector3(0.0, 0.0, 1.0),
        Vector3(0.0, 0.0, -1.0),
    }
    assert result == expected


def test_frontier_neighbors_skip_the_cell_below():
    result = generate_frontier_neighbors(ORIGIN, 1.0, 1.0)
    assert Vector3(0.0, 0.0, -1.0) not in result
    assert result == generate_neighbors(ORIGIN, 1.0, 1.0) - {Vector3(0.0, 0.0, -1.0)}


@pytest.mark.parametrize("node_size,resolution", [(1.0, 0.5), (2.0, 0.5), (4.0, 1.0), (1.0, 0.25)])
def test_neighbor_counts(node_size, resolution):
    n = int(node_size / resolution)
    center = Vector3(3.25, -1.75, 7.0)
    assert len(generate_neighbors(center, node_size, resolution)) == 6 * n * n
    assert len(generate_frontier_neighbors(center, node_size, resolution)) == 5 * n * n


@pytest.mark.parametrize("node_size,resolution", [(1.0, 0.5), (2.0, 0.5), (4.0, 1.0)])
def test_neighbors_lie_just_outside_one_face(node_size, resolution):
    center = Vector3(1.0, 2.0, 3.0)
    reach = node_size / 2 + resolution / 2
    inner = node_size / 2
    for point in generate_neighbors(center, node_size, resolution):
        offsets = [abs(p - c) for p, c in zip(point, center)]
        outside = [o for o in offsets if math.isclose(o, reach)]
        assert len(outside) == 1
        assert all(o < inner for o in offsets if not math.isclose(o, reach))


def test_frontier_neighbors_are_subset():
    center = Vector3(-2.0, 0.5, 1.5)
    full = generate_neighbors(center, 2.0, 0.5)
    frontier = generate_frontier_neighbors(center, 2.0, 0.5)
    assert frontier <= full
    missing = full - frontier
    assert all(math.isclose(p.z, center.z - 1.25) for p in missing)


def test_node_smaller_than_resolution_has_no_neighbors():
    assert generate_neighbors(ORIGIN, 0.25, 0.5) == set()
    assert generate_frontier_neighbors(ORIGIN, 0.25, 0.5) == set()


def test_distance_2d():
    assert distance_2d(0.0, 0.0, 3.0, 4.0) == pytest.approx(5.0)
    assert distance_2d(1.5, -2.0, 1.5, -2.0) == 0.0
    assert distance_2d(1.0, 2.0, -3.0, 7.0) == pytest.approx(distance_2d(-3.0, 7.0, 1.0, 2.0))


@pytest.mark.parametrize("resolution,depth", [(0.5, 16), (0.2, 4), (1.0, 1)])
def test_lookup_table_doubles_each_level(resolution, depth):
    table = fill_lookup_table(resolution, depth)
    assert len(table) == depth
    assert table[0] == resolution
    for smaller, larger in zip(table, table[1:]):
        assert larger == smaller * 2


def test_lookup_table_keeps_leaf_entry_for_zero_depth():
    assert fill_lookup_table(0.5, 0) == [0.5]


def test_find_side_length_reads_table():
    table = fill_lookup_table(0.5, 16)
    assert find_side_length(16, 16, table) == table[0]
    assert find_side_length(16, 13, table) == table[3]
    assert find_side_length(16, 1, table) == table[15]


@pytest.mark.parametrize("levels,depth", [(16, 17), (16, 0)])
def test_find_side_length_out_of_range(levels, depth):
    table = fill_lookup_table(0.5, 16)
    with pytest.raises(IndexError):
        find_side_length(levels, depth, table)