import pytest

from aeroplan.geometry import Vector3
from aeroplan.nodes import FLOAT_MAX, ResultSet, ThetaStarNode, Voxel, calculate_h


def test_calculate_h_is_symmetric_sum():
    assert calculate_h(1.5, 2.5) == calculate_h(2.5, 1.5)
    assert calculate_h(0.0, 7.25) == 7.25


def test_node_defaults():
    node = ThetaStarNode(Vector3(1, 2, 3), 0.5)
    assert node.distance_from_initial_point == FLOAT_MAX
    assert node.line_distance_to_final_point == FLOAT_MAX
    assert node.parent is None


def test_node_h_subtracts_cell_size():
    node = ThetaStarNode(Vector3(0, 0, 0), 1.0, 3.0, 4.0)
    assert node.calculate_h() == pytest.approx(6.0)


def test_node_h_never_negative():
    node = ThetaStarNode(Vector3(0, 0, 0), 100.0, 1.0, 2.0)
    assert node.calculate_h() == 0.0


def test_node_h_grows_with_distance():
    near = ThetaStarNode(Vector3(0, 0, 0), 0.5, 1.0, 2.0)
    far = ThetaStarNode(Vector3(0, 0, 0), 0.5, 3.0, 2.0)
    assert far.calculate_h() > near.calculate_h()


def test_has_same_coordinates():
    a = ThetaStarNode(Vector3(1, 1, 1), 0.5)
    b = ThetaStarNode(Vector3(1, 1, 1.00001), 0.5)
    c = ThetaStarNode(Vector3(2, 1, 1), 0.5)
    assert a.has_same_coordinates(b, 0.001)
    assert not a.has_same_coordinates(c, 0.001)


def test_nodes_compare_by_identity():
    a = ThetaStarNode(Vector3(1, 1, 1), 0.5)
    b = ThetaStarNode(Vector3(1, 1, 1), 0.5)
    assert a != b
    assert a == a


def test_node_str_mentions_parent_state():
    node = ThetaStarNode(Vector3(1, 2, 3), 0.5, 1.0, 2.0)
    assert "g = 1.000000" in str(node)
    assert "parent is none" in str(node)


def test_result_set_counts_and_largest():
    results = ResultSet()
    for size in (0.5, 2.0, 0.5, 1.0):
        results.add_occurrence(size)
    assert results.cell_voxel_distribution[0.5] == 2
    assert results.size_of_largest_voxel() == 2.0


def test_result_set_empty_raises():
    with pytest.raises(ValueError):
        ResultSet().size_of_largest_voxel()


def test_result_set_str():
    results = ResultSet(iterations_used=3)
    results.add_occurrence(4.0)
    assert str(results).startswith("Used 3 iterations finding voxels as big as 4.0")


def test_voxel_equality():
    assert Voxel(Vector3(1, 2, 3), 0.5) == Voxel(Vector3(1, 2, 3), 0.5)
    assert Voxel(Vector3(1, 2, 3), 0.5) != Voxel(Vector3(1, 2, 3), 1.0)


def test_voxel_default_is_origin():
    assert Voxel() == Voxel(Vector3(0, 0, 0), 0.0)


def test_voxel_error_margin():
    a = Voxel(Vector3(0, 0, 0), 1)
    b = Voxel(Vector3(0.3, 0.4, 0), 1)
    dist = a.coordinates.distance(b.coordinates)
    assert a.equal_coordinates_with_error_margin(b, dist)
    assert not a.equal_coordinates_with_error_margin(b, dist / 2)