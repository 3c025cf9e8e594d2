# aeroplan

Building blocks for planning and flying a UAV through a volumetric
(octree) map. The package has no side effects. It does not talk to a robot
or a message bus. It provides the maths and bookkeeping such a system needs.

## Modules

- **`aeroplan.geometry`**
  - `Vector3` is an immutable vector. It supports `+`, `-`, unary `-`,
    scalar `*` and `/`, and iteration over `(x, y, z)`. It has `norm`,
    `normalized`, `dot`, `cross` and `distance`. `normalized` returns a zero
    vector unchanged.
  - `equal(a, b, theta)` is true when every coordinate differs by less than
    `theta`.
  - `vector_less` is a strict lexicographic order on `(x, y, z)`.
  - `tolerant_key` truncates coordinates to a 0.0001 grid, for use as a
    dictionary key.
- **`aeroplan.nodes`**
  - `ThetaStarNode` is a Lazy Theta\* search node. It holds coordinates, cell
    size, distance from the start, straight-line distance to the goal and a
    parent.
    - `ThetaStarNode.calculate_h()` returns the heuristic minus the cell size,
      never below zero.
    - `has_same_coordinates` compares positions within a tolerance.
  - `calculate_h` is the plain sum of the two distances.
  - `ResultSet` gathers search statistics: a count of voxel sizes and
    iterations used. `size_of_largest_voxel` raises `ValueError` when
    nothing was recorded.
  - `Voxel` is a cell centre and side length. It has
    `equal_coordinates_with_error_margin`.
- **`aeroplan.orthogonal_planes`**
  - `CoordinateFrame` and `generate_coordinate_frame(start, goal)` build an
    orthonormal frame whose `direction` points from start to goal. When
    start and goal coincide, the world axes are returned.
  - `calculate_goal_with_margin` pushes the goal further along the flight
    direction by half the margin.
  - `generate_rotation_translation_matrix` builds a homogeneous 4x4 NumPy
    transform from a frame and an offset.
  - `generate_circle_plane_matrix` and `generate_offset_matrix` return 4xN
    homogeneous point sets on a disc of radius `margin`, sampled at
    `resolution`. With `generate_offset_matrix`, the x coordinate of each
    point comes from a depth function.
  - The depth functions are `depth_zero`, `semi_sphere_out` and
    `semi_sphere_in`. The hemispheres are offset by 0.05 and fall back to
    ±0.05 outside the radius.
- **`aeroplan.neighbors`**
  - `generate_neighbors(center, node_size, resolution)` returns the set of
    resolution-sized cell centres touching all six faces of a cell.
  - `generate_frontier_neighbors` does the same but leaves out the cells
    below the bottom face.
  - `distance_2d` is the planar Euclidean distance.
  - `fill_lookup_table(resolution, tree_depth)` gives the cell side length
    for each level, doubling at every level.
  - `find_side_length` reads that table and raises `IndexError` for a level
    outside it.
- **`aeroplan.geofence`**
  - `is_inside_geofence(candidate, geofence_min, geofence_max)` tests a
    point against a box. The lower z bound is not checked, and x must also
    not lie below the lower y bound.
  - `fill_local_geofence(start, end, fence_range, flyby_length,
    local_fence_side, geofence_min, geofence_max)` returns a `LocalGeofence`.
    This is a box around the segment, clipped to the global geofence. The
    default global geofence is (0, 0, 0)–(10, 10, 10). The result also holds
    the corner points `a`–`e`, `direction` and `ortho`.
    `fill_local_geofence` raises `ValueError` when start and end are 0.01 or
    less apart.
- **`aeroplan.flight`**
  - `yaw_diff` gives the amplitude between two yaw angles. A NaN previous yaw
    returns the requested yaw; a NaN requested yaw raises `ValueError`.
  - `limit_yaw` caps a turn at 120° (in radians) by default.
  - `quaternion_from_yaw` and `yaw_from_quaternion` work on `(x, y, z, w)`
    quaternions.
  - `angular_distance` gives the angle between two such quaternions.
  - `to_degrees` converts radians to degrees.
  - `calculate_velocity(x0, x2, d)` returns a `Vector3` of cruising speed 1.0
    pointing from `x0` towards `x2`. It raises `ValueError` when no direction
    can be formed.
- **`aeroplan.teleop`**
  - `key_to_twist(key, linear_scale, angular_scale)` maps an arrow-key code
    to a `Twist` (`linear_x`, `angular_z`). The key may be an `int`, a
    one-character `str` or a one-byte `bytes`. Both scales default to 2.0.
    Any other key gives `None`.
  - `teleop_commands` yields a `Twist` for every arrow key in an iterable.

## Installation

Install the package with pip. NumPy is the only runtime dependency. The
`test` extra adds pytest.

## Examples

```python
from aeroplan.geometry import Vector3
from aeroplan.orthogonal_planes import generate_coordinate_frame

frame = generate_coordinate_frame(Vector3(0, 0, 0), Vector3(1, 1, 1))
# frame.direction, frame.orthogonal_a and frame.orthogonal_b are
# mutually orthogonal unit vectors.
```

```python
import math
from aeroplan.flight import yaw_diff, to_degrees

yaw_diff(0.5, -0.5)   # 1.0
to_degrees(math.pi)   # 180.0
```

```python
from aeroplan.teleop import teleop_commands

list(teleop_commands(b"\x41q\x44"))
# [Twist(linear_x=2.0, angular_z=0.0), Twist(linear_x=0.0, angular_z=2.0)]
```

## What it does not do

The package provides pieces for a planner, not a planner. It has no:

- octree map storage or loading;
- open list or search loop that runs a complete path search;
- command-line tool or argument parsing;
- reading from a keyboard;
- publishing of commands to a vehicle.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.