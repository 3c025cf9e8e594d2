"""Geometry, neighbour, geofence, flight and teleoperation helpers for octree-based UAV planning."""

__version__ = "0.1.0"