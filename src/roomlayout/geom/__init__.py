"""Geometry for room layouts.

This module provides grid and point snapping, wall decomposition around
door gaps, wall hit detection and annotation geometry.
"""

from .annotations import DoorSwing, LabelAnchor, dimension_label, door_swing, label_anchors, room_dimensions
from .intersect import find_wall_intersection
from .snap import snap_points, snap_to_grid, snap_to_nearest_point
from .walls import doors_on_wall, drawable_segments, room_segments, walls_of

__all__ = [
    "DoorSwing",
    "LabelAnchor",
    "dimension_label",
    "door_swing",
    "doors_on_wall",
    "drawable_segments",
    "find_wall_intersection",
    "label_anchors",
    "room_dimensions",
    "room_segments",
    "snap_points",
    "snap_to_grid",
    "snap_to_nearest_point",
    "walls_of",
]
