"""Tests for grid and point snapping."""

import pytest

from roomlayout.core.model import Point, Room
from roomlayout.geom.snap import snap_points, snap_to_grid, snap_to_nearest_point


@pytest.mark.parametrize(
    "value, expected",
    [(0, 0), (9, 0), (10, 20), (11, 20), (29.9, 20), (205, 200), (-9, 0), (-10, 0), (-11, -20)],
)
def test_snap_to_grid_rounds_to_nearest_cell(value, expected):
    assert snap_to_grid(value) == expected


@pytest.mark.parametrize("value", [-37.5, -10, 0, 3.2, 10, 15, 210, 1234.5])
def test_snap_to_grid_is_idempotent(value):
    once = snap_to_grid(value)
    assert snap_to_grid(once) == once


def test_snap_to_grid_custom_size():
    assert snap_to_grid(26, grid_size=25) == 25
    assert snap_to_grid(38, grid_size=25) == 50


def test_snap_points_are_room_corners_in_order():
    rooms = [Room(0, 0, 100, 60), Room(100, 0, 40, 60)]
    assert snap_points(rooms) == [
        Point(0, 0),
        Point(100, 0),
        Point(0, 60),
        Point(100, 60),
        Point(100, 0),
        Point(140, 0),
        Point(100, 60),
        Point(140, 60),
    ]


def test_snap_to_nearest_point_falls_back_to_grid():
    assert snap_to_nearest_point(5, 5, []) == Point(0, 0)
    assert snap_to_nearest_point(33, 47, [Point(100, 100)]) == Point(40, 40)


def test_snap_to_nearest_point_captures_nearby_corner():
    # (107, 93) would grid-snap to (100, 100); the corner is off-grid
    corner = Point(113, 87)
    assert snap_to_nearest_point(107, 93, [corner]) == corner


def test_snap_to_nearest_point_requires_strictly_inside_radius():
    corner = Point(115, 100)
    assert snap_to_nearest_point(100, 100, [corner]) == Point(100, 100)
    assert snap_to_nearest_point(100.5, 100, [corner]) == corner


def test_snap_to_nearest_point_prefers_closest_candidate():
    near = Point(52, 50)
    far = Point(45, 50)
    assert snap_to_nearest_point(51, 50, [far, near]) == near


def test_snap_to_nearest_point_tie_keeps_first_candidate():
    # Intentional tie-break: equal distances resolve to the earlier point
    left = Point(40, 50)
    right = Point(60, 50)
    assert snap_to_nearest_point(50, 50, [left, right]) is left
    assert snap_to_nearest_point(50, 50, [right, left]) is right


def test_snap_to_nearest_point_custom_radius():
    corner = Point(130, 100)
    assert snap_to_nearest_point(100, 100, [corner], snap_distance=40) == corner
