"""Grid and point snapping.

Raw pointer coordinates are quantised to the grid, or pulled onto an
existing room corner when one lies within the snap radius.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from ..config import GRID_SIZE, SNAP_DISTANCE
from ..core.model import Point, Room


def _point_distance(x: float, y: float, point: Point) -> float:
    """Calculate Euclidean distance between a raw coordinate and a point."""
    return math.sqrt((x - point.x) ** 2 + (y - point.y) ** 2)


def snap_to_grid(value: float, grid_size: float = GRID_SIZE) -> float:
    """Round a coordinate to the nearest multiple of the grid size.

    Halves round up (toward positive infinity), so ``10`` snaps to ``20`` on
    a 20 unit grid and ``-10`` snaps to ``0``.
    """
    return math.floor(value / grid_size + 0.5) * grid_size


def snap_points(rooms: Iterable[Room]) -> List[Point]:
    """Collect the corners of all rooms, in room order."""
    points = []
    for room in rooms:
        points.extend(room.corners())
    return points


def snap_to_nearest_point(
    x: float,
    y: float,
    candidates: Sequence[Point],
    snap_distance: float = SNAP_DISTANCE,
    grid_size: float = GRID_SIZE,
) -> Point:
    """Snap a raw coordinate to the closest candidate point, or to the grid.

    Only candidates strictly closer than ``snap_distance`` are considered.
    On an exact distance tie the earlier candidate wins.

    Args:
        x: Raw x-coordinate.
        y: Raw y-coordinate.
        candidates: Snap points, usually room corners.
        snap_distance: Capture radius.
        grid_size: Grid cell size used for the fallback.

    Returns:
        The chosen candidate, or the grid-snapped coordinate.
    """
    closest = Point(snap_to_grid(x, grid_size), snap_to_grid(y, grid_size))
    min_distance = math.inf

    for point in candidates:
        distance = _point_distance(x, y, point)
        if distance < snap_distance and distance < min_distance:
            min_distance = distance
            closest = point

    return closest
