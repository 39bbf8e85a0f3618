"""Wall hit detection for door placement.

A click is snapped to the grid and tested against the edges of each room.
The first edge close enough wins: rooms are tried in insertion order and,
within a room, edges in the order top, bottom, left, right.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..config import GRID_SIZE
from ..core.model import HORIZONTAL, VERTICAL, Hit, Room
from .snap import snap_to_grid


def _hit_room(room: Room, x: float, y: float, tolerance: float) -> Optional[Hit]:
    """Test the edges of one room against an already snapped point."""
    within_width = room.x <= x <= room.right
    within_height = room.y <= y <= room.bottom

    if abs(y - room.y) < tolerance and within_width:
        return Hit(x=x, y=room.y, orientation=HORIZONTAL)
    if abs(y - room.bottom) < tolerance and within_width:
        return Hit(x=x, y=room.bottom, orientation=HORIZONTAL)
    if abs(x - room.x) < tolerance and within_height:
        return Hit(x=room.x, y=y, orientation=VERTICAL)
    if abs(x - room.right) < tolerance and within_height:
        return Hit(x=room.right, y=y, orientation=VERTICAL)
    return None


def find_wall_intersection(
    x: float,
    y: float,
    rooms: Iterable[Room],
    grid_size: float = GRID_SIZE,
    tolerance: Optional[float] = None,
) -> Optional[Hit]:
    """Find the wall a raw point lands on.

    Args:
        x: Raw x-coordinate.
        y: Raw y-coordinate.
        rooms: Rooms to test, in insertion order.
        grid_size: Grid cell size used to snap the point first.
        tolerance: Capture radius around each wall line. Defaults to half a
            grid cell.

    Returns:
        The snapped point clamped onto the first matching wall together with
        the wall orientation, or None if no wall is close enough.
    """
    if tolerance is None:
        tolerance = grid_size / 2

    snapped_x = snap_to_grid(x, grid_size)
    snapped_y = snap_to_grid(y, grid_size)

    for room in rooms:
        hit = _hit_room(room, snapped_x, snapped_y, tolerance)
        if hit is not None:
            return hit
    return None
