"""Wall decomposition for rectangular rooms.

Each room has four walls (top, right, bottom, left). Doors cut gaps into
the walls they sit on; ``drawable_segments`` returns the pieces of a wall
that remain once those gaps are removed.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from ..config import DOOR_MATCH_EPSILON, DOOR_WIDTH
from ..core.model import Door, Point, Room, WallSegment

Segment = Tuple[Point, Point]


def walls_of(room: Room) -> tuple[WallSegment, WallSegment, WallSegment, WallSegment]:
    """Return the walls of a room in the order top, right, bottom, left."""
    top_left, top_right, bottom_left, bottom_right = room.corners()
    return (
        WallSegment(start=top_left, end=top_right, is_horizontal=True),
        WallSegment(start=top_right, end=bottom_right, is_horizontal=False),
        WallSegment(start=bottom_left, end=bottom_right, is_horizontal=True),
        WallSegment(start=top_left, end=bottom_left, is_horizontal=False),
    )


def _door_position(door: Door, wall: WallSegment) -> float:
    return door.x if wall.is_horizontal else door.y


def _door_offset(door: Door, wall: WallSegment) -> float:
    return door.y if wall.is_horizontal else door.x


def doors_on_wall(
    wall: WallSegment, doors: Iterable[Door], epsilon: float = DOOR_MATCH_EPSILON
) -> List[Door]:
    """Select the doors lying on a wall, sorted along the wall axis.

    A door belongs to a horizontal wall when its y is within ``epsilon`` of
    the wall line and its x lies inside the wall span (endpoints included);
    vertical walls use the same rule with the axes swapped.
    """
    matching = [
        door
        for door in doors
        if abs(_door_offset(door, wall) - wall.line_coordinate) < epsilon
        and wall.axis_start <= _door_position(door, wall) <= wall.axis_end
    ]
    return sorted(matching, key=lambda door: _door_position(door, wall))


def drawable_segments(
    wall: WallSegment,
    doors: Iterable[Door],
    door_width: float = DOOR_WIDTH,
    epsilon: float = DOOR_MATCH_EPSILON,
) -> List[Segment]:
    """Split a wall into the segments left between door gaps.

    Doors are walked in order along the wall with a cursor starting at the
    wall start. A segment is emitted up to each door's gap only when the gap
    starts strictly after the cursor; the cursor then jumps past the gap.
    Doors whose gaps overlap are absorbed without emitting empty segments.

    Args:
        wall: The wall to split.
        doors: All doors of the layout; those not on the wall are ignored.
        door_width: Width of the gap cut for each door.
        epsilon: Tolerance used to match doors to the wall line.

    Returns:
        List of (start, end) point pairs, ordered along the wall.
    """
    wall_doors = doors_on_wall(wall, doors, epsilon)
    if not wall_doors:
        return [(wall.start, wall.end)]

    half_width = door_width / 2
    segments = []
    cursor = wall.axis_start

    for door in wall_doors:
        position = _door_position(door, wall)
        if position - half_width > cursor:
            segments.append((wall.point_at(cursor), wall.point_at(position - half_width)))
        cursor = position + half_width

    if cursor < wall.axis_end:
        segments.append((wall.point_at(cursor), wall.end))

    return segments


def room_segments(
    room: Room,
    doors: Iterable[Door],
    door_width: float = DOOR_WIDTH,
    epsilon: float = DOOR_MATCH_EPSILON,
) -> List[Segment]:
    """Return the drawable segments of all four walls of a room."""
    doors = list(doors)
    segments = []
    for wall in walls_of(room):
        segments.extend(drawable_segments(wall, doors, door_width, epsilon))
    return segments
