"""Command/query interface of the layout engine.

The editor wraps a single ``Layout`` and exposes the commands an input
layer issues (begin/update/commit a room, place a door) together with the
read-only queries a renderer needs. It never observes its own state: the
caller decides when to query again and redraw.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..config import DEFAULT_CONFIG, EditorConfig
from ..core.layout import Layout
from ..core.model import Door, Point, Room, WallSegment
from ..geom.intersect import find_wall_intersection
from ..geom.snap import snap_to_nearest_point
from ..geom.walls import Segment, drawable_segments, walls_of

LOGGER = logging.getLogger(__name__)


class Editor:
    """Single-writer editor over one layout.

    Args:
        config: Grid, snap and door constants. Defaults to ``DEFAULT_CONFIG``.
        layout: Layout to edit. A new empty one is created if omitted.

    Raises:
        ValueError: If the layout uses a different grid size than the config.
    """

    def __init__(self, config: EditorConfig = DEFAULT_CONFIG, layout: Optional[Layout] = None) -> None:
        if layout is not None and layout.grid_size != config.grid_size:
            raise ValueError(
                f"Layout grid size {layout.grid_size} does not match editor grid size {config.grid_size}"
            )
        self.config = config
        self.layout = layout if layout is not None else Layout(grid_size=config.grid_size)

    # Queries

    @property
    def rooms(self) -> Tuple[Room, ...]:
        return self.layout.rooms

    @property
    def doors(self) -> Tuple[Door, ...]:
        return self.layout.doors

    def snap_points(self) -> List[Point]:
        return self.layout.snap_points()

    def walls_of(self, room: Room) -> Tuple[WallSegment, ...]:
        return walls_of(room)

    def drawable_segments(self, wall: WallSegment) -> List[Segment]:
        """Split a wall around the doors currently in the layout."""
        return drawable_segments(
            wall,
            self.layout.doors,
            door_width=self.config.door_width,
            epsilon=self.config.door_match_epsilon,
        )

    def snap(self, x: float, y: float) -> Point:
        """Snap a raw coordinate to a room corner or the grid."""
        return snap_to_nearest_point(
            x,
            y,
            self.snap_points(),
            snap_distance=self.config.snap_distance,
            grid_size=self.config.grid_size,
        )

    # Commands

    def begin_room(self, x: float, y: float) -> Point:
        """Start a room drag and return its snapped anchor corner."""
        anchor = self.snap(x, y)
        LOGGER.debug("Room drag started at (%s, %s), anchored to %s", x, y, anchor)
        return anchor

    def update_room(self, anchor: Point, x: float, y: float) -> Room:
        """Build the candidate room spanning the anchor and the snapped pointer.

        The candidate is not committed and may have negative width/height.
        """
        corner = self.snap(x, y)
        candidate = Room(x=anchor.x, y=anchor.y, width=corner.x - anchor.x, height=corner.y - anchor.y)
        LOGGER.debug("Candidate room updated to %s", candidate)
        return candidate

    def commit_room(self, candidate: Room) -> bool:
        """Add a candidate room to the layout if it is large enough.

        Returns:
            True if the room was committed.
        """
        committed = self.layout.add_room(candidate)
        if committed:
            LOGGER.debug("Committed room %s", self.layout.rooms[-1])
        return committed

    def place_door(self, x: float, y: float) -> Optional[Door]:
        """Place a door on the wall nearest to a raw click.

        Returns:
            The new door, or None if the click was not near any wall.
        """
        hit = find_wall_intersection(
            x,
            y,
            self.layout.rooms,
            grid_size=self.config.grid_size,
            tolerance=self.config.tolerance,
        )
        if hit is None:
            LOGGER.debug("Click at (%s, %s) is not near any wall", x, y)
            return None

        door = hit.to_door()
        self.layout.add_door(door)
        return door
