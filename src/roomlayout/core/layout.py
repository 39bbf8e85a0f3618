"""In-memory layout store.

The layout owns the ordered rooms and doors of a floor plan. It only ever
grows: rooms are appended once committed and doors once a wall hit has been
resolved. Everything derived from it (walls, snap points) is recomputed on
demand by the geometry functions.
"""

from __future__ import annotations

import logging

from ..config import GRID_SIZE
from ..geom.snap import snap_points
from .model import Door, Point, Room
from .rules import commit_candidate

LOGGER = logging.getLogger(__name__)


class Layout:
    """Ordered collection of rooms and doors.

    Args:
        grid_size: Grid cell size used for the minimum room size rule.
    """

    def __init__(self, grid_size: float = GRID_SIZE) -> None:
        self.grid_size = grid_size
        self._rooms: list[Room] = []
        self._doors: list[Door] = []

    @property
    def rooms(self) -> tuple[Room, ...]:
        return tuple(self._rooms)

    @property
    def doors(self) -> tuple[Door, ...]:
        return tuple(self._doors)

    def add_room(self, candidate: Room) -> bool:
        """Normalise and append a room.

        Args:
            candidate: Room as produced by a drag; width/height may be negative.

        Returns:
            True if the room was added, False if it was too small and discarded.
        """
        room = commit_candidate(candidate, self.grid_size)
        if room is None:
            LOGGER.debug(
                "Discarded room %sx%s: sides must exceed %s",
                candidate.width,
                candidate.height,
                self.grid_size,
            )
            return False

        self._rooms.append(room)
        LOGGER.debug("Added room #%d: %s", len(self._rooms), room)
        return True

    def add_door(self, door: Door) -> None:
        self._doors.append(door)
        LOGGER.debug("Added door #%d: %s", len(self._doors), door)

    def snap_points(self) -> list[Point]:
        """Return the corners of every room, in room order."""
        return snap_points(self._rooms)

    def __len__(self) -> int:
        return len(self._rooms)

    def __repr__(self) -> str:
        return f"Layout(rooms={len(self._rooms)}, doors={len(self._doors)})"
