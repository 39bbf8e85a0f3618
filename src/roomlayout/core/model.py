"""Core data models for room layouts.

This module defines the value types the layout engine works with: points,
rectangular rooms, doors, the wall segments derived from a room, and the
hit produced when a click lands on a wall.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from shapely.geometry import Polygon, box

HORIZONTAL = "horizontal"
VERTICAL = "vertical"

Orientation = Literal["horizontal", "vertical"]


@dataclass(frozen=True)
class Point:
    """Represents a 2D point in canvas space (y grows downward).

    Attributes:
        x: The x-coordinate of the point.
        y: The y-coordinate of the point.
    """

    x: float
    y: float


@dataclass(frozen=True)
class Room:
    """Represents an axis-aligned rectangular room.

    While a room is being dragged its width and height may be negative;
    committed rooms are normalised so that ``(x, y)`` is the top-left corner.

    Attributes:
        x: The x-coordinate of the anchor (top-left once normalised).
        y: The y-coordinate of the anchor (top-left once normalised).
        width: Horizontal extent.
        height: Vertical extent.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Return the corners: top-left, top-right, bottom-left, bottom-right."""
        return (
            Point(self.x, self.y),
            Point(self.right, self.y),
            Point(self.x, self.bottom),
            Point(self.right, self.bottom),
        )

    def normalized(self) -> Room:
        """Return the same rectangle with non-negative width and height."""
        return Room(
            x=self.x + self.width if self.width < 0 else self.x,
            y=self.y + self.height if self.height < 0 else self.y,
            width=abs(self.width),
            height=abs(self.height),
        )

    def outline(self) -> Polygon:
        """Return the room footprint as a Shapely polygon."""
        room = self.normalized()
        return box(room.x, room.y, room.right, room.bottom)


@dataclass(frozen=True)
class Door:
    """Represents a door sitting on a room wall.

    Attributes:
        x: The x-coordinate of the door centre.
        y: The y-coordinate of the door centre.
        orientation: Axis of the wall the door interrupts.
    """

    x: float
    y: float
    orientation: Orientation


@dataclass(frozen=True)
class WallSegment:
    """Represents one straight wall of a room.

    Attributes:
        start: Starting point (smaller coordinate along the wall axis).
        end: Ending point.
        is_horizontal: Whether the wall runs along the x axis.
    """

    start: Point
    end: Point
    is_horizontal: bool

    @property
    def axis_start(self) -> float:
        return self.start.x if self.is_horizontal else self.start.y

    @property
    def axis_end(self) -> float:
        return self.end.x if self.is_horizontal else self.end.y

    @property
    def line_coordinate(self) -> float:
        """Fixed coordinate of the wall line (y for horizontal walls)."""
        return self.start.y if self.is_horizontal else self.start.x

    @property
    def length(self) -> float:
        return self.axis_end - self.axis_start

    def point_at(self, position: float) -> Point:
        """Return the point on the wall line at ``position`` along its axis."""
        if self.is_horizontal:
            return Point(position, self.start.y)
        return Point(self.start.x, position)


@dataclass(frozen=True)
class Hit:
    """Result of a successful wall-intersection test.

    Attributes:
        x: Snapped x-coordinate, clamped onto the wall.
        y: Snapped y-coordinate, clamped onto the wall.
        orientation: Orientation of the wall that was hit.
    """

    x: float
    y: float
    orientation: Orientation

    def to_door(self) -> Door:
        return Door(x=self.x, y=self.y, orientation=self.orientation)
