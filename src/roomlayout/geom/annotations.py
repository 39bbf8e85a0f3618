"""Annotation geometry: room dimension labels and door swings.

These are pure helpers for a renderer. Dimensions are expressed in grid
units; door swings describe the quarter circle drawn next to each door gap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from ..config import DOOR_WIDTH, GRID_SIZE
from ..core.model import HORIZONTAL, Door, Point, Room

# Offsets of the dimension labels from the room edges
LABEL_OFFSET_ABOVE = 5
LABEL_OFFSET_BELOW = 15
LABEL_OFFSET_SIDE = 10


@dataclass(frozen=True)
class DoorSwing:
    """Quarter-circle swing of a door leaf.

    Attributes:
        hinge: Centre of the arc.
        radius: Arc radius, equal to the door width.
        start_angle: Arc start in degrees, measured in canvas space.
        end_angle: Arc end in degrees.
        guide_end: End of the faint guide line drawn from the hinge.
    """

    hinge: Point
    radius: float
    start_angle: float
    end_angle: float
    guide_end: Point


@dataclass(frozen=True)
class LabelAnchor:
    """Position of a dimension label.

    Attributes:
        position: Where the label text is centred.
        text: Label text.
        rotation: Text rotation in degrees.
    """

    position: Point
    text: str
    rotation: float = 0.0


def dimension_label(length: float, grid_size: float = GRID_SIZE) -> str:
    """Format a length in grid units with one decimal."""
    return f"{length / grid_size:.1f}"


def room_dimensions(room: Room, grid_size: float = GRID_SIZE) -> Tuple[str, str]:
    """Return the width and height labels of a room."""
    return dimension_label(room.width, grid_size), dimension_label(room.height, grid_size)


def label_anchors(room: Room, grid_size: float = GRID_SIZE) -> Dict[str, LabelAnchor]:
    """Place the four dimension labels around a room.

    Width is written above and below the room, height to its left and right
    with the text rotated a quarter turn.
    """
    width_text, height_text = room_dimensions(room, grid_size)
    center_x = room.x + room.width / 2
    center_y = room.y + room.height / 2

    return {
        "top": LabelAnchor(Point(center_x, room.y - LABEL_OFFSET_ABOVE), width_text),
        "bottom": LabelAnchor(Point(center_x, room.bottom + LABEL_OFFSET_BELOW), width_text),
        "left": LabelAnchor(Point(room.x - LABEL_OFFSET_SIDE, center_y), height_text, 90.0),
        "right": LabelAnchor(Point(room.right + LABEL_OFFSET_SIDE, center_y), height_text, 90.0),
    }


def door_swing(door: Door, door_width: float = DOOR_WIDTH) -> DoorSwing:
    """Compute the swing arc of a door.

    Horizontal doors hinge on the right end of their gap and swing upward;
    vertical doors hinge on the lower end and swing to the right.
    """
    half = door_width / 2
    if door.orientation == HORIZONTAL:
        hinge = Point(door.x + half, door.y)
        return DoorSwing(
            hinge=hinge,
            radius=door_width,
            start_angle=180.0,
            end_angle=270.0,
            guide_end=Point(hinge.x, hinge.y - door_width),
        )

    hinge = Point(door.x, door.y + half)
    return DoorSwing(
        hinge=hinge,
        radius=door_width,
        start_angle=270.0,
        end_angle=360.0,
        guide_end=Point(hinge.x + door_width, hinge.y),
    )
