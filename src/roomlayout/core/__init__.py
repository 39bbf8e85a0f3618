"""Core data models for room layouts."""

from .model import HORIZONTAL, VERTICAL, Door, Hit, Orientation, Point, Room, WallSegment
from .rules import commit_candidate, exceeds_min_size
from .layout import Layout

__all__ = [
    "HORIZONTAL",
    "VERTICAL",
    "Door",
    "Hit",
    "Layout",
    "Orientation",
    "Point",
    "Room",
    "WallSegment",
    "commit_candidate",
    "exceeds_min_size",
]
