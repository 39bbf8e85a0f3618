"""Commit rules for rooms drawn by the user.

A dragged rectangle only becomes a room when both of its sides span more
than one grid cell; committed rooms are stored normalised.
"""

from __future__ import annotations

from .model import Room


def exceeds_min_size(room: Room, grid_size: float) -> bool:
    """Check that both sides of a candidate room are longer than one grid cell.

    Args:
        room: Candidate room, possibly with negative width or height.
        grid_size: Grid cell size.

    Returns:
        True if ``|width| > grid_size`` and ``|height| > grid_size``.
    """
    return abs(room.width) > grid_size and abs(room.height) > grid_size


def commit_candidate(room: Room, grid_size: float) -> Room | None:
    """Turn a candidate room into a committed one.

    Returns:
        The normalised room, or None if it is too small to keep.
    """
    if not exceeds_min_size(room, grid_size):
        return None
    return room.normalized()
