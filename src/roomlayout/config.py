"""Configuration for the room layout editor.

Module-level constants hold the defaults; ``EditorConfig`` bundles them so
that an editor, its geometry queries and the renderer all agree on the same
grid, snap radius and door width.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path

# Global parameters
GRID_SIZE = 20  # Grid cell size, also the snap quantum
SNAP_DISTANCE = 15  # Capture radius for snapping to room corners
DOOR_WIDTH = 40  # Gap reserved in a wall for each door
DOOR_MATCH_EPSILON = 1.0  # Max cross-axis offset for a door to sit on a wall

CANVAS_WIDTH = 1880
CANVAS_HEIGHT = 750


@dataclass(frozen=True)
class EditorConfig:
    """Tunable constants of the layout engine.

    Attributes:
        grid_size: Grid cell size and snap quantum.
        snap_distance: Point-snap capture radius.
        door_width: Gap width reserved in walls per door.
        wall_intersection_tolerance: Capture radius for wall-click detection.
            ``None`` means half of ``grid_size``.
        door_match_epsilon: Tolerance used to decide which wall a door sits on.
        canvas_width: Width of the drawing area, used by the renderer.
        canvas_height: Height of the drawing area, used by the renderer.
    """

    grid_size: float = GRID_SIZE
    snap_distance: float = SNAP_DISTANCE
    door_width: float = DOOR_WIDTH
    wall_intersection_tolerance: float | None = None
    door_match_epsilon: float = DOOR_MATCH_EPSILON
    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT

    def __post_init__(self) -> None:
        for name in ("grid_size", "snap_distance", "door_width", "door_match_epsilon"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.wall_intersection_tolerance is not None and self.wall_intersection_tolerance <= 0:
            raise ValueError(
                f"wall_intersection_tolerance must be positive, got {self.wall_intersection_tolerance}"
            )
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("Canvas dimensions must be positive")

    @property
    def tolerance(self) -> float:
        """Effective wall-click capture radius."""
        if self.wall_intersection_tolerance is None:
            return self.grid_size / 2
        return self.wall_intersection_tolerance


DEFAULT_CONFIG = EditorConfig()


def load_config(path: str | Path) -> EditorConfig:
    """Load an editor configuration from a JSON file.

    The file holds a single object with any subset of the ``EditorConfig``
    field names; missing fields keep their defaults.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        The parsed configuration.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON is not an object, names an unknown key or
            holds an invalid value.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a JSON object, got: {type(data).__name__}")

    known = {field.name for field in fields(EditorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    try:
        return EditorConfig(**data)
    except TypeError as e:
        raise ValueError(f"Invalid configuration in {path}: {e}") from e
