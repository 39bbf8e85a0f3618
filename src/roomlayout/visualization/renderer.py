"""PNG rendering of room layouts.

This module draws a layout the way the interactive editor shows it: a light
grid, walls with gaps cut for doors, door swings, dimension labels and the
room currently being dragged.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np

from ..config import DEFAULT_CONFIG, EditorConfig
from ..core.layout import Layout
from ..core.model import Room
from ..geom.annotations import door_swing, label_anchors
from ..geom.walls import room_segments

LOGGER = logging.getLogger(__name__)

# Canvas pixels are mapped 1:1 onto figure pixels at this resolution
DPI = 100
PX_TO_PT = 72 / DPI

GRID_COLOR = "#ddd"
GRID_LINE_WIDTH = 0.5
WALL_COLOR = "#555"
WALL_LINE_WIDTH = 5
CANDIDATE_EDGE_COLOR = "#000"
CANDIDATE_FILL_COLOR = "#A9A9A9"
GUIDE_COLOR = (0, 0, 0, 0.3)
GUIDE_LINE_WIDTH = 2
LABEL_FONT_SIZE = 14


def _draw_grid(ax, config: EditorConfig) -> None:
    xs = np.arange(0, config.canvas_width + 1, config.grid_size)
    ys = np.arange(0, config.canvas_height + 1, config.grid_size)
    ax.vlines(xs, 0, config.canvas_height, colors=GRID_COLOR, linewidth=GRID_LINE_WIDTH * PX_TO_PT)
    ax.hlines(ys, 0, config.canvas_width, colors=GRID_COLOR, linewidth=GRID_LINE_WIDTH * PX_TO_PT)


def _draw_dimensions(ax, room: Room, config: EditorConfig) -> None:
    for anchor in label_anchors(room, config.grid_size).values():
        ax.text(
            anchor.position.x,
            anchor.position.y,
            anchor.text,
            ha="center",
            va="center",
            rotation=anchor.rotation,
            fontsize=LABEL_FONT_SIZE * PX_TO_PT,
            color="#000",
        )


def _draw_candidate(ax, room: Room) -> None:
    outline = room.outline()
    if outline.area <= 0:
        return
    x, y = outline.exterior.xy
    ax.fill(
        x,
        y,
        facecolor=CANDIDATE_FILL_COLOR,
        edgecolor=CANDIDATE_EDGE_COLOR,
        linewidth=WALL_LINE_WIDTH * PX_TO_PT,
    )


def render_layout(
    layout: Layout,
    output_path: Path,
    config: EditorConfig = DEFAULT_CONFIG,
    current_room: Optional[Room] = None,
) -> bool:
    """Render a layout to a PNG image.

    Args:
        layout: The layout to draw.
        output_path: Path where to save the PNG image.
        config: Grid, door and canvas constants.
        current_room: Candidate room being dragged, drawn filled if given.

    Returns:
        True if the image was generated successfully, False otherwise.
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from matplotlib.patches import Arc

    fig = None
    try:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        fig = plt.figure(figsize=(config.canvas_width / DPI, config.canvas_height / DPI), dpi=DPI)
        ax = fig.add_axes([0, 0, 1, 1])
        ax.set_xlim(0, config.canvas_width)
        # Canvas coordinates: y grows downward
        ax.set_ylim(config.canvas_height, 0)
        ax.set_aspect("equal", adjustable="box")
        ax.axis("off")

        _draw_grid(ax, config)

        for room in layout.rooms:
            for start, end in room_segments(room, layout.doors, config.door_width, config.door_match_epsilon):
                ax.plot(
                    [start.x, end.x],
                    [start.y, end.y],
                    color=WALL_COLOR,
                    linewidth=WALL_LINE_WIDTH * PX_TO_PT,
                    solid_capstyle="butt",
                )
            _draw_dimensions(ax, room, config)

        if current_room is not None:
            _draw_candidate(ax, current_room)
            _draw_dimensions(ax, current_room, config)

        for door in layout.doors:
            swing = door_swing(door, config.door_width)
            ax.add_patch(
                Arc(
                    (swing.hinge.x, swing.hinge.y),
                    2 * swing.radius,
                    2 * swing.radius,
                    theta1=swing.start_angle,
                    theta2=swing.end_angle,
                    color=WALL_COLOR,
                    linewidth=WALL_LINE_WIDTH * PX_TO_PT,
                )
            )
            ax.plot(
                [swing.hinge.x, swing.guide_end.x],
                [swing.hinge.y, swing.guide_end.y],
                color=GUIDE_COLOR,
                linewidth=GUIDE_LINE_WIDTH * PX_TO_PT,
            )

        fig.savefig(output_path, dpi=DPI)
        LOGGER.debug("Rendered %r to %s", layout, output_path)
        return True

    except Exception as e:
        LOGGER.error("Error in image generation: %s", e)
        return False

    finally:
        if fig is not None:
            plt.close(fig)
