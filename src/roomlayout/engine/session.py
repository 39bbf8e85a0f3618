"""Pointer-event session driving an editor.

The session holds the UI state of an editing session (the selected tool and
the room currently being dragged) and maps pointer events onto editor
commands.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from ..core.model import Door, Point, Room
from .editor import Editor

LOGGER = logging.getLogger(__name__)

ROOM_TOOL = "room"
DOOR_TOOL = "door"
TOOLS = (ROOM_TOOL, DOOR_TOOL)

Tool = Literal["room", "door"]

EVENT_TYPES = ("pointer_down", "pointer_move", "pointer_up", "pointer_leave", "click", "tool")


@dataclass(frozen=True)
class PointerEvent:
    """A single input event.

    Attributes:
        type: One of ``EVENT_TYPES``.
        x: Pointer x-coordinate (unused for tool events).
        y: Pointer y-coordinate (unused for tool events).
        tool: Selected tool, only for ``tool`` events.
    """

    type: str
    x: float = 0.0
    y: float = 0.0
    tool: Optional[str] = None


class EditorSession:
    """Tool-aware adapter from pointer events to editor commands.

    Args:
        editor: The editor to drive.
        tool: Initially selected tool.
    """

    def __init__(self, editor: Editor, tool: Tool = ROOM_TOOL) -> None:
        self.editor = editor
        self.tool: str = ROOM_TOOL
        self.select_tool(tool)
        self.anchor: Optional[Point] = None
        self.current_room: Optional[Room] = None

    @property
    def is_drawing(self) -> bool:
        return self.anchor is not None

    def select_tool(self, tool: str) -> None:
        if tool not in TOOLS:
            raise ValueError(f"Unknown tool: {tool}")
        self.tool = tool

    def pointer_down(self, x: float, y: float) -> None:
        if self.tool == DOOR_TOOL:
            return
        self.anchor = self.editor.begin_room(x, y)
        self.current_room = Room(x=self.anchor.x, y=self.anchor.y, width=0, height=0)

    def pointer_move(self, x: float, y: float) -> None:
        if not self.is_drawing:
            return
        self.current_room = self.editor.update_room(self.anchor, x, y)

    def pointer_up(self, x: float = 0.0, y: float = 0.0) -> bool:
        """Finish the drag in progress.

        The candidate is committed as it stood after the last move; the
        coordinates of the release itself are not used.

        Returns:
            True if a room was committed.
        """
        if not self.is_drawing:
            return False

        committed = False
        if self.current_room is not None:
            committed = self.editor.commit_room(self.current_room)

        self.anchor = None
        self.current_room = None
        return committed

    def pointer_leave(self, x: float = 0.0, y: float = 0.0) -> bool:
        return self.pointer_up(x, y)

    def click(self, x: float, y: float) -> Optional[Door]:
        if self.tool != DOOR_TOOL:
            return None
        return self.editor.place_door(x, y)

    def dispatch(self, event: PointerEvent) -> None:
        """Route an event to the matching handler."""
        LOGGER.debug("Dispatching %s", event)
        if event.type == "tool":
            self.select_tool(event.tool)
        elif event.type == "pointer_down":
            self.pointer_down(event.x, event.y)
        elif event.type == "pointer_move":
            self.pointer_move(event.x, event.y)
        elif event.type == "pointer_up":
            self.pointer_up(event.x, event.y)
        elif event.type == "pointer_leave":
            self.pointer_leave(event.x, event.y)
        elif event.type == "click":
            self.click(event.x, event.y)
        else:
            raise ValueError(f"Unknown event type: {event.type}")
