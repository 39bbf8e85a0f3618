"""Engine module for room layout editing.

This module provides the command/query editor over a layout and the
pointer-event session that drives it.
"""

from .editor import Editor
from .session import DOOR_TOOL, ROOM_TOOL, EditorSession, PointerEvent

__all__ = ["DOOR_TOOL", "ROOM_TOOL", "Editor", "EditorSession", "PointerEvent"]
