"""Room Layout - A Python library for drawing rooms and doors on a grid."""

__version__ = "0.1.0"

from .config import EditorConfig
from .core.model import Door, Hit, Point, Room, WallSegment
from .core.layout import Layout
from .engine.editor import Editor
from .engine.session import EditorSession

__all__ = ["Door", "Editor", "EditorConfig", "EditorSession", "Hit", "Layout", "Point", "Room", "WallSegment"]
