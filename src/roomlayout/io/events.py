"""Reader for recorded pointer-event scripts.

An event script is a JSON list of objects, each either a pointer event
``{"type": "pointer_down", "x": 5, "y": 5}`` or a tool change
``{"type": "tool", "tool": "door"}``. Replaying a script into an
``EditorSession`` reproduces a drawing session without a UI.
"""

import json
from pathlib import Path
from typing import Iterable, List

from ..engine.session import EVENT_TYPES, TOOLS, EditorSession, PointerEvent


def _parse_event(index: int, event_data: dict) -> PointerEvent:
    """Build a PointerEvent from one script entry.

    Raises:
        ValueError: If the entry is malformed.
    """
    if not isinstance(event_data, dict):
        raise ValueError(f"Event {index} must be an object, got: {event_data!r}")

    event_type = event_data.get("type")
    if event_type not in EVENT_TYPES:
        raise ValueError(f"Event {index} has unknown type: {event_type!r}")

    if event_type == "tool":
        tool = event_data.get("tool")
        if tool not in TOOLS:
            raise ValueError(f"Event {index} selects unknown tool: {tool!r}")
        return PointerEvent(type=event_type, tool=tool)

    try:
        x = float(event_data["x"])
        y = float(event_data["y"])
    except KeyError as e:
        raise ValueError(f"Event {index} is missing coordinate {e}") from e
    except (TypeError, ValueError) as e:
        raise ValueError(f"Event {index} has invalid coordinates: {e}") from e

    return PointerEvent(type=event_type, x=x, y=y)


def parse_events(data: list) -> List[PointerEvent]:
    """Parse already-decoded event script data."""
    if not isinstance(data, list):
        raise ValueError(f"Event script must be a list, got: {type(data).__name__}")
    return [_parse_event(i, event_data) for i, event_data in enumerate(data)]


def load_events(path: str) -> List[PointerEvent]:
    """Load an event script from a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        The events in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON data is invalid or malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    return parse_events(data)


def replay(session: EditorSession, events: Iterable[PointerEvent]) -> EditorSession:
    """Dispatch events into a session in order and return it."""
    for event in events:
        session.dispatch(event)
    return session
