"""Tests for event-script loading and replay."""

import pytest

from roomlayout.core.model import HORIZONTAL, Door, Room
from roomlayout.engine.session import PointerEvent
from roomlayout.io.events import load_events, parse_events, replay

SCRIPT = [
    {"type": "pointer_down", "x": 5, "y": 5},
    {"type": "pointer_move", "x": 205, "y": 105},
    {"type": "pointer_up", "x": 205, "y": 105},
    {"type": "tool", "tool": "door"},
    {"type": "click", "x": 100, "y": 2},
]


def test_load_events(write_json):
    events = load_events(str(write_json("events.json", SCRIPT)))

    assert events[0] == PointerEvent("pointer_down", 5.0, 5.0)
    assert events[3] == PointerEvent("tool", tool="door")
    assert len(events) == 5


def test_replay_builds_layout(write_json, session):
    replay(session, load_events(str(write_json("events.json", SCRIPT))))

    assert session.editor.rooms == (Room(0, 0, 200, 100),)
    assert session.editor.doors == (Door(100, 0, HORIZONTAL),)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_events(str(tmp_path / "missing.json"))


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(ValueError):
        load_events(str(path))


@pytest.mark.parametrize(
    "data, message",
    [
        ({"type": "click"}, "must be a list"),
        (["click"], "must be an object"),
        ([{"type": "hover", "x": 1, "y": 1}], "unknown type"),
        ([{"type": "tool", "tool": "window"}], "unknown tool"),
        ([{"type": "click", "x": 1}], "missing coordinate"),
        ([{"type": "click", "x": "left", "y": 1}], "invalid coordinates"),
    ],
)
def test_malformed_scripts(data, message):
    with pytest.raises(ValueError, match=message):
        parse_events(data)


def test_error_names_offending_entry():
    with pytest.raises(ValueError, match="Event 1"):
        parse_events([{"type": "click", "x": 0, "y": 0}, {"type": "nope"}])
