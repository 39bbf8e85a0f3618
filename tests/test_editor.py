"""Tests for the editor command/query interface."""

import pytest

from roomlayout.config import EditorConfig
from roomlayout.core.layout import Layout
from roomlayout.core.model import HORIZONTAL, VERTICAL, Door, Point, Room
from roomlayout.engine.editor import Editor


def _draw(editor, start, end):
    anchor = editor.begin_room(*start)
    return editor.commit_room(editor.update_room(anchor, *end))


def test_begin_room_snaps_anchor_to_grid(editor):
    assert editor.begin_room(5, 5) == Point(0, 0)


def test_update_room_returns_uncommitted_candidate(editor):
    anchor = editor.begin_room(5, 5)
    candidate = editor.update_room(anchor, 205, 105)

    assert candidate == Room(0, 0, 200, 100)
    assert editor.rooms == ()


def test_drag_commits_snapped_room(editor):
    assert _draw(editor, (5, 5), (205, 105))
    assert editor.rooms == (Room(0, 0, 200, 100),)


def test_drag_on_half_cells_rounds_up(editor):
    # 210 and 110 sit exactly half way between grid lines
    assert _draw(editor, (5, 5), (210, 110))
    assert editor.rooms == (Room(0, 0, 220, 120),)


def test_single_cell_drag_is_rejected(editor):
    assert not _draw(editor, (5, 5), (15, 15))
    assert editor.rooms == ()


def test_reverse_drag_is_normalised(editor):
    assert _draw(editor, (205, 105), (5, 5))
    assert editor.rooms == (Room(0, 0, 200, 100),)


def test_new_room_snaps_to_existing_corner():
    editor = Editor(EditorConfig(grid_size=20, snap_distance=15))
    editor.layout.add_room(Room(3, 3, 197, 97))

    # (12, 8) would grid-snap to (20, 0); the corner (3, 3) is closer than 15
    anchor = editor.begin_room(12, 8)
    assert anchor == Point(3, 3)
    assert editor.update_room(anchor, 195, 105) == Room(3, 3, 197, 97)


def test_place_door_on_wall(editor_with_room):
    door = editor_with_room.place_door(100, 2)

    assert door == Door(100, 0, HORIZONTAL)
    assert editor_with_room.doors == (door,)


def test_place_door_away_from_walls_is_ignored(editor_with_room):
    assert editor_with_room.place_door(100, 50) is None
    assert editor_with_room.doors == ()


def test_place_door_without_rooms_is_ignored(editor):
    assert editor.place_door(0, 0) is None


def test_drawable_segments_use_layout_doors(editor_with_room):
    top, right, _, _ = editor_with_room.walls_of(editor_with_room.rooms[0])
    editor_with_room.place_door(100, 2)
    editor_with_room.place_door(198, 50)

    assert editor_with_room.drawable_segments(top) == [
        (Point(0, 0), Point(80, 0)),
        (Point(120, 0), Point(200, 0)),
    ]
    assert editor_with_room.doors[1] == Door(200, 60, VERTICAL)
    assert editor_with_room.drawable_segments(right) == [
        (Point(200, 0), Point(200, 40)),
        (Point(200, 80), Point(200, 100)),
    ]


def test_door_width_comes_from_config():
    editor = Editor(EditorConfig(door_width=20))
    _draw(editor, (5, 5), (205, 105))
    editor.place_door(100, 0)
    top = editor.walls_of(editor.rooms[0])[0]

    assert editor.drawable_segments(top) == [(Point(0, 0), Point(90, 0)), (Point(110, 0), Point(200, 0))]


def test_snap_points_track_committed_rooms(editor_with_room):
    assert editor_with_room.snap_points() == [Point(0, 0), Point(200, 0), Point(0, 100), Point(200, 100)]


def test_editor_can_wrap_existing_layout():
    layout = Layout()
    layout.add_room(Room(0, 0, 100, 100))
    editor = Editor(layout=layout)
    assert editor.rooms == (Room(0, 0, 100, 100),)


def test_wrapped_layout_must_share_grid_size():
    with pytest.raises(ValueError, match="grid size"):
        Editor(EditorConfig(grid_size=10), layout=Layout())


def test_min_size_rule_uses_editor_grid():
    editor = Editor(EditorConfig(grid_size=10), layout=Layout(grid_size=10))

    # 20x20 spans two cells of a 10 unit grid
    assert _draw(editor, (0, 0), (20, 20))
    assert editor.rooms == (Room(0, 0, 20, 20),)
