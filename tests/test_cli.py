"""Tests for the room-layout command line interface."""

import pytest
from typer.testing import CliRunner

from roomlayout.cli import app

runner = CliRunner()

SCRIPT = [
    {"type": "pointer_down", "x": 5, "y": 5},
    {"type": "pointer_move", "x": 205, "y": 105},
    {"type": "pointer_up", "x": 205, "y": 105},
    {"type": "tool", "tool": "door"},
    {"type": "click", "x": 100, "y": 2},
]


@pytest.fixture
def events_file(write_json):
    return write_json("events.json", SCRIPT)


def test_replay_prints_rooms_and_doors(events_file):
    result = runner.invoke(app, ["replay", "--events", str(events_file)])

    assert result.exit_code == 0, result.output
    assert "Loaded 5 events" in result.output
    assert "10.0 x 5.0" in result.output
    assert "horizontal" in result.output


def test_replay_renders_png(events_file, tmp_path):
    out = tmp_path / "plan.png"
    result = runner.invoke(app, ["replay", "--events", str(events_file), "--out", str(out)])

    assert result.exit_code == 0, result.output
    assert out.exists()


def test_replay_grid_override(events_file):
    result = runner.invoke(app, ["replay", "--events", str(events_file), "--grid-size", "40"])

    assert result.exit_code == 0, result.output
    # 105 snaps to 120 on a 40 unit grid
    assert "5.0 x 3.0" in result.output


def test_replay_missing_file(tmp_path):
    result = runner.invoke(app, ["replay", "--events", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_replay_malformed_script(write_json):
    path = write_json("bad.json", [{"type": "hover"}])
    result = runner.invoke(app, ["replay", "--events", str(path)])

    assert result.exit_code == 1
    assert "unknown type" in result.output


def test_replay_bad_config(events_file, write_json):
    config = write_json("config.json", {"grid_size": -5})
    result = runner.invoke(app, ["replay", "--events", str(events_file), "--config", str(config)])

    assert result.exit_code == 1
    assert "grid_size must be positive" in result.output


def test_walls_lists_segments(events_file):
    result = runner.invoke(app, ["walls", "--events", str(events_file)])

    assert result.exit_code == 0, result.output
    assert "(0, 0)-(80, 0)" in result.output
    assert "(120, 0)-(200, 0)" in result.output


def test_locate_reports_hit(events_file):
    result = runner.invoke(app, ["locate", "100", "2", "--events", str(events_file)])

    assert result.exit_code == 0, result.output
    assert "Snap: (100, 0)" in result.output
    assert "Wall: (100, 0) horizontal" in result.output


def test_locate_without_layout():
    result = runner.invoke(app, ["locate", "7", "13"])

    assert result.exit_code == 0, result.output
    assert "Snap: (0, 20)" in result.output
    assert "Wall: none" in result.output
