"""Command Line Interface for the room layout editor.

This module replays recorded pointer-event scripts through the layout
engine, prints the resulting rooms, doors and wall segments, and renders
the plan to PNG.
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import DEFAULT_CONFIG, EditorConfig, load_config
from .engine.editor import Editor
from .engine.session import EditorSession
from .geom.annotations import room_dimensions
from .io.events import load_events, replay

LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    name="room-layout",
    help="Replay, inspect and render room layouts drawn on a grid",
    no_args_is_help=True,
)
console = Console()

WALL_NAMES = ("top", "right", "bottom", "left")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _resolve_config(
    config: Optional[Path], grid_size: Optional[float], door_width: Optional[float]
) -> EditorConfig:
    editor_config = load_config(config) if config else DEFAULT_CONFIG
    overrides = {}
    if grid_size is not None:
        overrides["grid_size"] = grid_size
    if door_width is not None:
        overrides["door_width"] = door_width
    return replace(editor_config, **overrides) if overrides else editor_config


def _replay_events(events: Path, editor_config: EditorConfig) -> EditorSession:
    event_list = load_events(str(events))
    console.print(f"[green]✓[/green] Loaded {len(event_list)} events from {events}")
    session = EditorSession(Editor(editor_config))
    return replay(session, event_list)


def _fail(e: Exception, verbose: bool) -> None:
    if isinstance(e, FileNotFoundError):
        console.print(f"[red]Error: File not found - {e}[/red]")
    elif isinstance(e, json.JSONDecodeError):
        console.print(f"[red]Error: Invalid JSON - {e}[/red]")
    else:
        console.print(f"[red]Error: {e}[/red]")
    if verbose:
        import traceback

        console.print(traceback.format_exc())
    raise typer.Exit(1)


def _fmt(value: float) -> str:
    return f"{value:g}"


@app.command("replay")
def replay_events(
    events: Path = typer.Option(..., "--events", "-e", help="Path to event script JSON file"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to editor config JSON file"),
    grid_size: Optional[float] = typer.Option(None, "--grid-size", help="Override the grid size"),
    door_width: Optional[float] = typer.Option(None, "--door-width", help="Override the door width"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Path to output PNG image"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Replay an event script and print the rooms and doors it produces."""
    _configure_logging(verbose)
    try:
        editor_config = _resolve_config(config, grid_size, door_width)
        session = _replay_events(events, editor_config)
    except (FileNotFoundError, ValueError) as e:
        _fail(e, verbose)

    editor = session.editor

    rooms_table = Table(title="Rooms")
    rooms_table.add_column("#", justify="right")
    rooms_table.add_column("x", justify="right")
    rooms_table.add_column("y", justify="right")
    rooms_table.add_column("width", justify="right")
    rooms_table.add_column("height", justify="right")
    rooms_table.add_column("size", justify="center", style="cyan")
    rooms_table.add_column("area", justify="right")
    for i, room in enumerate(editor.rooms, start=1):
        width_label, height_label = room_dimensions(room, editor_config.grid_size)
        area = room.outline().area / editor_config.grid_size**2
        rooms_table.add_row(
            str(i),
            _fmt(room.x),
            _fmt(room.y),
            _fmt(room.width),
            _fmt(room.height),
            f"{width_label} x {height_label}",
            f"{area:.1f}",
        )
    console.print(rooms_table)

    doors_table = Table(title="Doors")
    doors_table.add_column("#", justify="right")
    doors_table.add_column("x", justify="right")
    doors_table.add_column("y", justify="right")
    doors_table.add_column("orientation", style="cyan")
    for i, door in enumerate(editor.doors, start=1):
        doors_table.add_row(str(i), _fmt(door.x), _fmt(door.y), door.orientation)
    console.print(doors_table)

    if session.current_room is not None:
        console.print("[yellow]![/yellow] Script ended while a room was still being drawn")

    if out:
        from .visualization.renderer import render_layout

        if render_layout(editor.layout, out, editor_config, current_room=session.current_room):
            console.print(f"[green]✓[/green] Layout rendered to {out}")
        else:
            console.print(f"[red]✗[/red] Failed to render layout to {out}")
            raise typer.Exit(1)


@app.command()
def walls(
    events: Path = typer.Option(..., "--events", "-e", help="Path to event script JSON file"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to editor config JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Replay an event script and list the drawable segments of every wall."""
    _configure_logging(verbose)
    try:
        editor_config = _resolve_config(config, None, None)
        session = _replay_events(events, editor_config)
    except (FileNotFoundError, ValueError) as e:
        _fail(e, verbose)

    editor = session.editor
    table = Table(title="Wall segments")
    table.add_column("room", justify="right")
    table.add_column("wall", style="cyan")
    table.add_column("length", justify="right")
    table.add_column("segment")

    for i, room in enumerate(editor.rooms, start=1):
        for name, wall in zip(WALL_NAMES, editor.walls_of(room)):
            segments = editor.drawable_segments(wall)
            if not segments:
                table.add_row(str(i), name, _fmt(wall.length), "-")
            for a, b in segments:
                table.add_row(
                    str(i),
                    name,
                    _fmt(wall.length),
                    f"({_fmt(a.x)}, {_fmt(a.y)})-({_fmt(b.x)}, {_fmt(b.y)})",
                )
    console.print(table)


@app.command()
def locate(
    x: float = typer.Argument(..., help="Raw x-coordinate"),
    y: float = typer.Argument(..., help="Raw y-coordinate"),
    events: Optional[Path] = typer.Option(None, "--events", "-e", help="Path to event script JSON file"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to editor config JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Show where a point snaps and which wall a click there would hit."""
    _configure_logging(verbose)
    try:
        editor_config = _resolve_config(config, None, None)
        if events:
            editor = _replay_events(events, editor_config).editor
        else:
            editor = Editor(editor_config)
    except (FileNotFoundError, ValueError) as e:
        _fail(e, verbose)

    snapped = editor.snap(x, y)
    console.print(f"Snap: ({_fmt(snapped.x)}, {_fmt(snapped.y)})")

    from .geom.intersect import find_wall_intersection

    hit = find_wall_intersection(
        x, y, editor.rooms, grid_size=editor_config.grid_size, tolerance=editor_config.tolerance
    )
    if hit is None:
        console.print("Wall: none")
    else:
        console.print(f"Wall: ({_fmt(hit.x)}, {_fmt(hit.y)}) {hit.orientation}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
