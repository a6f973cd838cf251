"""Rich rendering of a terrain grid with a path overlay."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from hillclimb.search.contracts import PathResult
from hillclimb.terrain.coordinate import Coordinate
from hillclimb.terrain.grid import GOAL_MARKER, START_MARKER, TerrainGrid

ELEVATION_BANDS = [
    (5, "green3"),
    (11, "yellow3"),
    (17, "dark_orange"),
    (23, "red"),
    (25, "bright_white"),
]

MARKER_STYLE = "bold bright_magenta"
PATH_STYLE = "bold black on bright_cyan"
SOURCE_STYLE = "bold black on bright_green"


def render_path_lines(
    grid: TerrainGrid, result: PathResult | None = None
) -> list[Text]:
    on_path: set[Coordinate] = set(result.path) if result else set()
    source = result.source if result else None

    lines: list[Text] = []
    for y, row in enumerate(grid.rows()):
        line = Text()
        for x, ch in enumerate(row):
            pos = Coordinate(x, y)
            if pos == source:
                style = SOURCE_STYLE
            elif pos in on_path:
                style = PATH_STYLE
            elif ch in (START_MARKER, GOAL_MARKER):
                style = MARKER_STYLE
            else:
                style = _elevation_style(grid.elevation(pos))
            line.append(ch, style=style)
        lines.append(line)
    return lines


def render_path(
    grid: TerrainGrid,
    result: PathResult | None = None,
    *,
    title: str | None = None,
) -> RenderableType:
    terrain = Text("\n").join(render_path_lines(grid, result))
    return Panel(
        Group(terrain, _render_summary(grid, result)),
        title=title or "Hill Climb",
    )


def _render_summary(grid: TerrainGrid, result: PathResult | None) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Grid", f"{grid.width}x{grid.height}")
    if result is None:
        table.add_row("Steps", "No path")
        return table
    table.add_row("Steps", str(result.steps))
    table.add_row("Source", _format_pos(result.source))
    table.add_row("Goal", _format_pos(result.goal))
    return table


def _elevation_style(level: int) -> str:
    for ceiling, style in ELEVATION_BANDS:
        if level <= ceiling:
            return style
    return ELEVATION_BANDS[-1][1]


def _format_pos(pos: Coordinate) -> str:
    return f"({pos.x}, {pos.y})"
