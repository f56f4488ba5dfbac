"""Rich terminal frontend: coloured grids inside panels.

Uses the ``rich`` library for styled output while sharing the cell
symbols of the vanilla frontend.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from backend.models.distances import DistanceMap
from backend.models.grid import Grid
from frontend.cli.glyphs import GOAL, OBSTACLE, START, UNREACHED, cell_symbols

console = Console()


# -- grid rendering -----------------------------------------------------------


def render_grid(grid: Grid, distances: DistanceMap, trace: bool = False) -> Text:
    """Return the ice floor as styled text, one line per row."""
    text = Text()
    for y, row in enumerate(cell_symbols(grid, distances, trace)):
        if y:
            text.append("\n")
        for x, symbol in enumerate(row):
            cell = (x, y)
            if symbol == OBSTACLE:
                text.append(symbol, style="bold yellow")
            elif symbol == UNREACHED:
                text.append(symbol, style="dim")
            elif symbol == START or (not trace and cell == grid.start):
                text.append(symbol, style="bold green")
            elif symbol == GOAL or (
                not trace and distances.pass_distance(cell) == distances.score
            ):
                text.append(symbol, style="bold blue")
            elif trace:
                text.append(symbol, style="cyan")
            else:
                text.append(symbol)
    return text


def render_panel(
    grid: Grid, distances: DistanceMap, trace: bool = False, title: str | None = None
) -> Panel:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(distances.score), style="bold yellow")
    stats.append("    Obstacles: ", style="dim")
    stats.append(str(grid.obstacle_count), style="bold yellow")

    floor = Panel.fit(render_grid(grid, distances, trace), border_style="bright_blue", padding=(0, 1))
    body = Group(Align.center(floor), Text(""), Align.center(stats))
    heading = title or f"Ice Floor  {grid.width}×{grid.height}"
    return Panel(
        body,
        title=f"[bold cyan]{heading}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )


# -- public entry point -------------------------------------------------------


def show(
    grid: Grid,
    distances: DistanceMap,
    *,
    trace: bool = False,
    title: str | None = None,
) -> None:
    """Print *grid* with its distances (or traced path) as a Rich panel."""
    console.print()
    console.print(Align.center(render_panel(grid, distances, trace, title)))
