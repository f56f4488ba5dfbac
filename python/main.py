#!/usr/bin/env python3
"""Ice-floor puzzle maker.

Searches for sliding-puzzle layouts whose hardest cell needs as many moves
as possible.

Usage::

    python main.py search                          # greedy, 7×6, 3-5 obstacles
    python main.py search -w 8 -h 8 -s annealing   # simulated annealing
    python main.py search -s exhaustive --min 2 --max 2 -w 4 -h 4
    python main.py score ".0#...." "......."       # score a literal grid
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.oracle import DistanceOracle  # noqa: E402
from backend.engine.search import (  # noqa: E402
    AnnealingSearch,
    CanonicalSearch,
    ExhaustiveSearch,
    RandomRestartSearch,
)
from backend.models.config import SearchConfig  # noqa: E402
from backend.models.grid import MAX_HEIGHT, MAX_WIDTH, Grid, GridError  # noqa: E402

logger = logging.getLogger("main")


# -- registries ---------------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class Strategy(StrEnum):
    greedy = "greedy"
    annealing = "annealing"
    exhaustive = "exhaustive"
    canonical = "canonical"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}

_STRATEGIES = {
    Strategy.greedy: RandomRestartSearch,
    Strategy.annealing: AnnealingSearch,
    Strategy.exhaustive: ExhaustiveSearch,
    Strategy.canonical: CanonicalSearch,
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _show(frontend: Frontend, grid: Grid, wall: bool, trace: bool, title: str) -> None:
    display = importlib.import_module(_RUNNERS[frontend])
    distances = DistanceOracle(wall_boundary=wall, track_paths=trace).evaluate(grid)
    display.show(grid, distances, trace=trace, title=title)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def search(
    width: int = typer.Option(7, "-w", "--width", min=1, max=MAX_WIDTH, help="Grid width."),
    height: int = typer.Option(6, "-h", "--height", min=1, max=MAX_HEIGHT, help="Grid height."),
    min_obstacles: int = typer.Option(3, "--min", min=0, help="Fewest obstacles to try."),
    max_obstacles: int = typer.Option(5, "--max", min=0, help="Most obstacles to try."),
    strategy: Strategy = typer.Option(Strategy.greedy, "-s", "--strategy", help="Search strategy."),
    frontend: Frontend = typer.Option(Frontend.vanilla, "-f", "--frontend", help="Output style."),
    wall: bool = typer.Option(True, "--wall/--no-wall", help="Whether the board edge stops a slide."),
    swaps: bool = typer.Option(False, "--swaps", help="Let greedy search swap rows and columns."),
    restarts: int = typer.Option(200, "--restarts", min=0, help="Greedy random restarts."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    trace: bool = typer.Option(False, "--trace", help="Draw a shortest path to the hardest cell."),
    verbose: int = typer.Option(0, "-v", "--verbose", count=True, help="-v info, -vv debug."),
) -> None:
    """Search for the hardest layouts over a range of obstacle counts."""
    _setup_logging(verbose)
    if min_obstacles > max_obstacles:
        raise typer.BadParameter(f"--min {min_obstacles} is above --max {max_obstacles}.")
    try:
        config = SearchConfig(
            width=width,
            height=height,
            wall_boundary=wall,
            allow_swaps=swaps,
            restarts=restarts,
            seed=seed,
        )
    except GridError as exc:
        raise typer.BadParameter(str(exc)) from exc

    on_improve = None
    if verbose >= 2:
        def on_improve(grid: Grid, score: int) -> None:
            _show(frontend, grid, wall, False, f"improved to {score}")

    for obstacles in range(min_obstacles, max_obstacles + 1):
        searcher = _STRATEGIES[strategy](config, on_improve=on_improve)
        try:
            result = searcher.run(obstacles)
        except GridError as exc:
            raise typer.BadParameter(str(exc)) from exc
        logger.info(
            "%s with %d obstacles: %d moves (%d evaluations)",
            strategy.value, obstacles, result.score, result.evaluations,
        )
        _show(
            frontend, result.grid, wall, trace,
            f"With {obstacles} obstacles: {result.score} steps",
        )


@app.command()
def score(
    rows: list[str] = typer.Argument(..., help="Grid rows: '#' obstacle, 'S' start."),
    frontend: Frontend = typer.Option(Frontend.vanilla, "-f", "--frontend", help="Output style."),
    wall: bool = typer.Option(True, "--wall/--no-wall", help="Whether the board edge stops a slide."),
    trace: bool = typer.Option(False, "--trace", help="Draw a shortest path to the hardest cell."),
) -> None:
    """Score a literal grid."""
    try:
        grid = Grid.from_rows(rows)
    except GridError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _show(frontend, grid, wall, trace, f"{grid.width}×{grid.height} grid")


if __name__ == "__main__":
    app()
