"""Vanilla terminal frontend with no third-party dependencies.

Prints a layout as plain text with optional ANSI colours: one character
per cell, obstacles as ``#``, unreachable cells as ``.`` and every other
cell as the number of moves needed to first visit it.
"""

from __future__ import annotations

import sys

from backend.models.distances import DistanceMap
from backend.models.grid import Grid
from frontend.cli.glyphs import GOAL, OBSTACLE, START, UNREACHED, cell_symbols

# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_B = "\033[34;1m"    # bold blue
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36m"      # cyan
_R = "\033[0m"       # reset


def _paint(symbol: str, style: str, color: bool) -> str:
    return f"{style}{symbol}{_R}" if color else symbol


# -- grid rendering -----------------------------------------------------------


def render(
    grid: Grid, distances: DistanceMap, trace: bool = False, color: bool = True
) -> str:
    """Return the grid as text, one line per row."""
    symbols = cell_symbols(grid, distances, trace)
    lines: list[str] = []
    for y, row in enumerate(symbols):
        cells: list[str] = []
        for x, symbol in enumerate(row):
            cell = (x, y)
            if symbol == OBSTACLE:
                cells.append(_paint(symbol, _Y, color))
            elif trace:
                if symbol == START:
                    cells.append(_paint(symbol, _G, color))
                elif symbol == GOAL:
                    cells.append(_paint(symbol, _B, color))
                elif symbol != UNREACHED:
                    cells.append(_paint(symbol, _C, color))
                else:
                    cells.append(symbol)
            elif cell == grid.start:
                cells.append(_paint(symbol, _G, color))
            elif distances.pass_distance(cell) == distances.score:
                cells.append(_paint(symbol, _B, color))
            else:
                cells.append(symbol)
        lines.append("".join(cells))
    return "\n".join(lines)


# -- public entry point -------------------------------------------------------


def show(
    grid: Grid,
    distances: DistanceMap,
    *,
    trace: bool = False,
    title: str | None = None,
) -> None:
    """Print *grid* with its distances (or traced path) to stdout."""
    color = sys.stdout.isatty()
    if title:
        print(_paint(title, _C, color))
    print(distances.score)
    print(render(grid, distances, trace=trace, color=color))
    print()
