"""Shared cell symbols for the terminal frontends.

Both the vanilla and the Rich frontend draw the same characters; only the
colouring differs.
"""

from __future__ import annotations

from backend.models.distances import DistanceMap
from backend.models.grid import UNREACHABLE, Coord, Direction, Grid

OBSTACLE = "#"
UNREACHED = "."
START = "S"
GOAL = "G"

# Box-drawing glyph for the set of sides a path leaves a cell through.
_BOX: dict[frozenset[Direction], str] = {
    frozenset({Direction.LEFT, Direction.RIGHT}): "─",
    frozenset({Direction.UP, Direction.DOWN}): "│",
    frozenset({Direction.DOWN, Direction.RIGHT}): "┌",
    frozenset({Direction.DOWN, Direction.LEFT}): "┐",
    frozenset({Direction.UP, Direction.RIGHT}): "└",
    frozenset({Direction.UP, Direction.LEFT}): "┘",
    frozenset({Direction.UP, Direction.DOWN, Direction.RIGHT}): "├",
    frozenset({Direction.UP, Direction.DOWN, Direction.LEFT}): "┤",
    frozenset({Direction.LEFT, Direction.RIGHT, Direction.DOWN}): "┬",
    frozenset({Direction.LEFT, Direction.RIGHT, Direction.UP}): "┴",
    frozenset(Direction): "┼",
    frozenset({Direction.LEFT}): "─",
    frozenset({Direction.RIGHT}): "─",
    frozenset({Direction.UP}): "│",
    frozenset({Direction.DOWN}): "│",
}


def distance_symbol(dist: int) -> str:
    """One character per distance: 0-9, then a-z, then ``+``."""
    if dist >= UNREACHABLE:
        return UNREACHED
    if dist < 10:
        return str(dist)
    if dist < 36:
        return chr(ord("a") + dist - 10)
    return "+"


def _step(a: Coord, b: Coord) -> Direction:
    dx = (b[0] > a[0]) - (b[0] < a[0])
    dy = (b[1] > a[1]) - (b[1] < a[1])
    for direction in Direction:
        if direction.delta == (dx, dy):
            return direction
    raise ValueError(f"{a} and {b} are not on a common row or column.")


def path_glyphs(path: list[Coord]) -> dict[Coord, str]:
    """Map every cell a path covers to its line-drawing glyph.

    *path* lists the resting cells of a slide sequence; consecutive cells
    share a row or a column.  The first cell is marked as the start and the
    last one as the goal.
    """
    sides: dict[Coord, set[Direction]] = {}
    for a, b in zip(path, path[1:]):
        if a == b:
            continue
        forward = _step(a, b)
        back = forward.opposite
        dx, dy = forward.delta
        sides.setdefault(a, set()).add(forward)
        cell = (a[0] + dx, a[1] + dy)
        while cell != b:
            sides.setdefault(cell, set()).update((forward, back))
            cell = (cell[0] + dx, cell[1] + dy)
        sides.setdefault(b, set()).add(back)

    glyphs = {cell: _BOX[frozenset(s)] for cell, s in sides.items()}
    if path:
        glyphs[path[-1]] = GOAL
        glyphs[path[0]] = START
    return glyphs


def cell_symbols(
    grid: Grid, distances: DistanceMap, trace: bool = False
) -> list[list[str]]:
    """Symbols for every cell, row by row.

    Without *trace* free cells show their pass distance; with it they show
    one shortest path to the hardest cell.
    """
    glyphs = path_glyphs(distances.trace_path()) if trace else {}
    rows: list[list[str]] = []
    for y in range(grid.height):
        row: list[str] = []
        for x in range(grid.width):
            cell = (x, y)
            if grid[cell]:
                row.append(OBSTACLE)
            elif trace:
                row.append(glyphs.get(cell, UNREACHED))
            else:
                row.append(distance_symbol(distances.pass_distance(cell)))
        rows.append(row)
    return rows
