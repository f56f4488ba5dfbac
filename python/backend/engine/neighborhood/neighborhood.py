"""Single-edit neighbourhood of a layout."""

from __future__ import annotations

from collections.abc import Iterator

from backend.engine.oracle import DistanceOracle
from backend.models.distances import DistanceMap
from backend.models.grid import UNREACHABLE, Grid


class Neighborhood:
    """Stateless producer of candidate layouts; all methods are static."""

    @staticmethod
    def candidates(
        grid: Grid,
        allow_swaps: bool = False,
        reachable_only: bool = False,
        distances: DistanceMap | None = None,
    ) -> Iterator[Grid]:
        """Yield fresh copies of *grid*, each changed by exactly one edit.

        In order: every obstacle moved to every free cell, the start moved
        to every free cell, then (with *allow_swaps*) every pair of columns
        and every pair of rows exchanged.

        With *reachable_only* obstacles are only moved onto cells the token
        can visit in *grid*.  An obstacle nobody slides into never stops a
        slide, so those layouts score no better than dropping the obstacle.
        Pass the *distances* of *grid* when they are already known.
        """
        free = grid.free_cells()
        targets = free
        if reachable_only:
            if distances is None:
                distances = DistanceOracle().evaluate(grid)
            targets = [
                cell for cell in free
                if distances.passed[grid.index(cell)] < UNREACHABLE
            ]

        for obstacle in grid.obstacle_cells():
            for target in targets:
                candidate = grid.copy()
                candidate[obstacle] = False
                candidate[target] = True
                yield candidate

        for target in free:
            candidate = grid.copy()
            candidate.place_start(target)
            yield candidate

        if allow_swaps:
            yield from Neighborhood.swaps(grid)

    @staticmethod
    def swaps(grid: Grid) -> Iterator[Grid]:
        for x1 in range(grid.width):
            for x2 in range(x1 + 1, grid.width):
                candidate = grid.copy()
                candidate.swap_columns(x1, x2)
                yield candidate
        for y1 in range(grid.height):
            for y2 in range(y1 + 1, grid.height):
                candidate = grid.copy()
                candidate.swap_rows(y1, y2)
                yield candidate
