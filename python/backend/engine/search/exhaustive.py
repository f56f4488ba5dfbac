"""Exhaustive enumeration of obstacle subsets, pruned by grid symmetry."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from backend.engine.search.base import Search
from backend.models.grid import Coord, Grid
from backend.models.result import SearchResult

logger = logging.getLogger(__name__)


class ExhaustiveSearch(Search):
    """Scores every placement of a fixed number of obstacles.

    Mirroring the grid left-right or top-bottom (and transposing a square
    grid) never changes the score, so only start cells in the top-left
    quadrant (and, for square grids, on or above the diagonal) are tried.
    """

    name = "exhaustive"

    @staticmethod
    def fundamental_starts(width: int, height: int) -> Iterator[Coord]:
        for y in range(height):
            for x in range(width):
                if x * 2 > width or y * 2 > height:
                    continue
                if width == height and y > x:
                    continue
                yield (x, y)

    @staticmethod
    def first_subset(grid: Grid, order: list[Coord], obstacles: int) -> None:
        """Block the first *obstacles* cells of *order*, clear the rest."""
        for i, cell in enumerate(order):
            grid[cell] = i < obstacles

    @staticmethod
    def next_subset(grid: Grid, order: list[Coord]) -> bool:
        """Advance to the next obstacle subset of the same size.

        Turns ``..###.`` into ``##...#``: the last obstacle of the first
        block steps onto the free cell after it, and the rest of the block
        falls back to the beginning.  Returns False after the last subset.
        """
        n = len(order)
        first = 0
        while first < n and not grid[order[first]]:
            first += 1
        if first == n:
            return False
        clear = first
        while clear < n and grid[order[clear]]:
            clear += 1
        if clear == n:
            return False

        run = clear - first
        for i in range(run - 1):
            grid[order[first + i]] = False
            grid[order[i]] = True
        grid[order[first + run - 1]] = False
        grid[order[clear]] = True
        return True

    def run(self, obstacles: int) -> SearchResult:
        cfg = self.config
        self.check_obstacles(obstacles, cfg.width, cfg.height)
        # Replaced by the first subset scored, (0, 0) is always a start.
        best = Grid.empty(cfg.width, cfg.height)
        best_score = -1
        history: list[int] = []

        for start in self.fundamental_starts(cfg.width, cfg.height):
            grid = Grid.empty(cfg.width, cfg.height, start)
            order = [cell for cell in grid.cells() if cell != start]
            self.first_subset(grid, order, obstacles)
            while True:
                score = self.score(grid)
                if score > best_score:
                    best, best_score = grid.copy(), score
                    self.improved(best, best_score)
                if not self.next_subset(grid, order):
                    break
            logger.info("start %s done: best %d", start, best_score)
            history.append(best_score)

        return SearchResult(best, best_score, self.evaluations, history)
