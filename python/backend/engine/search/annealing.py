"""Simulated annealing over obstacle and start relocations."""

from __future__ import annotations

import logging
import math

from backend.engine.generator import LayoutGenerator
from backend.engine.search.base import Search
from backend.models.grid import Grid
from backend.models.result import SearchResult

logger = logging.getLogger(__name__)


class AnnealingSearch(Search):
    """Several independent annealing runs from random layouts.

    A move is kept when ``uniform() < exp(temperature * (new - old))``.
    The temperature shrinks geometrically, which makes worsening moves
    *more* likely to be kept as a run goes on.  That is the acceptance
    rule the search has always used, and it is kept as is.
    """

    name = "annealing"

    def run(self, obstacles: int) -> SearchResult:
        cfg = self.config
        # Replaced by the first run's starting layout.
        best = Grid.empty(cfg.width, cfg.height)
        best_score = -1
        history: list[int] = []

        runs = max(cfg.anneal_runs, 1)
        for run_no in range(runs):
            grid = LayoutGenerator.generate_anywhere(cfg.width, cfg.height, obstacles, self.rng)
            score = self.score(grid)
            if score > best_score:
                best, best_score = grid.copy(), score
                self.improved(best, best_score)

            temperature = cfg.anneal_t_start
            while temperature > cfg.anneal_t_end:
                for _ in range(cfg.anneal_steps):
                    saved, saved_score = grid.copy(), score
                    if not self.perturb(grid):
                        continue
                    score = self.score(grid)
                    if score > best_score:
                        best, best_score = grid.copy(), score
                        self.improved(best, best_score)
                    # One draw per proposal; exp(0) == 1 already accepts.
                    delta = min(temperature * (score - saved_score), 0.0)
                    if self.rng.random() >= math.exp(delta):
                        grid, score = saved, saved_score
                temperature *= cfg.anneal_factor

            logger.info("annealing run %d/%d: best %d", run_no + 1, runs, best_score)
            history.append(best_score)

        return SearchResult(best, best_score, self.evaluations, history)

    def perturb(self, grid: Grid) -> bool:
        """Move one random obstacle, or the start, to a random free cell.

        Returns False when the grid has no free cell to move to.
        """
        free = grid.free_cells()
        if not free:
            return False
        obstacles = grid.obstacle_cells()
        choice = self.rng.randrange(len(obstacles) + 1)
        target = self.rng.choice(free)
        if choice < len(obstacles):
            grid[obstacles[choice]] = False
            grid[target] = True
        else:
            grid.place_start(target)
        return True
