"""Shared plumbing for the layout searches."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from backend.engine.oracle import DistanceOracle
from backend.models.config import SearchConfig
from backend.models.distances import DistanceMap
from backend.models.grid import Grid, GridError
from backend.models.result import SearchResult

logger = logging.getLogger(__name__)

ImproveCallback = Callable[[Grid, int], None]


class Search:
    """Base class: owns the oracle, the random stream and the counters.

    Each instance is independent, so separate instances can run in separate
    workers.
    """

    name = "search"

    def __init__(
        self,
        config: SearchConfig,
        oracle: DistanceOracle | None = None,
        rng: random.Random | None = None,
        on_improve: ImproveCallback | None = None,
    ) -> None:
        self.config = config
        self.oracle = oracle or DistanceOracle(wall_boundary=config.wall_boundary)
        self.rng = rng or random.Random(config.seed)
        self.on_improve = on_improve
        self.evaluations = 0

    def score(self, grid: Grid) -> int:
        return self.evaluate(grid).score

    def evaluate(self, grid: Grid) -> DistanceMap:
        """Run the oracle on *grid*; every run counts as one evaluation."""
        self.evaluations += 1
        return self.oracle.evaluate(grid)

    @staticmethod
    def check_obstacles(obstacles: int, width: int, height: int) -> None:
        if not 0 <= obstacles < width * height:
            raise GridError(
                f"Cannot place {obstacles} obstacles on a {width}×{height} grid "
                f"and keep a cell free for the start."
            )

    def improved(self, grid: Grid, score: int) -> None:
        logger.debug("%s: new best %d after %d evaluations", self.name, score, self.evaluations)
        if self.on_improve is not None:
            self.on_improve(grid, score)

    def run(self, obstacles: int) -> SearchResult:
        """Search the configured grid size for the best layout with *obstacles*."""
        raise NotImplementedError
