"""Greedy hill climbing and the random-restart driver around it."""

from __future__ import annotations

import logging

from backend.engine.generator import LayoutGenerator
from backend.engine.neighborhood import Neighborhood
from backend.engine.search.base import Search
from backend.models.grid import Grid
from backend.models.result import SearchResult

logger = logging.getLogger(__name__)


class GreedySearch(Search):
    """Hill climbing over the single-edit neighbourhood.

    Every round scans the whole neighbourhood of the incumbent as it was at
    the start of the round.  Any strictly better candidate becomes the new
    incumbent straight away, but the scan carries on over the old
    neighbourhood.  A round without improvement costs one unit of budget,
    an improvement refills it.
    """

    name = "greedy"

    def optimize(self, initial: Grid) -> SearchResult:
        cfg = self.config
        budget_size = cfg.budget
        best = initial.copy()
        best_score = self.score(best)
        history = [best_score]
        budget = budget_size
        round_no = 0

        while budget > 0:
            budget -= 1
            cur = best
            # Swaps only diversify: first round and last chance round.
            swaps = cfg.allow_swaps and (round_no == 0 or budget == 0)
            num_equal = 1
            distances = self.evaluate(cur) if cfg.reachable_only else None
            for candidate in Neighborhood.candidates(
                cur, allow_swaps=swaps, reachable_only=cfg.reachable_only, distances=distances
            ):
                score = self.score(candidate)
                if score > best_score:
                    best, best_score = candidate, score
                    budget = budget_size
                    self.improved(best, best_score)
                elif cfg.accept_same_score and score == best_score:
                    num_equal += 1
                    if self.rng.randrange(num_equal) == 0:
                        best = candidate
            history.append(best_score)
            round_no += 1

        return SearchResult(best, best_score, self.evaluations, history)

    def run(self, obstacles: int) -> SearchResult:
        cfg = self.config
        initial = LayoutGenerator.generate(cfg.width, cfg.height, obstacles, self.rng)
        return self.optimize(initial)


class RandomRestartSearch(Search):
    """Runs greedy searches from many random layouts and keeps the best."""

    name = "random-restart"

    def run(self, obstacles: int) -> SearchResult:
        cfg = self.config
        greedy = GreedySearch(cfg, oracle=self.oracle, rng=self.rng)
        best: Grid | None = None
        best_score = -1
        history: list[int] = []

        for trial in range(cfg.restarts):
            initial = LayoutGenerator.generate(cfg.width, cfg.height, obstacles, self.rng)
            result = greedy.optimize(initial)
            self.evaluations = greedy.evaluations
            if result.score > best_score:
                best, best_score = result.grid, result.score
                self.improved(best, best_score)
                logger.info(
                    "restart %d/%d: score %d", trial + 1, cfg.restarts, best_score
                )
            history.append(best_score)

        if best is None:
            # No trials: score one random layout so the caller still gets a grid.
            best = LayoutGenerator.generate(cfg.width, cfg.height, obstacles, self.rng)
            best_score = greedy.score(best)

        self.evaluations = greedy.evaluations
        return SearchResult(best, best_score, self.evaluations, history)
