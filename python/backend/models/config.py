"""Search settings shared by every strategy."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.grid import MAX_HEIGHT, MAX_WIDTH, GridError
from backend.models.layout import SKIP_WIDTH

# Greedy rounds without improvement before giving up.
GREEDY_BUDGET = 1
# When wandering across equal-score plateaus the search needs more slack.
PLATEAU_BUDGET = 10


@dataclass
class SearchConfig:
    """Plain value parameters for one search run."""

    width: int = 7
    height: int = 6
    wall_boundary: bool = True

    # greedy + random restart
    allow_swaps: bool = False
    reachable_only: bool = True
    accept_same_score: bool = False
    restarts: int = 200

    # simulated annealing
    anneal_runs: int = 4
    anneal_t_start: float = 2.0
    anneal_t_end: float = 0.05
    anneal_factor: float = 0.9
    anneal_steps: int = 200

    # canonical enumeration
    skip_width: int = SKIP_WIDTH
    max_width: int = MAX_WIDTH
    max_height: int = MAX_HEIGHT

    seed: int | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.width <= MAX_WIDTH:
            raise GridError(f"Width must be between 1 and {MAX_WIDTH}, got {self.width}.")
        if not 1 <= self.height <= MAX_HEIGHT:
            raise GridError(f"Height must be between 1 and {MAX_HEIGHT}, got {self.height}.")
        if not 1 <= self.max_width <= MAX_WIDTH or not 1 <= self.max_height <= MAX_HEIGHT:
            raise GridError(
                f"Maximum grid size must lie within {MAX_WIDTH}×{MAX_HEIGHT}, "
                f"got {self.max_width}×{self.max_height}."
            )
        if not 0 < self.anneal_factor < 1:
            raise ValueError(f"Cooling factor must be in (0, 1), got {self.anneal_factor}.")

    @property
    def budget(self) -> int:
        return PLATEAU_BUDGET if self.accept_same_score else GREEDY_BUDGET
