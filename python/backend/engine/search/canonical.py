"""Enumeration of puzzle shapes through relative layouts."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from backend.engine.search.base import Search
from backend.models.grid import Grid
from backend.models.layout import RelativeLayout, RelativePosition
from backend.models.result import SearchResult

logger = logging.getLogger(__name__)

SAME = RelativePosition.SAME
NEXT = RelativePosition.NEXT
SKIP = RelativePosition.SKIP


def _first_gaps(count: int) -> list[RelativePosition]:
    # Objects may not overlap the wall: the outer gaps are at least NEXT.
    gaps = [SAME] * count
    gaps[0] = gaps[-1] = NEXT
    return gaps


def _advance_gaps(gaps: list[RelativePosition]) -> bool:
    """Odometer step over gap symbols; False once every digit wrapped."""
    last = len(gaps) - 1
    for i, gap in enumerate(gaps):
        if gap < SKIP:
            gaps[i] = RelativePosition(gap + 1)
            return True
        gaps[i] = NEXT if i in (0, last) else SAME
    return False


def _next_permutation(perm: list[int]) -> bool:
    """Rearrange *perm* into its lexicographic successor in place."""
    i = len(perm) - 2
    while i >= 0 and perm[i] >= perm[i + 1]:
        i -= 1
    if i < 0:
        return False
    j = len(perm) - 1
    while perm[j] <= perm[i]:
        j -= 1
    perm[i], perm[j] = perm[j], perm[i]
    perm[i + 1:] = reversed(perm[i + 1:])
    return True


class CanonicalSearch(Search):
    """Scores one representative grid per relative layout.

    A left-right mirror maps start rank ``s`` to ``n - 1 - s`` and a
    top-bottom mirror maps row rank ``r`` to ``n - 1 - r``, so only layouts
    whose start and whose leftmost object sit in the first half of the
    ranks are visited.  Large gaps all use one representative width.
    """

    name = "canonical"

    @staticmethod
    def layouts(obstacles: int) -> Iterator[RelativeLayout]:
        n = obstacles + 1
        half = (n + 1) // 2
        horizontal = _first_gaps(n + 1)
        vertical = _first_gaps(n + 1)

        while True:
            perm = list(range(n))
            while perm[0] < half:
                for start_index in range(half):
                    yield RelativeLayout(
                        horizontal=horizontal[:],
                        vertical=vertical[:],
                        permutation=perm[:],
                        start_index=start_index,
                    )
                if not _next_permutation(perm):
                    break
            if _advance_gaps(horizontal):
                continue
            if not _advance_gaps(vertical):
                return

    def run(self, obstacles: int) -> SearchResult:
        cfg = self.config
        self.check_obstacles(obstacles, cfg.max_width, cfg.max_height)
        best: Grid | None = None
        best_score = -1
        skipped = 0

        for layout in self.layouts(obstacles):
            grid = layout.to_grid(cfg.max_width, cfg.max_height, cfg.skip_width)
            if grid is None:
                skipped += 1
                continue
            score = self.score(grid)
            if score > best_score:
                best, best_score = grid, score
                self.improved(best, best_score)

        logger.info(
            "canonical: %d layouts scored, %d did not fit", self.evaluations, skipped
        )
        if best is None:
            # Nothing fits the size limits; fall back to the lone start.
            best = Grid.empty(1, 1)
            best_score = self.score(best)
        return SearchResult(best, best_score, self.evaluations, [best_score])
