"""Sliding-move distance oracle."""

from __future__ import annotations

from collections import deque

from backend.models.distances import DistanceMap
from backend.models.grid import UNREACHABLE, Grid


class DistanceOracle:
    """Breadth-first search over slides.

    The queue only ever holds resting cells.  From each of them the token
    slides in all four directions; every cell crossed on the way (the
    landing cell included) gets a pass distance, and the landing cell a
    stop distance.  The score is the largest pass distance seen.

    With ``wall_boundary=False`` the board edge does not stop a slide: the
    token leaves the board, so no landing cell is produced, although the
    cells crossed before leaving still count as visited.
    """

    def __init__(self, wall_boundary: bool = True, track_paths: bool = False) -> None:
        self.wall_boundary = wall_boundary
        self.track_paths = track_paths

    def score(self, grid: Grid) -> int:
        return self.evaluate(grid).score

    def evaluate(self, grid: Grid) -> DistanceMap:
        w, h = grid.width, grid.height
        size = w * h
        blocked = grid.obstacles

        stop = [UNREACHABLE] * size
        passed = [UNREACHABLE] * size
        stop_parent = [-1] * size if self.track_paths else None
        pass_parent = [-1] * size if self.track_paths else None

        origin = grid.index(grid.start)
        stop[origin] = passed[origin] = 0
        queue = deque([origin])
        best = 0

        while queue:
            pos = queue.popleft()
            step = stop[pos] + 1
            y, x = divmod(pos, w)
            # (offset, free cells until the edge) for left, right, up, down
            for delta, room in ((-1, x), (1, w - 1 - x), (-w, y), (w, h - 1 - y)):
                p = pos
                moved = 0
                while moved < room and not blocked[p + delta]:
                    p += delta
                    moved += 1
                    if passed[p] > step:
                        passed[p] = step
                        # BFS pops in distance order, so this is the maximum.
                        best = step
                        if pass_parent is not None:
                            pass_parent[p] = pos
                if moved == room and not self.wall_boundary:
                    continue
                if stop[p] > step:
                    stop[p] = step
                    queue.append(p)
                    if stop_parent is not None:
                        stop_parent[p] = pos

        return DistanceMap(
            width=w,
            height=h,
            start=grid.start,
            stop=stop,
            passed=passed,
            score=best,
            stop_parent=stop_parent,
            pass_parent=pass_parent,
        )
