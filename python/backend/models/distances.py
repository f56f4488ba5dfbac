"""Per-cell move counts produced by the distance oracle."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.grid import UNREACHABLE, Coord


@dataclass
class DistanceMap:
    """Distances from the start for every cell of one grid.

    ``stop[i]`` is the fewest moves needed to come to rest on cell ``i``,
    ``passed[i]`` the fewest moves needed to cross it at all.  Cells are
    flat row-major indices; unreached cells hold ``UNREACHABLE``.

    The parent arrays are only filled when the oracle tracks paths.
    ``stop_parent[i]`` is the resting cell whose slide first landed on
    ``i`` and ``pass_parent[i]`` the one whose slide first crossed it.
    """

    width: int
    height: int
    start: Coord
    stop: list[int]
    passed: list[int]
    score: int
    stop_parent: list[int] | None = None
    pass_parent: list[int] | None = None

    # -- queries --------------------------------------------------------------

    def _index(self, cell: Coord) -> int:
        x, y = cell
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"Cell {cell} is outside the {self.width}×{self.height} grid.")
        return y * self.width + x

    def _coord(self, index: int) -> Coord:
        y, x = divmod(index, self.width)
        return (x, y)

    def stop_distance(self, cell: Coord) -> int:
        return self.stop[self._index(cell)]

    def pass_distance(self, cell: Coord) -> int:
        return self.passed[self._index(cell)]

    def is_reachable(self, cell: Coord) -> bool:
        return self.passed[self._index(cell)] < UNREACHABLE

    def hardest_cell(self) -> Coord:
        """First cell in row-major order whose pass distance equals the score."""
        return self._coord(self.passed.index(self.score))

    # -- path reconstruction --------------------------------------------------

    def trace_path(self, target: Coord | None = None) -> list[Coord]:
        """Return the resting cells of one shortest path, ending at *target*.

        The list starts at the start cell; each consecutive pair is one
        slide.  The last slide may continue past *target*.  Defaults to the
        hardest cell.
        """
        if self.stop_parent is None or self.pass_parent is None:
            raise ValueError("Distances were computed without path tracking.")
        if target is None:
            target = self.hardest_cell()
        idx = self._index(target)
        if self.passed[idx] >= UNREACHABLE:
            raise ValueError(f"Cell {target} is unreachable.")

        origin = self._index(self.start)
        path = [target]
        if idx == origin:
            return path
        node = self.pass_parent[idx]
        while node != origin:
            path.append(self._coord(node))
            node = self.stop_parent[node]
        path.append(self.start)
        path.reverse()
        return path
