"""Coordinate-free puzzle shapes.

A relative layout places ``n`` objects (the obstacles plus the start) by
the gaps between them instead of by absolute position.  Objects are
ordered left to right; ``horizontal`` holds the ``n + 1`` gaps from the
left wall, past every object, to the right wall.  ``vertical`` does the
same top to bottom, and ``permutation[i]`` gives the top-to-bottom rank
of the i-th object from the left.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from backend.models.grid import MAX_HEIGHT, MAX_WIDTH, Coord, Grid

SKIP_WIDTH = 3


class RelativePosition(IntEnum):
    SAME = 0
    NEXT = 1
    SKIP = 2


@dataclass
class RelativeLayout:
    horizontal: list[RelativePosition]
    vertical: list[RelativePosition]
    permutation: list[int]
    start_index: int

    def __post_init__(self) -> None:
        n = len(self.permutation)
        if n == 0:
            raise ValueError("A layout needs at least the start object.")
        if len(self.horizontal) != n + 1 or len(self.vertical) != n + 1:
            raise ValueError(
                f"Expected {n + 1} gaps per axis for {n} objects, got "
                f"{len(self.horizontal)} horizontal and {len(self.vertical)} vertical."
            )
        if sorted(self.permutation) != list(range(n)):
            raise ValueError(f"{self.permutation} is not a permutation of 0..{n - 1}.")
        if not 0 <= self.start_index < n:
            raise ValueError(f"Start index {self.start_index} out of range for {n} objects.")

    @property
    def num_objects(self) -> int:
        return len(self.permutation)

    @property
    def num_obstacles(self) -> int:
        return len(self.permutation) - 1

    # -- conversion -----------------------------------------------------------

    @staticmethod
    def _positions(gaps: list[RelativePosition], skip_width: int) -> tuple[list[int], int]:
        """Object positions along one axis and the resulting grid extent."""
        pos = -1
        out: list[int] = []
        for gap in gaps:
            if gap == RelativePosition.NEXT:
                pos += 1
            elif gap == RelativePosition.SKIP:
                pos += skip_width
            out.append(pos)
        return out[:-1], out[-1]

    def to_grid(
        self,
        max_width: int = MAX_WIDTH,
        max_height: int = MAX_HEIGHT,
        skip_width: int = SKIP_WIDTH,
    ) -> Grid | None:
        """Place the objects on a concrete grid.

        Returns ``None`` when the shape does not fit: an empty or oversized
        grid, an object on the wall, or two objects on the same cell.
        """
        xs, width = self._positions(self.horizontal, skip_width)
        ys, height = self._positions(self.vertical, skip_width)
        if not (0 < width <= min(max_width, MAX_WIDTH)):
            return None
        if not (0 < height <= min(max_height, MAX_HEIGHT)):
            return None

        cells: list[Coord] = []
        for i, x in enumerate(xs):
            y = ys[self.permutation[i]]
            if not (0 <= x < width and 0 <= y < height):
                return None
            cells.append((x, y))
        if len(set(cells)) != len(cells):
            return None

        grid = Grid.empty(width, height, cells[self.start_index])
        for i, cell in enumerate(cells):
            if i != self.start_index:
                grid[cell] = True
        return grid
