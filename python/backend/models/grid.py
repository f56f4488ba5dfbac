"""Grid model for the ice-floor sliding puzzle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum

MAX_WIDTH = 32
MAX_HEIGHT = 32

# Larger than any distance a real slide sequence can reach.
UNREACHABLE = MAX_WIDTH * MAX_HEIGHT + 1

Coord = tuple[int, int]

_OBSTACLE_CHARS = "#*"
_START_CHARS = "0sS"


class GridError(ValueError):
    """Raised when a grid cannot be built from the given dimensions or data."""


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Coord:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS: dict[Direction, Coord] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass
class Grid:
    """A rectangular ice floor with obstacles and a start cell.

    Obstacles are stored as a flat row-major list of flags, so the cell
    ``(x, y)`` lives at index ``y * width + x``.  The start cell is never
    an obstacle.
    """

    width: int
    height: int
    obstacles: list[bool]
    start: Coord = (0, 0)

    def __post_init__(self) -> None:
        if not 1 <= self.width <= MAX_WIDTH:
            raise GridError(
                f"Width must be between 1 and {MAX_WIDTH}, got {self.width}."
            )
        if not 1 <= self.height <= MAX_HEIGHT:
            raise GridError(
                f"Height must be between 1 and {MAX_HEIGHT}, got {self.height}."
            )
        if len(self.obstacles) != self.width * self.height:
            raise GridError(
                f"Expected {self.width * self.height} cells for a "
                f"{self.width}×{self.height} grid, got {len(self.obstacles)}."
            )
        self._check(self.start)
        if self.obstacles[self.index(self.start)]:
            raise GridError(f"Start {self.start} is on an obstacle.")

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls, width: int, height: int, start: Coord = (0, 0)) -> Grid:
        return cls(width, height, [False] * (width * height), start)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Grid:
        """Create a grid from text rows.

        ``#`` or ``*`` is an obstacle, ``0``, ``s`` or ``S`` the start and
        any other character a free cell.

        Example::

            Grid.from_rows([
                ".0#....",
                ".......",
            ])
        """
        if not rows:
            raise GridError("A grid needs at least one row.")
        width = len(rows[0])
        obstacles: list[bool] = []
        start: Coord | None = None
        for y, row in enumerate(rows):
            if len(row) != width:
                raise GridError(
                    f"Row {y} has {len(row)} cells, expected {width}."
                )
            for x, ch in enumerate(row):
                obstacles.append(ch in _OBSTACLE_CHARS)
                if ch in _START_CHARS:
                    if start is not None:
                        raise GridError(f"Second start at {(x, y)}, first at {start}.")
                    start = (x, y)
        if start is None:
            raise GridError("No start cell ('0', 's' or 'S') in rows.")
        return cls(width, len(rows), obstacles, start)

    # -- queries --------------------------------------------------------------

    def index(self, cell: Coord) -> int:
        x, y = cell
        return y * self.width + x

    def coord(self, index: int) -> Coord:
        y, x = divmod(index, self.width)
        return (x, y)

    def in_bounds(self, cell: Coord) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def __getitem__(self, cell: Coord) -> bool:
        self._check(cell)
        return self.obstacles[self.index(cell)]

    def __setitem__(self, cell: Coord, blocked: bool) -> None:
        self._check(cell)
        if blocked and cell == self.start:
            raise GridError(f"Cannot place an obstacle on the start {cell}.")
        self.obstacles[self.index(cell)] = blocked

    def cells(self) -> Iterator[Coord]:
        """All cells in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def obstacle_cells(self) -> list[Coord]:
        return [self.coord(i) for i, blocked in enumerate(self.obstacles) if blocked]

    def free_cells(self) -> list[Coord]:
        """Cells that are neither an obstacle nor the start."""
        return [
            cell for cell in self.cells()
            if not self.obstacles[self.index(cell)] and cell != self.start
        ]

    @property
    def obstacle_count(self) -> int:
        return sum(self.obstacles)

    # -- edits ----------------------------------------------------------------

    def place_start(self, cell: Coord) -> None:
        self._check(cell)
        if self.obstacles[self.index(cell)]:
            raise GridError(f"Cannot place the start on obstacle {cell}.")
        self.start = cell

    def swap_columns(self, x1: int, x2: int) -> None:
        w = self.width
        obs = self.obstacles
        for y in range(self.height):
            a, b = y * w + x1, y * w + x2
            obs[a], obs[b] = obs[b], obs[a]
        sx, sy = self.start
        if sx == x1:
            self.start = (x2, sy)
        elif sx == x2:
            self.start = (x1, sy)

    def swap_rows(self, y1: int, y2: int) -> None:
        w = self.width
        obs = self.obstacles
        obs[y1 * w:(y1 + 1) * w], obs[y2 * w:(y2 + 1) * w] = (
            obs[y2 * w:(y2 + 1) * w],
            obs[y1 * w:(y1 + 1) * w],
        )
        sx, sy = self.start
        if sy == y1:
            self.start = (sx, y2)
        elif sy == y2:
            self.start = (sx, y1)

    def transformed(
        self, flip_x: bool = False, flip_y: bool = False, transpose: bool = False
    ) -> Grid:
        """Return a mirrored and/or transposed copy (flips are applied first)."""

        def move(cell: Coord) -> Coord:
            x, y = cell
            if flip_x:
                x = self.width - 1 - x
            if flip_y:
                y = self.height - 1 - y
            return (y, x) if transpose else (x, y)

        width, height = (self.height, self.width) if transpose else (self.width, self.height)
        out = Grid.empty(width, height, move(self.start))
        for cell in self.obstacle_cells():
            out[move(cell)] = True
        return out

    def copy(self) -> Grid:
        return Grid(
            width=self.width,
            height=self.height,
            obstacles=self.obstacles[:],
            start=self.start,
        )

    # -- display --------------------------------------------------------------

    def to_rows(self) -> list[str]:
        rows: list[str] = []
        for y in range(self.height):
            chars: list[str] = []
            for x in range(self.width):
                if (x, y) == self.start:
                    chars.append("S")
                elif self.obstacles[y * self.width + x]:
                    chars.append("#")
                else:
                    chars.append(".")
            rows.append("".join(chars))
        return rows

    # -- helpers --------------------------------------------------------------

    def _check(self, cell: Coord) -> None:
        if not self.in_bounds(cell):
            raise GridError(
                f"Cell {cell} is outside the {self.width}×{self.height} grid."
            )
