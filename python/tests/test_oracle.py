"""Distance oracle tests.

The reference layout is a 7×6 floor with a single obstacle right of the
start::

    .S#....
    .......
    .......
    .......
    .......
    .......

Hand-run BFS: the token needs five slides (down, right, up, left, down)
to cross the column below the obstacle's right neighbour, so the score
is 5.  Columns 2, 4 and 5 below the top row are never visited.
"""

from __future__ import annotations

import pytest

from backend.engine.oracle import DistanceOracle
from backend.models.grid import UNREACHABLE, Grid

REFERENCE_ROWS = [
    ".S#....",
    ".......",
    ".......",
    ".......",
    ".......",
    ".......",
]

# (cell, pass distance, stop distance)
REFERENCE_CELLS = [
    ((1, 0), 0, 0),
    ((0, 0), 1, 1),
    ((1, 5), 1, 1),
    ((0, 3), 2, UNREACHABLE),
    ((0, 5), 2, 2),
    ((6, 5), 2, 2),
    ((3, 5), 2, 5),
    ((6, 0), 3, 3),
    ((5, 0), 4, UNREACHABLE),
    ((3, 0), 4, 4),
    ((3, 2), 5, UNREACHABLE),
    ((2, 3), UNREACHABLE, UNREACHABLE),
    ((4, 1), UNREACHABLE, UNREACHABLE),
]


# -- helpers ------------------------------------------------------------------


def _reference() -> Grid:
    return Grid.from_rows(REFERENCE_ROWS)


def _cell_id(case: tuple) -> str:
    (x, y), _, _ = case
    return f"{x}-{y}"


# -- tests --------------------------------------------------------------------


def test_reference_score() -> None:
    grid = _reference()
    assert grid.width == 7 and grid.height == 6
    assert grid.obstacle_cells() == [(2, 0)]
    assert grid.start == (1, 0)
    assert DistanceOracle().score(grid) == 5


@pytest.mark.parametrize("case", REFERENCE_CELLS, ids=_cell_id)
def test_reference_cells(case: tuple) -> None:
    cell, passed, stop = case
    distances = DistanceOracle().evaluate(_reference())
    assert distances.pass_distance(cell) == passed
    assert distances.stop_distance(cell) == stop


def test_evaluate_is_idempotent() -> None:
    grid = _reference()
    oracle = DistanceOracle(track_paths=True)
    first = oracle.evaluate(grid)
    second = oracle.evaluate(grid)
    assert first == second
    assert grid == _reference(), "evaluate() must not modify the grid"


@pytest.mark.parametrize(
    "rows",
    [
        REFERENCE_ROWS,
        [".0#....", ".#..#..", ".#.....", ".#...#.", ".#.#...", "......."],
        ["0...#...", "#.......", ".......#", "........", "........", "........"],
        ["S"],
    ],
    ids=["reference", "seven-obstacles", "three-obstacles", "single-cell"],
)
def test_stop_never_below_pass(rows: list[str]) -> None:
    grid = Grid.from_rows(rows)
    distances = DistanceOracle().evaluate(grid)
    start = grid.index(grid.start)
    assert distances.passed[start] == distances.stop[start] == 0
    for i, stop in enumerate(distances.stop):
        if stop < UNREACHABLE:
            assert stop >= distances.passed[i], f"cell {grid.coord(i)}"
    reached = [d for d in distances.passed if d < UNREACHABLE]
    assert distances.score == max(reached)


def test_obstacles_are_never_reached() -> None:
    grid = Grid.from_rows([".0#....", ".#..#..", ".#.....", ".#...#.", ".#.#...", "......."])
    distances = DistanceOracle().evaluate(grid)
    for cell in grid.obstacle_cells():
        assert not distances.is_reachable(cell)


@pytest.mark.parametrize(
    "flips",
    [(True, False, False), (False, True, False), (True, True, False), (False, False, True)],
    ids=["mirror-x", "mirror-y", "rotate-180", "transpose"],
)
def test_score_is_symmetric(flips: tuple[bool, bool, bool]) -> None:
    grid = Grid.from_rows(["0...#...", "#.......", ".......#", "........", "........", "........"])
    oracle = DistanceOracle()
    assert oracle.score(grid.transformed(*flips)) == oracle.score(grid)


def test_open_boundary_drops_edge_landings() -> None:
    grid = Grid.from_rows(["S.."])
    walled = DistanceOracle().evaluate(grid)
    assert walled.stop_distance((2, 0)) == 1
    assert walled.score == 1

    open_floor = DistanceOracle(wall_boundary=False).evaluate(grid)
    # The slide right crosses both cells and then leaves the board.
    assert open_floor.pass_distance((1, 0)) == 1
    assert open_floor.pass_distance((2, 0)) == 1
    assert open_floor.stop_distance((2, 0)) == UNREACHABLE
    assert open_floor.score == 1


def test_open_boundary_still_stops_at_obstacles() -> None:
    grid = Grid.from_rows(["S..#"])
    distances = DistanceOracle(wall_boundary=False).evaluate(grid)
    assert distances.stop_distance((2, 0)) == 1
    assert distances.stop_distance((0, 0)) == 0


def test_trace_path_to_hardest_cell() -> None:
    distances = DistanceOracle(track_paths=True).evaluate(_reference())
    assert distances.hardest_cell() == (3, 1)
    assert distances.trace_path((3, 2)) == [(1, 0), (1, 5), (6, 5), (6, 0), (3, 0), (3, 2)]
    path = distances.trace_path()
    assert path[0] == (1, 0) and path[-1] == (3, 1)
    assert len(path) - 1 == distances.score


def test_trace_path_errors() -> None:
    untracked = DistanceOracle().evaluate(_reference())
    with pytest.raises(ValueError):
        untracked.trace_path()
    tracked = DistanceOracle(track_paths=True).evaluate(_reference())
    with pytest.raises(ValueError):
        tracked.trace_path((4, 1))
    assert tracked.trace_path((1, 0)) == [(1, 0)]
