"""Grid model and relative layout tests."""

from __future__ import annotations

import pytest

from backend.models.grid import MAX_WIDTH, Grid, GridError
from backend.models.layout import RelativeLayout, RelativePosition

SAME = RelativePosition.SAME
NEXT = RelativePosition.NEXT
SKIP = RelativePosition.SKIP


# -- literal grids ------------------------------------------------------------


def test_from_rows_reads_symbols() -> None:
    grid = Grid.from_rows(["*.s", "#.."])
    assert (grid.width, grid.height) == (3, 2)
    assert grid.start == (2, 0)
    assert grid.obstacle_cells() == [(0, 0), (0, 1)]
    assert grid.to_rows() == ["#.S", "#.."]


@pytest.mark.parametrize(
    "rows",
    [
        ["S..", ".."],
        ["...", "..."],
        ["S..", "..0"],
        [],
    ],
    ids=["ragged", "no-start", "two-starts", "empty"],
)
def test_from_rows_rejects_malformed(rows: list[str]) -> None:
    with pytest.raises(GridError):
        Grid.from_rows(rows)


@pytest.mark.parametrize(
    "size",
    [(0, 4), (4, 0), (MAX_WIDTH + 1, 4), (-3, 2)],
    ids=["zero-width", "zero-height", "too-wide", "negative"],
)
def test_dimensions_are_validated(size: tuple[int, int]) -> None:
    width, height = size
    with pytest.raises(GridError):
        Grid.empty(width, height)


def test_start_cannot_share_an_obstacle() -> None:
    grid = Grid.empty(3, 3, (1, 1))
    with pytest.raises(GridError):
        grid[(1, 1)] = True
    grid[(0, 0)] = True
    with pytest.raises(GridError):
        grid.place_start((0, 0))
    with pytest.raises(GridError):
        grid[(3, 0)] = True


# -- edits --------------------------------------------------------------------


def test_swap_columns_moves_start() -> None:
    grid = Grid.from_rows(["S#.", "..#"])
    grid.swap_columns(0, 2)
    assert grid.to_rows() == [".#S", "#.."]


def test_swap_rows_moves_start() -> None:
    grid = Grid.from_rows(["S#.", "..#"])
    grid.swap_rows(0, 1)
    assert grid.to_rows() == ["..#", "S#."]


def test_transformed() -> None:
    grid = Grid.from_rows(["S#.", "..#"])
    assert grid.transformed(flip_x=True).to_rows() == [".#S", "#.."]
    assert grid.transformed(flip_y=True).to_rows() == ["..#", "S#."]
    assert grid.transformed(transpose=True).to_rows() == ["S.", "#.", ".#"]


def test_copy_is_independent() -> None:
    grid = Grid.from_rows(["S.."])
    clone = grid.copy()
    clone[(2, 0)] = True
    assert grid.obstacle_count == 0
    assert clone.obstacle_count == 1


# -- relative layouts ---------------------------------------------------------


def test_layout_to_grid() -> None:
    layout = RelativeLayout(
        horizontal=[NEXT, NEXT, NEXT],
        vertical=[NEXT, SKIP, NEXT],
        permutation=[0, 1],
        start_index=0,
    )
    grid = layout.to_grid()
    assert grid is not None
    assert grid.to_rows() == ["S.", "..", "..", ".#"]


def test_layout_permutation_picks_rows() -> None:
    layout = RelativeLayout(
        horizontal=[SKIP, SAME, NEXT],
        vertical=[NEXT, NEXT, NEXT],
        permutation=[1, 0],
        start_index=1,
    )
    grid = layout.to_grid()
    assert grid is not None
    # Both objects share column 2; the left-ranked one sits on the lower row.
    assert grid.to_rows() == ["..S", "..#"]


@pytest.mark.parametrize(
    "layout",
    [
        RelativeLayout([SAME, NEXT, NEXT], [NEXT, NEXT, NEXT], [0, 1], 0),
        RelativeLayout([NEXT, NEXT, SAME], [NEXT, NEXT, NEXT], [0, 1], 0),
        RelativeLayout([NEXT, SAME, NEXT], [NEXT, SAME, NEXT], [0, 1], 0),
    ],
    ids=["on-left-wall", "on-right-wall", "collision"],
)
def test_layout_conversion_failures(layout: RelativeLayout) -> None:
    assert layout.to_grid() is None


def test_layout_respects_size_limit() -> None:
    layout = RelativeLayout([SKIP, SKIP, SKIP], [NEXT, NEXT, NEXT], [0, 1], 0)
    assert layout.to_grid(max_width=7) is None
    grid = layout.to_grid(max_width=8)
    assert grid is not None and grid.width == 8


def test_layout_validates_shape() -> None:
    with pytest.raises(ValueError):
        RelativeLayout([NEXT, NEXT], [NEXT, NEXT, NEXT], [0, 1], 0)
    with pytest.raises(ValueError):
        RelativeLayout([NEXT, NEXT, NEXT], [NEXT, NEXT, NEXT], [1, 1], 0)
    with pytest.raises(ValueError):
        RelativeLayout([NEXT, NEXT, NEXT], [NEXT, NEXT, NEXT], [0, 1], 2)
