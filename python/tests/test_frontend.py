"""Rendering and command-line tests."""

from __future__ import annotations

from rich.console import Console
from typer.testing import CliRunner

import main
from backend.engine.oracle import DistanceOracle
from backend.models.grid import Grid
from frontend.cli.glyphs import distance_symbol, path_glyphs
from frontend.cli.rich.app import render_panel
from frontend.cli.vanilla.app import render

REFERENCE_ROWS = [
    ".S#....",
    ".......",
    ".......",
    ".......",
    ".......",
    ".......",
]

runner = CliRunner()


# -- glyphs -------------------------------------------------------------------


def test_distance_symbols() -> None:
    assert [distance_symbol(d) for d in (0, 9, 10, 35, 36)] == ["0", "9", "a", "z", "+"]


def test_path_glyphs_corners() -> None:
    glyphs = path_glyphs([(0, 0), (2, 0), (2, 2)])
    assert glyphs == {
        (0, 0): "S",
        (1, 0): "─",
        (2, 0): "┐",
        (2, 1): "│",
        (2, 2): "G",
    }


# -- vanilla ------------------------------------------------------------------


def test_render_distances() -> None:
    grid = Grid.from_rows(REFERENCE_ROWS)
    distances = DistanceOracle().evaluate(grid)
    assert render(grid, distances, color=False).splitlines() == [
        "10#4443",
        "21.5..3",
        "21.5..3",
        "21.5..3",
        "21.5..3",
        "2122222",
    ]


def test_render_trace() -> None:
    grid = Grid.from_rows(REFERENCE_ROWS)
    distances = DistanceOracle(track_paths=True).evaluate(grid)
    assert render(grid, distances, trace=True, color=False).splitlines() == [
        ".S#┌──┐",
        ".│.G..│",
        ".│....│",
        ".│....│",
        ".│....│",
        ".└────┘",
    ]


# -- rich ---------------------------------------------------------------------


def test_rich_panel_renders() -> None:
    grid = Grid.from_rows(REFERENCE_ROWS)
    distances = DistanceOracle(track_paths=True).evaluate(grid)
    console = Console(width=80, record=True, color_system=None)
    console.print(render_panel(grid, distances, trace=True))
    text = console.export_text()
    assert "Moves: 5" in text
    assert "┌──┐" in text


# -- CLI ----------------------------------------------------------------------


def test_cli_score() -> None:
    result = runner.invoke(main.app, ["score", *REFERENCE_ROWS])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "5" in lines
    assert "10#4443" in lines


def test_cli_score_rejects_ragged_rows() -> None:
    result = runner.invoke(main.app, ["score", "S..", ".."])
    assert result.exit_code != 0


def test_cli_search_exhaustive() -> None:
    result = runner.invoke(
        main.app,
        ["search", "-s", "exhaustive", "-w", "3", "-h", "3", "--min", "1", "--max", "1"],
    )
    assert result.exit_code == 0, result.output
    assert "With 1 obstacles" in result.output


def test_cli_search_greedy_trace() -> None:
    result = runner.invoke(
        main.app,
        [
            "search", "-w", "4", "-h", "3", "--min", "2", "--max", "2",
            "--restarts", "3", "--seed", "1", "--trace", "-f", "rich",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "With 2 obstacles" in result.output


def test_cli_search_rejects_too_many_obstacles() -> None:
    result = runner.invoke(
        main.app, ["search", "-s", "exhaustive", "-w", "2", "-h", "1", "--min", "3", "--max", "3"]
    )
    assert result.exit_code != 0
    assert "With 3 obstacles" not in result.output
