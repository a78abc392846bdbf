"""End-to-end checks of the command line and both terminal frontends."""

from __future__ import annotations

import io

from rich.console import Console
from typer.testing import CliRunner

from backend.engine.gamesolver import Algorithm, Solver
from frontend.cli.rich import app as rich_app
from frontend.cli.vanilla import app as vanilla_app
from main import app

runner = CliRunner()


# -- command line -------------------------------------------------------------


def test_solves_puzzle(puzzle_path) -> None:
    result = runner.invoke(app, [str(puzzle_path("scenario_a.txt"))])
    assert result.exit_code == 0, result.output
    assert "A* (A-Star)" in result.output
    assert "Move 1: P-right-2" in result.output
    assert "Solved in 1 moves!" in result.output


def test_uses_choices_from_file(puzzle_path) -> None:
    result = runner.invoke(app, [str(puzzle_path("classic.txt"))])
    assert result.exit_code == 0, result.output
    assert "Greedy Best-First Search" in result.output
    assert "Combined Heuristic" in result.output


def test_options_override_file(puzzle_path) -> None:
    result = runner.invoke(app, [str(puzzle_path("classic.txt")), "-a", "ucs"])
    assert result.exit_code == 0, result.output
    assert "Uniform Cost Search" in result.output
    assert "Heuristic:" not in result.output


def test_reports_unsolvable(puzzle_path) -> None:
    result = runner.invoke(app, [str(puzzle_path("boxed_in.txt")), "-a", "dijkstra"])
    assert result.exit_code == 0, result.output
    assert "No solution found!" in result.output


def test_save_json(puzzle_path, tmp_path) -> None:
    out = tmp_path / "solution.json"
    result = runner.invoke(app, [str(puzzle_path("blocked_exit.txt")), "--save", str(out)])
    assert result.exit_code == 0, result.output
    assert "Solution saved to" in result.output
    assert out.exists()


def test_compare(puzzle_path) -> None:
    result = runner.invoke(app, [str(puzzle_path("blocked_exit.txt")), "--compare"])
    assert result.exit_code == 0, result.output
    for label in ("A* (A-Star)", "Dijkstra's Algorithm", "Greedy Best-First Search", "Uniform Cost Search"):
        assert label in result.output


def test_compare_rejects_save(puzzle_path, tmp_path) -> None:
    out = tmp_path / "solution.txt"
    result = runner.invoke(app, [str(puzzle_path("blocked_exit.txt")), "--compare", "--save", str(out)])
    assert result.exit_code == 1
    assert "--compare" in result.output
    assert not out.exists()


def test_rich_frontend(puzzle_path) -> None:
    result = runner.invoke(app, [str(puzzle_path("scenario_a.txt")), "-f", "rich"])
    assert result.exit_code == 0, result.output
    assert "Solved in 1 moves!" in result.output


def test_invalid_puzzle_exits_with_error(tmp_path) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("2 3\n0\nPP.\n...\n")
    result = runner.invoke(app, [str(bad)])
    assert result.exit_code == 1
    assert "No exit" in result.output


def test_missing_file_is_rejected(tmp_path) -> None:
    result = runner.invoke(app, [str(tmp_path / "nope.txt")])
    assert result.exit_code != 0


# -- frontends ----------------------------------------------------------------


def test_vanilla_run_without_colour(board_from_file) -> None:
    board = board_from_file("bottom_exit.txt")
    buf = io.StringIO()
    vanilla_app.run(board, Solver.solve(board), out=buf, color=False)
    text = buf.getvalue()
    assert "\033[" not in text
    assert "  Initial board:" in text
    assert "  . P . ." in text
    assert "    K" in text
    assert "Solved in 2 moves!" in text


def test_vanilla_comparison(board_from_file) -> None:
    board = board_from_file("scenario_a.txt")
    buf = io.StringIO()
    vanilla_app.print_comparison(Solver.compare(board), out=buf)
    lines = buf.getvalue().splitlines()
    assert len(lines) == 1 + len(Algorithm)
    assert "Moves" in lines[0]


def test_rich_run_and_comparison(board_from_file) -> None:
    board = board_from_file("boxed_in.txt")
    buf = io.StringIO()
    console = Console(file=buf, width=120, color_system=None)
    rich_app.run(board, Solver.solve(board), out=console)
    rich_app.print_comparison(Solver.compare(board), out=console)
    text = buf.getvalue()
    assert "No solution found!" in text
    assert "Algorithm comparison" in text
    assert "Uniform Cost Search" in text
