from __future__ import annotations

import json

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Algorithm, Heuristic, Solver
from backend.models.solution import SolutionRecord, algorithm_label, heuristic_label


def test_text_report(board_from_file, tmp_path) -> None:
    board = board_from_file("scenario_a.txt")
    record = SolutionRecord.from_result(board, Solver.solve(board, Algorithm.ASTAR, Heuristic.MANHATTAN))
    out = tmp_path / "nested" / "solution.txt"
    record.save(out)

    text = out.read_text()
    assert "Rush Hour Puzzle Solution" in text
    assert "Algorithm: A* (A-Star)" in text
    assert "Heuristic: Manhattan Distance" in text
    assert "Total Moves: 1" in text
    assert "Move 1: P-right-2" in text
    assert "│..PP..K│" in text
    assert "│....PPK│" in text
    assert "End of solution" in text


def test_unsolved_report(board_from_file) -> None:
    board = board_from_file("boxed_in.txt")
    record = SolutionRecord.from_result(board, Solver.solve(board, Algorithm.UCS))
    assert not record.found
    assert record.heuristic is None
    text = record.to_text()
    assert "Total Moves: no solution found" in text
    assert "Heuristic: None" in text
    assert "Move 1" not in text


def test_json_record(board_from_file, tmp_path) -> None:
    board = board_from_file("blocked_exit.txt")
    record = SolutionRecord.from_result(board, Solver.solve(board, Algorithm.DIJKSTRA))
    out = tmp_path / "solution.json"
    record.save(out)

    data = json.loads(out.read_text())
    assert data["algorithm"] == "dijkstra"
    assert data["heuristic"] is None
    assert len(data["moves"]) == 3
    assert len(data["steps"]) == 3

    loaded = SolutionRecord.load(out)
    assert loaded == record
    assert GamePlay.replay(board, loaded.parsed_moves()).is_won


def test_labels() -> None:
    assert algorithm_label(Algorithm.GBFS) == "Greedy Best-First Search"
    assert algorithm_label("ucs") == "Uniform Cost Search"
    assert heuristic_label(None) == "None"
    assert heuristic_label(Heuristic.COMBINED) == "Combined Heuristic"
