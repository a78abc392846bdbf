"""Vanilla terminal frontend with no third-party dependencies.

Uses only print and ANSI codes to show a solution step by step.
"""

from __future__ import annotations

import sys
from typing import TextIO

from backend.engine.gamesolver import SearchResult
from backend.models.board import EMPTY, EXIT, Board
from backend.models.move import Move
from backend.models.solution import algorithm_label, heuristic_label


# -- ANSI helpers -------------------------------------------------------------

_RED = "\033[31;1m"   # primary piece
_BLUE = "\033[34;1m"  # piece just moved
_G = "\033[32;1m"     # bold green
_Y = "\033[33;1m"     # bold yellow
_C = "\033[36;1m"     # bold cyan
_DIM = "\033[2m"      # dim
_R = "\033[0m"        # reset


def _format_time(ms: float) -> str:
    if ms < 1:
        return f"{ms * 1000:.2f} µs"
    if ms < 1000:
        return f"{ms:.2f} ms"
    return f"{ms / 1000:.2f} s"


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, move: Move | None = None, color: bool = True) -> str:
    """Return the board in puzzle-file layout, optionally ANSI-coloured."""
    primary = board.primary.id
    moved = move.piece_id if move is not None else None
    lines: list[str] = []
    for line in board.to_lines():
        cells: list[str] = []
        for ch in line:
            if not color or ch == " ":
                cells.append(ch)
            elif ch == primary:
                cells.append(f"{_RED}{ch}{_R}")
            elif ch == moved:
                cells.append(f"{_BLUE}{ch}{_R}")
            elif ch == EXIT:
                cells.append(f"{_G}{ch}{_R}")
            elif ch == EMPTY:
                cells.append(f"{_DIM}{ch}{_R}")
            else:
                cells.append(ch)
        lines.append("  " + " ".join(cells))
    return "\n".join(lines)


# -- entry points -------------------------------------------------------------


def run(board: Board, result: SearchResult, out: TextIO | None = None, color: bool = True) -> None:
    """Print the initial board, every move with its board, and a summary."""
    out = out or sys.stdout

    def emit(text: str = "") -> None:
        print(text, file=out)

    def paint(text: str, code: str) -> str:
        return f"{code}{text}{_R}" if color else text

    emit(paint(f"=== {algorithm_label(result.algorithm)} ===", _C))
    if result.heuristic is not None:
        emit(f"  Heuristic: {heuristic_label(result.heuristic)}")
    emit()
    emit("  Initial board:")
    emit(_render_board(board, color=color))
    emit()

    if not result.found:
        emit(paint("No solution found!", _Y))
    else:
        current = board
        for i, move in enumerate(result.moves, 1):
            current = current.apply_move(move)
            emit(f"  Move {i}: {move}")
            emit(_render_board(current, move, color=color))
            emit()
        emit(paint(f"Solved in {len(result.moves)} moves!", _G))

    emit(f"  Nodes visited: {result.nodes_visited}")
    emit(f"  Execution time: {_format_time(result.elapsed_ms)}")


def print_comparison(results: list[SearchResult], out: TextIO | None = None) -> None:
    """Print one line per algorithm: moves, nodes visited, time."""
    out = out or sys.stdout
    print(f"  {'Algorithm':<26}{'Heuristic':<20}{'Moves':>7}{'Nodes':>10}{'Time':>14}", file=out)
    for r in results:
        moves = str(len(r.moves)) if r.found else "-"
        print(
            f"  {algorithm_label(r.algorithm):<26}{heuristic_label(r.heuristic):<20}"
            f"{moves:>7}{r.nodes_visited:>10}{_format_time(r.elapsed_ms):>14}",
            file=out,
        )
