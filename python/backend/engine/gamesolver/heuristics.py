"""Heuristic estimates of the moves left before the primary piece exits."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from backend.models.board import EMPTY, EXIT, Board

logger = logging.getLogger(__name__)


def _primary_line(board: Board) -> tuple[str, int, int, int]:
    """Cells along the primary piece's axis, its first and last index, and the exit index."""
    p = board.primary
    if p.is_horizontal:
        return board.grid[p.row], p.col, p.end_col, board.exit_col
    return "".join(row[p.col] for row in board.grid), p.row, p.end_row, board.exit_row


def manhattan(board: Board) -> int:
    """Cells between the primary piece's leading edge and the exit.

    An exit beyond the grid counts only up to the boundary.
    """
    line, start, end, exit_at = _primary_line(board)
    target = min(max(exit_at, 0), len(line) - 1)
    if target > end:
        return target - end
    if target < start:
        return start - target
    return 0


def blocking(board: Board) -> int:
    """Occupied cells strictly between the primary piece and the exit."""
    line, start, end, exit_at = _primary_line(board)
    size = len(line)
    if exit_at >= size:
        lo, hi = end + 1, size - 1
    elif exit_at < 0:
        lo, hi = 0, start - 1
    elif exit_at > end:
        lo, hi = end + 1, exit_at - 1
    else:
        lo, hi = exit_at + 1, start - 1
    lo, hi = max(0, lo), min(size - 1, hi)
    primary_id = board.primary.id
    return sum(1 for cell in line[lo : hi + 1] if cell not in (EMPTY, EXIT, primary_id))


def combined(board: Board) -> int:
    # Each blocking cell counts double.
    return manhattan(board) + 2 * blocking(board)


class Heuristic(StrEnum):
    MANHATTAN = "manhattan"
    BLOCKING = "blocking"
    COMBINED = "combined"

    def evaluate(self, board: Board) -> int:
        return _FUNCTIONS[self](board)

    @classmethod
    def parse(cls, name: str | None) -> Heuristic:
        """Resolve *name*, falling back to Manhattan for anything unknown."""
        if isinstance(name, Heuristic):
            return name
        if name is None:
            return cls.MANHATTAN
        try:
            return cls(name.strip().lower())
        except ValueError:
            logger.warning("Unknown heuristic %r, using %s.", name, cls.MANHATTAN.value)
            return cls.MANHATTAN


_FUNCTIONS: dict[Heuristic, Callable[[Board], int]] = {
    Heuristic.MANHATTAN: manhattan,
    Heuristic.BLOCKING: blocking,
    Heuristic.COMBINED: combined,
}
