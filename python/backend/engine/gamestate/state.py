"""Search node: a board plus the moves that led to it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from backend.models.board import Board
from backend.models.move import Move

if TYPE_CHECKING:
    from backend.engine.gamesolver.heuristics import Heuristic


class GameState:
    """Holds one board, its move history, and g/h/f costs.

    Identity is the board's grid alone: two states reached through
    different move orders compare and hash equal.  The move history and
    the heuristic in use play no part in it.
    """

    __slots__ = ("board", "moves", "g", "h", "f", "heuristic")

    def __init__(
        self,
        board: Board,
        moves: tuple[Move, ...] = (),
        heuristic: Heuristic | None = None,
    ) -> None:
        self.board = board
        self.moves = moves
        self.heuristic = heuristic
        self.g: int = len(moves)
        self.h: int = heuristic.evaluate(board) if heuristic is not None else 0
        self.f: int = self.g + self.h

    @classmethod
    def initial(cls, board: Board, heuristic: Heuristic | None = None) -> GameState:
        return cls(board, (), heuristic)

    # -- identity -------------------------------------------------------------

    @property
    def key(self) -> tuple[str, ...]:
        return self.board.grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.board.grid == other.board.grid

    def __hash__(self) -> int:
        return hash(self.board.grid)

    def __repr__(self) -> str:
        return f"GameState(g={self.g}, h={self.h}, moves={len(self.moves)})"

    # -- search ---------------------------------------------------------------

    def is_goal(self) -> bool:
        return self.board.is_solved()

    def successors(self) -> list[GameState]:
        """One state per legal move; each costs exactly one more than this one."""
        return [
            GameState(self.board.apply_move(move), self.moves + (move,), self.heuristic)
            for move in self.board.all_possible_moves()
        ]
