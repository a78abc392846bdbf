"""Core gameplay logic: processes moves and checks the win condition."""

from __future__ import annotations

from collections.abc import Iterable

from backend.models.board import Board
from backend.models.errors import IllegalMove
from backend.models.move import Move


class GamePlay:
    """Orchestrates a single play session on one puzzle.

    Unlike the search engine, a session keeps one mutable current board
    and the history of moves applied to it.
    """

    def __init__(self, board: Board) -> None:
        self.initial = board
        self.board = board
        self.history: list[Move] = []
        self._can_undo = False

    @classmethod
    def replay(cls, board: Board, moves: Iterable[Move | str]) -> GamePlay:
        """Apply *moves* in order from *board*.

        Raises :class:`IllegalMove` at the first move the current board
        does not allow.
        """
        game = cls(board)
        for i, move in enumerate(moves):
            if not game.move(move):
                raise IllegalMove(f"Move {i} ({move}) is not legal on the current board.")
        return game

    # -- movement -------------------------------------------------------------

    def move(self, move: Move | str) -> bool:
        """Apply *move* if the current board allows it.

        Accepts a :class:`Move` or its text notation (``"A-left-2"``).
        Returns True if the move was valid.
        """
        if isinstance(move, str):
            move = Move.parse(move)
        if move not in self.board.all_possible_moves():
            return False
        self.board = self.board.apply_move(move)
        self.history.append(move)
        self._can_undo = True
        return True

    def undo(self) -> bool:
        """Take back the most recent move.

        Only one step can be undone; a second call returns False until
        another move is made.
        """
        if not self._can_undo:
            return False
        self.board = self.board.reverse_move(self.history.pop())
        self._can_undo = False
        return True

    def restart(self) -> None:
        self.board = self.initial
        self.history.clear()
        self._can_undo = False

    # -- queries --------------------------------------------------------------

    @property
    def moves(self) -> int:
        return len(self.history)

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()
