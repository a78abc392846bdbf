"""Vehicle model for the Rush Hour board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from backend.models.errors import InvalidConfiguration
from backend.models.move import Direction, Move, Orientation

if TYPE_CHECKING:
    from backend.models.board import Board

VALID_LENGTHS = (2, 3)


@dataclass(frozen=True)
class Piece:
    """A vehicle occupying *length* contiguous cells from its anchor.

    The anchor ``(row, col)`` is the piece's top-left occupied cell.
    """

    id: str
    row: int
    col: int
    length: int
    orientation: Orientation
    is_primary: bool = False

    def __post_init__(self) -> None:
        try:
            orientation = Orientation(self.orientation)
        except ValueError:
            raise InvalidConfiguration(
                f"Invalid orientation {self.orientation!r} for piece {self.id!r}."
            ) from None
        object.__setattr__(self, "orientation", orientation)
        if self.length not in VALID_LENGTHS:
            raise InvalidConfiguration(
                f"Piece {self.id!r} has length {self.length}; "
                f"expected one of {VALID_LENGTHS}."
            )

    # -- geometry -------------------------------------------------------------

    @property
    def is_horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    @property
    def end_row(self) -> int:
        return self.row if self.is_horizontal else self.row + self.length - 1

    @property
    def end_col(self) -> int:
        return self.col + self.length - 1 if self.is_horizontal else self.col

    def occupied_cells(self) -> list[tuple[int, int]]:
        if self.is_horizontal:
            return [(self.row, self.col + i) for i in range(self.length)]
        return [(self.row + i, self.col) for i in range(self.length)]

    # -- moves ----------------------------------------------------------------

    def possible_moves(self, board: Board) -> list[Move]:
        """Every legal slide of this piece on *board*.

        Each direction yields one move per step count from 1 up to the
        length of the free run next to the piece.
        """
        if self.is_horizontal:
            back, ahead = Direction.LEFT, Direction.RIGHT
        else:
            back, ahead = Direction.UP, Direction.DOWN

        moves: list[Move] = []
        for direction, (start_r, start_c) in (
            (back, (self.row, self.col)),
            (ahead, (self.end_row, self.end_col)),
        ):
            dr, dc = direction.delta
            free = 0
            while board.is_cell_traversable(
                start_r + dr * (free + 1), start_c + dc * (free + 1)
            ):
                free += 1
            moves.extend(Move(self.id, direction, step) for step in range(1, free + 1))
        return moves

    def apply_move(self, move: Move) -> Piece:
        """Return a copy shifted by *move*; legality is the caller's concern."""
        dr, dc = move.direction.delta
        return Piece(
            id=self.id,
            row=self.row + dr * move.steps,
            col=self.col + dc * move.steps,
            length=self.length,
            orientation=self.orientation,
            is_primary=self.is_primary,
        )
