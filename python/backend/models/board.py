"""Board model for the Rush Hour puzzle."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.descriptor import PuzzleDescriptor
from backend.models.errors import IllegalMove, InvalidConfiguration, PieceNotFound
from backend.models.move import Move
from backend.models.piece import Piece

EMPTY = "."
EXIT = "K"
RESERVED = (EMPTY, EXIT, " ")


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of a Rush Hour position.

    The grid is a tuple of row strings: ``.`` for an empty cell, ``K`` for
    an uncovered in-grid exit, otherwise the id of the piece on that cell.
    The exit may also sit one unit outside the grid, in which case it never
    appears in the grid itself.

    Build boards with :meth:`from_descriptor`; the plain constructor trusts
    its arguments and is used internally by :meth:`apply_move`.
    """

    rows: int
    cols: int
    grid: tuple[str, ...]
    pieces: tuple[Piece, ...]
    primary: Piece
    exit_row: int
    exit_col: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_descriptor(cls, descriptor: PuzzleDescriptor) -> Board:
        """Validate *descriptor* and build the board it describes.

        Raises :class:`InvalidConfiguration` on the first problem found;
        no board is returned in that case.
        """
        rows, cols = descriptor.rows, descriptor.cols
        if rows < 1 or cols < 1:
            raise InvalidConfiguration(f"Board must be at least 1×1, got {rows}×{cols}.")

        pieces: list[Piece] = []
        seen: set[str] = set()
        cells: list[list[str]] = [[EMPTY] * cols for _ in range(rows)]
        for spec in descriptor.pieces:
            if not isinstance(spec.id, str) or len(spec.id) != 1 or spec.id in RESERVED:
                raise InvalidConfiguration(f"Invalid piece id {spec.id!r}.")
            if spec.id in seen:
                raise InvalidConfiguration(f"Duplicate piece id {spec.id!r}.")
            seen.add(spec.id)
            piece = Piece(
                id=spec.id,
                row=spec.row,
                col=spec.col,
                length=spec.length,
                orientation=spec.orientation,
                is_primary=spec.is_primary,
            )
            for r, c in piece.occupied_cells():
                if not (0 <= r < rows and 0 <= c < cols):
                    raise InvalidConfiguration(
                        f"Piece {piece.id!r} leaves the {rows}×{cols} grid at ({r}, {c})."
                    )
                if cells[r][c] != EMPTY:
                    raise InvalidConfiguration(
                        f"Pieces {cells[r][c]!r} and {piece.id!r} overlap at ({r}, {c})."
                    )
                cells[r][c] = piece.id
            pieces.append(piece)

        primaries = [p for p in pieces if p.is_primary]
        if not primaries:
            raise InvalidConfiguration("No primary piece found.")
        if len(primaries) > 1:
            ids = ", ".join(p.id for p in primaries)
            raise InvalidConfiguration(f"Expected one primary piece, found {ids}.")
        primary = primaries[0]

        expected = descriptor.non_primary_count
        if expected is not None and expected != len(pieces) - 1:
            raise InvalidConfiguration(
                f"Expected {expected} non-primary pieces, found {len(pieces) - 1}."
            )

        exit_row, exit_col = descriptor.exit_row, descriptor.exit_col
        if exit_row is None or exit_col is None:
            raise InvalidConfiguration("No exit found.")
        row_inside = 0 <= exit_row < rows
        col_inside = 0 <= exit_col < cols
        if not (-1 <= exit_row <= rows and -1 <= exit_col <= cols) or (
            not row_inside and not col_inside
        ):
            raise InvalidConfiguration(
                f"Exit ({exit_row}, {exit_col}) must lie inside the grid or "
                f"directly beside one of its edges."
            )
        if primary.is_horizontal and exit_row != primary.row:
            raise InvalidConfiguration(
                f"Exit row {exit_row} is not aligned with horizontal primary "
                f"piece on row {primary.row}."
            )
        if not primary.is_horizontal and exit_col != primary.col:
            raise InvalidConfiguration(
                f"Exit column {exit_col} is not aligned with vertical primary "
                f"piece on column {primary.col}."
            )

        if row_inside and col_inside and cells[exit_row][exit_col] == EMPTY:
            cells[exit_row][exit_col] = EXIT

        return cls(
            rows=rows,
            cols=cols,
            grid=tuple("".join(row) for row in cells),
            pieces=tuple(pieces),
            primary=primary,
            exit_row=exit_row,
            exit_col=exit_col,
        )

    # -- queries --------------------------------------------------------------

    @property
    def exit(self) -> tuple[int, int]:
        return self.exit_row, self.exit_col

    @property
    def exit_outside(self) -> bool:
        return not self.in_bounds(self.exit_row, self.exit_col)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> str:
        return self.grid[row][col]

    def is_cell_traversable(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            return False
        return self.grid[row][col] in (EMPTY, EXIT)

    def piece(self, piece_id: str) -> Piece:
        for p in self.pieces:
            if p.id == piece_id:
                return p
        raise PieceNotFound(piece_id)

    def clamped_exit(self) -> tuple[int, int]:
        """The exit, pulled back onto the nearest in-grid cell."""
        return (
            min(max(self.exit_row, 0), self.rows - 1),
            min(max(self.exit_col, 0), self.cols - 1),
        )

    def is_solved(self) -> bool:
        """True once the primary piece reaches the exit.

        An exit outside the grid is reached when the primary piece sits
        flush against that edge, which is the same as covering the exit
        once it is clamped back into the grid.
        """
        row, col = self.clamped_exit()
        p = self.primary
        return p.row <= row <= p.end_row and p.col <= col <= p.end_col

    def all_possible_moves(self) -> list[Move]:
        moves: list[Move] = []
        for piece in self.pieces:
            moves.extend(piece.possible_moves(self))
        return moves

    # -- transitions ----------------------------------------------------------

    def apply_move(self, move: Move) -> Board:
        """Return the board after *move*; this board is left untouched.

        Only moves produced by :meth:`all_possible_moves` on this board are
        guaranteed to keep pieces from overlapping.
        """
        old = self.piece(move.piece_id)
        if move.direction.orientation is not old.orientation:
            raise IllegalMove(
                f"Piece {old.id!r} is {old.orientation.value}; cannot move {move.direction.value}."
            )
        new = old.apply_move(move)
        if not (self.in_bounds(new.row, new.col) and self.in_bounds(new.end_row, new.end_col)):
            raise IllegalMove(f"Move {move} takes piece {old.id!r} off the board.")

        cells = [list(row) for row in self.grid]
        for r, c in old.occupied_cells():
            cells[r][c] = EMPTY
        if not self.exit_outside and cells[self.exit_row][self.exit_col] == EMPTY:
            cells[self.exit_row][self.exit_col] = EXIT
        for r, c in new.occupied_cells():
            cells[r][c] = new.id

        return Board(
            rows=self.rows,
            cols=self.cols,
            grid=tuple("".join(row) for row in cells),
            pieces=tuple(new if p.id == old.id else p for p in self.pieces),
            primary=new if old.is_primary else self.primary,
            exit_row=self.exit_row,
            exit_col=self.exit_col,
        )

    def reverse_move(self, move: Move) -> Board:
        """Undo *move* by sliding the same piece back the same distance."""
        return self.apply_move(move.reversed())

    # -- rendering ------------------------------------------------------------

    def to_lines(self) -> list[str]:
        """Grid rows in puzzle-file layout, with an outside exit drawn in place.

        A left exit prefixes its row with ``K`` and indents the others by
        one space; top and bottom exits get a line of their own.
        """
        lines = list(self.grid)
        if not self.exit_outside:
            return lines
        if self.exit_col == self.cols:
            lines[self.exit_row] += EXIT
        elif self.exit_col == -1:
            lines = [(EXIT if r == self.exit_row else " ") + line for r, line in enumerate(lines)]
        elif self.exit_row == -1:
            lines.insert(0, " " * self.exit_col + EXIT)
        else:
            lines.append(" " * self.exit_col + EXIT)
        return lines

    def __str__(self) -> str:
        return "\n".join(self.to_lines())
