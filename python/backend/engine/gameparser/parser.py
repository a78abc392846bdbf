"""Reads Rush Hour puzzle files into board descriptors.

File layout::

    6 6
    11
    AAB..F
    ..BCDF
    GPPCDFK
    GH.III
    GHJ...
    LLJMM.
    astar
    manhattan

Line one holds the grid size, line two the number of non-primary
vehicles, followed by the grid.  ``P`` marks the primary vehicle and
``K`` the exit.  The exit may sit inside a row, right after a row's
last cell, at the start of a row (other rows are then indented by one
space), or alone on a line directly above or below the grid.  The two
optional trailing lines name the algorithm and heuristic to run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from backend.models.board import EMPTY, EXIT, Board
from backend.models.descriptor import PieceSpec, PuzzleDescriptor
from backend.models.errors import PuzzleFormatError
from backend.models.move import Orientation
from backend.models.piece import VALID_LENGTHS

logger = logging.getLogger(__name__)

PRIMARY_ID = "P"


@dataclass(frozen=True)
class PuzzleFile:
    """A parsed puzzle plus the solver choices written after the grid."""

    descriptor: PuzzleDescriptor
    algorithm: str | None = None
    heuristic: str | None = None

    def to_board(self) -> Board:
        return Board.from_descriptor(self.descriptor)


# -- parsing ------------------------------------------------------------------


def load_puzzle(path: Path | str) -> PuzzleFile:
    path = Path(path)
    logger.debug("Loading puzzle from %s", path)
    return parse_puzzle(path.read_text())


def parse_puzzle(text: str) -> PuzzleFile:
    """Parse puzzle *text*.  Raises :class:`PuzzleFormatError` on bad input."""
    lines = [line.rstrip() for line in text.splitlines()]
    if len(lines) < 2:
        raise PuzzleFormatError("Puzzle needs a size line and a vehicle count line.")

    rows, cols = _parse_size(lines[0])
    non_primary = _parse_int(lines[1], line_no=2, what="vehicle count")

    body = lines[2:]
    first = 3  # 1-based file line number of body[0]
    idx = 0
    exit_row: int | None = None
    exit_col: int | None = None
    exits_seen = 0

    if body and body[0].strip() == EXIT:
        exit_row, exit_col = -1, body[0].index(EXIT)
        exits_seen += 1
        idx = 1

    raw_rows = body[idx : idx + rows]
    if len(raw_rows) < rows:
        raise PuzzleFormatError(f"Expected {rows} grid rows, found {len(raw_rows)}.")
    grid_first = first + idx
    idx += rows

    if idx < len(body) and body[idx].strip() == EXIT:
        exit_row, exit_col = rows, body[idx].index(EXIT)
        exits_seen += 1
        idx += 1

    trailing = [line.strip() for line in body[idx:] if line.strip()]
    if len(trailing) > 2:
        logger.debug("Ignoring %d extra trailing lines", len(trailing) - 2)

    left_exit_row = next(
        (
            r
            for r, line in enumerate(raw_rows)
            if len(line) == cols + 1 and line[0] == EXIT and line[-1] != EXIT
        ),
        None,
    )

    grid: list[str] = []
    for r, line in enumerate(raw_rows):
        line_no = grid_first + r
        if left_exit_row is not None:
            if r == left_exit_row:
                exit_row, exit_col = r, -1
                exits_seen += 1
                line = line[1:]
            elif line.startswith(" "):
                line = line[1:]
        if len(line) == cols + 1 and line[-1] == EXIT:
            exit_row, exit_col = r, cols
            exits_seen += 1
            line = line[:cols]
        if len(line) != cols:
            raise PuzzleFormatError(f"Row has {len(line)} cells, expected {cols}.", line_no)
        for c, ch in enumerate(line):
            if ch == EXIT:
                exit_row, exit_col = r, c
                exits_seen += 1
            elif ch.isspace():
                raise PuzzleFormatError(f"Blank cell at column {c}; use '{EMPTY}'.", line_no)
        grid.append(line)

    if exits_seen == 0:
        raise PuzzleFormatError("No exit (K) found in the puzzle.")
    if exits_seen > 1:
        raise PuzzleFormatError("Multiple exits (K) found. Only one exit is allowed.")
    logger.debug("Exit at (%d, %d)", exit_row, exit_col)

    descriptor = PuzzleDescriptor(
        rows=rows,
        cols=cols,
        pieces=tuple(_pieces_from_grid(grid)),
        exit_row=exit_row,
        exit_col=exit_col,
        non_primary_count=non_primary,
    )
    return PuzzleFile(
        descriptor=descriptor,
        algorithm=trailing[0] if trailing else None,
        heuristic=trailing[1] if len(trailing) > 1 else None,
    )


def _parse_int(line: str, line_no: int, what: str) -> int:
    try:
        return int(line.strip())
    except ValueError:
        raise PuzzleFormatError(f"Invalid {what} {line.strip()!r}.", line_no) from None


def _parse_size(line: str) -> tuple[int, int]:
    parts = line.split()
    if len(parts) != 2:
        raise PuzzleFormatError(f"Expected '<rows> <cols>', got {line.strip()!r}.", 1)
    rows = _parse_int(parts[0], 1, "row count")
    cols = _parse_int(parts[1], 1, "column count")
    if rows < 1 or cols < 1:
        raise PuzzleFormatError(f"Grid size must be positive, got {rows}×{cols}.", 1)
    return rows, cols


def _pieces_from_grid(grid: list[str]) -> list[PieceSpec]:
    """Group grid cells by letter into straight pieces, in reading order."""
    cells: dict[str, list[tuple[int, int]]] = {}
    for r, line in enumerate(grid):
        for c, ch in enumerate(line):
            if ch not in (EMPTY, EXIT):
                cells.setdefault(ch, []).append((r, c))

    if PRIMARY_ID not in cells:
        raise PuzzleFormatError(f"No primary piece ({PRIMARY_ID}) found in the puzzle.")

    specs: list[PieceSpec] = []
    for piece_id, coords in cells.items():
        length = len(coords)
        if length not in VALID_LENGTHS:
            raise PuzzleFormatError(
                f"Piece {piece_id!r} covers {length} cells; expected one of {VALID_LENGTHS}."
            )
        row, col = coords[0]
        if all(r == row for r, _ in coords):
            orientation = Orientation.HORIZONTAL
            straight = [c for _, c in coords] == list(range(col, col + length))
        elif all(c == col for _, c in coords):
            orientation = Orientation.VERTICAL
            straight = [r for r, _ in coords] == list(range(row, row + length))
        else:
            straight = False
        if not straight:
            raise PuzzleFormatError(f"Piece {piece_id!r} is not a straight contiguous line.")
        specs.append(
            PieceSpec(
                id=piece_id,
                row=row,
                col=col,
                length=length,
                orientation=orientation,
                is_primary=piece_id == PRIMARY_ID,
            )
        )
    return specs


# -- formatting ---------------------------------------------------------------


def format_puzzle(board: Board, algorithm: str | None = None, heuristic: str | None = None) -> str:
    """Write *board* back out in the file layout :func:`parse_puzzle` reads."""
    lines = [f"{board.rows} {board.cols}", str(len(board.pieces) - 1), *board.to_lines()]
    if algorithm:
        lines.append(str(algorithm))
        if heuristic:
            lines.append(str(heuristic))
    return "\n".join(lines) + "\n"
