"""Plain puzzle descriptors consumed by ``Board.from_descriptor``."""

from __future__ import annotations

from dataclasses import dataclass, field

from backend.models.move import Orientation


@dataclass(frozen=True)
class PieceSpec:
    id: str
    row: int
    col: int
    length: int
    orientation: Orientation
    is_primary: bool = False


@dataclass(frozen=True)
class PuzzleDescriptor:
    """Everything needed to build a board.

    ``exit_row``/``exit_col`` may lie one unit outside the grid.
    ``non_primary_count`` is the declared vehicle count from a puzzle file;
    when set, the board checks it against the pieces actually given.
    """

    rows: int
    cols: int
    pieces: tuple[PieceSpec, ...] = field(default_factory=tuple)
    exit_row: int | None = None
    exit_col: int | None = None
    non_primary_count: int | None = None
