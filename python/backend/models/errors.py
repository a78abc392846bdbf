"""Exception hierarchy for the Rush Hour models and engine."""

from __future__ import annotations


class RushHourError(Exception):
    """Base class for every error raised by the backend."""


class InvalidConfiguration(RushHourError, ValueError):
    """A puzzle, piece or move was built from malformed input."""


class PuzzleFormatError(InvalidConfiguration):
    """Puzzle text could not be read into a descriptor."""

    def __init__(self, message: str, line: int | None = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class PieceNotFound(RushHourError, KeyError):
    """A move named a piece id that is not on the board."""

    def __init__(self, piece_id: str) -> None:
        super().__init__(piece_id)
        self.piece_id = piece_id

    def __str__(self) -> str:
        return f"Piece not found: {self.piece_id!r}"


class IllegalMove(RushHourError):
    """A move that the current board could not have generated was applied."""
