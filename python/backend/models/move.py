"""Move and direction values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.errors import InvalidConfiguration


class Orientation(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def orientation(self) -> Orientation:
        """The piece orientation this direction slides along."""
        if self in (Direction.LEFT, Direction.RIGHT):
            return Orientation.HORIZONTAL
        return Orientation.VERTICAL

    @property
    def delta(self) -> tuple[int, int]:
        """Unit (row, col) offset of a one-cell slide."""
        return _DELTAS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Move:
    """Slide piece *piece_id* by *steps* cells in *direction*.

    A move costs one unit regardless of how many cells it covers.
    """

    piece_id: str
    direction: Direction
    steps: int = 1

    def __post_init__(self) -> None:
        try:
            direction = Direction(self.direction)
        except ValueError:
            raise InvalidConfiguration(
                f"Invalid direction {self.direction!r} for piece {self.piece_id!r}."
            ) from None
        object.__setattr__(self, "direction", direction)
        if isinstance(self.steps, bool) or not isinstance(self.steps, int) or self.steps < 1:
            raise InvalidConfiguration(
                f"Step count must be a positive integer, got {self.steps!r}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Move:
        """Read the ``<id>-<direction>[-<steps>]`` notation.

        Example::

            Move.parse("A-left-2")
        """
        parts = text.strip().split("-")
        if len(parts) not in (2, 3) or len(parts[0]) != 1:
            raise InvalidConfiguration(f"Invalid move format: {text!r}")
        steps = 1
        if len(parts) == 3:
            try:
                steps = int(parts[2])
            except ValueError:
                raise InvalidConfiguration(f"Invalid step count in move: {text!r}") from None
        return cls(parts[0], parts[1].lower(), steps)

    # -- queries --------------------------------------------------------------

    def reversed(self) -> Move:
        return Move(self.piece_id, self.direction.opposite, self.steps)

    def __str__(self) -> str:
        if self.steps == 1:
            return f"{self.piece_id}-{self.direction.value}"
        return f"{self.piece_id}-{self.direction.value}-{self.steps}"
