from backend.models.board import Board
from backend.models.descriptor import PieceSpec, PuzzleDescriptor
from backend.models.errors import (
    IllegalMove,
    InvalidConfiguration,
    PieceNotFound,
    PuzzleFormatError,
    RushHourError,
)
from backend.models.move import Direction, Move, Orientation
from backend.models.piece import Piece
from backend.models.solution import SolutionRecord

__all__ = [
    "Board",
    "Direction",
    "IllegalMove",
    "InvalidConfiguration",
    "Move",
    "Orientation",
    "Piece",
    "PieceNotFound",
    "PieceSpec",
    "PuzzleDescriptor",
    "PuzzleFormatError",
    "RushHourError",
    "SolutionRecord",
]
