from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from backend.engine.gameparser import load_puzzle, parse_puzzle
from backend.models.board import Board

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"
PUZZLES_DIR = FIXTURES_DIR / "puzzles"


@pytest.fixture
def puzzle_path() -> Callable[[str], Path]:
    def _path(name: str) -> Path:
        return PUZZLES_DIR / name

    return _path


@pytest.fixture
def board_from_file() -> Callable[[str], Board]:
    """Build the board stored in ``fixtures/puzzles/<name>``."""

    def _load(name: str) -> Board:
        return load_puzzle(PUZZLES_DIR / name).to_board()

    return _load


@pytest.fixture
def board_from_text() -> Callable[[str], Board]:
    def _parse(text: str) -> Board:
        return parse_puzzle(text).to_board()

    return _parse
