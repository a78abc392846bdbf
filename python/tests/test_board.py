from __future__ import annotations

import pytest

from backend.models.board import EXIT, Board
from backend.models.descriptor import PieceSpec, PuzzleDescriptor
from backend.models.errors import IllegalMove, InvalidConfiguration, PieceNotFound
from backend.models.move import Direction, Move, Orientation

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


def _descriptor(*pieces: PieceSpec, rows: int = 6, cols: int = 6, exit_at=(2, 6), count=None) -> PuzzleDescriptor:
    exit_row, exit_col = exit_at if exit_at is not None else (None, None)
    return PuzzleDescriptor(
        rows=rows,
        cols=cols,
        pieces=tuple(pieces),
        exit_row=exit_row,
        exit_col=exit_col,
        non_primary_count=count,
    )


def _primary(row: int = 2, col: int = 2, length: int = 2, orientation: Orientation = H) -> PieceSpec:
    return PieceSpec("P", row, col, length, orientation, is_primary=True)


# -- construction -------------------------------------------------------------


def test_from_descriptor_builds_grid() -> None:
    board = Board.from_descriptor(_descriptor(_primary(), PieceSpec("A", 0, 5, 3, V)))
    assert board.grid == (
        ".....A",
        ".....A",
        "..PP.A",
        "......",
        "......",
        "......",
    )
    assert board.primary.id == "P"
    assert board.exit == (2, 6)
    assert board.exit_outside


def test_in_grid_exit_is_marked() -> None:
    board = Board.from_descriptor(_descriptor(_primary(col=0), exit_at=(2, 4)))
    assert board.cell(2, 4) == EXIT
    assert not board.exit_outside


@pytest.mark.parametrize(
    "descriptor",
    [
        _descriptor(_primary(), PieceSpec("P", 0, 0, 2, H)),
        _descriptor(_primary(), PieceSpec("A", 2, 3, 2, V)),
        _descriptor(_primary(col=5)),
        _descriptor(PieceSpec("A", 0, 0, 2, H)),
        _descriptor(_primary(), PieceSpec("Q", 0, 0, 2, H, is_primary=True)),
        _descriptor(_primary(), PieceSpec(".", 0, 0, 2, H)),
        _descriptor(_primary(), PieceSpec("AB", 0, 0, 2, H)),
        _descriptor(_primary(), count=2),
        _descriptor(_primary(), exit_at=None),
        _descriptor(_primary(), exit_at=(3, 6)),
        _descriptor(_primary(), exit_at=(2, 7)),
        _descriptor(_primary(), exit_at=(-1, 3)),
        _descriptor(_primary(), exit_at=(-1, -1)),
        _descriptor(_primary(), rows=0),
    ],
    ids=[
        "duplicate-id",
        "overlap",
        "out-of-bounds",
        "no-primary",
        "two-primaries",
        "reserved-id",
        "long-id",
        "count-mismatch",
        "missing-exit",
        "exit-off-row",
        "exit-too-far",
        "exit-on-wrong-axis",
        "exit-in-corner",
        "empty-grid",
    ],
)
def test_invalid_configurations(descriptor: PuzzleDescriptor) -> None:
    with pytest.raises(InvalidConfiguration):
        Board.from_descriptor(descriptor)


def test_vertical_primary_needs_exit_in_its_column() -> None:
    ok = _descriptor(_primary(row=1, col=3, orientation=V), exit_at=(6, 3))
    assert Board.from_descriptor(ok).exit == (6, 3)
    with pytest.raises(InvalidConfiguration):
        Board.from_descriptor(_descriptor(_primary(row=1, col=3, orientation=V), exit_at=(6, 2)))


# -- queries ------------------------------------------------------------------


def test_scenario_a_moves(board_from_file) -> None:
    board = board_from_file("scenario_a.txt")
    assert {str(m) for m in board.all_possible_moves()} == {
        "P-left",
        "P-left-2",
        "P-right",
        "P-right-2",
    }
    assert not board.is_solved()
    assert board.apply_move(Move("P", Direction.RIGHT, 2)).is_solved()


def test_scenario_b_is_solved(board_from_file) -> None:
    assert board_from_file("scenario_b.txt").is_solved()


@pytest.mark.parametrize(
    "name,move",
    [
        ("left_exit.txt", "P-left"),
        ("top_exit.txt", "P-up"),
        ("bottom_exit.txt", None),
        ("inner_exit.txt", "P-right-2"),
        ("inner_exit.txt", "P-right-3"),
    ],
)
def test_goal_on_every_side(board_from_file, name: str, move: str | None) -> None:
    board = board_from_file(name)
    assert not board.is_solved()
    if move is None:
        board = board.apply_move(Move.parse("A-right")).apply_move(Move.parse("P-down-2"))
    else:
        board = board.apply_move(Move.parse(move))
    assert board.is_solved()


def test_traversable_cells(board_from_file) -> None:
    board = board_from_file("inner_exit.txt")
    assert board.is_cell_traversable(1, 3)
    assert board.is_cell_traversable(0, 0)
    assert not board.is_cell_traversable(1, 0)
    assert not board.is_cell_traversable(-1, 0)
    assert not board.is_cell_traversable(1, 5)


def test_piece_lookup(board_from_file) -> None:
    board = board_from_file("blocked_exit.txt")
    assert board.piece("E").col == 4
    with pytest.raises(PieceNotFound) as excinfo:
        board.piece("Z")
    assert excinfo.value.piece_id == "Z"
    assert "Z" in str(excinfo.value)


# -- transitions --------------------------------------------------------------


@pytest.mark.parametrize("name", ["classic.txt", "blocked_exit.txt", "left_exit.txt", "top_exit.txt"])
def test_apply_move_touches_only_the_moved_piece(board_from_file, name: str) -> None:
    board = board_from_file(name)
    for move in board.all_possible_moves():
        after = board.apply_move(move)
        old = board.piece(move.piece_id)
        new = after.piece(move.piece_id)
        touched = set(old.occupied_cells()) | set(new.occupied_cells())
        for r in range(board.rows):
            for c in range(board.cols):
                if (r, c) not in touched:
                    assert after.cell(r, c) == board.cell(r, c)
        for p in board.pieces:
            if p.id != move.piece_id:
                assert after.piece(p.id) == p


@pytest.mark.parametrize("name", ["classic.txt", "blocked_exit.txt", "inner_exit.txt", "bottom_exit.txt"])
def test_reverse_move_restores_board(board_from_file, name: str) -> None:
    board = board_from_file(name)
    for move in board.all_possible_moves():
        assert board.apply_move(move).reverse_move(move) == board


def test_apply_move_leaves_original_untouched(board_from_file) -> None:
    board = board_from_file("scenario_a.txt")
    grid = board.grid
    board.apply_move(Move.parse("P-left-2"))
    assert board.grid == grid
    assert board.primary.col == 2


def test_exit_cell_reappears_when_uncovered(board_from_file) -> None:
    board = board_from_file("inner_exit.txt")
    covered = board.apply_move(Move.parse("P-right-3"))
    assert covered.grid[1] == "...PP"
    assert covered.is_solved()
    back = covered.apply_move(Move.parse("P-left-3"))
    assert back.grid[1] == "PP.K."


def test_illegal_moves(board_from_file) -> None:
    board = board_from_file("scenario_a.txt")
    with pytest.raises(PieceNotFound):
        board.apply_move(Move.parse("Z-left"))
    with pytest.raises(IllegalMove):
        board.apply_move(Move.parse("P-up"))
    with pytest.raises(IllegalMove):
        board.apply_move(Move.parse("P-right-3"))


# -- rendering ----------------------------------------------------------------


@pytest.mark.parametrize(
    "name,expected",
    [
        ("scenario_a.txt", ["......", "......", "..PP..K", "......", "......", "......"]),
        ("left_exit.txt", [" ....", "K.PPA", " ...A"]),
        ("top_exit.txt", [" K", "...", ".P.", ".P.", "AA."]),
        ("bottom_exit.txt", [".P..", ".P..", "....", ".AA.", " K"]),
        ("inner_exit.txt", [".....", "PP.K.", "AA..."]),
    ],
)
def test_to_lines_draws_the_exit(board_from_file, name: str, expected: list[str]) -> None:
    board = board_from_file(name)
    assert board.to_lines() == expected
    assert str(board) == "\n".join(expected)
