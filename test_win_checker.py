"""
Tests for win and draw detection.
"""

import pytest

from logic.game_state import Board
from logic.moves import Cell, GamePhase, GameStatus, Move
from logic.win_checker import WINNING_LINES, WinChecker, would_complete


def board_with_line(line, marker):
    grid = [["." for _ in range(3)] for _ in range(3)]
    for row, col in line:
        grid[row][col] = marker
    return Board.from_rows(["".join(r) for r in grid])


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("marker,status", [
    ("X", GameStatus.X_WINS),
    ("O", GameStatus.O_WINS),
])
def test_every_line_wins(line, marker, status):
    board = board_with_line(line, marker)

    assert board.get_status() == status
    assert WinChecker().get_winning_line(board) == line


def test_eight_lines():
    assert len(WINNING_LINES) == 8


def test_win_by_play():
    board = Board()
    for row, col in [(1, 1), (2, 1), (1, 2), (2, 2), (1, 3)]:
        board = board.apply(Move.place(row, col, board.current_player))

    assert board.get_status() == GameStatus.X_WINS
    assert WinChecker().check_winner(board) == Cell.X


def test_win_in_movement_phase():
    # X at (0,0) (0,1) (0,2) after a slide
    board = Board.from_rows(["XXX", "OO.", "..O"], current_player=Cell.O)

    assert board.phase == GamePhase.MOVEMENT
    assert board.get_status() == GameStatus.X_WINS


FULL_NO_LINE = ["XOX", "XOO", "OXX"]


def test_full_board_in_placement_is_draw():
    board = Board.from_rows(FULL_NO_LINE, phase=GamePhase.PLACEMENT)

    assert board.get_status() == GameStatus.DRAW
    assert WinChecker().check_draw(board)


def test_no_draw_in_movement_phase():
    board = Board.from_rows(FULL_NO_LINE, phase=GamePhase.MOVEMENT)
    assert board.get_status() == GameStatus.IN_PROGRESS

    board = Board.from_rows(["XO.", "OX.", "X.O"])
    assert board.get_status() == GameStatus.IN_PROGRESS


def test_in_progress_without_line():
    board = Board.from_rows(["XO.", "...", "..."])

    assert board.get_status() == GameStatus.IN_PROGRESS
    assert WinChecker().check_winner(board) is None
    assert WinChecker().get_winning_line(board) is None


# ==================== would_complete ====================

TOP_ROW = ((0, 0), (0, 1), (0, 2))


def test_would_complete_placement():
    board = Board.from_rows(["XX.", "O..", "O.."])

    assert would_complete(TOP_ROW, board, Cell.X, None, (0, 2))
    assert not would_complete(TOP_ROW, board, Cell.O, None, (0, 2))


def test_would_complete_slide_into_line():
    board = Board.from_rows(["XX.", "OOX", "O.."])

    assert would_complete(TOP_ROW, board, Cell.X, (1, 2), (0, 2))


def test_source_in_line_not_double_counted():
    board = Board.from_rows(["XX.", "OOX", "O.."])

    # Sliding along the row leaves (0,1) empty
    assert not would_complete(TOP_ROW, board, Cell.X, (0, 1), (0, 2))


def test_target_overrides_board_cell():
    # Hypothetical target counted even though the board says otherwise
    board = Board.from_rows(["XXO", "O.X", "O.."])

    assert would_complete(TOP_ROW, board, Cell.X, (1, 2), (0, 2))
