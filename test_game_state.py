"""
Tests for the board: applying moves, phases, turns and queries.
"""

import dataclasses

import pytest

from logic.errors import ValidationError
from logic.game_state import Board
from logic.moves import Cell, GamePhase, GameStatus, Move


def play_placements(board, moves):
    """Apply placements, alternating from the board's current player."""
    for row, col in moves:
        board = board.apply(Move.place(row, col, board.current_player))
    return board


# No line is completed by these six placements (X, O, X, O, X, O)
SAFE_PLACEMENTS = [(1, 1), (2, 2), (1, 2), (1, 3), (3, 1), (2, 1)]


def test_new_board_is_empty():
    board = Board()

    assert all(board[row, col] == Cell.EMPTY for row in range(3) for col in range(3))
    assert board.current_player == Cell.X
    assert board.phase == GamePhase.PLACEMENT
    assert board.pieces_placed(Cell.X) == 0
    assert board.pieces_placed(Cell.O) == 0
    assert board.get_status() == GameStatus.IN_PROGRESS


def test_first_placement():
    board = Board().apply(Move.place(1, 1, Cell.X))

    assert board[0, 0] == Cell.X
    assert board.current_player == Cell.O
    assert board.pieces_placed(Cell.X) == 1
    assert board.phase == GamePhase.PLACEMENT


def test_o_cannot_move_first():
    with pytest.raises(ValidationError, match="turn"):
        Board().apply(Move.place(1, 1, Cell.O))


@pytest.mark.parametrize("row,col", [(4, 1), (1, 4), (0, 1), (1, 0), (-1, 2)])
def test_coordinates_out_of_range_in_placement(row, col):
    with pytest.raises(ValidationError, match="between 1 and 3"):
        Board().apply(Move.place(row, col, Cell.X))


def test_coordinates_out_of_range_in_movement():
    board = play_placements(Board(), SAFE_PLACEMENTS)

    with pytest.raises(ValidationError, match="between 1 and 3"):
        board.apply(Move.slide(2, 2, 4, 2, Cell.O))


def test_range_checked_before_turn():
    with pytest.raises(ValidationError, match="between 1 and 3"):
        Board().apply(Move.place(4, 1, Cell.O))


def test_occupied_cell_rejected():
    board = Board().apply(Move.place(1, 1, Cell.X))

    with pytest.raises(ValidationError, match="already occupied"):
        board.apply(Move.place(1, 1, Cell.O))


def test_cannot_place_more_than_three():
    board = Board.from_rows(
        ["XX.", "O..", "X.."],
        current_player=Cell.X,
        phase=GamePhase.PLACEMENT,
    )

    with pytest.raises(ValidationError, match="already placed all pieces"):
        board.apply(Move.place(2, 2, Cell.X))


def test_turn_alternates_then_holds_at_phase_change():
    board = Board()
    players = []

    for row, col in SAFE_PLACEMENTS:
        mover = board.current_player
        board = board.apply(Move.place(row, col, mover))
        players.append((mover, board.current_player, board.phase))

    # First five placements flip the turn
    for mover, next_player, phase in players[:5]:
        assert next_player == mover.opposite()
        assert phase == GamePhase.PLACEMENT

    # The sixth does not: O keeps the turn and moves first
    mover, next_player, phase = players[5]
    assert mover == Cell.O
    assert next_player == Cell.O
    assert phase == GamePhase.MOVEMENT
    assert board.get_status() == GameStatus.IN_PROGRESS


def test_phase_never_reverts():
    board = play_placements(Board(), SAFE_PLACEMENTS)

    for _ in range(12):
        moves = list(board.get_valid_movement_moves(board.current_player))
        if not moves or board.get_status() != GameStatus.IN_PROGRESS:
            break
        board = board.apply(moves[0])
        assert board.phase == GamePhase.MOVEMENT
        assert board.occupied_count() == 6
        assert board.pieces_placed(Cell.X) == 3
        assert board.pieces_placed(Cell.O) == 3


def test_apply_does_not_change_board():
    board = Board()
    board.apply(Move.place(2, 2, Cell.X))

    assert board == Board()
    assert len(list(board.get_empty_cells())) == 9
    assert board.current_player == Cell.X

    moved = play_placements(Board(), SAFE_PLACEMENTS)
    before = moved.cells
    moved.apply(Move.slide(2, 2, 2, 3, Cell.O))
    assert moved.cells == before
    assert moved.current_player == Cell.O


def test_board_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Board().current_player = Cell.O


# ==================== MOVEMENT ====================

# X: (0,0) (1,1) (2,0)   O: (0,1) (1,0) (2,2)
MOVEMENT_ROWS = ["XO.", "OX.", "X.O"]


def test_movement_slide():
    board = Board.from_rows(MOVEMENT_ROWS, current_player=Cell.X)
    assert board.phase == GamePhase.MOVEMENT

    after = board.apply(Move.slide(3, 1, 3, 2, Cell.X))

    assert after[2, 0] == Cell.EMPTY
    assert after[2, 1] == Cell.X
    assert after.current_player == Cell.O
    assert after.phase == GamePhase.MOVEMENT
    assert after.occupied_count() == 6


def test_movement_requires_source():
    board = Board.from_rows(MOVEMENT_ROWS, current_player=Cell.X)

    with pytest.raises(ValidationError, match="must specify source"):
        board.apply(Move.place(1, 3, Cell.X))


def test_movement_source_must_be_own_piece():
    board = Board.from_rows(MOVEMENT_ROWS, current_player=Cell.X)

    with pytest.raises(ValidationError, match="does not contain player's piece"):
        board.apply(Move.slide(1, 2, 1, 3, Cell.X))

    with pytest.raises(ValidationError, match="does not contain player's piece"):
        board.apply(Move.slide(2, 3, 1, 3, Cell.X))


def test_movement_target_must_be_empty():
    board = Board.from_rows(MOVEMENT_ROWS, current_player=Cell.X)

    with pytest.raises(ValidationError, match="already occupied"):
        board.apply(Move.slide(2, 2, 1, 2, Cell.X))


def test_movement_target_must_be_adjacent():
    board = Board.from_rows(MOVEMENT_ROWS, current_player=Cell.X)

    with pytest.raises(ValidationError, match="not an adjacent cell"):
        board.apply(Move.slide(1, 1, 1, 3, Cell.X))


def test_movement_wrong_turn():
    board = Board.from_rows(MOVEMENT_ROWS, current_player=Cell.X)

    with pytest.raises(ValidationError, match="turn"):
        board.apply(Move.slide(3, 3, 2, 3, Cell.O))


# X: (0,1) (1,2) (2,1), all edge midpoints
EDGE_ROWS = [".XO", "..X", "OXO"]


@pytest.mark.parametrize("move", [
    Move.slide(1, 2, 2, 1, Cell.X),  # top -> left
    Move.slide(3, 2, 2, 1, Cell.X),  # bottom -> left
])
def test_cross_corner_diagonals_rejected(move):
    board = Board.from_rows(EDGE_ROWS, current_player=Cell.X)

    with pytest.raises(ValidationError, match="not an adjacent cell"):
        board.apply(move)


def test_valid_movement_moves_order():
    board = Board.from_rows(EDGE_ROWS, current_player=Cell.X)

    assert list(board.get_valid_movement_moves(Cell.X)) == [
        Move.slide(1, 2, 1, 1, Cell.X),
        Move.slide(1, 2, 2, 2, Cell.X),
        Move.slide(2, 3, 2, 2, Cell.X),
        Move.slide(3, 2, 2, 2, Cell.X),
    ]


def test_every_generated_move_applies():
    board = Board.from_rows(EDGE_ROWS, current_player=Cell.X)

    for move in board.get_valid_movement_moves(Cell.X):
        after = board.apply(move)
        assert after.occupied_count() == 6


def test_no_movement_moves_during_placement():
    board = Board().apply(Move.place(1, 1, Cell.X))
    assert list(board.get_valid_movement_moves(Cell.X)) == []


# ==================== QUERIES ====================

def test_empty_cells_row_major():
    board = play_placements(Board(), [(1, 1), (2, 2)])

    assert list(board.get_empty_cells()) == [
        (0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)
    ]


def test_empty_cells_recomputed_each_call():
    board = Board()
    first = board.get_empty_cells()
    next(first)

    assert len(list(board.get_empty_cells())) == 9


def test_player_pieces():
    board = Board.from_rows(MOVEMENT_ROWS, current_player=Cell.X)

    assert list(board.get_player_pieces(Cell.X)) == [(0, 0), (1, 1), (2, 0)]
    assert list(board.get_player_pieces(Cell.O)) == [(0, 1), (1, 0), (2, 2)]


def test_from_rows_counts_and_phase():
    board = Board.from_rows(["X..", ".O.", "..."], current_player=Cell.X)

    assert board.phase == GamePhase.PLACEMENT
    assert board.pieces_placed(Cell.X) == 1
    assert board.pieces_placed(Cell.O) == 1

    with pytest.raises(ValueError):
        Board.from_rows(["XX", "...", "..."])
