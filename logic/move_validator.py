"""
Move validator for sliding TicTacToe.
Validates that moves follow the rules and defines cell adjacency.
"""

from typing import Optional, Tuple, TYPE_CHECKING
from dataclasses import dataclass

from .moves import Cell, GamePhase, Move, MoveType, MAX_PIECES, in_range

if TYPE_CHECKING:
    from .game_state import Board


# Diagonal steps that cut across a corner between two edge midpoints.
# Stored one way round; is_adjacent() checks both directions.
FORBIDDEN_DIAGONALS = frozenset([
    frozenset([(0, 1), (1, 0)]),
    frozenset([(0, 1), (1, 2)]),
    frozenset([(1, 0), (2, 1)]),
    frozenset([(1, 2), (2, 1)]),
])


def are_neighbors(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """True if two different 0-based cells touch (8-neighbourhood)."""
    if a == b:
        return False
    return abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


def is_adjacent(source: Tuple[int, int], target: Tuple[int, int]) -> bool:
    """
    Check whether a piece may slide from source to target (0-based).

    Any king step is allowed except the diagonals between edge midpoints.
    Corner <-> centre diagonals are fine.
    """
    if not are_neighbors(source, target):
        return False
    return frozenset([source, target]) not in FORBIDDEN_DIAGONALS


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates sliding TicTacToe moves.

    Rules, checked in this order:
    1. Target coordinates must be 1-3
    2. It must be the moving player's turn
    3. Placement: target empty and the player still has pieces to place
    4. Movement: source given and owned by the player, target empty,
       and source -> target is an adjacent step
    """

    def validate_move(self, board: "Board", move: Move) -> ValidationResult:
        """
        Validate a move against a board.

        Args:
            board: Current board.
            move: The requested move (1-based coordinates).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not (in_range(move.row) and in_range(move.col)):
            return ValidationResult(
                is_valid=False,
                error_message="Move coordinates must be between 1 and 3"
            )

        if move.player != board.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Player {move.player.value} cannot move when it's "
                    f"{board.current_player.value}'s turn"
                )
            )

        if board.phase == GamePhase.PLACEMENT:
            return self._validate_placement(board, move)

        return self._validate_movement(board, move)

    def _validate_placement(self, board: "Board", move: Move) -> ValidationResult:
        row, col = move.target

        if board[row, col] != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell at ({move.row}, {move.col}) is already occupied"
            )

        if board.pieces_placed(move.player) >= MAX_PIECES:
            return ValidationResult(
                is_valid=False,
                error_message=f"Player {move.player.value} has already placed all pieces"
            )

        return ValidationResult(is_valid=True)

    def _validate_movement(self, board: "Board", move: Move) -> ValidationResult:
        if move.kind != MoveType.MOVE or not move.has_source:
            return ValidationResult(
                is_valid=False,
                error_message="Movement moves must specify source"
            )

        if not (in_range(move.from_row) and in_range(move.from_col)):
            return ValidationResult(
                is_valid=False,
                error_message="Move coordinates must be between 1 and 3"
            )

        source = move.source
        target = move.target

        if board[source] != move.player:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Source cell ({move.from_row}, {move.from_col}) "
                    f"does not contain player's piece"
                )
            )

        if board[target] != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell at ({move.row}, {move.col}) is already occupied"
            )

        if not is_adjacent(source, target):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Cell ({move.row}, {move.col}) is not an adjacent cell "
                    f"to ({move.from_row}, {move.from_col})"
                )
            )

        return ValidationResult(is_valid=True)
