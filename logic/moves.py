"""
Value types shared by the board, the validator and the AI.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass


BOARD_SIZE = 3

# Each player places this many pieces before the movement phase starts
MAX_PIECES = 3


class Cell(Enum):
    """Content of a board cell. X is the human, O is the bot."""
    EMPTY = "."
    X = "X"
    O = "O"

    def opposite(self) -> "Cell":
        """Get the other player's marker."""
        if self == Cell.X:
            return Cell.O
        if self == Cell.O:
            return Cell.X
        raise ValueError("EMPTY has no opposite")


class GamePhase(Enum):
    """The two phases of the game."""
    PLACEMENT = "placement"  # Players place their 3 pieces
    MOVEMENT = "movement"    # Players slide pieces to adjacent cells


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"


class MoveType(Enum):
    PLACE = "place"
    MOVE = "move"


@dataclass(frozen=True)
class Move:
    """
    A move request. All coordinates are 1-based (1-3).

    from_row/from_col are only used for MoveType.MOVE.
    """
    row: int
    col: int
    player: Cell
    kind: MoveType = MoveType.PLACE
    from_row: Optional[int] = None
    from_col: Optional[int] = None

    @classmethod
    def place(cls, row: int, col: int, player: Cell) -> "Move":
        """Create a placement move."""
        return cls(row, col, player, MoveType.PLACE)

    @classmethod
    def slide(
        cls,
        from_row: int,
        from_col: int,
        row: int,
        col: int,
        player: Cell
    ) -> "Move":
        """Create a movement move from (from_row, from_col) to (row, col)."""
        return cls(row, col, player, MoveType.MOVE, from_row, from_col)

    @property
    def has_source(self) -> bool:
        return self.from_row is not None and self.from_col is not None

    @property
    def target(self) -> Tuple[int, int]:
        """Target cell as 0-based (row, col)."""
        return (self.row - 1, self.col - 1)

    @property
    def source(self) -> Optional[Tuple[int, int]]:
        """Source cell as 0-based (row, col), or None for placements."""
        if not self.has_source:
            return None
        return (self.from_row - 1, self.from_col - 1)

    def __str__(self) -> str:
        if self.kind == MoveType.MOVE and self.has_source:
            return f"({self.from_row},{self.from_col}) -> ({self.row},{self.col})"
        return f"({self.row},{self.col})"


def in_range(value: Optional[int]) -> bool:
    """Check a 1-based coordinate."""
    return value is not None and 1 <= value <= BOARD_SIZE
