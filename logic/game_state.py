"""
Board state for sliding TicTacToe.
Tracks the grid, current player, phase and how many pieces each side placed.
"""

from typing import Iterator, Optional, Sequence, Tuple
from dataclasses import dataclass, replace

from .errors import InternalStateError, ValidationError
from .moves import (
    BOARD_SIZE,
    MAX_PIECES,
    Cell,
    GamePhase,
    GameStatus,
    Move,
)
from .move_validator import MoveValidator, is_adjacent
from .win_checker import WinChecker


_VALIDATOR = MoveValidator()
_WIN_CHECKER = WinChecker()

_EMPTY_GRID = (Cell.EMPTY,) * (BOARD_SIZE * BOARD_SIZE)


def _index(row: int, col: int) -> int:
    """Convert 0-based (row, col) to flat index."""
    return row * BOARD_SIZE + col


@dataclass(frozen=True)
class Board:
    """
    Immutable snapshot of the game.

    Tracks:
    - The 3x3 grid, stored flat in row-major order
    - Whose turn it is
    - The game phase
    - How many pieces each player has placed (0-3)

    apply() never changes a board, it returns a new one.
    """

    cells: Tuple[Cell, ...] = _EMPTY_GRID
    current_player: Cell = Cell.X
    phase: GamePhase = GamePhase.PLACEMENT
    x_pieces_placed: int = 0
    o_pieces_placed: int = 0

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        current_player: Cell = Cell.X,
        phase: Optional[GamePhase] = None
    ) -> "Board":
        """
        Build a board from three strings like "XO." ('.' or ' ' = empty).

        Placement counters come from the markers on the board. If phase is
        not given, it is MOVEMENT when both players have all their pieces
        down, otherwise PLACEMENT.
        """
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board needs 3 rows of 3 cells")

        cells = []
        for row in rows:
            for char in row:
                if char in (".", " "):
                    cells.append(Cell.EMPTY)
                else:
                    cells.append(Cell(char.upper()))

        x_count = cells.count(Cell.X)
        o_count = cells.count(Cell.O)
        if phase is None:
            both_done = x_count >= MAX_PIECES and o_count >= MAX_PIECES
            phase = GamePhase.MOVEMENT if both_done else GamePhase.PLACEMENT

        return cls(
            cells=tuple(cells),
            current_player=current_player,
            phase=phase,
            x_pieces_placed=min(x_count, MAX_PIECES),
            o_pieces_placed=min(o_count, MAX_PIECES),
        )

    def __getitem__(self, position: Tuple[int, int]) -> Cell:
        """Cell at a 0-based (row, col)."""
        row, col = position
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IndexError(f"({row}, {col}) is off the board")
        return self.cells[_index(row, col)]

    def pieces_placed(self, player: Cell) -> int:
        """How many pieces a player has placed so far."""
        if player == Cell.X:
            return self.x_pieces_placed
        if player == Cell.O:
            return self.o_pieces_placed
        raise ValueError("EMPTY is not a player")

    def occupied_count(self) -> int:
        return sum(1 for cell in self.cells if cell != Cell.EMPTY)

    def apply(self, move: Move) -> "Board":
        """
        Apply a move and return the resulting board.

        Args:
            move: The move, with 1-based coordinates.

        Returns:
            A new Board. This board is left unchanged.

        Raises:
            ValidationError: If the move breaks a rule.
        """
        result = _VALIDATOR.validate_move(self, move)
        if not result.is_valid:
            raise ValidationError(result.error_message)

        if self.phase == GamePhase.PLACEMENT:
            return self._apply_placement(move)
        if self.phase == GamePhase.MOVEMENT:
            return self._apply_movement(move)

        raise InternalStateError(f"Unknown game phase: {self.phase!r}")

    def _apply_placement(self, move: Move) -> "Board":
        cells = list(self.cells)
        cells[_index(*move.target)] = move.player

        x_placed = self.x_pieces_placed
        o_placed = self.o_pieces_placed
        if move.player == Cell.X:
            x_placed += 1
        else:
            o_placed += 1

        if x_placed == MAX_PIECES and o_placed == MAX_PIECES:
            # Whoever finished the placement phase moves first in the next one
            phase = GamePhase.MOVEMENT
            next_player = self.current_player
        else:
            phase = GamePhase.PLACEMENT
            next_player = self.current_player.opposite()

        return replace(
            self,
            cells=tuple(cells),
            current_player=next_player,
            phase=phase,
            x_pieces_placed=x_placed,
            o_pieces_placed=o_placed,
        )

    def _apply_movement(self, move: Move) -> "Board":
        cells = list(self.cells)
        cells[_index(*move.source)] = Cell.EMPTY
        cells[_index(*move.target)] = move.player

        return replace(
            self,
            cells=tuple(cells),
            current_player=self.current_player.opposite(),
        )

    def get_status(self) -> GameStatus:
        """Check rows, columns and diagonals for a winner, then for a draw."""
        return _WIN_CHECKER.get_status(self)

    def get_empty_cells(self) -> Iterator[Tuple[int, int]]:
        """
        Yield all empty cells as 0-based (row, col), row by row.
        """
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self[row, col] == Cell.EMPTY:
                    yield (row, col)

    def get_player_pieces(self, player: Cell) -> Iterator[Tuple[int, int]]:
        """Yield the 0-based cells holding the player's marker, row by row."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self[row, col] == player:
                    yield (row, col)

    def get_valid_movement_moves(self, player: Cell) -> Iterator[Move]:
        """
        Yield every legal slide for a player.

        Ordered by source cell, then target cell, both row by row.
        Yields nothing outside the movement phase.
        """
        if self.phase != GamePhase.MOVEMENT:
            return

        for source in self.get_player_pieces(player):
            src_row, src_col = source
            for row in range(max(src_row - 1, 0), min(src_row + 2, BOARD_SIZE)):
                for col in range(max(src_col - 1, 0), min(src_col + 2, BOARD_SIZE)):
                    if self[row, col] != Cell.EMPTY:
                        continue
                    if not is_adjacent(source, (row, col)):
                        continue
                    yield Move.slide(src_row + 1, src_col + 1, row + 1, col + 1, player)
