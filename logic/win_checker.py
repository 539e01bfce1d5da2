"""
Win checker for sliding TicTacToe.
Finds completed lines and decides the game status.
"""

from typing import Optional, List, Tuple, TYPE_CHECKING

from .moves import Cell, GamePhase, GameStatus

if TYPE_CHECKING:
    from .game_state import Board


Line = Tuple[Tuple[int, int], ...]

# All possible winning lines, in the order they are checked:
# rows, then columns, then both diagonals
WINNING_LINES: List[Line] = [
    # Rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # Columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # Diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
]


def would_complete(
    line: Line,
    board: "Board",
    player: Cell,
    source: Optional[Tuple[int, int]],
    target: Tuple[int, int]
) -> bool:
    """
    Check if moving a piece of `player` from source to target completes `line`,
    without building a new board.

    The source cell never counts (the piece has left it), the target always
    counts as `player`, every other cell counts if it already holds `player`.
    Use source=None for a placement.
    """
    count = 0
    for cell in line:
        if cell == source:
            continue
        if cell == target or board[cell] == player:
            count += 1
    return count == len(line)


def completes_any_line(
    board: "Board",
    player: Cell,
    source: Optional[Tuple[int, int]],
    target: Tuple[int, int]
) -> bool:
    """True if the hypothetical move completes at least one winning line."""
    return any(
        would_complete(line, board, player, source, target)
        for line in WINNING_LINES
    )


class WinChecker:
    """
    Checks for win conditions.

    Win condition: 3 of the same marker in a row
    (horizontally, vertically, or diagonally)
    """

    def check_winner(self, board: "Board") -> Optional[Cell]:
        """
        Check if there's a winner.

        Returns:
            Cell.X or Cell.O, or None if no line is complete.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def _check_line(self, board: "Board", line: Line) -> Optional[Cell]:
        first = board[line[0]]
        if first == Cell.EMPTY:
            return None
        if all(board[cell] == first for cell in line):
            return first
        return None

    def check_draw(self, board: "Board") -> bool:
        """
        Check if the game is a draw.

        Only a full board during placement is a draw. In the movement
        phase there are always 3 empty cells, so it never happens.
        """
        if self.check_winner(board) is not None:
            return False

        if board.phase != GamePhase.PLACEMENT:
            return False

        return next(board.get_empty_cells(), None) is None

    def get_status(self, board: "Board") -> GameStatus:
        """Work out the status of a board."""
        winner = self.check_winner(board)

        if winner == Cell.X:
            return GameStatus.X_WINS
        if winner == Cell.O:
            return GameStatus.O_WINS
        if self.check_draw(board):
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS

    def get_winning_line(self, board: "Board") -> Optional[Line]:
        """
        Get the first completed line, if there is one.

        Returns:
            The winning line as 0-based (row, col) cells, or None.
        """
        for line in WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None
