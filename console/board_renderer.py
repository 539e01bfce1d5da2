"""
Text rendering of the board for the console game.
"""

from typing import Optional

from logic.moves import BOARD_SIZE, Cell, GamePhase
from logic.game_state import Board
from .config import ConsoleConfig


def render_board(board: Board, config: Optional[ConsoleConfig] = None) -> str:
    """
    Draw the 3x3 grid with 1-based coordinates, plus whose turn it is.

    Args:
        board: Board to draw.
        config: Console settings (colours). Uses defaults if not provided.

    Returns:
        The board as a multi-line string.
    """
    config = config or ConsoleConfig()

    lines = ["", "     1   2   3", "   ┌───┬───┬───┐"]
    for row in range(BOARD_SIZE):
        symbols = [_symbol(board[row, col], config) for col in range(BOARD_SIZE)]
        lines.append(f" {row + 1} │" + "│".join(symbols) + "│")
        if row < BOARD_SIZE - 1:
            lines.append("   ├───┼───┼───┤")
    lines.append("   └───┴───┴───┘")

    phase = "Placement" if board.phase == GamePhase.PLACEMENT else "Movement"
    lines.append(f"Current Player: {board.current_player.value}  ({phase} phase)")
    return "\n".join(lines)


def _symbol(cell: Cell, config: ConsoleConfig) -> str:
    if cell == Cell.EMPTY:
        return "   "

    text = f" {cell.value} "
    if not config.USE_COLOR:
        return text

    color = config.X_COLOR if cell == Cell.X else config.O_COLOR
    return f"{color}{text}{config.RESET_COLOR}"
