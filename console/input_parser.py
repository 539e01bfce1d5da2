"""
Parses what the human types into a Move.

Placement phase:  "row,col"                     e.g. "2,2"
Movement phase:   "from_row,from_col to_row,to_col"  e.g. "1,1 1,2"
                  ("->" or ">" also work as the separator: "1,1->1,2")
"""

import re
from typing import Tuple

from logic.errors import FormatError
from logic.moves import Cell, GamePhase, Move
from logic.game_state import Board


_MOVE_SEPARATOR = re.compile(r"\s*(?:->|>)\s*|\s+")


def parse_coordinates(text: str) -> Tuple[int, int]:
    """
    Parse "row,col" into two ints. Range is checked by the board, not here.

    Raises:
        FormatError: If the text isn't two comma separated numbers.
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise FormatError("Please enter coordinates in format: row,col (e.g., 2,2)")

    try:
        return int(parts[0].strip()), int(parts[1].strip())
    except ValueError:
        raise FormatError("Please enter valid numbers for row and column") from None


def parse_move(text: str, board: Board, player: Cell) -> Move:
    """
    Turn a line of input into a Move for the current phase.

    Raises:
        FormatError: If the input is malformed.
    """
    if text is None:
        raise FormatError("Input cannot be empty")

    text = text.strip()
    if not text:
        raise FormatError("Input cannot be empty")

    if board.phase == GamePhase.PLACEMENT:
        row, col = parse_coordinates(text)
        return Move.place(row, col, player)

    parts = [part for part in _MOVE_SEPARATOR.split(text) if part]
    if len(parts) != 2:
        raise FormatError(
            "Please enter a move as: from_row,from_col to_row,to_col (e.g., 1,1 1,2)"
        )

    from_row, from_col = parse_coordinates(parts[0])
    row, col = parse_coordinates(parts[1])
    return Move.slide(from_row, from_col, row, col, player)


def prompt_for(board: Board) -> str:
    """The input prompt for the current phase."""
    if board.phase == GamePhase.PLACEMENT:
        return "Enter row,col (1-3,1-3) or 'q' to quit: "
    return "Enter from_row,from_col to_row,to_col (e.g. 1,1 1,2) or 'q' to quit: "
