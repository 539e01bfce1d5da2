"""
Console module for sliding TicTacToe.
Handles settings, drawing the board, and reading the human's moves.
"""

from .config import ConsoleConfig
from .board_renderer import render_board
from .input_parser import parse_move, parse_coordinates, prompt_for
