"""
Logic module for sliding TicTacToe.
Handles the board, rules, and the AI opponent.
"""

from .moves import Cell, GamePhase, GameStatus, Move, MoveType
from .errors import FormatError, InternalStateError, TicTacToeError, ValidationError
from .game_state import Board
from .move_validator import MoveValidator, is_adjacent
from .win_checker import WinChecker
from .ai_player import HeuristicPlayer

__version__ = "1.0.0"
