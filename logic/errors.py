"""
Exceptions for the sliding TicTacToe game.
"""


class TicTacToeError(Exception):
    """Base class for all game errors."""


class FormatError(TicTacToeError, ValueError):
    """Console input could not be parsed into a move."""


class ValidationError(TicTacToeError, ValueError):
    """A move breaks one of the game rules."""


class InternalStateError(TicTacToeError, RuntimeError):
    """
    Raised for conditions that cannot happen in a correctly played game,
    e.g. the bot finding no legal movement move. Do not catch and continue.
    """
