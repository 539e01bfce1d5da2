"""
Console configuration for sliding TicTacToe.
All the settings for the terminal game.
"""

from logic.moves import Cell


class ConsoleConfig:
    """
    Configuration class for the console game.
    Class attributes are the defaults; override any of them per instance:

        ConsoleConfig(bot_delay_seconds=0, use_color=False)
    """

    # ==================== PLAYERS ====================
    HUMAN_PLAYER = Cell.X
    BOT_PLAYER = Cell.O

    # ==================== PACING ====================
    # Pause after "Bot is thinking..." so the human sees both moves
    BOT_DELAY_SECONDS = 1.0

    # Stop the game after this many moves in total (None = play forever).
    # The movement phase has no draw rule, so games can loop.
    MAX_TURNS = None

    # ==================== DISPLAY ====================
    USE_COLOR = True
    X_COLOR = "\033[94m"   # Blue
    O_COLOR = "\033[91m"   # Red
    RESET_COLOR = "\033[0m"

    # ==================== INPUT ====================
    QUIT_COMMANDS = ("q", "quit")

    def __init__(self, **overrides):
        for name, value in overrides.items():
            attr = name.upper()
            if not hasattr(type(self), attr):
                raise AttributeError(f"Unknown console setting: {name}")
            setattr(self, attr, value)
