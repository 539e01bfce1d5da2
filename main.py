"""
Main script for sliding TicTacToe.

This script ties together:
- Logic (board, rules, AI)
- Console (settings, board drawing, input parsing)

Run this script to play against the bot in a terminal!
"""

import logging
import random
import sys
import time
from typing import Callable, Optional

# Logic imports
from logic.errors import FormatError, ValidationError
from logic.game_state import Board
from logic.moves import GameStatus
from logic.win_checker import WinChecker
from logic.ai_player import HeuristicPlayer

# Console imports
from console.config import ConsoleConfig
from console.board_renderer import render_board
from console.input_parser import parse_move, prompt_for


logger = logging.getLogger("main")


class TicTacToeGame:
    """
    Human vs bot game in the terminal.

    Game flow:
    1. Whoever's turn it is moves (human types a move, bot picks one)
    2. The move goes through Board.apply(); bad human input is re-prompted
    3. Status is checked after every move
    4. Repeat until someone wins, it's a draw, or the human quits
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        bot: Optional[HeuristicPlayer] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        sleep_func: Optional[Callable[[float], None]] = None
    ):
        """
        Initialize the game.

        Args:
            config: Console settings. Uses defaults if not provided.
            bot: The AI opponent. A HeuristicPlayer for the bot's marker
                 if not provided.
            input_func: Reads a line of input given a prompt (default: input).
            output_func: Writes a line of output (default: print).
            sleep_func: Pause before the bot's move (default: time.sleep).
        """
        self.config = config or ConsoleConfig()
        self.bot = bot or HeuristicPlayer(self.config.BOT_PLAYER)
        self.win_checker = WinChecker()

        self._input = input_func or input
        self._output = output_func or print
        self._sleep = sleep_func or time.sleep

        self.board = Board()
        self.turns_played = 0

    def run(self) -> Optional[GameStatus]:
        """
        Play one game.

        Returns:
            The final status, or None if the human quit.
        """
        self._output("Tic-Tac-Toe: Human (X) vs Bot (O)")
        self._render()

        while True:
            if self.board.current_player == self.config.HUMAN_PLAYER:
                if not self._human_move():
                    self._output("Game ended by user.")
                    return None
            else:
                self._bot_move()

            self.turns_played += 1
            self._render()

            status = self.board.get_status()
            if status != GameStatus.IN_PROGRESS:
                self._show_game_result(status)
                return status

            max_turns = self.config.MAX_TURNS
            if max_turns is not None and self.turns_played >= max_turns:
                self._output(f"Stopping after {self.turns_played} moves with no winner.")
                return status

    def _human_move(self) -> bool:
        """
        Read and apply the human's move, re-prompting until it is legal.

        Returns:
            False if the human quit, True once a move was applied.
        """
        text = self._read(prompt_for(self.board))

        while True:
            if text is None or text.strip().lower() in self.config.QUIT_COMMANDS:
                return False

            try:
                move = parse_move(text, self.board, self.config.HUMAN_PLAYER)
                self.board = self.board.apply(move)
            except (FormatError, ValidationError) as e:
                logger.debug("Rejected human input %r: %s", text, e)
                self._render()
                self._output(f"Error: {e}")
                text = self._read("Please try again: ")
                continue

            logger.debug("Human played %s", move)
            self._output(f"Move applied: {move}")
            return True

    def _bot_move(self):
        """Let the AI pick and apply its move."""
        self._output("Bot is thinking...")
        self._sleep(self.config.BOT_DELAY_SECONDS)

        move = self.bot.choose_move(self.board)
        self.board = self.board.apply(move)

        logger.debug("Bot played %s in %s phase", move, self.board.phase.value)
        self._output(f"Bot moved: {move}")

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self._input(prompt)
        except EOFError:
            return None

    def _render(self):
        self._output(render_board(self.board, self.config))

    def _show_game_result(self, status: GameStatus):
        """Print the final result."""
        if status == GameStatus.DRAW:
            message = "It's a draw!"
        elif self.win_checker.check_winner(self.board) == self.config.HUMAN_PLAYER:
            message = "Human wins!"
        else:
            message = "Bot wins!"

        self._output(f"Game Over! {message}")

        line = self.win_checker.get_winning_line(self.board)
        if line is not None:
            cells = ", ".join(f"({row + 1},{col + 1})" for row, col in line)
            self._output(f"Winning line: {cells}")


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Sliding TicTacToe: Human (X) vs Bot (O)")
    parser.add_argument(
        "--delay",
        type=float,
        default=ConsoleConfig.BOT_DELAY_SECONDS,
        help="Seconds to wait before showing the bot's move"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Show the bot's move immediately"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Don't colour X and O"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the bot's random opening"
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=None,
        help="Stop after this many moves (the movement phase has no draw rule)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log moves and bot decisions"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )

    config = ConsoleConfig(
        bot_delay_seconds=0.0 if args.no_delay else args.delay,
        use_color=not args.no_color,
        max_turns=args.max_turns,
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    game = TicTacToeGame(config, bot=HeuristicPlayer(config.BOT_PLAYER, rng=rng))

    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
