"""
AI player for sliding TicTacToe.
Picks a move with a fixed list of rules, first matching rule wins.
"""

import random
from typing import List, Optional, Tuple

from .errors import InternalStateError
from .game_state import Board
from .move_validator import are_neighbors
from .moves import Cell, GamePhase, Move
from .win_checker import completes_any_line


CENTER = (1, 1)

# Scan orders for the placement fallbacks (0-based)
CORNERS = [(0, 0), (0, 2), (2, 0), (2, 2)]  # top-left, top-right, bottom-left, bottom-right
EDGES = [(0, 1), (1, 0), (1, 2), (2, 1)]    # top, left, right, bottom


class HeuristicPlayer:
    """
    A rule-based AI for sliding TicTacToe.

    Placement:  win, block, centre, next to own piece, corner, edge, anything.
    Movement:   win, block, move next to own piece, first legal move.

    The only randomness is the bot's very first placement when the centre
    is already taken, drawn from `rng`.
    """

    def __init__(self, player: Cell = Cell.O, rng=None):
        """
        Initialize the AI player.

        Args:
            player: Which marker the AI plays (default: O)
            rng: Random source with a choice() method. Defaults to the
                 global `random` module; pass random.Random(seed) or a stub
                 in tests.
        """
        self.player = player
        self.opponent = player.opposite()
        self.rng = rng if rng is not None else random

    def choose_move(self, board: Board) -> Move:
        """
        Choose a move for the current position.

        Raises:
            InternalStateError: If it's not the AI's turn, or no legal
                movement move exists.
        """
        if board.current_player != self.player:
            raise InternalStateError(
                f"It's not {self.player.value}'s turn "
                f"(current player: {board.current_player.value})"
            )

        if board.phase == GamePhase.PLACEMENT:
            return self.choose_placement(board)
        return self.choose_movement(board)

    # ==================== PLACEMENT ====================

    def choose_placement(self, board: Board) -> Move:
        rules = [
            self._random_opening,
            self._winning_cell,
            self._blocking_cell,
            self._center_cell,
            self._cell_next_to_own_piece,
            self._corner_cell,
            self._edge_cell,
            self._first_empty_cell,
        ]
        for rule in rules:
            cell = rule(board)
            if cell is not None:
                row, col = cell
                return Move.place(row + 1, col + 1, self.player)

        raise InternalStateError("No empty cell to place a piece on")

    def _random_opening(self, board: Board) -> Optional[Tuple[int, int]]:
        """First placement with the centre already taken: pick at random."""
        if board.pieces_placed(self.player) != 0 or board[CENTER] == Cell.EMPTY:
            return None
        empties = list(board.get_empty_cells())
        if not empties:
            return None
        return self.rng.choice(empties)

    def _find_completing_cell(self, board: Board, player: Cell) -> Optional[Tuple[int, int]]:
        for cell in board.get_empty_cells():
            if completes_any_line(board, player, None, cell):
                return cell
        return None

    def _winning_cell(self, board: Board) -> Optional[Tuple[int, int]]:
        return self._find_completing_cell(board, self.player)

    def _blocking_cell(self, board: Board) -> Optional[Tuple[int, int]]:
        return self._find_completing_cell(board, self.opponent)

    def _center_cell(self, board: Board) -> Optional[Tuple[int, int]]:
        return CENTER if board[CENTER] == Cell.EMPTY else None

    def _cell_next_to_own_piece(self, board: Board) -> Optional[Tuple[int, int]]:
        own = list(board.get_player_pieces(self.player))
        for cell in board.get_empty_cells():
            if any(are_neighbors(cell, piece) for piece in own):
                return cell
        return None

    def _corner_cell(self, board: Board) -> Optional[Tuple[int, int]]:
        return self._first_empty_of(board, CORNERS)

    def _edge_cell(self, board: Board) -> Optional[Tuple[int, int]]:
        return self._first_empty_of(board, EDGES)

    def _first_empty_cell(self, board: Board) -> Optional[Tuple[int, int]]:
        return next(board.get_empty_cells(), None)

    @staticmethod
    def _first_empty_of(board: Board, cells) -> Optional[Tuple[int, int]]:
        for cell in cells:
            if board[cell] == Cell.EMPTY:
                return cell
        return None

    # ==================== MOVEMENT ====================

    def choose_movement(self, board: Board) -> Move:
        # Generate once so every rule looks at the same list
        moves = list(board.get_valid_movement_moves(self.player))
        if not moves:
            raise InternalStateError(
                f"No valid movement moves available for {self.player.value}"
            )

        rules = [
            self._winning_move,
            self._blocking_move,
            self._grouping_move,
        ]
        for rule in rules:
            move = rule(board, moves)
            if move is not None:
                return move

        return moves[0]

    def _winning_move(self, board: Board, moves: List[Move]) -> Optional[Move]:
        for move in moves:
            if completes_any_line(board, self.player, move.source, move.target):
                return move
        return None

    def _blocking_move(self, board: Board, moves: List[Move]) -> Optional[Move]:
        """Take the target cell of an opponent slide that would win."""
        for threat in board.get_valid_movement_moves(self.opponent):
            if not completes_any_line(board, self.opponent, threat.source, threat.target):
                continue
            for move in moves:
                if move.target == threat.target:
                    return move
        return None

    def _grouping_move(self, board: Board, moves: List[Move]) -> Optional[Move]:
        """Slide a piece so it ends up next to another of our pieces."""
        own = list(board.get_player_pieces(self.player))
        for move in moves:
            others = [piece for piece in own if piece != move.source]
            if any(are_neighbors(move.target, piece) for piece in others):
                return move
        return None
