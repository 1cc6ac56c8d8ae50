"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Tuple

from .board import Board, Cell
from .config import GameConfig
from .win_checker import WinChecker

# Returned by get_best_move() when the board has no empty cell
NO_MOVE = (-1, -1)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search is exhaustive: no depth limit, no pruning, no cache.
    A 3x3 board is small enough for that. The AI never loses; with
    both sides searched this way every game ends in a draw.

    Ties between equally scored moves go to the first one in
    row-major order, so the same board always yields the same move.
    """

    def __init__(self, player: Cell = GameConfig.COMPUTER_PLAYER):
        """
        Initialize the AI player.

        Args:
            player: The side the AI maximizes for (default: O).
        """
        self.player = player
        self.opponent = player.opposite()
        self.win_checker = WinChecker()

        # Nodes visited by the last search (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, board: Board) -> Tuple[int, int]:
        """
        Get the best move for the AI's side on this board.

        The caller's board is left untouched; the search runs on a copy.

        Args:
            board: Current board. Should not be full or already won.

        Returns:
            (row, col) of the best move, or NO_MOVE if none is available.
        """
        self.moves_evaluated = 0
        board = board.copy()

        best_score = None
        best_move = NO_MOVE

        for row, col in board.available_moves():
            with board.hypothetical(row, col, self.player):
                score = self._minimax(board, is_maximizing=False)

            # Strictly greater: an equal score later in row-major order
            # never replaces the incumbent
            if best_score is None or score > best_score:
                best_score = score
                best_move = (row, col)

        if GameConfig.DEBUG_MODE and best_move != NO_MOVE:
            print(f"AI evaluated {self.moves_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(self, board: Board, is_maximizing: bool) -> int:
        """
        Score a position by exhaustive Minimax.

        Args:
            board: Position to evaluate. Restored before returning.
            is_maximizing: True if it is the AI's side to move.

        Returns:
            WIN_SCORE if the AI wins with best play, -WIN_SCORE if it
            loses, DRAW_SCORE for a draw.
        """
        self.moves_evaluated += 1

        winner = self.win_checker.check_winner(board)
        if winner == self.player:
            return GameConfig.WIN_SCORE
        if winner == self.opponent:
            return -GameConfig.WIN_SCORE
        if board.is_full():
            return GameConfig.DRAW_SCORE

        if is_maximizing:
            best = -GameConfig.WIN_SCORE
            for row, col in board.available_moves():
                with board.hypothetical(row, col, self.player):
                    best = max(best, self._minimax(board, False))
            return best
        else:
            best = GameConfig.WIN_SCORE
            for row, col in board.available_moves():
                with board.hypothetical(row, col, self.opponent):
                    best = min(best, self._minimax(board, True))
            return best

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board)

        if move == NO_MOVE:
            return "No moves available!"

        row, col = move
        return f"Place {self.player.symbol} at position ({row}, {col})"
