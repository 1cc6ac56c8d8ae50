"""
Win checker for TicTacToe.
Turns a board into an Outcome: still playing, won by a side, or drawn.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import Board, Cell, WINNING_LINES


class GameStatus(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    winner and line are only set when status is WON.
    """
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Cell] = None
    line: Optional[Tuple[Tuple[int, int], ...]] = None

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW

    def __str__(self) -> str:
        if self.status == GameStatus.WON:
            return f"{self.winner.name} wins"
        if self.status == GameStatus.DRAW:
            return "Draw"
        return "In progress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same side in a row
    (horizontally, vertically, or diagonally).

    Every method is pure: evaluating a board never changes it,
    and never touches any score.
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Cell]:
        """
        Check if there's a winner.

        Returns:
            The winning side, or None if no line is complete.
        """
        return board.winner()

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no complete line."""
        return board.is_full() and self.check_winner(board) is None

    def get_winning_line(self, board: Board) -> Optional[Tuple[Tuple[int, int], ...]]:
        """
        Get the winning line if there is one.

        Returns:
            The first complete line as a tuple of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            marks = {board.get(row, col) for row, col in line}
            if len(marks) == 1 and Cell.EMPTY not in marks:
                return line
        return None

    def evaluate(self, board: Board) -> Outcome:
        """
        Evaluate a board.

        Args:
            board: The board to look at.

        Returns:
            Outcome describing the position.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome(GameStatus.WON, winner, self.get_winning_line(board))
        if self.check_draw(board):
            return Outcome(GameStatus.DRAW)
        return Outcome()
