"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .board import Board, Cell
from .win_checker import Outcome


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells

    An illegal move is ordinary input (a stale click, a typo), so it is
    reported through the result instead of raised.
    """

    def validate_move(
        self,
        board: Board,
        outcome: Outcome,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            outcome: Current outcome of the match.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if outcome.is_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not board.in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-2."
            )

        occupant = board.get(row, col)
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.symbol}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board, outcome: Outcome) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the side to move.

        Returns:
            List of (row, col) positions, empty once the game is over.
        """
        if outcome.is_over:
            return []
        return board.available_moves()
