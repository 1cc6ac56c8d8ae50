"""
Game configuration for TicTacToe.
Who starts, who the computer plays, and how positions are scored.
"""

from .board import Cell


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== PLAYERS ====================
    # Side that moves first after every restart
    STARTING_PLAYER = Cell.X

    # Side the computer plays in Human vs Computer mode
    COMPUTER_PLAYER = Cell.O

    # ==================== SEARCH SCORES ====================
    # Scores are from the computer's point of view.
    # No depth discount: any forced win is worth the same.
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== DEBUG SETTINGS ====================
    # Print search statistics and rejected moves
    DEBUG_MODE = True
