"""
Logic module for TicTacToe.
Handles the board, rules, match flow, and AI opponent.
"""

from .board import Board, Cell, WINNING_LINES
from .config import GameConfig
from .win_checker import WinChecker, Outcome, GameStatus
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, NO_MOVE
from .match import Match, Mode, Move

__version__ = "1.0.0"
