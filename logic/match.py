"""
Match management for TicTacToe.
Tracks the board, side to move, outcome, and running scores.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field

from .board import Board, Cell
from .config import GameConfig
from .ai_player import AIPlayer, NO_MOVE
from .move_validator import MoveValidator
from .win_checker import GameStatus, Outcome, WinChecker


class Mode(Enum):
    """Who plays the two sides."""
    HUMAN_VS_HUMAN = "human"
    HUMAN_VS_COMPUTER = "ai"

    @property
    def label(self) -> str:
        return "Human vs Human" if self == Mode.HUMAN_VS_HUMAN else "Human vs AI"


@dataclass
class Move:
    """
    An accepted move in the current match.
    """
    player: Cell            # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (0-8)


@dataclass
class Match:
    """
    The complete state of a TicTacToe match.

    Tracks:
    - The 3x3 board
    - Side to move
    - Outcome (in progress, won, draw)
    - Win counters per side, kept across restarts
    - Play mode
    - Moves made since the last restart

    Commands never raise on illegal input. play_move() returns False
    and leaves last_error describing why.
    """

    board: Board = field(default_factory=Board)
    current_player: Cell = GameConfig.STARTING_PLAYER
    mode: Mode = Mode.HUMAN_VS_COMPUTER
    outcome: Outcome = field(default_factory=Outcome)
    scores: Dict[Cell, int] = field(
        default_factory=lambda: {Cell.X: 0, Cell.O: 0}
    )
    moves: List[Move] = field(default_factory=list)
    last_error: Optional[str] = None

    def __post_init__(self):
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    # ==================== READ ACCESSORS ====================

    def get_cell(self, row: int, col: int) -> Cell:
        return self.board.get(row, col)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_over

    @property
    def winner(self) -> Optional[Cell]:
        """The winning side, or None while playing or after a draw."""
        return self.outcome.winner

    def valid_moves(self) -> List[Tuple[int, int]]:
        """Cells the side to move may play; empty once the match is over."""
        return self.validator.get_valid_moves(self.board, self.outcome)

    def score(self, player: Cell) -> int:
        return self.scores[player]

    def is_computer_turn(self) -> bool:
        """True when the computer should move next."""
        return (
            self.mode == Mode.HUMAN_VS_COMPUTER
            and not self.is_game_over
            and self.current_player == GameConfig.COMPUTER_PLAYER
        )

    # ==================== COMMANDS ====================

    def play_move(self, row: int, col: int) -> bool:
        """
        Place the current side's mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if the move was accepted, False otherwise.
        """
        result = self.validator.validate_move(self.board, self.outcome, row, col)
        if not result.is_valid:
            self.last_error = result.error_message
            if GameConfig.DEBUG_MODE:
                print(result.error_message)
            return False

        return self._apply_move(row, col)

    def computer_move(self) -> Optional[Tuple[int, int]]:
        """
        Let the AI play for the side to move.

        Does nothing once the match is over. Timing is up to the caller.

        Returns:
            The (row, col) played, or None if no move was made.
        """
        if self.is_game_over:
            return None

        ai = AIPlayer(self.current_player)
        move = ai.get_best_move(self.board)
        if move == NO_MOVE:
            return None

        row, col = move
        if not self.play_move(row, col):
            return None
        return move

    def restart(self):
        """Start a new match. Scores are kept."""
        self.board.reset()
        self.current_player = GameConfig.STARTING_PLAYER
        self.outcome = Outcome()
        self.moves = []
        self.last_error = None

    def set_mode(self, mode: Mode):
        """Change who plays. Does not touch the board."""
        self.mode = mode

    def toggle_mode(self) -> Mode:
        """Switch between the two modes and return the new one."""
        if self.mode == Mode.HUMAN_VS_HUMAN:
            self.set_mode(Mode.HUMAN_VS_COMPUTER)
        else:
            self.set_mode(Mode.HUMAN_VS_HUMAN)
        return self.mode

    # ==================== INTERNALS ====================

    def _apply_move(self, row: int, col: int) -> bool:
        """Place the mark, record it, evaluate, then switch turns."""
        if not self.board.place(row, col, self.current_player):
            return False

        self.moves.append(Move(
            player=self.current_player,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))
        self.last_error = None

        self._apply_outcome(self.win_checker.evaluate(self.board))

        if not self.is_game_over:
            self.current_player = self.current_player.opposite()
        return True

    def _apply_outcome(self, outcome: Outcome):
        """
        Store a freshly evaluated outcome.

        The only place scores change: a side scores once, on the
        transition into a win. Draws score nothing.
        """
        was_over = self.is_game_over
        self.outcome = outcome

        if outcome.status == GameStatus.WON and not was_over:
            self.scores[outcome.winner] += 1

    def print_board(self):
        """Print the board and match info to console."""
        self.board.print_board()

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.symbol} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.symbol}")

        print(f"Score  X: {self.score(Cell.X)}    O: {self.score(Cell.O)}"
              f"    [{self.mode.label}]")
