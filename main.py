"""
Main orchestration script for TicTacToe.

This script ties together:
- Logic (board, match flow, AI)
- A front end: the Tkinter window, or a console loop

Run this script to play TicTacToe!
"""

from typing import Callable, Optional, Tuple

# Logic imports
from logic.board import Cell
from logic.config import GameConfig
from logic.match import Match, Mode
from logic.ai_player import AIPlayer


class ConsoleGame:
    """
    Console front end for TicTacToe.

    Game flow:
    1. The board is printed
    2. A human types "row col" (0-2 each)
    3. In Human vs AI mode, the AI (O) answers right away
    4. Repeat until someone wins or it's a draw; "r" starts over

    Commands: r = restart, m = toggle mode, h = hint, q = quit
    """

    PROMPT_HELP = "Enter 'row col' (0-2), or r=restart, m=mode, h=hint, q=quit"

    def __init__(
        self,
        match: Optional[Match] = None,
        input_fn: Callable[[str], str] = input
    ):
        """
        Initialize the console game.

        Args:
            match: Match to drive. A new one is created if omitted.
            input_fn: Where player input comes from.
        """
        self.match = match if match is not None else Match()
        self.input_fn = input_fn
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\nStarting TicTacToe game...")
        print(f"Mode: {self.match.mode.label}")
        print(self.PROMPT_HELP)

        self.is_running = True
        try:
            self._game_loop()
        except (KeyboardInterrupt, EOFError):
            print("\n\nGame interrupted by user.")
        finally:
            self.is_running = False
            print("Goodbye!")

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.match.is_computer_turn():
                self._computer_move()
                continue

            self.match.print_board()
            if self.match.is_game_over:
                self._show_game_result()

            command = self.input_fn(f"{self.match.current_player.symbol} > ").strip().lower()
            self._handle_command(command)

    def _handle_command(self, command: str):
        """Dispatch one line of input."""
        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif command == "r":
            self._reset_game()
        elif command == "m":
            mode = self.match.toggle_mode()
            print(f"\nMode set to: {mode.label}")
            self._reset_game()
        elif command == "h":
            if not self.match.valid_moves():
                print("Game is already over!")
            else:
                print(AIPlayer(self.match.current_player).get_move_suggestion(self.match.board))
        else:
            move = self._parse_move(command)
            if move is None:
                print(self.PROMPT_HELP)
            elif not self.match.play_move(*move):
                print(f"Illegal move: {self.match.last_error}")

    @staticmethod
    def _parse_move(command: str) -> Optional[Tuple[int, int]]:
        """Parse 'row col' (or 'row,col'). Returns None if malformed."""
        parts = command.replace(",", " ").split()
        if len(parts) != 2:
            return None
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            return None

    def _computer_move(self):
        """Execute the AI's move."""
        print("\n>>> AI is thinking...")
        move = self.match.computer_move()
        if move is None:
            print("ERROR: AI could not find a move!")
            self.is_running = False
            return
        print(f">>> AI plays {GameConfig.COMPUTER_PLAYER.symbol} at {move}")

    def _show_game_result(self):
        """Show the result of the finished match."""
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)

        winner = self.match.winner
        if winner is None:
            print("\nIt's a draw! Good game!")
        elif self.match.mode == Mode.HUMAN_VS_COMPUTER and winner == GameConfig.COMPUTER_PLAYER:
            print("\nAI wins! Better luck next time!")
        else:
            print(f"\nCongratulations! {winner.symbol} won!")

        print(f"Score  X: {self.match.score(Cell.X)}    O: {self.match.score(Cell.O)}")
        print("Press r to play again, q to quit.")

    def _reset_game(self):
        """Reset the board for a new round."""
        print("\nResetting game...")
        self.match.restart()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        default=Mode.HUMAN_VS_COMPUTER.value,
        help="Opponent type: another human or the AI"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()
    match = Match(mode=Mode(args.mode))

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "=" * 40)
        print("   TicTacToe UI")
        print("=" * 40 + "\n")
        ui = TicTacToeUI(match)
        ui.run()
        return

    # Console mode (--no-ui)
    ConsoleGame(match).start()


if __name__ == "__main__":
    main()
