"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (X in red, O in cyan)
- Whose turn it is, or the result
- Running score
- Restart and mode buttons (keys R and M)
"""

import tkinter as tk
import numpy as np
from typing import Optional

# Logic imports
from logic.board import Board, Cell
from logic.match import Match, Mode


class UIConfig:
    """
    Configuration for the window.
    """

    # ==================== LAYOUT ====================
    BOARD_PIXELS = 600            # Square board area
    PANEL_HEIGHT = 100            # Control strip below the board
    CELL_PIXELS = BOARD_PIXELS // Board.SIZE
    GRID_THICKNESS = 4
    MARK_THICKNESS = 6

    # Buttons in the control strip: (x0, y0, x1, y1)
    RESTART_BUTTON = (50, 620, 250, 670)
    MODE_BUTTON = (350, 620, 550, 670)

    # ==================== COLORS ====================
    BG_COLOR = '#1e1e1e'
    GRID_COLOR = 'white'
    X_COLOR = 'red'
    O_COLOR = 'cyan'
    BUTTON_COLOR = '#505050'
    TEXT_COLOR = 'white'
    RESULT_COLOR = 'yellow'
    WIN_LINE_COLOR = '#ffd700'

    # ==================== FONTS ====================
    FONT = 'Helvetica'

    # ==================== TIMING ====================
    # Pause before the computer answers a human move
    AI_MOVE_DELAY_MS = 300


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The window only renders the match and forwards input to it.
    All rules live in logic.Match.
    """

    def __init__(self, match: Optional[Match] = None):
        """Initialize the UI."""
        self.match = match if match is not None else Match()
        self.pending_ai_move: Optional[str] = None
        self.status_message = ""

        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.resizable(False, False)

        self.canvas = tk.Canvas(
            self.root,
            width=UIConfig.BOARD_PIXELS,
            height=UIConfig.BOARD_PIXELS + UIConfig.PANEL_HEIGHT,
            bg=UIConfig.BG_COLOR,
            highlightthickness=0
        )
        self.canvas.pack()

        self.canvas.bind("<Button-1>", self._on_click)
        self.root.bind("<KeyPress-r>", lambda event: self._restart())
        self.root.bind("<KeyPress-R>", lambda event: self._restart())
        self.root.bind("<KeyPress-m>", lambda event: self._toggle_mode())
        self.root.bind("<KeyPress-M>", lambda event: self._toggle_mode())

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

        self._render()

    # ==================== INPUT ====================

    def _on_click(self, event):
        """Route a left click to the board or the control strip."""
        if event.y < UIConfig.BOARD_PIXELS:
            row = event.y // UIConfig.CELL_PIXELS
            col = event.x // UIConfig.CELL_PIXELS
            self._handle_board_click(row, col)
        elif self._inside(UIConfig.RESTART_BUTTON, event.x, event.y):
            self._restart()
        elif self._inside(UIConfig.MODE_BUTTON, event.x, event.y):
            self._toggle_mode()

    def _handle_board_click(self, row: int, col: int):
        """Play a human move, then schedule the computer's reply if needed."""
        if self.match.mode == Mode.HUMAN_VS_COMPUTER:
            # Ignore clicks while the computer is to move
            if self.match.is_computer_turn() or self.pending_ai_move:
                return

        if self.match.play_move(row, col):
            self.status_message = ""
            if self.match.is_computer_turn():
                self._schedule_ai_move()
        else:
            self.status_message = self.match.last_error or ""

        self._render()

    @staticmethod
    def _inside(box, x: int, y: int) -> bool:
        x0, y0, x1, y1 = box
        return x0 <= x <= x1 and y0 <= y <= y1

    # ==================== COMPUTER MOVE ====================

    def _schedule_ai_move(self):
        """Run the computer move after a short pause, on the UI thread."""
        self._cancel_ai_move()
        self.pending_ai_move = self.root.after(UIConfig.AI_MOVE_DELAY_MS, self._ai_move)

    def _cancel_ai_move(self):
        if self.pending_ai_move:
            self.root.after_cancel(self.pending_ai_move)
            self.pending_ai_move = None

    def _ai_move(self):
        """Let the match play the computer's move."""
        self.pending_ai_move = None
        if self.match.is_computer_turn():
            move = self.match.computer_move()
            if move is not None:
                print(f"AI plays at {move}")
        self._render()

    # ==================== COMMANDS ====================

    def _restart(self):
        """Reset the board, keep the score."""
        print("Resetting game...")
        self._cancel_ai_move()
        self.match.restart()
        self.status_message = ""
        self._render()

    def _toggle_mode(self):
        """Switch mode and start a fresh match."""
        mode = self.match.toggle_mode()
        print(f"Mode set to: {mode.label}")
        self._restart()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_ai_move()
        self.root.quit()
        self.root.destroy()

    # ==================== DRAWING ====================

    def _render(self):
        """Redraw the whole window from the match state."""
        self.canvas.delete("all")
        self._draw_grid()
        self._draw_marks()
        self._draw_bottom_ui()
        if self.match.is_game_over:
            self._draw_game_over()

    def _draw_grid(self):
        size = UIConfig.BOARD_PIXELS
        step = UIConfig.CELL_PIXELS
        for i in range(1, Board.SIZE):
            self.canvas.create_line(i * step, 0, i * step, size,
                                    fill=UIConfig.GRID_COLOR, width=UIConfig.GRID_THICKNESS)
            self.canvas.create_line(0, i * step, size, i * step,
                                    fill=UIConfig.GRID_COLOR, width=UIConfig.GRID_THICKNESS)

    def _draw_marks(self):
        grid = self.match.board.as_array()
        for row, col in np.argwhere(grid != Cell.EMPTY.value):
            x = int(col) * UIConfig.CELL_PIXELS
            y = int(row) * UIConfig.CELL_PIXELS
            if grid[row, col] == Cell.X.value:
                self._draw_x(x, y)
            else:
                self._draw_o(x, y)

    def _draw_x(self, x: float, y: float):
        pad = UIConfig.CELL_PIXELS * 0.2
        far = UIConfig.CELL_PIXELS - pad
        self.canvas.create_line(x + pad, y + pad, x + far, y + far,
                                fill=UIConfig.X_COLOR, width=UIConfig.MARK_THICKNESS)
        self.canvas.create_line(x + far, y + pad, x + pad, y + far,
                                fill=UIConfig.X_COLOR, width=UIConfig.MARK_THICKNESS)

    def _draw_o(self, x: float, y: float):
        pad = UIConfig.CELL_PIXELS * 0.18
        far = UIConfig.CELL_PIXELS - pad
        self.canvas.create_oval(x + pad, y + pad, x + far, y + far,
                                outline=UIConfig.O_COLOR, width=UIConfig.MARK_THICKNESS)

    def _draw_button(self, box, text: str, size: int):
        x0, y0, x1, y1 = box
        self.canvas.create_rectangle(x0, y0, x1, y1, fill=UIConfig.BUTTON_COLOR, outline="")
        self.canvas.create_text((x0 + x1) / 2, (y0 + y1) / 2, text=text,
                                fill=UIConfig.TEXT_COLOR, font=(UIConfig.FONT, size))

    def _draw_bottom_ui(self):
        size = UIConfig.BOARD_PIXELS
        self.canvas.create_line(0, size, size, size, fill=UIConfig.GRID_COLOR, width=2)

        self._draw_button(UIConfig.RESTART_BUTTON, "Restart (R)", 16)
        self._draw_button(UIConfig.MODE_BUTTON, f"{self.match.mode.label} (M)", 14)

        # Score
        score = f"X: {self.match.score(Cell.X)}    O: {self.match.score(Cell.O)}"
        self.canvas.create_text(size / 2, size + 10, text=score,
                                fill=UIConfig.TEXT_COLOR, font=(UIConfig.FONT, 12))

        # Current turn / result, bottom-left of the board
        if not self.match.is_game_over:
            turn_text = f"Turn: {self.match.current_player.symbol}"
        elif self.match.winner:
            turn_text = f"Winner: {self.match.winner.symbol}"
        else:
            turn_text = "Draw"
        if self.status_message:
            turn_text += f"  ({self.status_message})"
        self.canvas.create_text(10, size - 14, text=turn_text, anchor=tk.W,
                                fill=UIConfig.TEXT_COLOR, font=(UIConfig.FONT, 12))

    def _draw_game_over(self):
        """Dim the board, highlight the winning line, show the result."""
        size = UIConfig.BOARD_PIXELS
        half = UIConfig.CELL_PIXELS / 2

        self.canvas.create_rectangle(0, 0, size, size, fill='black',
                                     stipple='gray50', outline="")

        line = self.match.outcome.line
        if line:
            (r0, c0), (r1, c1) = line[0], line[-1]
            self.canvas.create_line(
                c0 * UIConfig.CELL_PIXELS + half, r0 * UIConfig.CELL_PIXELS + half,
                c1 * UIConfig.CELL_PIXELS + half, r1 * UIConfig.CELL_PIXELS + half,
                fill=UIConfig.WIN_LINE_COLOR, width=UIConfig.MARK_THICKNESS * 2
            )

        if self.match.winner:
            result = f"{self.match.winner.symbol} Wins!"
        else:
            result = "Draw!"
        self.canvas.create_text(size / 2, size / 2 - 20, text=result,
                                fill=UIConfig.RESULT_COLOR, font=(UIConfig.FONT, 48, 'bold'))
        self.canvas.create_text(size / 2, size / 2 + 30,
                                text="Click Restart or press R to play again",
                                fill=UIConfig.TEXT_COLOR, font=(UIConfig.FONT, 16))

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        default=Mode.HUMAN_VS_COMPUTER.value,
        help="Opponent type: another human or the AI"
    )

    args = parser.parse_args()

    ui = TicTacToeUI(Match(mode=Mode(args.mode)))
    ui.run()


if __name__ == "__main__":
    main()
