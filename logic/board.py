"""
Board for TicTacToe.
A fixed 3x3 grid of cells, with move placement and line detection.
"""

from enum import Enum
from typing import List, Optional, Tuple

import numpy as np


class Cell(Enum):
    """
    Contents of a single board cell.

    X and O double as the two sides. The values are chosen so that
    a line of three equal marks sums to +3 or -3.
    """
    EMPTY = 0
    X = 1
    O = -1

    def opposite(self) -> "Cell":
        """Get the opposite side."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opposite side")
        return Cell.O if self == Cell.X else Cell.X

    @property
    def symbol(self) -> str:
        """Single character used when printing the board."""
        return " " if self == Cell.EMPTY else self.name


# All possible winning lines (as tuples of (row, col)).
# Rows first, then columns, then the two diagonals.
WINNING_LINES: List[Tuple[Tuple[int, int], ...]] = [
    # Rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # Columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # Diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
]

# Same lines as flat indices into Board._cells
_FLAT_LINES = [tuple(row * 3 + col for row, col in line) for line in WINNING_LINES]

_EMPTY = Cell.EMPTY.value
_CELLS = {cell.value: cell for cell in Cell}


class _Hypothetical:
    """Context manager behind Board.hypothetical()."""

    __slots__ = ("board", "row", "col")

    def __init__(self, board: "Board", row: int, col: int):
        self.board = board
        self.row = row
        self.col = col

    def __enter__(self) -> "Board":
        return self.board

    def __exit__(self, exc_type, exc, tb):
        self.board.clear(self.row, self.col)
        return False


class Board:
    """
    The 3x3 TicTacToe grid.

    Cells are kept in a flat row-major list of plain ints (Cell values),
    which is what the search reads on every node. as_array() gives a
    numpy view of the same contents for renderers.

    The board never raises on an illegal placement; place() simply
    returns False and leaves the grid untouched.
    """

    SIZE = 3

    def __init__(self):
        self._cells = [_EMPTY] * (self.SIZE * self.SIZE)

    def in_bounds(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board."""
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def get(self, row: int, col: int) -> Cell:
        """
        Get the contents of a cell.

        Raises:
            IndexError: if (row, col) is off the board.
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is off the board")
        return _CELLS[self._cells[row * self.SIZE + col]]

    def place(self, row: int, col: int, player: Cell) -> bool:
        """
        Place a mark on an empty cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            player: Cell.X or Cell.O.

        Returns:
            True if the mark was placed, False if the cell is occupied,
            out of range, or player is not a side.
        """
        if player == Cell.EMPTY or not self.in_bounds(row, col):
            return False
        index = row * self.SIZE + col
        if self._cells[index] != _EMPTY:
            return False
        self._cells[index] = player.value
        return True

    def clear(self, row: int, col: int):
        """Reset a cell to EMPTY. Only the search uses this, to undo a move."""
        self._cells[row * self.SIZE + col] = _EMPTY

    def hypothetical(self, row: int, col: int, player: Cell) -> _Hypothetical:
        """
        Place a mark for the duration of a with-block.

        The cell is cleared again on every exit path. The cell must be
        empty on entry.
        """
        if not self.place(row, col, player):
            raise ValueError(f"Cell ({row}, {col}) is not available")
        return _Hypothetical(self, row, col)

    def available_moves(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        return [divmod(i, self.SIZE) for i, value in enumerate(self._cells) if value == _EMPTY]

    def occupied_cells(self) -> List[Tuple[int, int]]:
        """Get all non-empty cells in row-major order."""
        return [divmod(i, self.SIZE) for i, value in enumerate(self._cells) if value != _EMPTY]

    def is_full(self) -> bool:
        return _EMPTY not in self._cells

    def winner(self) -> Optional[Cell]:
        """
        Check all 8 lines for three equal marks.

        Returns:
            The side owning the first complete line found, or None.
        """
        cells = self._cells
        for a, b, c in _FLAT_LINES:
            total = cells[a] + cells[b] + cells[c]
            if total == 3:
                return Cell.X
            if total == -3:
                return Cell.O
        return None

    def reset(self):
        """Set every cell back to EMPTY."""
        self._cells = [_EMPTY] * (self.SIZE * self.SIZE)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board._cells = list(self._cells)
        return new_board

    def as_array(self) -> np.ndarray:
        """Read-only 3x3 int8 snapshot of the grid (values are Cell values)."""
        snapshot = np.array(self._cells, dtype=np.int8).reshape(self.SIZE, self.SIZE)
        snapshot.setflags(write=False)
        return snapshot

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None

    def __str__(self) -> str:
        rows = [" | ".join(self.get(r, c).symbol for c in range(self.SIZE))
                for r in range(self.SIZE)]
        return "\n---------\n".join(rows)

    def __repr__(self) -> str:
        cells = "".join(_CELLS[value].symbol if value else "." for value in self._cells)
        return f"Board({cells!r})"

    def print_board(self):
        """Print the board to console."""
        print("\n    0   1   2")
        print("  +---+---+---+")
        for row in range(self.SIZE):
            row_str = "|".join(f" {self.get(row, col).symbol} " for col in range(self.SIZE))
            print(f"{row} |{row_str}|")
            print("  +---+---+---+")
