"""
Board state for Minimax TicTacToe.
Holds the 3x3 grid and which mark is on the move.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .config import GameConfig


class Mark(Enum):
    """The contents of a cell."""
    X = "X"
    O = "O"
    EMPTY = " "

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark.O if self == Mark.X else Mark.X


class Board:
    """
    The 3x3 TicTacToe board.

    Cells are stored as one-character strings in a numpy array so the
    evaluator can scan whole lines at once. `mover` is the mark whose turn
    it is, `waiting` is the other one; they swap after every turn.
    """

    SIZE = GameConfig.BOARD_SIZE

    def __init__(self, mover: Mark = Mark.X, grid: Optional[np.ndarray] = None):
        """
        Initialize the board.

        Args:
            mover: The mark that moves first (default: X).
            grid: Optional starting grid of mark values.
        """
        if grid is None:
            grid = np.full((self.SIZE, self.SIZE), Mark.EMPTY.value, dtype="<U1")
        self.grid = grid
        self.mover = mover
        self.waiting = mover.opposite()

    @classmethod
    def from_rows(cls, rows: Sequence[str], mover: Mark = Mark.X) -> "Board":
        """
        Build a board from three row strings, e.g. ["XX ", " O ", "   "].

        Args:
            rows: Top row first, one character per cell.
            mover: The mark on the move.

        Returns:
            A new Board.
        """
        if len(rows) != cls.SIZE or any(len(row) != cls.SIZE for row in rows):
            raise ValueError(f"Expected {cls.SIZE} rows of {cls.SIZE} cells")

        valid = {mark.value for mark in Mark}
        for row in rows:
            for cell in row:
                if cell not in valid:
                    raise ValueError(f"Invalid cell {cell!r}")

        grid = np.array([list(row) for row in rows], dtype="<U1")
        return cls(mover=mover, grid=grid)

    def get(self, row: int, col: int) -> Mark:
        """Get the mark in a cell."""
        return Mark(str(self.grid[row, col]))

    def is_legal_move(self, row: int, col: int) -> bool:
        """
        Check whether a mark may be placed on a cell.

        Both coordinates are bounds-checked before the cell is read.
        """
        if not (0 <= row < self.SIZE and 0 <= col < self.SIZE):
            return False
        return bool(self.grid[row, col] == Mark.EMPTY.value)

    def place(self, row: int, col: int, mark: Mark):
        """Write a mark into a cell. The caller must check legality."""
        self.grid[row, col] = mark.value

    def clear(self, row: int, col: int):
        """Reset a cell to empty. Only used to undo trial moves."""
        self.grid[row, col] = Mark.EMPTY.value

    def apply_move(self, row: int, col: int):
        """Place the mover's mark on a cell."""
        self.place(row, col, self.mover)

    @contextmanager
    def trial_move(self, row: int, col: int, mark: Mark) -> Iterator["Board"]:
        """
        Place a mark for the duration of a with-block.

        The cell is cleared again however the block is left, including
        early returns and exceptions.
        """
        self.place(row, col, mark)
        try:
            yield self
        finally:
            self.clear(row, col)

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return not bool(np.any(self.grid == Mark.EMPTY.value))

    def swap_roles(self):
        """Hand the move to the other mark. Called once per completed turn."""
        self.mover, self.waiting = self.waiting, self.mover

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        empty = np.argwhere(self.grid == Mark.EMPTY.value)
        return [(int(row), int(col)) for row, col in empty]

    def count(self, mark: Mark) -> int:
        """Number of cells holding a mark."""
        return int(np.count_nonzero(self.grid == mark.value))

    def rows(self) -> List[str]:
        """The grid as row strings, top row first."""
        return ["".join(row) for row in self.grid.tolist()]

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        return Board(mover=self.mover, grid=self.grid.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.mover == other.mover
            and self.waiting == other.waiting
            and bool(np.array_equal(self.grid, other.grid))
        )

    def __repr__(self) -> str:
        return f"Board(rows={self.rows()!r}, mover={self.mover.name})"
