"""
Evaluator for Minimax TicTacToe.
Scores a board from the mover's point of view and detects the end of a game.
"""

from typing import List, Optional, Tuple

import numpy as np

from .board import Board, Mark
from .config import GameConfig


class Evaluator:
    """
    Checks for completed lines on the board.

    Lines are scanned in a fixed order: rows 0-2, columns 0-2, then both
    diagonals as one group. The first group holding a complete line decides
    the score, so only the earliest winning line is ever reported.
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    # Index of the first diagonal in WINNING_LINES
    DIAGONALS_START = 6

    def __init__(self):
        lines = np.array(self.WINNING_LINES)
        self._line_rows = lines[:, :, 0]
        self._line_cols = lines[:, :, 1]

    def _complete_lines(self, cells: np.ndarray, mark: Mark) -> np.ndarray:
        """Boolean vector, one entry per winning line, true where mark owns it."""
        return np.all(cells == mark.value, axis=1)

    def _first_complete(self, board: Board) -> Tuple[Optional[Mark], Optional[int]]:
        """
        Find the first complete line in scan order.

        Returns:
            (owner, line index), or (None, None) if no line is complete.
        """
        cells = board.grid[self._line_rows, self._line_cols]
        mover_lines = self._complete_lines(cells, board.mover)
        waiting_lines = self._complete_lines(cells, board.waiting)

        for i in range(self.DIAGONALS_START):
            if mover_lines[i]:
                return board.mover, i
            if waiting_lines[i]:
                return board.waiting, i

        # Diagonals are checked together, mover first
        for i in range(self.DIAGONALS_START, len(self.WINNING_LINES)):
            if mover_lines[i]:
                return board.mover, i
        for i in range(self.DIAGONALS_START, len(self.WINNING_LINES)):
            if waiting_lines[i]:
                return board.waiting, i

        return None, None

    def evaluate(self, board: Board) -> int:
        """
        Static score of the board.

        Returns:
            +10 if the mover owns a complete line, -10 if the waiting mark
            does, 0 otherwise.
        """
        owner, _ = self._first_complete(board)
        if owner is None:
            return GameConfig.DRAW_SCORE
        if owner == board.mover:
            return GameConfig.WIN_SCORE
        return GameConfig.LOSS_SCORE

    def is_game_over(self, board: Board) -> bool:
        """True if the board is full or a line is complete."""
        return board.is_full() or self.evaluate(board) != 0

    def winner(self, board: Board) -> Optional[Mark]:
        """
        Get the mark owning the first complete line.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        owner, _ = self._first_complete(board)
        return owner

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        _, index = self._first_complete(board)
        if index is None:
            return None
        return self.WINNING_LINES[index]
