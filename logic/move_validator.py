"""
Move validator for Minimax TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .board import Board
from .evaluator import Evaluator


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must both be on the board
    2. Can only place on empty cells
    3. Game must not be over
    """

    def __init__(self):
        self.evaluator = Evaluator()

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if self.evaluator.is_game_over(board):
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if row/col are in valid range
        if not (0 <= row < Board.SIZE and 0 <= col < Board.SIZE):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-2."
            )

        if not board.is_legal_move(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {board.get(row, col).value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the mover.

        Returns:
            List of (row, col) valid move positions, empty once the game is over.
        """
        if self.evaluator.is_game_over(board):
            return []
        return board.get_empty_cells()
