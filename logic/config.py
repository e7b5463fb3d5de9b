"""
Game configuration for Minimax TicTacToe.
Board constants, scores and the search settings handed to the AI.
"""

from dataclasses import dataclass

from .errors import InvalidDepthError


class GameConfig:
    """
    Constants shared by the board, the evaluator and the AI.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # ==================== SCORES ====================
    # Static score of a finished line, from the mover's point of view
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # ==================== SEARCH DEPTH ====================
    # The game tree is at most 9 plies high, so 7 is already perfect play
    MIN_DEPTH = 0
    MAX_DEPTH = 7
    DEFAULT_DEPTH = 7

    # ==================== HUMAN INPUT ====================
    # Columns are letters left to right, rows are digits bottom to top
    COLUMN_LABELS = "abc"
    ROW_LABELS = "123"


@dataclass(frozen=True)
class SearchConfig:
    """
    Settings for one AI player.

    Attributes:
        depth: How many plies to look ahead (0-7).
        prune: Use alpha-beta pruning.
        verbose: Count the nodes expanded by every decision.
    """
    depth: int = GameConfig.DEFAULT_DEPTH
    prune: bool = False
    verbose: bool = False

    def validate(self) -> "SearchConfig":
        """
        Check the depth is inside the supported range.

        Returns:
            self, so the call can be chained.

        Raises:
            InvalidDepthError: If depth is out of range.
        """
        if not GameConfig.MIN_DEPTH <= self.depth <= GameConfig.MAX_DEPTH:
            raise InvalidDepthError(self.depth, GameConfig.MIN_DEPTH, GameConfig.MAX_DEPTH)
        return self
