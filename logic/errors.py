"""
Errors raised by the TicTacToe game.
"""


class TicTacToeError(Exception):
    """Base class for all game errors."""


class InvalidDepthError(TicTacToeError):
    """The requested search depth is outside the supported range."""

    def __init__(self, depth: object, min_depth: int, max_depth: int):
        self.depth = depth
        self.min_depth = min_depth
        self.max_depth = max_depth
        super().__init__(
            f"The depth argument must be between {min_depth} "
            f"and {max_depth} inclusive."
        )


class MalformedInputError(TicTacToeError):
    """Input ended (or could not be read) while waiting for a human move."""
