"""
Terminal UI for Minimax TicTacToe.

Draws the board, reads the human's moves and announces the result.
Moves are typed as a column letter followed by a row digit, e.g. "b2".

    3 [X][ ][ ]
    2 [ ][O][ ]
    1 [ ][ ][ ]
       a  b  c
"""

from typing import Callable, Optional, Tuple

from logic.board import Board
from logic.config import GameConfig
from logic.errors import MalformedInputError, TicTacToeError
from logic.evaluator import Evaluator
from logic.move_validator import MoveValidator


def render_board(board: Board) -> str:
    """
    Draw the board as text, row 3 at the top.

    Args:
        board: The board to draw.

    Returns:
        The grid followed by the column labels, without a trailing newline.
    """
    lines = []
    size = Board.SIZE
    for row in range(size):
        cells = "".join(f"[{board.get(row, col).value}]" for col in range(size))
        lines.append(f"{size - row} {cells}")
    lines.append("   " + "  ".join(GameConfig.COLUMN_LABELS))
    return "\n".join(lines)


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Turn typed input like "a3" into board coordinates.

    Args:
        text: A column letter (a-c, any case) followed by a row digit (1-3).

    Returns:
        (row, col), or None if the text is not a move.
    """
    text = text.strip().lower()
    if len(text) != 2:
        return None

    col_char, row_char = text
    if col_char not in GameConfig.COLUMN_LABELS or row_char not in GameConfig.ROW_LABELS:
        return None

    col = GameConfig.COLUMN_LABELS.index(col_char)
    row = Board.SIZE - int(row_char)
    return row, col


def format_move(row: int, col: int) -> str:
    """Board coordinates back to the typed form, e.g. (0, 0) -> "a3"."""
    return f"{GameConfig.COLUMN_LABELS[col]}{Board.SIZE - row}"


def read_human_move(
    board: Board,
    prompt: str = "Your move: ",
    read: Optional[Callable[[str], str]] = None,
    validator: Optional[MoveValidator] = None
) -> Tuple[int, int]:
    """
    Ask for a move until a legal one is typed.

    Every parsed move goes through the MoveValidator. Unreadable moves,
    off-board cells and occupied cells just prompt again.

    Args:
        board: Current board, used to reject occupied cells.
        prompt: Text shown before each attempt.
        read: Line reader (default: input).
        validator: Rules check for parsed moves (default: MoveValidator()).

    Returns:
        (row, col) of a legal move.

    Raises:
        MalformedInputError: If input ends before a legal move is entered.
        TicTacToeError: If the game is already over.
    """
    read = read or input
    validator = validator or MoveValidator()
    if not validator.get_valid_moves(board):
        raise TicTacToeError("Game is already over!")

    while True:
        try:
            text = read(prompt)
        except EOFError as e:
            raise MalformedInputError("Input ended before a move was entered.") from e

        move = parse_move(text)
        if move is not None and validator.validate_move(board, *move).is_valid:
            return move


def announce_result(board: Board, evaluator: Optional[Evaluator] = None) -> str:
    """
    The final line of a game.

    Returns:
        "<mark> wins!" or "Tie!".
    """
    evaluator = evaluator or Evaluator()
    winner = evaluator.winner(board)
    if winner is None:
        return "Tie!"
    return f"{winner.value} wins!"
