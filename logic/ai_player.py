"""
AI player for Minimax TicTacToe.
Uses the Minimax algorithm, optionally with alpha-beta pruning, to choose a move.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Board
from .config import GameConfig, SearchConfig
from .evaluator import Evaluator


@dataclass
class NodeCounter:
    """Number of search plies expanded. Owned by whoever calls decide()."""
    count: int = 0

    def increment(self):
        self.count += 1

    def reset(self):
        self.count = 0


@dataclass
class SearchResult:
    """
    The move chosen by one decision.
    """
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    score: int              # Backed-up minimax score of the move
    nodes: int = 0          # Plies expanded (0 unless verbose)

    @property
    def move(self):
        return (self.row, self.col)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The board is searched in place: every trial move is placed, searched
    and cleared again through Board.trial_move, so the board a caller
    hands in is the board it gets back.

    Scores are adjusted by the remaining depth on the way up the tree
    (subtracted at maximizing plies, added at minimizing plies), which makes
    the AI prefer quicker wins and slower losses.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """
        Initialize the AI player.

        Args:
            config: Search settings (default: depth 7, no pruning).
        """
        self.config = (config or SearchConfig()).validate()
        self.evaluator = Evaluator()

    def decide(self, board: Board, counter: Optional[NodeCounter] = None) -> Optional[SearchResult]:
        """
        Get the best move for board.mover.

        Cells are tried in row-major order and a move only replaces the best
        so far if it scores strictly higher, so ties go to the earliest cell.

        Args:
            board: Current board. Unchanged on return.
            counter: Node counter to add to. A fresh one is used if omitted.

        Returns:
            SearchResult for the best move, or None if no cell is empty.
        """
        if counter is None:
            counter = NodeCounter()

        best: Optional[SearchResult] = None
        best_value = GameConfig.LOSS_SCORE

        for row in range(Board.SIZE):
            for col in range(Board.SIZE):
                if not board.is_legal_move(row, col):
                    continue

                with board.trial_move(row, col, board.mover):
                    value = self._minimax(
                        board,
                        self.config.depth,
                        is_maximizing=False,
                        alpha=GameConfig.LOSS_SCORE,
                        beta=GameConfig.WIN_SCORE,
                        counter=counter,
                    )

                if best is None:
                    best = SearchResult(row, col, value)
                if value > best_value:
                    best_value = value
                    best = SearchResult(row, col, value)

        if best is not None:
            best.nodes = counter.count
        return best

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: int,
        beta: int,
        counter: NodeCounter
    ) -> int:
        """
        Minimax with optional alpha-beta pruning.

        Args:
            board: Board to search, restored before returning.
            depth: Remaining plies.
            is_maximizing: True on the mover's plies.
            alpha: Lower bound of the window (only used when pruning).
            beta: Upper bound of the window (only used when pruning).
            counter: Node counter, bumped once per ply when verbose.

        Returns:
            The score of the position.
        """
        if self.config.verbose:
            counter.increment()

        # Leaves keep their static score
        if depth == 0 or self.evaluator.is_game_over(board):
            return self.evaluator.evaluate(board)

        prune = self.config.prune

        if is_maximizing:
            max_score = GameConfig.LOSS_SCORE
            for row in range(Board.SIZE):
                for col in range(Board.SIZE):
                    if not board.is_legal_move(row, col):
                        continue
                    with board.trial_move(row, col, board.mover):
                        # Child scores are shifted by depth, so is its window
                        score = self._minimax(
                            board, depth - 1, False, alpha + depth, beta + depth, counter
                        ) - depth
                    max_score = max(max_score, score)
                    if prune:
                        if score >= beta:
                            return max_score  # Prune
                        alpha = max(alpha, score)
            return max_score
        else:
            min_score = GameConfig.WIN_SCORE
            for row in range(Board.SIZE):
                for col in range(Board.SIZE):
                    if not board.is_legal_move(row, col):
                        continue
                    with board.trial_move(row, col, board.waiting):
                        score = self._minimax(
                            board, depth - 1, True, alpha - depth, beta - depth, counter
                        ) + depth
                    min_score = min(min_score, score)
                    if prune:
                        if score <= alpha:
                            return min_score  # Prune
                        beta = min(beta, score)
            return min_score


# Quick test (python -m logic.ai_player)
if __name__ == "__main__":
    print("Testing AIPlayer...")

    board = Board.from_rows(["OX ", " O ", "X  "])
    print(f"\nAI is {board.mover.value}. {board.waiting.value} is about to win with (2,2)!")

    for prune in (False, True):
        ai = AIPlayer(SearchConfig(depth=7, prune=prune, verbose=True))
        result = ai.decide(board)
        print(f"prune={prune}: move {result.move}, score {result.score}, {result.nodes} nodes")
        assert result.move == (2, 2), f"Expected (2, 2), got {result.move}"

    print("\nAIPlayer test done!")
