"""
Main orchestration script for Minimax TicTacToe.

This script ties together:
- Logic (board, evaluator, AI)
- UI (board drawing, move input)

Run this script to play TicTacToe against the computer!
"""

import argparse
import random
import sys
from typing import List, Optional

# Logic imports
from logic.ai_player import AIPlayer, NodeCounter
from logic.board import Board, Mark
from logic.config import GameConfig, SearchConfig
from logic.errors import InvalidDepthError, MalformedInputError
from logic.evaluator import Evaluator
from logic.move_validator import MoveValidator

# UI imports
from ui import announce_result, format_move, read_human_move, render_board


class TicTacToeGame:
    """
    Main controller for a game of TicTacToe.

    Game flow:
    1. X moves first (human, or the AI when the human plays O)
    2. The move is applied and the board is printed
    3. The board hands the move to the other mark
    4. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        human_mark: Mark = Mark.X,
        self_play: bool = False,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the game.

        Args:
            config: Search settings for the AI.
            human_mark: Which mark the human plays.
            self_play: If True, the AI plays both sides.
            rng: Random source for the opening move of self play.
        """
        self.config = config or SearchConfig()
        self.human_mark = human_mark
        self.self_play = self_play
        self.rng = rng or random.Random()

        self.board = Board()
        self.evaluator = Evaluator()
        self.validator = MoveValidator()
        self.ai = AIPlayer(self.config)
        self.counter = NodeCounter()

    def play(self) -> str:
        """
        Play one game in the configured mode.

        Returns:
            The result line that was printed.
        """
        if self.self_play:
            return self.play_self()
        return self.play_human()

    def play_human(self) -> str:
        """Human against the AI."""
        print()
        print(render_board(self.board))
        print()

        while not self.is_game_over():
            if self.board.mover == self.human_mark:
                row, col = read_human_move(self.board, validator=self.validator)
                self._apply(row, col)
                print(render_board(self.board))
                print()
            else:
                self._ai_move(" for this move")

        return self._show_game_result()

    def play_self(self) -> str:
        """The AI against itself, starting from a random cell."""
        row = self.rng.randrange(Board.SIZE)
        col = self.rng.randrange(Board.SIZE)
        self._announce_move(row, col)
        self._apply(row, col)
        print(render_board(self.board))
        print()

        while not self.is_game_over():
            self._ai_move("")

        return self._show_game_result()

    def is_game_over(self) -> bool:
        return self.evaluator.is_game_over(self.board)

    def _apply(self, row: int, col: int):
        """Place the mover's mark and end the turn."""
        self.board.apply_move(row, col)
        self.board.swap_roles()

    def _announce_move(self, row: int, col: int):
        print(f"{self.board.mover.value} plays {format_move(row, col)}:")

    def _ai_move(self, nodes_suffix: str):
        """Let the AI choose and play a move for the mover."""
        result = self.ai.decide(self.board, self.counter)

        self._announce_move(result.row, result.col)
        self._apply(result.row, result.col)
        print(render_board(self.board))

        if self.config.verbose:
            print(f"Minimax expanded {self.counter.count} nodes{nodes_suffix}.")
            self.counter.reset()
        print()

    def _show_game_result(self) -> str:
        result = announce_result(self.board, self.evaluator)
        print(result)
        return result


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that prints usage and exits 0 on bad flags."""

    def error(self, message):
        self.print_help()
        self.exit(0)


def build_parser() -> UsageParser:
    parser = UsageParser(
        prog="tictactoe",
        description="Play TicTacToe against a minimax AI"
    )
    parser.add_argument(
        "-s",
        dest="self_play",
        action="store_true",
        help="Simulate a full game of tic-tac-toe (AI against AI)"
    )
    parser.add_argument(
        "-p",
        dest="prune",
        action="store_true",
        help="Use alpha-beta pruning"
    )
    parser.add_argument(
        "-d",
        dest="depth",
        metavar="depth",
        default=str(GameConfig.DEFAULT_DEPTH),
        help=f"Set the maximum depth of the decision tree "
             f"({GameConfig.MIN_DEPTH}-{GameConfig.MAX_DEPTH})"
    )
    parser.add_argument(
        "-v",
        dest="verbose",
        action="store_true",
        help="Output the number of expanded nodes"
    )
    parser.add_argument(
        "-O",
        dest="play_o",
        action="store_true",
        help="Play O instead of X (the AI moves first)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random opening move of a simulated game"
    )
    return parser


def parse_depth(value: str) -> int:
    """
    Parse and range-check the depth argument.

    Raises:
        InvalidDepthError: If value is not an integer in range.
    """
    try:
        depth = int(value)
    except ValueError:
        raise InvalidDepthError(value, GameConfig.MIN_DEPTH, GameConfig.MAX_DEPTH)
    SearchConfig(depth=depth).validate()
    return depth


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        depth = parse_depth(args.depth)
    except InvalidDepthError as e:
        print(e)
        return 0

    config = SearchConfig(depth=depth, prune=args.prune, verbose=args.verbose)
    human_mark = Mark.O if args.play_o else Mark.X

    game = TicTacToeGame(
        config=config,
        human_mark=human_mark,
        self_play=args.self_play,
        rng=random.Random(args.seed)
    )

    try:
        game.play()
    except MalformedInputError as e:
        print()
        print(e)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
