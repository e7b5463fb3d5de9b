"""
Tests for the terminal UI, the game loop and the command line.
Run with: pytest test_main.py
"""

import random

import pytest

from logic.board import Board, Mark
from logic.config import SearchConfig
from logic.errors import MalformedInputError, TicTacToeError
from logic.move_validator import MoveValidator
from main import TicTacToeGame, main, parse_depth
from ui import announce_result, format_move, parse_move, read_human_move, render_board


def lines_of(text):
    return [line for line in text.splitlines() if line.strip()]


# ==================== UI ====================

def test_render_board():
    board = Board.from_rows(["X  ", " O ", "   "])
    assert render_board(board) == (
        "3 [X][ ][ ]\n"
        "2 [ ][O][ ]\n"
        "1 [ ][ ][ ]\n"
        "   a  b  c"
    )


@pytest.mark.parametrize("text,expected", [
    ("a3", (0, 0)),
    ("b2", (1, 1)),
    ("c1", (2, 2)),
    ("C1", (2, 2)),
    (" a1\n", (2, 0)),
])
def test_parse_move(text, expected):
    assert parse_move(text) == expected


@pytest.mark.parametrize("text", ["", "a", "d1", "a4", "a0", "1a", "a10", "zz"])
def test_parse_move_rejects_garbage(text):
    assert parse_move(text) is None


def test_format_move():
    assert format_move(0, 0) == "a3"
    assert format_move(2, 2) == "c1"
    assert format_move(1, 0) == "a2"


def test_read_human_move_reprompts_until_legal():
    board = Board.from_rows(["X  ", "   ", "   "], mover=Mark.O)
    answers = iter(["zz", "a3", "d9", "b2"])
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        return next(answers)

    assert read_human_move(board, read=read) == (1, 1)
    assert prompts == ["Your move: "] * 4


def test_read_human_move_end_of_input():
    def read(prompt):
        raise EOFError

    with pytest.raises(MalformedInputError):
        read_human_move(Board(), read=read)


class RecordingValidator(MoveValidator):
    """MoveValidator that remembers every move it was asked about."""

    def __init__(self):
        super().__init__()
        self.checked = []

    def validate_move(self, board, row, col):
        result = super().validate_move(board, row, col)
        self.checked.append(((row, col), result))
        return result


def test_read_human_move_checks_moves_with_validator():
    board = Board.from_rows(["X  ", "   ", "   "], mover=Mark.O)
    answers = iter(["zz", "a3", "c1"])
    validator = RecordingValidator()

    assert read_human_move(board, read=lambda prompt: next(answers), validator=validator) == (2, 2)

    # "zz" never parses, so only the two real moves reach the validator
    assert [move for move, _ in validator.checked] == [(0, 0), (2, 2)]
    occupied, accepted = [result for _, result in validator.checked]
    assert not occupied.is_valid
    assert "occupied" in occupied.error_message
    assert accepted.is_valid


def test_read_human_move_refuses_finished_game():
    board = Board.from_rows(["XXX", "OO ", "   "], mover=Mark.O)

    def read(prompt):
        raise AssertionError("should not prompt once the game is over")

    with pytest.raises(TicTacToeError, match="Game is already over!"):
        read_human_move(board, read=read)


def test_game_passes_its_validator_to_human_input(monkeypatch):
    game = TicTacToeGame(config=SearchConfig(depth=1, prune=True))
    game.validator = RecordingValidator()
    answers = iter(["b2", "b2", "a3"])

    def read_then_stop(prompt):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", read_then_stop)

    with pytest.raises(MalformedInputError):
        game.play()

    checked = [move for move, _ in game.validator.checked]
    assert checked[0] == (1, 1)
    assert (1, 1) in checked[1:]


def test_announce_result():
    assert announce_result(Board.from_rows(["XXX", "OO ", "   "], mover=Mark.O)) == "X wins!"
    assert announce_result(Board.from_rows(["XX ", "OOO", "X  "])) == "O wins!"
    assert announce_result(Board.from_rows(["XOX", "XOO", "OXX"])) == "Tie!"


# ==================== GAME LOOP ====================

def test_self_play_ends_in_tie(capsys):
    config = SearchConfig(depth=7, prune=True)
    game = TicTacToeGame(config=config, self_play=True, rng=random.Random(1))

    assert game.play() == "Tie!"

    out = lines_of(capsys.readouterr().out)
    assert out[-1] == "Tie!"
    assert out[0].startswith("X plays ")
    assert game.board.is_full()


def test_human_game_against_ai(monkeypatch, capsys):
    """Human always takes the first empty cell; the AI must not lose."""
    config = SearchConfig(depth=7, prune=True, verbose=True)
    game = TicTacToeGame(config=config, human_mark=Mark.X)

    monkeypatch.setattr(
        "builtins.input",
        lambda prompt: format_move(*game.board.get_empty_cells()[0])
    )

    result = game.play()
    assert result in ("O wins!", "Tie!")

    out = capsys.readouterr().out
    assert "O plays " in out
    assert "nodes for this move." in out
    assert lines_of(out)[-1] == result


def test_ai_moves_first_when_human_plays_o(monkeypatch, capsys):
    def no_more_input(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)
    game = TicTacToeGame(config=SearchConfig(depth=2, prune=True), human_mark=Mark.O)

    with pytest.raises(MalformedInputError):
        game.play()

    assert "X plays " in capsys.readouterr().out
    assert game.board.count(Mark.X) == 1
    assert game.board.mover == Mark.O


# ==================== COMMAND LINE ====================

def test_parse_depth():
    assert parse_depth("3") == 3


@pytest.mark.parametrize("argv", [["-d", "8"], ["-d", "-1"], ["-d", "x"]])
def test_bad_depth_prints_message_and_exits_zero(argv, capsys):
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "The depth argument must be between 0 and 7 inclusive." in out


@pytest.mark.parametrize("argv", [["-h"], ["-z"]])
def test_help_and_unknown_flags_print_usage(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 0
    assert "usage:" in capsys.readouterr().out


def test_cli_self_play(capsys):
    assert main(["-s", "-p", "-v", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Minimax expanded" in out
    assert lines_of(out)[-1] == "Tie!"


def test_cli_stops_on_end_of_input(monkeypatch, capsys):
    def no_more_input(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)
    assert main([]) == 0
    assert "Input ended before a move was entered." in capsys.readouterr().out
