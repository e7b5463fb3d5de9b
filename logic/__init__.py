"""
Logic module for Minimax TicTacToe.
Handles the board, scoring, rules, and the AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig, SearchConfig
from .errors import TicTacToeError, InvalidDepthError, MalformedInputError
from .board import Board, Mark
from .evaluator import Evaluator
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, NodeCounter, SearchResult
