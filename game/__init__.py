"""
Game module for TicTacToe.
Handles the board, rules, engine, and the minimax opponent.
"""

from .config import GameConfig
from .players import Mark, GameMode, Seat, Player, create_players, random_marks
from .board import Board
from .win_checker import WinChecker
from .ai_player import MinimaxSearch, SearchResult
from .errors import InvariantViolation
from .engine import TicTacToe, GameListener, GameStatus

__version__ = "1.0.0"
