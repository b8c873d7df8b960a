"""
NxN TicTacToe engine.
Handles game state, rules, and a perfect-play AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import Board, GameState, Player
from .win_checker import Outcome, OutcomeKind, WinChecker, winning_lines
from .move_validator import MoveApplier, MoveError, MoveResult, MoveValidator, ValidationResult
from .ai_player import AIPlayer, Move, best_move
from .session import GamePhase, GameSession
