"""
Game session for NxN TicTacToe.
The small command surface drivers talk to: move, reset, AI move, render.
"""

from enum import Enum
from typing import Optional, Tuple

from .ai_player import AIPlayer, Move
from .config import GameConfig
from .game_state import Cell, GameState, Player
from .move_validator import MoveApplier, MoveResult
from .win_checker import Outcome, OutcomeKind, WinChecker


class GamePhase(Enum):
    """Where a game session stands."""
    EMPTY = "empty"
    IN_PROGRESS = "in progress"
    WON = "won"
    TIE = "tie"


class GameSession:
    """
    One game of TicTacToe between two players, either of which can be the AI.

    Game flow:
    1. A player moves with apply_move(index), or asks the AI with ai_move()
    2. The session plays the move and reports the outcome
    3. Repeat until someone wins or it's a draw, then reset()

    The session does not refuse moves after the game is over; check
    is_game_over (or phase) first.
    """

    def __init__(
        self,
        size: int = GameConfig.BOARD_SIZE,
        config: Optional[GameConfig] = None,
        verbose: bool = False
    ):
        """
        Start a session with an empty board.

        Args:
            size: Board width in cells (at least 3).
            config: Game configuration. Uses defaults if not provided.
            verbose: Print AI search statistics.
        """
        self.config = config or GameConfig()
        self.game_state = GameState.new(size)
        self.applier = MoveApplier()
        self.win_checker = self.applier.win_checker
        self.ai = AIPlayer(config=self.config, verbose=verbose)
        self.last_ai_move: Optional[Move] = None

    @classmethod
    def from_string(
        cls,
        text: str,
        turn: Optional[Player] = None,
        **kwargs
    ) -> "GameSession":
        """Start a session from a board picture (see GameState.from_string)."""
        game_state = GameState.from_string(text, turn)
        session = cls(game_state.size, **kwargs)
        session.game_state = game_state
        return session

    @property
    def size(self) -> int:
        return self.game_state.size

    @property
    def turn(self) -> Player:
        return self.game_state.turn

    @property
    def outcome(self) -> Outcome:
        return self.win_checker.detect(self.game_state.board)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def phase(self) -> GamePhase:
        outcome = self.outcome
        if outcome.kind == OutcomeKind.WIN:
            return GamePhase.WON
        if outcome.kind == OutcomeKind.TIE:
            return GamePhase.TIE
        if not any(cell is not None for cell in self.game_state.board.cells):
            return GamePhase.EMPTY
        return GamePhase.IN_PROGRESS

    def apply_move(self, index: int) -> MoveResult:
        """Play the current player's mark at index."""
        return self.applier.apply(self.game_state, index)

    def reset(self):
        """Empty the board (same size), X to move."""
        self.game_state.reset()
        self.last_ai_move = None

    def ai_move(self) -> Optional[MoveResult]:
        """
        Let the AI play the side on move.

        Returns:
            Result of the AI's move, or None if the game is already over.
        """
        if self.is_game_over:
            return None

        move = self.ai.best_move(self.game_state.board, self.game_state.turn)
        self.last_ai_move = move
        return self.apply_move(move.index)

    def render(self) -> Tuple[Cell, ...]:
        """The board cells in scan order (None for empty)."""
        return tuple(self.game_state.board.cells)
