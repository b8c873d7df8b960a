"""
Move validation and application for NxN TicTacToe.
Checks moves against the rules and plays them on the game state.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .game_state import GameState
from .win_checker import Outcome, WinChecker


class MoveError(Enum):
    """Why a move was refused."""
    PLACE_IS_OCCUPIED = "place is occupied"
    INDEX_OUT_OF_RANGE = "index out of range"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


@dataclass
class MoveResult:
    """
    Result of playing a move.

    Exactly one of outcome/error is set.
    """
    outcome: Optional[Outcome] = None
    error: Optional[MoveError] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, validation: ValidationResult) -> "MoveResult":
        return cls(error=validation.error, error_message=validation.error_message)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be on the board (0 .. N*N - 1)
    2. Can only place on empty cells

    Whether the game is already over is NOT checked here, that is up to
    whoever drives the game.
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell offset to place a mark on.

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        board = game_state.board

        # Check if index is in valid range
        if not 0 <= index < len(board):
            return ValidationResult(
                is_valid=False,
                error=MoveError.INDEX_OUT_OF_RANGE,
                error_message=f"Invalid position {index}. Must be 0-{len(board) - 1}."
            )

        # Check if cell is empty
        if board[index] is not None:
            row, col = board.row_col(index)
            return ValidationResult(
                is_valid=False,
                error=MoveError.PLACE_IS_OCCUPIED,
                error_message=f"Cell {index} ({row}, {col}) is already occupied by {board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            Empty cell offsets in scan order.
        """
        return game_state.board.get_empty_cells()


class MoveApplier:
    """
    Plays moves on a GameState.

    A move either fully happens (mark placed, turn switched, board checked)
    or the state is left exactly as it was.
    """

    def __init__(
        self,
        validator: Optional[MoveValidator] = None,
        win_checker: Optional[WinChecker] = None
    ):
        self.validator = validator or MoveValidator()
        self.win_checker = win_checker or WinChecker()

    def apply(self, game_state: GameState, index: int) -> MoveResult:
        """
        Place the current player's mark at index.

        The turn switches on every successful move, even one that ends the
        game.

        Args:
            game_state: The game to play on (mutated on success).
            index: Cell offset.

        Returns:
            MoveResult with the new outcome, or the error.
        """
        validation = self.validator.validate_move(game_state, index)
        if not validation.is_valid:
            return MoveResult.failed(validation)

        game_state.board.place(index, game_state.turn)
        game_state.turn = game_state.turn.opposite()

        return MoveResult(outcome=self.win_checker.detect(game_state.board))
