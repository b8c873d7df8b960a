"""
Win checker for NxN TicTacToe.
Checks if a player has three in a row or if the game is a draw.
"""

from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, Player

Line = Tuple[int, int, int]


class OutcomeKind(Enum):
    """How a game stands."""
    WIN = "win"
    TIE = "tie"
    ONGOING = "ongoing"


@dataclass(frozen=True)
class Outcome:
    """
    Result of checking a board.

    Only WIN carries a winner.
    """
    kind: OutcomeKind
    winner: Optional[Player] = None

    @classmethod
    def win(cls, player: Player) -> "Outcome":
        return cls(OutcomeKind.WIN, player)

    @classmethod
    def tie(cls) -> "Outcome":
        return cls(OutcomeKind.TIE)

    @classmethod
    def ongoing(cls) -> "Outcome":
        return cls(OutcomeKind.ONGOING)

    @property
    def is_terminal(self) -> bool:
        """True for a win or a tie."""
        return self.kind != OutcomeKind.ONGOING

    def __str__(self) -> str:
        if self.kind == OutcomeKind.WIN:
            return f"Win({self.winner.value})"
        return self.kind.value.capitalize()


@lru_cache(maxsize=None)
def winning_lines(size: int) -> Tuple[Line, ...]:
    """
    All runs of three cells on a size x size board.

    Runs are generated stride by stride: horizontal (1), vertical (size),
    diagonal (size + 1) and anti-diagonal (size - 1). Start positions are
    bounded so a run never wraps from the end of one row into the next.

    Args:
        size: Board width in cells.

    Returns:
        Tuple of (a, b, c) cell offsets.
    """
    span = GameConfig.WIN_LENGTH - 1
    last = size - span  # first row/col a run can NOT start on

    lines = []
    # Rows
    for row in range(size):
        for col in range(last):
            start = row * size + col
            lines.append((start, start + 1, start + 2))
    # Columns
    for row in range(last):
        for col in range(size):
            start = row * size + col
            lines.append((start, start + size, start + 2 * size))
    # Diagonals
    for row in range(last):
        for col in range(last):
            start = row * size + col
            step = size + 1
            lines.append((start, start + step, start + 2 * step))
    # Anti-diagonals
    for row in range(last):
        for col in range(span, size):
            start = row * size + col
            step = size - 1
            lines.append((start, start + step, start + 2 * step))

    return tuple(lines)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally), on any board size.
    """

    def detect(self, board: Board) -> Outcome:
        """
        Work out how the game stands.

        Args:
            board: The board to check.

        Returns:
            Win(player) if someone has three in a row, Tie if the board is
            full otherwise, Ongoing in every other case.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.win(winner)
        if board.is_full():
            return Outcome.tie()
        return Outcome.ongoing()

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no winner."""
        return board.is_full() and self.check_winner(board) is None

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The first winning line in scan order, or None.
        """
        cells = board.cells
        for a, b, c in winning_lines(board.size):
            mark = cells[a]
            if mark is not None and mark == cells[b] == cells[c]:
                return (a, b, c)
        return None
