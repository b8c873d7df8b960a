"""
Game state management for NxN TicTacToe.
Tracks the board and whose turn it is.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# A cell is either empty (None) or marked by a player
Cell = Optional[Player]

# Characters accepted as empty cells by Board.from_string
EMPTY_CHARS = "_.- "

# Values used by Board.as_grid()
GRID_VALUES = {None: 0, Player.X: 1, Player.O: -1}


@dataclass
class Board:
    """
    An N x N TicTacToe board.

    Cells are stored as one flat list and addressed by a linear offset
    (row * size + col). Rows, columns and diagonals are never stored.
    """

    size: int = GameConfig.BOARD_SIZE
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self):
        if self.size < GameConfig.MIN_BOARD_SIZE:
            raise ValueError(
                f"Board size must be at least {GameConfig.MIN_BOARD_SIZE}, got {self.size}"
            )
        if not self.cells:
            self.cells = [None] * (self.size * self.size)
        elif len(self.cells) != self.size * self.size:
            raise ValueError(
                f"A {self.size}x{self.size} board needs {self.size * self.size} cells, "
                f"got {len(self.cells)}"
            )

    @classmethod
    def empty(cls, size: int = GameConfig.BOARD_SIZE) -> "Board":
        """Create an empty board."""
        return cls(size)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a picture of it.

        Rows are separated by "/" or newlines. "X" and "O" are marks,
        any of "_.- " is an empty cell. Example: "XOX/OXO/__O".

        Args:
            text: The board picture.

        Returns:
            The board. The size is the number of rows.
        """
        rows = [row for row in text.replace("/", "\n").split("\n") if row.strip()]
        cells: List[Cell] = []
        for row in rows:
            if len(row) != len(rows):
                raise ValueError(f"Row {row!r} does not match board size {len(rows)}")
            for char in row.upper():
                if char in EMPTY_CHARS:
                    cells.append(None)
                elif char in ("X", "O"):
                    cells.append(Player(char))
                else:
                    raise ValueError(f"Unknown cell character {char!r}")
        return cls(len(rows), cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def place(self, index: int, player: Player):
        """Put a player's mark on a cell (no checks)."""
        self.cells[index] = player

    def row_col(self, index: int) -> Tuple[int, int]:
        """Convert a linear offset to (row, col)."""
        return divmod(index, self.size)

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell offsets in scan order (left to right, top to bottom).
        """
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def count(self, player: Player) -> int:
        return sum(1 for cell in self.cells if cell == player)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(self.size, list(self.cells))

    def swapped(self) -> "Board":
        """Copy of the board with every X turned into O and vice versa."""
        return Board(
            self.size,
            [None if cell is None else cell.opposite() for cell in self.cells]
        )

    def as_grid(self) -> np.ndarray:
        """
        The board as a size x size array.

        Returns:
            int8 array: 1 for X, -1 for O, 0 for empty.
        """
        flat = np.array([GRID_VALUES[cell] for cell in self.cells], dtype=np.int8)
        return flat.reshape(self.size, self.size)


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The N x N board
    - Whose turn it is

    The game result is never stored here, WinChecker derives it from the board.
    """

    board: Board = field(default_factory=Board)

    # X always moves first
    turn: Player = Player.X

    @classmethod
    def new(cls, size: int = GameConfig.BOARD_SIZE) -> "GameState":
        """Create a fresh game: empty board, X to move."""
        return cls(Board.empty(size), Player.X)

    @classmethod
    def from_string(cls, text: str, turn: Optional[Player] = None) -> "GameState":
        """
        Create a game from a board picture (see Board.from_string).

        Args:
            text: The board picture.
            turn: Player to move. If None, X moves when both players have
                placed the same number of marks, otherwise O.
        """
        board = Board.from_string(text)
        if turn is None:
            turn = Player.X if board.count(Player.X) <= board.count(Player.O) else Player.O
        return cls(board, turn)

    @property
    def size(self) -> int:
        return self.board.size

    def reset(self):
        """Start over with an empty board of the same size."""
        self.board = Board.empty(self.board.size)
        self.turn = Player.X

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(self.board.copy(), self.turn)
