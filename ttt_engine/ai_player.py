"""
AI player for NxN TicTacToe.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

from typing import Optional
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, GameState, Player
from .win_checker import OutcomeKind, WinChecker

# Index reported for terminal positions, where there is nothing to play
NO_MOVE = -1


@dataclass(frozen=True)
class Move:
    """A candidate move and its minimax score."""
    score: int
    index: int


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search always runs to the end of the game, so the AI plays
    perfectly: it wins if it can, blocks if it must, and never loses a
    position that can be held.
    """

    def __init__(
        self,
        player: Optional[Player] = None,
        config: Optional[GameConfig] = None,
        verbose: bool = False
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls. None means whoever is
                on move when get_best_move is called.
            config: Game configuration (scores). Uses defaults if not provided.
            verbose: Print a line about every search.
        """
        self.player = player
        self.config = config or GameConfig()
        self.verbose = verbose
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state. Not modified.

        Returns:
            Cell offset of the best move, or None if there is no move to make.
        """
        player = self.player or game_state.turn

        # Check if it's our turn
        if game_state.turn != player:
            print(f"Warning: It's not {player.value}'s turn!")
            return None

        if self.win_checker.detect(game_state.board).is_terminal:
            return None

        return self.best_move(game_state.board, player).index

    def best_move(
        self,
        board: Board,
        perspective: Player,
        depth: int = 0,
        pruning: bool = True
    ) -> Move:
        """
        Find the best move for perspective on board.

        Args:
            board: Position to search. Not modified.
            perspective: Player the search is maximizing for. Moves first.
            depth: Depth of this position, used to offset win/loss scores.
            pruning: Use alpha-beta pruning. Switching it off changes only
                the amount of work, never the result.

        Returns:
            The chosen Move. On equal scores the lowest cell offset wins.

        Raises:
            ValueError: If the game on board is already over.
        """
        if self.win_checker.detect(board).is_terminal:
            raise ValueError("Cannot search a finished game")

        self.moves_evaluated = 0
        move = self._minimax(
            board, perspective, depth,
            is_maximizing=True,
            alpha=float('-inf'),
            beta=float('inf'),
            pruning=pruning
        )

        if self.verbose:
            print(f"AI evaluated {self.moves_evaluated} positions. "
                  f"Best move: {move.index} (score: {move.score})")

        return move

    def _score(self, winner: Player, perspective: Player, depth: int) -> int:
        """Win score, shrinking with depth so quick wins and slow losses are preferred."""
        if winner == perspective:
            return self.config.WIN_SCORE - depth
        return -self.config.WIN_SCORE + depth

    def _minimax(
        self,
        board: Board,
        perspective: Player,
        depth: int,
        is_maximizing: bool,
        alpha: float,
        beta: float,
        pruning: bool
    ) -> Move:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Current position to evaluate.
            perspective: The maximizing player.
            depth: Plies played since the start of the game.
            is_maximizing: True if perspective is on move here.
            alpha: Best score the maximizer can already guarantee.
            beta: Best score the minimizer can already guarantee.
            pruning: Cut off siblings once beta <= alpha.

        Returns:
            Best Move at this node (index NO_MOVE for terminal positions).
        """
        self.moves_evaluated += 1

        # Check terminal states
        outcome = self.win_checker.detect(board)

        if outcome.kind == OutcomeKind.WIN:
            return Move(self._score(outcome.winner, perspective, depth), NO_MOVE)
        elif outcome.kind == OutcomeKind.TIE:
            return Move(self.config.TIE_SCORE, NO_MOVE)

        best: Optional[Move] = None

        if is_maximizing:
            for index in board.get_empty_cells():
                new_board = board.copy()
                new_board.place(index, perspective)
                score = self._minimax(
                    new_board, perspective, depth + 1, False, alpha, beta, pruning
                ).score
                # Strict comparison keeps the first index on equal scores
                if best is None or score > best.score:
                    best = Move(score, index)
                alpha = max(alpha, score)
                if pruning and beta <= alpha:
                    break  # Prune
        else:
            opponent = perspective.opposite()
            for index in board.get_empty_cells():
                new_board = board.copy()
                new_board.place(index, opponent)
                score = self._minimax(
                    new_board, perspective, depth + 1, True, alpha, beta, pruning
                ).score
                if best is None or score < best.score:
                    best = Move(score, index)
                beta = min(beta, score)
                if pruning and beta <= alpha:
                    break  # Prune

        return best


def best_move(
    board: Board,
    perspective: Player,
    depth: int = 0,
    pruning: bool = True
) -> Move:
    """Search board with a default AIPlayer (see AIPlayer.best_move)."""
    return AIPlayer().best_move(board, perspective, depth, pruning)
