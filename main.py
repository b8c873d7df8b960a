"""
Console driver for NxN TicTacToe.

Reads one command per line:
- a cell number (0 .. N*N - 1) plays a move for the player on turn
- N*N or "reset" starts a new game
- N*N + 1 or "ai" lets the AI play the player on turn
- N*N + 2, "quit" or "q" exits

Run this script to play TicTacToe against the AI!
"""

import sys
from typing import Optional, TextIO

from ttt_engine.config import GameConfig
from ttt_engine.game_state import Board
from ttt_engine.move_validator import MoveResult
from ttt_engine.session import GameSession
from ttt_engine.win_checker import OutcomeKind


def format_board(board: Board, config: Optional[GameConfig] = None) -> str:
    """
    Draw the board as text, one row per line.

    Args:
        board: The board to draw.
        config: Supplies the symbols. Uses defaults if not provided.
    """
    config = config or GameConfig()
    grid = board.as_grid()
    return "\n".join(
        " ".join(config.SYMBOLS[int(value)] for value in row)
        for row in grid
    )


class ConsoleDriver:
    """
    Plays a GameSession from a line-oriented text stream.
    """

    WORD_COMMANDS = ("reset", "ai", "quit", "q")

    def __init__(self, session: GameSession, debug: bool = False):
        """
        Args:
            session: The game to drive.
            debug: Print the AI's chosen move and score.
        """
        self.session = session
        self.debug = debug

    @property
    def reset_code(self) -> int:
        return self.session.size * self.session.size

    def handle_command(self, line: str) -> bool:
        """
        Run one command.

        Args:
            line: The raw input line.

        Returns:
            False if the driver should stop, True otherwise.
        """
        command = line.strip().lower()
        if not command:
            return True

        if command in self.WORD_COMMANDS:
            code = {
                "reset": self.reset_code,
                "ai": self.reset_code + 1,
                "quit": self.reset_code + 2,
                "q": self.reset_code + 2,
            }[command]
        else:
            try:
                code = int(command)
            except ValueError:
                print(f"Please type a cell number 0-{self.reset_code - 1}, "
                      f"or one of: {', '.join(self.WORD_COMMANDS)}")
                return True

        if code == self.reset_code:
            self.session.reset()
            return True
        if code == self.reset_code + 2:
            return False

        if self.session.is_game_over:
            print("Game is already over! Type reset to play again.")
            return True

        if code == self.reset_code + 1:
            result = self.session.ai_move()
            if self.debug:
                print(self.session.last_ai_move)
        else:
            result = self.session.apply_move(code)

        self._show_result(result)
        return True

    def _show_result(self, result: MoveResult):
        """Print the board after a move, or the error."""
        if not result.ok:
            print(f"Error: {result.error_message}")
            return

        print(format_board(self.session.game_state.board, self.session.config))

        if result.outcome.kind == OutcomeKind.WIN:
            print(f"Player {result.outcome.winner.value} won!")
        elif result.outcome.kind == OutcomeKind.TIE:
            print("It's a tie!")

    def run(self, stream: Optional[TextIO] = None):
        """Read commands until quit or end of input."""
        stream = stream or sys.stdin
        for line in stream:
            if not self.handle_command(line):
                break


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="NxN TicTacToe against a perfect AI")
    parser.add_argument(
        "--size",
        type=int,
        default=GameConfig.BOARD_SIZE,
        help="Board width in cells (at least 3)"
    )
    parser.add_argument(
        "--ui",
        action="store_true",
        help="Play in a window instead of the console"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X) in the window"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the AI's chosen move and search statistics"
    )

    args = parser.parse_args(argv)

    if args.size < GameConfig.MIN_BOARD_SIZE:
        parser.error(f"--size must be at least {GameConfig.MIN_BOARD_SIZE}")

    if args.ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(size=args.size, ai_first=args.ai_first, verbose=args.debug)
        ui.run()
        return 0

    session = GameSession(args.size, verbose=args.debug)
    cells = args.size * args.size

    print("\n" + "="*60)
    print(f"   TicTacToe {args.size}x{args.size}")
    print(f"   0-{cells - 1}: move   {cells}: reset   {cells + 1}: AI move   {cells + 2}: quit")
    print("="*60 + "\n")

    try:
        ConsoleDriver(session, debug=args.debug).run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
