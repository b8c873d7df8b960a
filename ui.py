"""
TicTacToe UI
A graphical interface for NxN TicTacToe using Tkinter.

Shows:
- The board as a grid of buttons (click to move)
- Game status and whose turn it is
- The AI's last move
"""

import tkinter as tk
from tkinter import ttk
import threading
from typing import List, Optional

from ttt_engine.config import GameConfig
from ttt_engine.game_state import Player
from ttt_engine.move_validator import MoveResult
from ttt_engine.session import GamePhase, GameSession


class TicTacToeUI:
    """
    Main UI class for the TicTacToe game.
    """

    def __init__(
        self,
        size: int = GameConfig.BOARD_SIZE,
        ai_first: bool = False,
        config: Optional[GameConfig] = None,
        verbose: bool = False
    ):
        """Initialize the UI."""
        self.config = config or GameConfig()
        self.session = GameSession(size, config=self.config, verbose=verbose)
        self.human_player = Player.O if ai_first else Player.X
        self.robot_player = self.human_player.opposite()

        # Set while the AI is searching on its worker thread
        self.ai_thinking = False

        # Create UI
        self._create_ui()
        self._update_board_display()
        self._update_game_info()

        if self.session.turn == self.robot_player:
            self._start_ai_move()

    def _create_ui(self):
        """Create the Tkinter UI."""
        config = self.config
        size = self.session.size

        self.root = tk.Tk()
        self.root.title(f"TicTacToe {size}x{size}")
        self.root.configure(bg=config.UI_BACKGROUND)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=config.UI_BACKGROUND)
        style.configure('TLabel', background=config.UI_BACKGROUND, foreground='white',
                        font=(config.UI_FONT, 11))
        style.configure('Title.TLabel', font=(config.UI_FONT, 16, 'bold'),
                        foreground=config.UI_TITLE_COLOR)
        style.configure('Status.TLabel', font=(config.UI_FONT, 12),
                        foreground=config.UI_STATUS_COLOR)

        ttk.Label(main_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 10))

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        font_size = config.cell_font_size(size)
        self.board_cells: List[tk.Button] = []
        for index in range(size * size):
            row, col = divmod(index, size)
            cell = tk.Button(
                board_frame,
                text="",
                font=(config.UI_FONT, font_size, 'bold'),
                width=3,
                height=1,
                bg=config.UI_CELL_BACKGROUND,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Legend
        legend_frame = ttk.Frame(main_frame)
        legend_frame.pack(pady=5)
        ttk.Label(legend_frame, text=f"{self.human_player.value} = Human  ").pack(side=tk.LEFT)
        ttk.Label(legend_frame, text=f"{self.robot_player.value} = AI").pack(side=tk.LEFT)

        # Game status section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(main_frame, text="Turn: -")
        self.turn_label.pack()

        self.ai_move_label = ttk.Label(main_frame, text="AI move: -")
        self.ai_move_label.pack()

        # Control buttons
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        self.reset_btn = tk.Button(
            control_frame,
            text="🔄 Reset",
            font=(config.UI_FONT, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        )
        self.reset_btn.pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=(config.UI_FONT, 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Handle a human click on a cell."""
        if self.ai_thinking or self.session.is_game_over:
            return
        if self.session.turn != self.human_player:
            return

        result = self.session.apply_move(index)
        if not result.ok:
            self.status_label.configure(text=result.error_message)
            return

        self._after_move(result)

    def _after_move(self, result: MoveResult):
        """Refresh the display and hand over to the AI if needed."""
        self._update_board_display()
        self._update_game_info()

        if not result.outcome.is_terminal and self.session.turn == self.robot_player:
            self._start_ai_move()

    def _start_ai_move(self):
        """Run the AI search in a background thread."""
        self.ai_thinking = True
        self.status_label.configure(text="AI is thinking...")
        threading.Thread(target=self._ai_move, daemon=True).start()

    def _ai_move(self):
        """Compute and play the AI's move (runs in background thread)."""
        result = self.session.ai_move()
        self.root.after(0, lambda: self._finish_ai_move(result))

    def _finish_ai_move(self, result: Optional[MoveResult]):
        """Show the AI's move (runs on UI thread)."""
        self.ai_thinking = False
        move = self.session.last_ai_move
        if move is not None:
            row, col = divmod(move.index, self.session.size)
            self.ai_move_label.configure(text=f"AI move: ({row}, {col})  score {move.score}")
        if result is not None:
            self._after_move(result)

    def _update_board_display(self):
        """Update the board grid display."""
        config = self.config
        winning_line = self.session.win_checker.get_winning_line(self.session.game_state.board)

        for index, mark in enumerate(self.session.render()):
            cell = self.board_cells[index]
            if mark is None:
                cell.configure(text="", bg=config.UI_CELL_BACKGROUND)
                continue

            bg_color, fg_color = config.UI_X_COLORS if mark == Player.X else config.UI_O_COLORS
            if winning_line is not None and index in winning_line:
                bg_color = config.UI_WIN_BACKGROUND
            cell.configure(text=mark.value, bg=bg_color, fg=fg_color)

    def _update_game_info(self):
        """Update game status labels."""
        phase = self.session.phase

        if phase == GamePhase.WON:
            winner = self.session.outcome.winner
            winner_name = "Human" if winner == self.human_player else "AI"
            self.status_label.configure(text=f"🏆 {winner_name} WINS!")
            self.turn_label.configure(text="Game Over")
        elif phase == GamePhase.TIE:
            self.status_label.configure(text="🤝 It's a DRAW!")
            self.turn_label.configure(text="Game Over")
        else:
            current = "Human" if self.session.turn == self.human_player else "AI"
            self.turn_label.configure(text=f"Turn: {current} ({self.session.turn.value})")
            self.status_label.configure(
                text="Your move!" if phase == GamePhase.EMPTY else "Game in progress"
            )

    def _reset_game(self):
        """Reset the game."""
        if self.ai_thinking:
            return

        print("Resetting game...")
        self.session.reset()
        self.ai_move_label.configure(text="AI move: -")
        self._update_board_display()
        self._update_game_info()

        if self.session.turn == self.robot_player:
            self._start_ai_move()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="NxN TicTacToe UI")
    parser.add_argument(
        "--size",
        type=int,
        default=GameConfig.BOARD_SIZE,
        help="Board width in cells (at least 3)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )

    args = parser.parse_args()

    if args.size < GameConfig.MIN_BOARD_SIZE:
        parser.error(f"--size must be at least {GameConfig.MIN_BOARD_SIZE}")

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60)
    print(f"   Board: {args.size}x{args.size}")
    print(f"   AI plays: {'X' if args.ai_first else 'O'}")
    print("="*60 + "\n")

    ui = TicTacToeUI(size=args.size, ai_first=args.ai_first)
    ui.run()


if __name__ == "__main__":
    main()
