"""
Game configuration for NxN TicTacToe.
Board size, scoring and display settings.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the game!
    """

    # ==================== BOARD SETTINGS ====================
    # Default board is the classic 3x3 grid
    BOARD_SIZE = 3

    # Three in a row needs at least a 3x3 board
    MIN_BOARD_SIZE = 3

    # Marks in a row needed to win (fixed)
    WIN_LENGTH = 3

    # ==================== SEARCH SETTINGS ====================
    # Score of a win at depth 0. Depth is subtracted so faster wins score higher
    # and slower losses score higher than fast ones.
    WIN_SCORE = 100
    TIE_SCORE = 0

    # ==================== DISPLAY SETTINGS ====================
    # Characters used when printing the board
    EMPTY_SYMBOL = "_"
    SYMBOLS = {
        1: "X",    # Player.X in Board.as_grid()
        -1: "O",   # Player.O
        0: EMPTY_SYMBOL,
    }

    # ==================== UI SETTINGS ====================
    UI_BACKGROUND = '#1a1a2e'
    UI_CELL_BACKGROUND = '#16213e'
    UI_TITLE_COLOR = '#00d4ff'
    UI_STATUS_COLOR = '#ffd700'
    UI_X_COLORS = ('#065f46', '#10b981')   # (bg, fg)
    UI_O_COLORS = ('#7f1d1d', '#f87171')
    UI_WIN_BACKGROUND = '#b45309'
    UI_FONT = 'Segoe UI'

    # Cell font shrinks as the board grows
    UI_CELL_FONT_SIZE = 24
    UI_MIN_CELL_FONT_SIZE = 10

    def cell_font_size(self, size: int) -> int:
        """
        Font size for board cells on a size x size board.

        Args:
            size: Board width in cells.

        Returns:
            Font size in points.
        """
        scaled = self.UI_CELL_FONT_SIZE * self.BOARD_SIZE // max(size, 1)
        return max(self.UI_MIN_CELL_FONT_SIZE, min(self.UI_CELL_FONT_SIZE, scaled))
