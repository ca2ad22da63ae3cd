"""
Rendering configuration for the TicTacToe board image.
Sizes are in pixels, colors are hex strings understood by Pillow and Tk.
"""


class RenderConfig:
    """
    Configuration for drawing the board.
    Change these values to restyle the UI.
    """

    # ==================== SIZE SETTINGS ====================
    BOARD_SIZE = 3
    CELL_SIZE_PX = 120
    MARGIN_PX = 10
    IMAGE_SIZE_PX = CELL_SIZE_PX * BOARD_SIZE + 2 * MARGIN_PX  # 380

    GRID_WIDTH_PX = 4
    MARK_WIDTH_PX = 10
    MARK_PADDING_PX = 25    # Space between a mark and its cell border

    # ==================== COLORS ====================
    BACKGROUND_COLOR = "#1a1a2e"
    CELL_COLOR = "#16213e"
    GRID_COLOR = "#00d4ff"
    CROSS_COLOR = "#f87171"
    ZERO_COLOR = "#10b981"
    HIGHLIGHT_COLOR = "#ffd700"
