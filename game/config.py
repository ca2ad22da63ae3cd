"""
Game configuration for TicTacToe.
All the settings for the board, rules, and diagnostics.
"""


class GameConfig:
    """
    Configuration class for the game engine.
    Change these values on an instance (or subclass) to tweak behaviour.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # One mark per cell, so the game can't last longer than this
    MAX_MOVES = BOARD_SIZE * BOARD_SIZE  # 9

    # Line sum that means one mark filled a whole line (+3 cross, -3 zero)
    WIN_SUM = BOARD_SIZE

    # ==================== PLAYER SETTINGS ====================
    # Display name of the computer opponent in one-player mode
    COMPUTER_NAME = "computer"

    # ==================== DEBUG SETTINGS ====================
    # Print search statistics and ignored moves to the console
    DEBUG_MODE = False
