"""
Smoke tests for the TicTacToe modules.
Checks that every component imports and works together before playing.
"""

import pytest


def test_game_config():
    """Test game configuration."""
    from game.config import GameConfig
    config = GameConfig()
    assert config.BOARD_SIZE == 3
    assert config.MAX_MOVES == 9
    assert config.WIN_SUM == 3
    assert config.DEBUG_MODE is False


def test_render_config():
    """Test rendering configuration."""
    from view.config import RenderConfig
    config = RenderConfig()
    assert config.IMAGE_SIZE_PX == config.CELL_SIZE_PX * 3 + 2 * config.MARGIN_PX


def test_game_logic():
    """Test game logic components together."""
    from game import (
        GameMode, TicTacToe, WinChecker, MinimaxSearch, Seat, create_players,
        __version__,
    )

    assert __version__

    import random
    ann, computer = create_players(GameMode.ONE_PLAYER, "Ann", rng=random.Random(0))
    game = TicTacToe(first_player=ann, second_player=computer)
    game.start()

    # Whoever holds X, it is the human's turn once start() returns
    assert game.current_player is ann

    x, y = game.board.empty_cells()[0]
    game.apply_move(x, y)
    assert game.move_count in (2, 3)

    checker = WinChecker()
    assert checker.winning_mark(game.board) is None

    search = MinimaxSearch({Seat.FIRST: ann, Seat.SECOND: computer})
    assert search.winner_seat(game.board) is None


def test_renderer():
    """Test the board renderer."""
    from game.board import Board
    from view import BoardRenderer
    image = BoardRenderer().render(Board())
    assert image.mode == "RGB"


def test_ui_imports():
    """Test that the Tkinter UI module loads (needs Tk)."""
    pytest.importorskip("tkinter")
    pytest.importorskip("PIL.ImageTk")
    import ui
    assert hasattr(ui, "TicTacToeUI")
