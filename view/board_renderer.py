"""
Board renderer for TicTacToe.
Draws the current board into a Pillow image for the UI.
"""

from typing import Iterable, Optional, Tuple

from PIL import Image, ImageDraw

from game.board import Board
from game.players import Mark

from .config import RenderConfig


class BoardRenderer:
    """
    Draws the 3x3 board with X and O marks.

    The image is square; the grid sits inside a margin, and cell (0, 0) is
    the top-left one.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def cell_box(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Pixel box (left, top, right, bottom) of a cell."""
        cfg = self.config
        left = cfg.MARGIN_PX + x * cfg.CELL_SIZE_PX
        top = cfg.MARGIN_PX + y * cfg.CELL_SIZE_PX
        return left, top, left + cfg.CELL_SIZE_PX, top + cfg.CELL_SIZE_PX

    def cell_at(self, px: int, py: int) -> Optional[Tuple[int, int]]:
        """
        Map a pixel (e.g. a mouse click) to a board cell.

        Returns:
            (x, y) of the cell, or None if the pixel is in the margin.
        """
        cfg = self.config
        gx = px - cfg.MARGIN_PX
        gy = py - cfg.MARGIN_PX
        if gx < 0 or gy < 0:
            return None

        x = gx // cfg.CELL_SIZE_PX
        y = gy // cfg.CELL_SIZE_PX
        if x >= cfg.BOARD_SIZE or y >= cfg.BOARD_SIZE:
            return None
        return int(x), int(y)

    def render(
        self,
        board: Board,
        winning_line: Optional[Iterable[Tuple[int, int]]] = None
    ) -> Image.Image:
        """
        Draw the board.

        Args:
            board: The board to draw.
            winning_line: Cells to highlight, if somebody won.

        Returns:
            RGB image of size IMAGE_SIZE_PX x IMAGE_SIZE_PX.
        """
        cfg = self.config
        image = Image.new("RGB", (cfg.IMAGE_SIZE_PX, cfg.IMAGE_SIZE_PX), cfg.BACKGROUND_COLOR)
        draw = ImageDraw.Draw(image)

        highlighted = set(winning_line or [])

        # Cell backgrounds
        for y in range(cfg.BOARD_SIZE):
            for x in range(cfg.BOARD_SIZE):
                fill = cfg.HIGHLIGHT_COLOR if (x, y) in highlighted else cfg.CELL_COLOR
                draw.rectangle(self.cell_box(x, y), fill=fill)

        self._draw_grid(draw)

        # Marks
        for y in range(cfg.BOARD_SIZE):
            for x in range(cfg.BOARD_SIZE):
                value = board[x, y]
                if value == 0:
                    continue
                if Mark.from_int(value).is_cross:
                    self._draw_cross(draw, x, y)
                else:
                    self._draw_zero(draw, x, y)

        return image

    def _draw_grid(self, draw: ImageDraw.ImageDraw):
        cfg = self.config
        start = cfg.MARGIN_PX
        end = cfg.MARGIN_PX + cfg.BOARD_SIZE * cfg.CELL_SIZE_PX

        for i in range(1, cfg.BOARD_SIZE):
            offset = cfg.MARGIN_PX + i * cfg.CELL_SIZE_PX
            draw.line([(offset, start), (offset, end)], fill=cfg.GRID_COLOR, width=cfg.GRID_WIDTH_PX)
            draw.line([(start, offset), (end, offset)], fill=cfg.GRID_COLOR, width=cfg.GRID_WIDTH_PX)

    def _inner_box(self, x: int, y: int) -> Tuple[int, int, int, int]:
        pad = self.config.MARK_PADDING_PX
        left, top, right, bottom = self.cell_box(x, y)
        return left + pad, top + pad, right - pad, bottom - pad

    def _draw_cross(self, draw: ImageDraw.ImageDraw, x: int, y: int):
        left, top, right, bottom = self._inner_box(x, y)
        width = self.config.MARK_WIDTH_PX
        color = self.config.CROSS_COLOR
        draw.line([(left, top), (right, bottom)], fill=color, width=width)
        draw.line([(left, bottom), (right, top)], fill=color, width=width)

    def _draw_zero(self, draw: ImageDraw.ImageDraw, x: int, y: int):
        draw.ellipse(
            self._inner_box(x, y),
            outline=self.config.ZERO_COLOR,
            width=self.config.MARK_WIDTH_PX
        )
