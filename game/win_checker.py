"""
Win checker for TicTacToe.
Checks if a mark has completed a line.
"""

from typing import List, Optional, Tuple

from .board import Board, LINES
from .config import GameConfig
from .players import Mark


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Every line is summed using the numeric marks. A sum of +3 means three
    crosses, -3 means three zeros. A board reached by alternating single
    moves can't have both.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def winning_mark(self, board: Board) -> Optional[Mark]:
        """
        Check if a mark has completed a line.

        Args:
            board: The board to check.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        sums = board.line_sums()
        if max(sums) == self.config.WIN_SUM:
            return Mark.CROSS
        if min(sums) == -self.config.WIN_SUM:
            return Mark.ZERO
        return None

    def winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The cells of the first completed line as (x, y), or None.
        """
        for line, total in zip(LINES, board.line_sums()):
            if abs(total) == self.config.WIN_SUM:
                return list(line)
        return None

    def is_terminal(self, board: Board) -> bool:
        """No moves left or somebody already won."""
        return board.is_full() or self.winning_mark(board) is not None
