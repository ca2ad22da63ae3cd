"""
Tests for the board and the win checker.
"""

import pytest

from game.board import Board, LINES
from game.players import Mark
from game.win_checker import WinChecker

X = Mark.CROSS.to_int()
O = Mark.ZERO.to_int()


class TestBoard:
    def test_new_board_is_empty(self):
        board = Board()
        assert board.filled_count() == 0
        assert len(board.empty_cells()) == 9
        assert not board.is_full()

    def test_indexing_is_column_then_row(self):
        board = Board()
        board.place(2, 0, X)
        assert board[2, 0] == X
        assert board.rows()[0] == (0, 0, X)

    def test_empty_cells_row_major(self):
        board = Board.from_rows([
            [X, 0, 0],
            [0, O, 0],
            [0, 0, 0],
        ])
        assert board.empty_cells()[:3] == [(1, 0), (2, 0), (0, 1)]
        assert (1, 1) not in board.empty_cells()

    def test_from_rows_rejects_bad_input(self):
        with pytest.raises(ValueError):
            Board.from_rows([[0, 0, 0], [0, 0, 0]])
        with pytest.raises(ValueError):
            Board.from_rows([[0, 0, 2], [0, 0, 0], [0, 0, 0]])

    def test_copy_is_independent(self):
        board = Board()
        copy = board.copy()
        copy.place(1, 1, X)
        assert board[1, 1] == 0
        assert copy != board

    def test_clear(self):
        board = Board.from_rows([[X, O, X], [O, X, O], [O, X, O]])
        assert board.is_full()
        board.clear()
        assert board == Board()

    def test_placed_restores_cell(self):
        board = Board()
        with board.placed(0, 2, O):
            assert board[0, 2] == O
        assert board[0, 2] == 0

    def test_placed_restores_on_error(self):
        board = Board()
        with pytest.raises(RuntimeError):
            with board.placed(1, 1, X):
                raise RuntimeError("boom")
        assert board == Board()

    def test_in_bounds(self):
        assert Board.in_bounds(0, 0)
        assert Board.in_bounds(2, 2)
        assert not Board.in_bounds(3, 0)
        assert not Board.in_bounds(0, -1)

    def test_in_bounds_needs_integers(self):
        assert not Board.in_bounds(1.0, 1)
        assert not Board.in_bounds(1, "1")

    def test_line_sums_order(self):
        board = Board.from_rows([
            [X, X, X],
            [O, O, 0],
            [0, 0, 0],
        ])
        sums = board.line_sums()
        assert sums[:3] == [3, -2, 0]           # rows
        assert sums[3:6] == [0, 0, 1]           # columns
        assert sums[6:] == [X + O, X + O]       # diagonals

    def test_lines_match_line_sums(self):
        board = Board.from_rows([
            [X, O, 0],
            [0, X, O],
            [O, 0, X],
        ])
        expected = [sum(board[x, y] for x, y in line) for line in LINES]
        assert board.line_sums() == expected


class TestWinChecker:
    def setup_method(self):
        self.checker = WinChecker()

    def test_row_win(self):
        board = Board.from_rows([
            [X, X, X],
            [0, O, 0],
            [O, 0, 0],
        ])
        assert self.checker.winning_mark(board) is Mark.CROSS
        assert self.checker.winning_line(board) == [(0, 0), (1, 0), (2, 0)]

    def test_column_win(self):
        board = Board.from_rows([
            [O, X, 0],
            [O, X, 0],
            [O, 0, X],
        ])
        assert self.checker.winning_mark(board) is Mark.ZERO
        assert self.checker.winning_line(board) == [(0, 0), (0, 1), (0, 2)]

    def test_diagonal_win(self):
        board = Board.from_rows([
            [X, O, 0],
            [0, X, O],
            [0, 0, X],
        ])
        assert self.checker.winning_mark(board) is Mark.CROSS

    def test_anti_diagonal_win(self):
        board = Board.from_rows([
            [X, X, O],
            [0, O, 0],
            [O, 0, X],
        ])
        assert self.checker.winning_mark(board) is Mark.ZERO
        assert self.checker.winning_line(board) == [(2, 0), (1, 1), (0, 2)]

    def test_no_winner(self):
        board = Board.from_rows([
            [X, O, 0],
            [0, O, 0],
            [0, 0, X],
        ])
        assert self.checker.winning_mark(board) is None
        assert self.checker.winning_line(board) is None
        assert not self.checker.is_terminal(board)

    def test_full_board_without_line_is_terminal(self):
        board = Board.from_rows([
            [X, O, X],
            [X, O, O],
            [O, X, X],
        ])
        assert self.checker.winning_mark(board) is None
        assert self.checker.is_terminal(board)

    def test_win_with_empty_cells_is_terminal(self):
        board = Board.from_rows([
            [X, 0, 0],
            [X, O, 0],
            [X, O, 0],
        ])
        assert self.checker.is_terminal(board)

    def test_reachable_boards_never_have_two_winners(self):
        """Walk every position reachable by alternating moves from X."""
        seen = set()

        def walk(board, value):
            key = board.rows()
            if key in seen:
                return
            seen.add(key)

            sums = board.line_sums()
            assert not (3 in sums and -3 in sums)

            if self.checker.is_terminal(board):
                return
            for x, y in board.empty_cells():
                with board.placed(x, y, value):
                    walk(board, -value)

        walk(Board(), X)
        # 5478 distinct legal positions in tic-tac-toe
        assert len(seen) == 5478
