"""
Board for TicTacToe.
A 3x3 grid of numeric marks: 0 empty, +1 cross, -1 zero.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple

EMPTY = 0

# All possible lines as lists of (x, y) cells, in line_sums() order
LINES = [
    # Rows
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    # Columns
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    # Diagonals
    [(0, 0), (1, 1), (2, 2)],
    [(2, 0), (1, 1), (0, 2)],
]


class Board:
    """
    The 3x3 grid.

    Cells are addressed as board[x, y] where x is the column and y the row,
    with (0, 0) in the top-left corner.
    """

    SIZE = 3

    def __init__(self, cells: Optional[List[List[int]]] = None):
        # Stored row-major: self._cells[y][x]
        self._cells = cells if cells is not None else [
            [EMPTY for _ in range(self.SIZE)] for _ in range(self.SIZE)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """
        Build a board from three rows of three values each.

        Raises:
            ValueError: If the shape or a value is wrong.
        """
        if len(rows) != cls.SIZE or any(len(row) != cls.SIZE for row in rows):
            raise ValueError("Board must be 3 rows of 3 cells")
        for row in rows:
            for value in row:
                if value not in (EMPTY, 1, -1):
                    raise ValueError(f"Invalid cell value {value!r}")
        return cls([list(row) for row in rows])

    def __getitem__(self, cell: Tuple[int, int]) -> int:
        x, y = cell
        return self._cells[y][x]

    def __setitem__(self, cell: Tuple[int, int], value: int):
        x, y = cell
        self._cells[y][x] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self._cells!r})"

    @classmethod
    def in_bounds(cls, x: int, y: int) -> bool:
        if not isinstance(x, int) or not isinstance(y, int):
            return False
        return 0 <= x < cls.SIZE and 0 <= y < cls.SIZE

    def place(self, x: int, y: int, value: int):
        """Write a numeric mark into a cell (overwrites whatever is there)."""
        self._cells[y][x] = value

    def clear_cell(self, x: int, y: int):
        self._cells[y][x] = EMPTY

    def clear(self):
        """Empty every cell in place."""
        for row in self._cells:
            for x in range(self.SIZE):
                row[x] = EMPTY

    @contextmanager
    def placed(self, x: int, y: int, value: int) -> Iterator["Board"]:
        """
        Put a mark down for the duration of a with-block.

        The previous cell value is restored on every exit, including
        exceptions.
        """
        previous = self._cells[y][x]
        self._cells[y][x] = value
        try:
            yield self
        finally:
            self._cells[y][x] = previous

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (x, y) tuples in row-major order.
        """
        empty = []
        for y, row in enumerate(self._cells):
            for x, value in enumerate(row):
                if value == EMPTY:
                    empty.append((x, y))
        return empty

    def filled_count(self) -> int:
        return sum(1 for row in self._cells for value in row if value != EMPTY)

    def is_full(self) -> bool:
        return all(value != EMPTY for row in self._cells for value in row)

    def line_sums(self) -> List[int]:
        """
        Sum of every line: three rows, three columns, then both diagonals.
        """
        c = self._cells
        rows = [sum(row) for row in c]
        cols = [c[0][x] + c[1][x] + c[2][x] for x in range(self.SIZE)]
        main_diag = c[0][0] + c[1][1] + c[2][2]
        anti_diag = c[0][2] + c[1][1] + c[2][0]
        return rows + cols + [main_diag, anti_diag]

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        """Read-only snapshot of the grid, row by row."""
        return tuple(tuple(row) for row in self._cells)

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        return Board([list(row) for row in self._cells])
