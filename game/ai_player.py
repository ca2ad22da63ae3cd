"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Dict, NamedTuple, Optional, Tuple

from .board import Board
from .config import GameConfig
from .errors import InvariantViolation
from .players import Mark, Player, Seat
from .win_checker import WinChecker

Cell = Tuple[int, int]

CROSS = Mark.CROSS.to_int()
ZERO = Mark.ZERO.to_int()


class SearchResult(NamedTuple):
    """Outcome of a search: score for the computer and the move that gets it."""
    score: int              # +1 computer wins, -1 computer loses, 0 draw
    move: Optional[Cell]    # (x, y), None only for a terminal root


class MinimaxSearch:
    """
    Plain minimax over every remaining cell.

    No pruning and no cache: the 3x3 tree is small enough to walk in full.
    The computer always sits in the second seat, so the score is +1 when the
    second player wins, -1 when the first player wins and 0 for a draw. The
    computer-controlled player maximizes, the human minimizes.

    Ties go to the first cell in row-major order: a later cell only replaces
    the chosen move when its score is strictly better.
    """

    COMPUTER_SEAT = Seat.SECOND

    def __init__(
        self,
        players: Dict[Seat, Player],
        win_checker: Optional[WinChecker] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the search.

        Args:
            players: Seat -> Player. Read on every call, so marks changed
                between games are picked up.
            win_checker: Shared checker (a new one if omitted).
            config: Game configuration.
        """
        self.players = players
        self.config = config or GameConfig()
        self.win_checker = win_checker or WinChecker(self.config)

        # How many positions the last get_best_move() looked at
        self.positions_evaluated = 0

    def winner_seat(self, board: Board) -> Optional[Seat]:
        """Seat of the player whose mark completed a line, if any."""
        mark = self.win_checker.winning_mark(board)
        if mark is None:
            return None
        return self._seats_by_value().get(mark.to_int())

    def _seats_by_value(self) -> Dict[int, Seat]:
        """Numeric mark -> seat holding it, for the current players."""
        return {player.mark.to_int(): seat for seat, player in self.players.items()}

    def search(
        self,
        board: Board,
        seat: Seat,
        depth: int = 0,
        move: Optional[Cell] = None
    ) -> SearchResult:
        """
        Minimax from the given position.

        The board is used as scratch space: every hypothetical mark is
        removed again before this returns.

        Args:
            board: Position to search (mutated temporarily).
            seat: Seat of the player to move.
            depth: Plies below the root.
            move: The move that led here, returned as-is for terminal
                positions.

        Returns:
            SearchResult with the minimax score and the best move.
        """
        # Players don't change during a search, so look them up once
        seats = self._seats_by_value()
        movers = {
            s: (player.mark.to_int(), player.is_computer)
            for s, player in self.players.items()
        }
        return self._search(board, seat, depth, move, seats, movers)

    def _search(
        self,
        board: Board,
        seat: Seat,
        depth: int,
        move: Optional[Cell],
        seats: Dict[int, Seat],
        movers: Dict[Seat, Tuple[int, bool]]
    ) -> SearchResult:
        self.positions_evaluated += 1

        sums = board.line_sums()
        win_sum = self.config.WIN_SUM
        if win_sum in sums:
            winner = seats.get(CROSS)
        elif -win_sum in sums:
            winner = seats.get(ZERO)
        else:
            winner = None

        empty_cells = board.empty_cells()

        if not empty_cells or winner is not None:
            if winner is self.COMPUTER_SEAT:
                return SearchResult(1, move)
            elif winner is not None:
                return SearchResult(-1, move)
            return SearchResult(0, move)

        value, maximizing = movers[seat]
        next_seat = seat.opposite()

        best_score = 0
        best_move: Optional[Cell] = None

        for x, y in empty_cells:
            board.place(x, y, value)
            try:
                score = self._search(board, next_seat, depth + 1, (x, y), seats, movers).score
            finally:
                board.clear_cell(x, y)

            if best_move is None:
                improved = True
            elif maximizing:
                improved = score > best_score
            else:
                improved = score < best_score

            if improved:
                best_score = score
                best_move = (x, y)

        return SearchResult(best_score, best_move)

    def get_best_move(self, board: Board, seat: Seat = COMPUTER_SEAT) -> Cell:
        """
        Get the best move for the current position.

        Searches a private copy, so the caller's board is never touched.

        Args:
            board: Current board.
            seat: Seat of the player to move.

        Returns:
            (x, y) of the best move.

        Raises:
            InvariantViolation: If the position is already finished.
        """
        if self.win_checker.is_terminal(board):
            raise InvariantViolation("Computer move requested on a finished board")

        self.positions_evaluated = 0
        result = self.search(board.copy(), seat)

        if result.move is None:
            raise InvariantViolation("Best move not found")

        if self.config.DEBUG_MODE:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {result.move} (score: {result.score})")

        return result.move
