"""
Game engine for TicTacToe.
Owns the board, whose turn it is, and the result. Asks the AI for the
computer's moves and tells a listener about every move and the game end.
"""

from enum import Enum
from typing import Dict, Optional

from .ai_player import MinimaxSearch
from .board import Board
from .config import GameConfig
from .errors import InvariantViolation
from .players import GameMode, Player, Seat
from .win_checker import WinChecker


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    OVER = "over"


class GameListener:
    """
    Receives engine events. Subclass and override what you need.

    Both hooks are called synchronously; exceptions raised here are not
    caught by the engine.
    """

    def on_move_applied(self, player: Player, x: int, y: int):
        """A mark was written at (x, y), before the turn passes."""

    def on_game_over(self, winner: Optional[Player]):
        """The game ended. winner is None for a draw."""


class TicTacToe:
    """
    The TicTacToe engine.

    Game flow:
    1. The driver sets two players and calls start()
    2. Whoever holds X moves first
    3. The driver calls apply_move(x, y) for every human move
    4. When the computer is to move, the engine answers before returning
    5. The listener hears about every move and about the end of the game

    apply_move() does not check that the cell is empty. Rejecting occupied
    cells is the driver's job; writing onto one overwrites it.
    """

    def __init__(
        self,
        listener: Optional[GameListener] = None,
        first_player: Optional[Player] = None,
        second_player: Optional[Player] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the engine.

        Args:
            listener: Receives move and game-over events.
            first_player: Player in the first seat (always human).
            second_player: Player in the second seat (may be the computer).
            config: Game configuration.
        """
        self.listener = listener or GameListener()
        self.config = config or GameConfig()

        self._players: Dict[Seat, Player] = {}
        if first_player is not None:
            self._players[Seat.FIRST] = first_player
        if second_player is not None:
            self._players[Seat.SECOND] = second_player

        self.win_checker = WinChecker(self.config)
        self.ai = MinimaxSearch(self._players, self.win_checker, self.config)

        self._board = Board()
        self._move_count = 0
        self._status = GameStatus.NOT_STARTED
        self._current_seat: Optional[Seat] = None
        self._winner_seat: Optional[Seat] = None

    # ==================== PLAYERS ====================

    def set_players(self, first_player: Player, second_player: Player):
        """
        Seat two players for the next start().

        Raises:
            InvariantViolation: If a game is in progress.
        """
        if self.is_in_progress:
            raise InvariantViolation("Cannot change players during a game")
        self._players[Seat.FIRST] = first_player
        self._players[Seat.SECOND] = second_player

    def player(self, seat: Seat) -> Player:
        """
        Get the player in a seat.

        Raises:
            InvariantViolation: If nobody sits there.
        """
        try:
            return self._players[seat]
        except KeyError:
            raise InvariantViolation(f"Player in {seat.name} seat is not defined") from None

    @property
    def first_player(self) -> Player:
        return self.player(Seat.FIRST)

    @property
    def second_player(self) -> Player:
        return self.player(Seat.SECOND)

    @property
    def computer_opens(self) -> bool:
        """True when the next start() begins with a computer move."""
        second = self.second_player
        return second.is_computer and second.mark.is_cross

    @property
    def mode(self) -> GameMode:
        if self.second_player.is_computer:
            return GameMode.ONE_PLAYER
        return GameMode.TWO_PLAYERS

    # ==================== STATE QUERIES ====================

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_started(self) -> bool:
        return self._status is not GameStatus.NOT_STARTED

    @property
    def is_in_progress(self) -> bool:
        return self._status is GameStatus.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        return self._status is GameStatus.OVER

    @property
    def current_player(self) -> Optional[Player]:
        if self._current_seat is None:
            return None
        return self._players[self._current_seat]

    @property
    def winner(self) -> Optional[Player]:
        if self._winner_seat is None:
            return None
        return self._players[self._winner_seat]

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def board(self) -> Board:
        """A copy of the board. Changing it does not affect the game."""
        return self._board.copy()

    def winning_line(self):
        """Cells of the completed line, or None."""
        return self.win_checker.winning_line(self._board)

    # ==================== LIFECYCLE ====================

    def _check_players(self):
        first = self.player(Seat.FIRST)
        second = self.player(Seat.SECOND)

        if first.mark is second.mark:
            raise InvariantViolation(
                f"Both players hold {first.mark}; marks must be complementary"
            )
        if first.is_computer:
            raise InvariantViolation("The computer can only play in the second seat")

    def start(self):
        """
        Start (or restart) the game.

        Clears the board and the result, and gives the first turn to the
        player holding X. If that is the computer, it moves right away.

        Raises:
            InvariantViolation: If the players are missing or both hold the
                same mark.
        """
        self._check_players()

        self._board.clear()
        self._move_count = 0
        self._winner_seat = None
        self._status = GameStatus.IN_PROGRESS

        if self.first_player.mark.is_cross:
            self._current_seat = Seat.FIRST
        else:
            self._current_seat = Seat.SECOND

        if self.current_player.is_computer:
            self.computer_move()

    def end(self):
        """Finish the game and report the result."""
        self._status = GameStatus.OVER
        self.listener.on_game_over(self.winner)

    def game_is_over(self) -> bool:
        return self._winner_seat is not None or self._move_count >= self.config.MAX_MOVES

    # ==================== MOVES ====================

    def apply_move(self, x: int, y: int) -> bool:
        """
        Put the current player's mark at (x, y).

        Ignored when the game is not in progress, the board has had its 9
        moves, or the coordinates are off the board.

        Args:
            x: Column (0-2).
            y: Row (0-2).

        Returns:
            True if the move was applied, False if it was ignored.
        """
        if not self.is_in_progress or self._move_count >= self.config.MAX_MOVES:
            if self.config.DEBUG_MODE:
                print(f"Ignoring move ({x}, {y}): game is not in progress")
            return False

        if not Board.in_bounds(x, y):
            if self.config.DEBUG_MODE:
                print(f"Ignoring move ({x}, {y}): off the board")
            return False

        mover = self.current_player
        self._board.place(x, y, mover.mark.to_int())
        self._move_count += 1

        self.listener.on_move_applied(mover, x, y)

        self._current_seat = self._current_seat.opposite()

        self._determine_winner()

        if self.game_is_over():
            self.end()
            return True

        if self.current_player.is_computer:
            self.computer_move()

        return True

    def _determine_winner(self):
        self._winner_seat = self.ai.winner_seat(self._board)

    def computer_move(self):
        """
        Let the computer pick and play its move.

        Raises:
            InvariantViolation: If the board has no move left.
        """
        x, y = self.ai.get_best_move(self._board, self._current_seat)
        self.apply_move(x, y)
