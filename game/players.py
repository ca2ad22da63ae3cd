"""
Players and marks for TicTacToe.
Holds the small value types the engine is built from.
"""

import random
from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig


class Mark(Enum):
    """The symbol a player puts on the board."""
    CROSS = "X"
    ZERO = "O"

    def __str__(self) -> str:
        return self.value

    @property
    def is_cross(self) -> bool:
        return self is Mark.CROSS

    @property
    def is_zero(self) -> bool:
        return self is Mark.ZERO

    def to_int(self) -> int:
        """
        Numeric value stored in the board.

        Returns:
            +1 for cross, -1 for zero.
        """
        return 1 if self.is_cross else -1

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.ZERO if self.is_cross else Mark.CROSS

    @classmethod
    def from_int(cls, value: int) -> "Mark":
        if value == 1:
            return cls.CROSS
        if value == -1:
            return cls.ZERO
        raise ValueError(f"No mark is stored as {value!r}")

    @classmethod
    def from_symbol(cls, text: str) -> "Mark":
        """
        Parse a mark typed by a user ("X"/"O", any case).

        Raises:
            ValueError: If the text is not a mark symbol.
        """
        symbol = text.strip().upper()
        for mark in cls:
            if mark.value == symbol:
                return mark
        raise ValueError(f"Unknown mark {text!r}. Must be X or O.")


class GameMode(Enum):
    """How the two seats are filled."""
    ONE_PLAYER = "one-player"      # human vs computer
    TWO_PLAYERS = "two-players"    # human vs human

    def __str__(self) -> str:
        return self.value

    @property
    def has_computer_opponent(self) -> bool:
        return self is GameMode.ONE_PLAYER

    @classmethod
    def from_name(cls, text: str) -> "GameMode":
        for mode in cls:
            if mode.value == text.strip().lower():
                return mode
        choices = ", ".join(mode.value for mode in cls)
        raise ValueError(f"Unknown game mode {text!r}. Choose one of: {choices}")


class Seat(Enum):
    """
    The two places at the table.

    The engine compares seats, not Player objects, to decide whose turn
    it is and who owns a mark.
    """
    FIRST = 0
    SECOND = 1

    def opposite(self) -> "Seat":
        """Get the opposite seat."""
        return Seat.SECOND if self is Seat.FIRST else Seat.FIRST


@dataclass
class Player:
    """
    A player in the game.
    """
    name: str                   # Shown in messages
    mark: Mark                  # Can be swapped between games
    is_computer: bool = False   # Moves are chosen by minimax

    def __str__(self) -> str:
        return f"{self.name} ({self.mark})"


def random_marks(rng: Optional[random.Random] = None) -> Tuple[Mark, Mark]:
    """
    Pick a random mark for the first player and the other one for the second.

    Args:
        rng: Random source (module-level random if omitted).

    Returns:
        (first_mark, second_mark), always complementary.
    """
    rng = rng or random
    first = Mark.CROSS if rng.random() < 0.5 else Mark.ZERO
    return first, first.opposite()


def create_players(
    mode: GameMode,
    name1: str,
    name2: Optional[str] = None,
    rng: Optional[random.Random] = None,
    config: Optional[GameConfig] = None
) -> Tuple[Player, Player]:
    """
    Build the two players for a game.

    In one-player mode the second seat is the computer and name2 is ignored.

    Raises:
        ValueError: If a required name is blank.
    """
    config = config or GameConfig()

    name1 = (name1 or "").strip()
    if not name1:
        raise ValueError("Player 1 needs a name")

    if mode.has_computer_opponent:
        name2 = config.COMPUTER_NAME
    else:
        name2 = (name2 or "").strip()
        if not name2:
            raise ValueError("Player 2 needs a name")

    first_mark, second_mark = random_marks(rng)
    return (
        Player(name1, first_mark),
        Player(name2, second_mark, is_computer=mode.has_computer_opponent),
    )
