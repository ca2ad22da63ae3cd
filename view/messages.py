"""
Text shown to the players by the drivers.
"""

from typing import Optional

from game.engine import TicTacToe
from game.players import GameMode, Player


def welcome_message(game: TicTacToe) -> str:
    """Greeting shown once the players are seated."""
    first = game.first_player
    second = game.second_player
    if game.mode is GameMode.TWO_PLAYERS:
        return (f"Welcome, {first.name} ({first.mark}) and "
                f"{second.name} ({second.mark})! Let's play!")
    return f"Welcome, {first.name}! Let's play!\nYou are \"{first.mark}\"."


def result_message(winner: Optional[Player]) -> str:
    """Text shown when the game ends."""
    if winner is None:
        return "You have a draw!"
    return f"{winner.name} wins!"


def thinking_message(game: TicTacToe) -> str:
    """Shown while the computer works out its opening move."""
    return f"{game.second_player.name} ({game.second_player.mark}) is thinking..."
