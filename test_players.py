"""
Tests for marks, modes, seats and player setup.
"""

import random

import pytest

from game.config import GameConfig
from game.players import GameMode, Mark, Player, Seat, create_players, random_marks


class TestMark:
    def test_numeric_values(self):
        assert Mark.CROSS.to_int() == 1
        assert Mark.ZERO.to_int() == -1

    def test_round_trip_through_int(self):
        assert Mark.from_int(1) is Mark.CROSS
        assert Mark.from_int(-1) is Mark.ZERO
        with pytest.raises(ValueError):
            Mark.from_int(0)

    def test_symbols(self):
        assert str(Mark.CROSS) == "X"
        assert str(Mark.ZERO) == "O"
        assert Mark.from_symbol(" x ") is Mark.CROSS
        assert Mark.from_symbol("o") is Mark.ZERO

    def test_bad_symbol(self):
        with pytest.raises(ValueError):
            Mark.from_symbol("Z")

    def test_opposite(self):
        assert Mark.CROSS.opposite() is Mark.ZERO
        assert Mark.ZERO.opposite() is Mark.CROSS
        assert Mark.CROSS.is_cross and not Mark.CROSS.is_zero


class TestGameModeAndSeat:
    def test_mode_names(self):
        assert GameMode.from_name("one-player") is GameMode.ONE_PLAYER
        assert GameMode.from_name("Two-Players") is GameMode.TWO_PLAYERS
        with pytest.raises(ValueError):
            GameMode.from_name("three-players")

    def test_computer_opponent(self):
        assert GameMode.ONE_PLAYER.has_computer_opponent
        assert not GameMode.TWO_PLAYERS.has_computer_opponent

    def test_seat_opposite(self):
        assert Seat.FIRST.opposite() is Seat.SECOND
        assert Seat.SECOND.opposite() is Seat.FIRST


class TestPlayerSetup:
    def test_random_marks_are_complementary(self):
        rng = random.Random(7)
        for _ in range(20):
            first, second = random_marks(rng)
            assert first is second.opposite()

    def test_random_marks_use_both_marks(self):
        rng = random.Random(3)
        firsts = {random_marks(rng)[0] for _ in range(50)}
        assert firsts == {Mark.CROSS, Mark.ZERO}

    def test_one_player_mode(self):
        ann, computer = create_players(GameMode.ONE_PLAYER, " Ann ", "ignored", rng=random.Random(1))
        assert ann.name == "Ann"
        assert not ann.is_computer
        assert computer.name == GameConfig.COMPUTER_NAME
        assert computer.is_computer
        assert ann.mark is computer.mark.opposite()

    def test_two_player_mode(self):
        ann, bob = create_players(GameMode.TWO_PLAYERS, "Ann", "Bob", rng=random.Random(1))
        assert bob.name == "Bob"
        assert not bob.is_computer

    def test_blank_names_rejected(self):
        with pytest.raises(ValueError):
            create_players(GameMode.ONE_PLAYER, "   ")
        with pytest.raises(ValueError):
            create_players(GameMode.TWO_PLAYERS, "Ann", "")

    def test_player_str(self):
        assert str(Player("Ann", Mark.CROSS)) == "Ann (X)"
