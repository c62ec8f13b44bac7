"""Tests pour l'identité des joueurs."""

from congklak.engine.player import Player


def test_exactly_two_players():
    assert list(Player) == [Player.FIRST, Player.SECOND]


def test_opponent_is_involutive():
    assert Player.FIRST.opponent is Player.SECOND
    assert Player.SECOND.opponent is Player.FIRST
    for player in Player:
        assert player.opponent.opponent is player


def test_display_names():
    assert Player.FIRST.display_name == "Player 1"
    assert Player.SECOND.display_name == "Player 2"
