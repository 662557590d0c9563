import pytest

from rpgcompanion.player import Player
from rpgcompanion.weapon import Weapon


@pytest.fixture
def player():
    return Player("Harvey", "Journalist", "Boston", "Arkham", "he", 34)


def test_identity_fields(player):
    assert player.get_field("name") == "Harvey"
    assert player.get_field("residence") == "Arkham"
    assert player.get_field("age") == 34


def test_new_player_defaults(player):
    assert player.get_field("strength") == 0
    assert player.get_field("sanity") == 0
    assert player.get_field("charm") == 15
    assert player.get_field("first_aid") == 30
    assert player.get_field("dodge") == 0
    assert player.get_field("language_own") == 0
    assert player.weapons == []


def test_set_text_field(player):
    player.set_field("occupation", "Professor")
    assert player.occupation == "Professor"
    assert player.get_field("occupation") == "Professor"


def test_set_numeric_fields(player):
    player.set_field("age", "40")
    player.set_field("strength", "60")
    player.set_field("spot_hidden", "55")
    assert player.age == 40
    assert player.stats.strength == 60
    assert player.skills.spot_hidden == 55


@pytest.mark.parametrize("text, expected", [("-5", -5), ("+7", 7), ("007", 7)])
def test_signed_numbers_accepted(player, text, expected):
    player.set_field("luck", text)
    assert player.get_field("luck") == expected


@pytest.mark.parametrize("text", ["", "abc", "1.5", "12a", " 3", "-"])
def test_non_numbers_rejected(player, text):
    with pytest.raises(ValueError):
        player.set_field("power", text)
    assert player.get_field("power") == 0


def test_error_messages(player):
    with pytest.raises(ValueError, match="^Strength must be a number\\.$"):
        player.set_field("strength", "strong")
    with pytest.raises(ValueError, match="^Hit Points must be a number\\.$"):
        player.set_field("hit_points", "x")
    with pytest.raises(ValueError, match="^Sleight of Hand must be a number\\.$"):
        player.set_field("sleight_of_hand", "x")
    with pytest.raises(ValueError, match="^Age must be a number\\.$"):
        player.set_field("age", "old")


def test_unknown_field(player):
    with pytest.raises(KeyError):
        player.set_field("wisdom", "10")
    with pytest.raises(KeyError):
        player.get_field("wisdom")


def test_add_weapon(player):
    knife = Weapon("Knife", "Fighting", "1D4", 1, "touch", 0, 0)
    player.add_weapon(knife)
    assert player.weapons == [knife]


def test_players_do_not_share_state():
    first = Player("A", "B", "C", "D", "she", 20)
    second = Player("E", "F", "G", "H", "they", 30)
    first.set_field("climb", "70")
    assert second.get_field("climb") == 20
    assert first.get_field("climb") == 70