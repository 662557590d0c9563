"""The companion session: a roster of investigators, dice and name tools."""

from __future__ import annotations

import random
import re
from pathlib import Path

from .dice import Die, roll_text
from .names import Gender, NameGenerator
from .player import Player
from .sheet import format_sheet

_NUMBER = re.compile(r"[+-]?[0-9]+")

MISSING_FIELDS = "Some of the fields are missing or age is not a number"


class Companion:
    """Holds the players of a session and the tools used at the table."""

    def __init__(
        self,
        players: list[Player] | None = None,
        data_dir: str | Path = Path("../data"),
        rng: random.Random | None = None,
    ) -> None:
        self.players: list[Player] = players if players is not None else []
        self.name_generator = NameGenerator(data_dir)
        self.rng = rng
        self.results: dict[Die, str] = {die: "" for die in Die}
        self.names: list[str] = []

    @property
    def player_names(self) -> list[str]:
        """Names of the players in roster order."""
        return [player.name for player in self.players]

    def add_player(
        self,
        name: str,
        occupation: str,
        birthplace: str,
        residence: str,
        pronoun: str,
        age: str,
    ) -> Player:
        """Create a player from entered text and add it to the roster.

        Every text field must be filled in and age must be a whole number;
        otherwise :class:`ValueError` is raised and the roster is unchanged.
        """
        texts = (name, occupation, birthplace, residence, pronoun)
        if any(text == "" for text in texts) or not _NUMBER.fullmatch(age):
            raise ValueError(MISSING_FIELDS)
        player = Player(name, occupation, birthplace, residence, pronoun, int(age))
        self.players.append(player)
        return player

    def inspect_player(self, index: int) -> str:
        """Return the character sheet of the player at ``index``.

        Raises :class:`IndexError` when no player stands at that position.
        """
        if not 0 <= index < len(self.players):
            raise IndexError(f"no player at position {index}")
        return format_sheet(self.players[index])

    def roll(self, die: Die | int) -> str:
        """Roll ``die`` once, remember the shown result and return it."""
        key = Die(die)
        result = roll_text(key, 1, self.rng)
        self.results[key] = result
        return result

    def generate_names(self, gender: Gender | str, count: int = 5) -> list[str]:
        """Draw ``count`` names for ``gender``, keeping the non-blank ones."""
        drawn = self.name_generator.generate(gender, count, self.rng)
        self.names = [name for name in drawn if name]
        return list(self.names)

    def clear_names(self) -> None:
        """Forget the last generated names."""
        self.names = []