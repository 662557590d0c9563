"""Investigators and their character sheets."""

from __future__ import annotations

import re
from dataclasses import dataclass, field as dc_field, fields

from .stats import Skills, Stats, default_skills
from .weapon import Weapon

TEXT_FIELDS = ("name", "occupation", "birthplace", "residence", "pronoun")
STAT_FIELDS = tuple(f.name for f in fields(Stats))
SKILL_FIELDS = tuple(f.name for f in fields(Skills))

_NUMBER = re.compile(r"[+-]?[0-9]+")
_LABELS = {
    "appraise": "Apprise",
    "sleight_of_hand": "Sleight of Hand",
}


def _label(name: str) -> str:
    return _LABELS.get(name, name.replace("_", " ").title())


@dataclass
class Player:
    """An investigator with identity, characteristics, skills and weapons."""

    name: str
    occupation: str
    birthplace: str
    residence: str
    pronoun: str
    age: int
    stats: Stats = dc_field(default_factory=Stats)
    skills: Skills = dc_field(default_factory=default_skills)
    weapons: list[Weapon] = dc_field(default_factory=list)

    def _owner(self, field: str) -> object:
        if field in TEXT_FIELDS or field == "age":
            return self
        if field in STAT_FIELDS:
            return self.stats
        if field in SKILL_FIELDS:
            return self.skills
        raise KeyError(f"unknown field: {field}")

    def get_field(self, field: str) -> str | int:
        """Return the value of a sheet field by its name."""
        return getattr(self._owner(field), field)

    def set_field(self, field: str, text: str) -> None:
        """Set a sheet field from text entered by the user.

        Text fields take the text as it is; every other field needs a whole
        number, optionally signed, and raises :class:`ValueError` otherwise.
        """
        owner = self._owner(field)
        if field in TEXT_FIELDS:
            setattr(owner, field, text)
            return
        if not _NUMBER.fullmatch(text):
            raise ValueError(f"{_label(field)} must be a number.")
        setattr(owner, field, int(text))

    def add_weapon(self, weapon: Weapon) -> None:
        """Add a weapon to the investigator's equipment."""
        self.weapons.append(weapon)