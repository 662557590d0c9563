"""Weapons carried by investigators."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Weapon:
    """A weapon entry on a character sheet."""

    name: str
    skill: str
    damage: str
    attacks: int
    range: str
    ammo: int
    malfunction: int