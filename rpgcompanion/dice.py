"""Polyhedral dice rolling."""

from __future__ import annotations

import random
from enum import IntEnum


class Die(IntEnum):
    """The dice available to the roller, valued by their number of faces."""

    D4 = 4
    D6 = 6
    D10 = 10
    D12 = 12
    D20 = 20
    D100 = 100

    def __str__(self) -> str:
        return self.name


def roll(
    die: Die | int, count: int = 1, rng: random.Random | None = None
) -> list[int]:
    """Roll ``die`` ``count`` times and return the results in order.

    ``die`` may be a :class:`Die` or its number of faces; any other number
    raises :class:`ValueError`. A count of zero or less yields no rolls.
    """
    sides = Die(die)
    source = rng if rng is not None else random
    return [source.randint(1, sides) for _ in range(count)]


def roll_text(
    die: Die | int, count: int = 1, rng: random.Random | None = None
) -> str:
    """Roll ``die`` and render each result followed by a single space."""
    return "".join(f"{value} " for value in roll(die, count, rng))