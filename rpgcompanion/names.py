"""Random investigator name generation from name lists."""

from __future__ import annotations

import random
from enum import Enum
from pathlib import Path


class Gender(Enum):
    """Name lists that can be drawn from, with their file names."""

    FEMALE = "female"
    MALE = "male"

    @property
    def filename(self) -> str:
        return f"{self.value}Names.txt"


def load_names(path: str | Path) -> list[str]:
    """Read one name per line from ``path``."""
    return Path(path).read_text(encoding="utf-8").splitlines()


class NameGenerator:
    """Draws distinct random names from the lists in a data directory."""

    def __init__(self, data_dir: str | Path = Path("../data")) -> None:
        self.data_dir = Path(data_dir)

    def generate(
        self, gender: Gender | str, count: int, rng: random.Random | None = None
    ) -> list[str]:
        """Return ``count`` distinct names from the list for ``gender``.

        Raises :class:`OSError` if the list cannot be read and
        :class:`ValueError` if it holds fewer than ``count`` names.
        """
        names = load_names(self.data_dir / Gender(gender).filename)
        source = rng if rng is not None else random
        return source.sample(names, max(count, 0))

    def generate_female_names(
        self, count: int, rng: random.Random | None = None
    ) -> list[str]:
        """Return ``count`` distinct female names."""
        return self.generate(Gender.FEMALE, count, rng)

    def generate_male_names(
        self, count: int, rng: random.Random | None = None
    ) -> list[str]:
        """Return ``count`` distinct male names."""
        return self.generate(Gender.MALE, count, rng)