"""Character sheet view of an investigator."""

from __future__ import annotations

from .player import SKILL_FIELDS, STAT_FIELDS, TEXT_FIELDS, Player

_SPECIAL_LABELS = {
    "firearms_handgun": "Firearms (Handgun)",
    "firearms_rifle": "Firearms (Rifle)",
    "language_other": "Language (Other)",
    "language_own": "Language (Own)",
    "sleight_of_hand": "Sleight of Hand",
}

SHEET_FIELDS = (*TEXT_FIELDS, "age", *STAT_FIELDS, *SKILL_FIELDS)


def _label(field: str) -> str:
    text = _SPECIAL_LABELS.get(field, field.replace("_", " ").title())
    return f"{text}:"


def player_sheet(player: Player) -> list[tuple[str, str]]:
    """Return the sheet of ``player`` as ordered ``(label, value)`` pairs.

    Identity comes first, then age, characteristics and skills.
    """
    return [(_label(name), str(player.get_field(name))) for name in SHEET_FIELDS]


def format_sheet(player: Player) -> str:
    """Render the sheet of ``player`` as text headed by the player's name."""
    rows = player_sheet(player)
    width = max(len(label) for label, _ in rows)
    lines = [player.name]
    lines.extend(f"{label:<{width}} {value}" for label, value in rows)
    return "\n".join(lines)