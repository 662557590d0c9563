"""Characteristics and skills of an investigator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Stats:
    """Core characteristics and derived points; all start at zero."""

    strength: int = 0
    concentration: int = 0
    dexterity: int = 0
    intelligence: int = 0
    size: int = 0
    power: int = 0
    appearance: int = 0
    education: int = 0
    hit_points: int = 0
    magic_points: int = 0
    luck_points: int = 0
    luck: int = 0
    sanity: int = 0


@dataclass
class Skills:
    """Skill percentages, defaulting to the base values of a new investigator.

    Dodge starts at half of dexterity and own language at education; both
    characteristics are zero for a new investigator.
    """

    accounting: int = 5
    anthropology: int = 1
    appraise: int = 5
    archaeology: int = 1
    art: int = 5
    charm: int = 15
    climb: int = 20
    credit_rating: int = 0
    cthulhu_mythos: int = 0
    disguise: int = 5
    dodge: int = 0
    drive_auto: int = 20
    electrical_repair: int = 10
    fast_talk: int = 5
    fighting: int = 25
    firearms_handgun: int = 20
    firearms_rifle: int = 25
    first_aid: int = 30
    history: int = 5
    intimidate: int = 15
    jump: int = 20
    language_other: int = 1
    language_own: int = 0
    law: int = 5
    library_use: int = 20
    listen: int = 20
    locksmith: int = 1
    mechanical_repair: int = 10
    medicine: int = 1
    natural_world: int = 10
    navigate: int = 10
    occult: int = 5
    persuade: int = 10
    pilot: int = 1
    psychology: int = 10
    psychoanalysis: int = 1
    ride: int = 5
    science: int = 1
    sleight_of_hand: int = 10
    spot_hidden: int = 25
    stealth: int = 20
    survival: int = 10
    swim: int = 20
    throwing: int = 20
    track: int = 10


def default_skills() -> Skills:
    """Return a fresh set of skills for a new investigator."""
    stats = Stats()
    return Skills(dodge=stats.dexterity // 2, language_own=stats.education)