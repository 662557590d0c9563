"""Tabletop role-playing companion: dice, investigator sheets and name generation."""

__version__ = "0.1.0"