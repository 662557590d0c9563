"""Persistent storage of the investigators in a campaign."""

from __future__ import annotations

from pathlib import Path

from .player import Player


class StorageManager:
    """Keeps the players of a campaign under a storage path."""

    def __init__(self, file_path: str | Path) -> None:
        self.file_path = Path(file_path)

    def load_players(self) -> list[Player]:
        """Return a fresh list of the stored players.

        Nothing is kept on disk yet, so every call starts an empty roster.
        """
        return []