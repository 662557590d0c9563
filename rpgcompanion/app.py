"""Command-line entry point for the companion."""

from __future__ import annotations

import argparse
import random
import shlex
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from .companion import Companion
from .dice import Die
from .names import Gender
from .storage import StorageManager

TITLE = "RPG-Companion"
ABOUT = "RPG-Companion: players, dice and names for tabletop role-playing."

_HELP = """\
Commands:
  add NAME OCCUPATION BIRTHPLACE RESIDENCE PRONOUN AGE   add a player
  players                                                list the players
  inspect N                                              show player N's sheet
  roll DIE                                               roll D4, D6, D10, D12, D20 or D100
  names female|male [COUNT]                              generate random names
  about                                                  about this application
  help                                                   show this help
  quit                                                   leave the application"""


class _Quit(Exception):
    """Raised by the quit command to end the session."""


def _parse_die(text: str) -> Die:
    key = text.upper()
    if key in Die.__members__:
        return Die[key]
    try:
        return Die(int(key.removeprefix("D")))
    except ValueError:
        raise ValueError(f"unknown die: {text}") from None


class _Session:
    def __init__(self, companion: Companion, out: TextIO) -> None:
        self.companion = companion
        self.out = out
        self.commands: dict[str, Callable[[list[str]], None]] = {
            "add": self.add,
            "players": self.players,
            "inspect": self.inspect,
            "roll": self.roll,
            "names": self.names,
            "about": self.about,
            "help": self.help,
            "quit": self.quit,
            "exit": self.quit,
        }

    def say(self, text: str) -> None:
        print(text, file=self.out)

    def execute(self, line: str) -> None:
        words = shlex.split(line)
        if not words:
            return
        command, *args = words
        handler = self.commands.get(command.lower())
        if handler is None:
            raise ValueError(f"unknown command: {command}")
        handler(args)

    def add(self, args: list[str]) -> None:
        if len(args) != 6:
            raise ValueError(
                "add needs NAME OCCUPATION BIRTHPLACE RESIDENCE PRONOUN AGE"
            )
        player = self.companion.add_player(*args)
        self.say(f"Added {player.name}")

    def players(self, args: list[str]) -> None:
        for number, name in enumerate(self.companion.player_names, start=1):
            self.say(f"{number}. {name}")

    def inspect(self, args: list[str]) -> None:
        if len(args) != 1 or not args[0].isdigit():
            raise ValueError("inspect needs a player number")
        self.say(self.companion.inspect_player(int(args[0]) - 1))

    def roll(self, args: list[str]) -> None:
        if len(args) != 1:
            raise ValueError("roll needs a die")
        die = _parse_die(args[0])
        self.say(f"{die}: {self.companion.roll(die).strip()}")

    def names(self, args: list[str]) -> None:
        if not 1 <= len(args) <= 2:
            raise ValueError("names needs a gender and an optional count")
        try:
            gender = Gender(args[0].lower())
        except ValueError:
            raise ValueError(f"unknown gender: {args[0]}") from None
        count = 5
        if len(args) == 2:
            if not args[1].isdigit():
                raise ValueError("count must be a number")
            count = int(args[1])
        for name in self.companion.generate_names(gender, count):
            self.say(name)

    def about(self, args: list[str]) -> None:
        self.say(ABOUT)

    def help(self, args: list[str]) -> None:
        self.say(_HELP)

    def quit(self, args: list[str]) -> None:
        raise _Quit


def _run(session: _Session, lines: Iterable[str], err: TextIO) -> None:
    for line in lines:
        try:
            session.execute(line)
        except _Quit:
            return
        except (ValueError, IndexError, OSError) as exc:
            print(f"error: {exc}", file=err)


def main(argv: list[str] | None = None) -> int:
    """Start a companion session reading commands from standard input."""
    parser = argparse.ArgumentParser(prog="rpgcompanion", description=TITLE)
    parser.add_argument("--storage", default="Players", help="player storage path")
    parser.add_argument(
        "--data-dir", default="../data", help="directory holding the name lists"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    options = parser.parse_args(argv)

    players = StorageManager(options.storage).load_players()
    rng = random.Random(options.seed) if options.seed is not None else None
    companion = Companion(players, options.data_dir, rng)
    session = _Session(companion, sys.stdout)

    print(TITLE, file=sys.stdout)
    if sys.stdin.isatty():
        print("Type 'help' for a list of commands.", file=sys.stdout)
    _run(session, sys.stdin, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())