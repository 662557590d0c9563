# rpgcompanion

A small companion for tabletop role-playing sessions. It keeps a roster of
investigators with their characteristics and skills, rolls the usual
polyhedral dice (D4, D6, D10, D12, D20, D100) and draws random character
names from name lists.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
rpgcompanion
```

This prints the title and then reads commands from standard input, one per
line (arguments may be quoted, as in a shell):

```
add NAME OCCUPATION BIRTHPLACE RESIDENCE PRONOUN AGE   add a player
players                                                list the players
inspect N                                              show player N's sheet
roll DIE                                               roll D4, D6, D10, D12, D20 or D100
names female|male [COUNT]                              generate random names (5 by default)
about                                                  about this application
help                                                   show this help
quit                                                   leave the application (also: exit)
```

Errors, such as a missing field or an unknown command, are reported on
standard error and the session goes on. The session ends on `quit`, `exit`
or the end of input.

Options:

- `--storage PATH` – player storage path (default `Players`)
- `--data-dir DIR` – directory holding the name lists (default `../data`)
- `--seed N` – seed the random number generator for repeatable rolls and names

## Using it from Python

Rolling dice:

```python
import random
from rpgcompanion.dice import Die, roll, roll_text

rng = random.Random(7)
values = roll(Die.D20, 3, rng)      # a list of three values from 1 to 20
text = roll_text(Die.D6, 2, rng)    # rolls as text, each followed by a space
```

A die may also be given by its number of faces (`roll(20)`); any other
number raises `ValueError`.

Working with players:

```python
from rpgcompanion.companion import Companion

companion = Companion()
player = companion.add_player("Ada", "Librarian", "Arkham", "Boston", "she", "34")
player.set_field("strength", "60")
print(player.get_field("strength"))   # 60
print(companion.inspect_player(0))    # the character sheet as text
```

`add_player` raises `ValueError` if any text field is empty or the age is
not a whole number. `inspect_player` raises `IndexError` for a position with
no player. `Companion.roll(die)` rolls once and keeps the result in
`companion.results`; `Companion.generate_names(gender, count)` keeps the
drawn names in `companion.names`.

`Player.set_field` takes the field names of `rpgcompanion.stats.Stats` and
`rpgcompanion.stats.Skills` (such as `strength`, `sanity`, `spot_hidden`),
plus `name`, `occupation`, `birthplace`, `residence`, `pronoun` and `age`.
Numeric fields accept only a whole number, optionally signed; anything else
raises `ValueError` and leaves the player unchanged. An unknown field name
raises `KeyError`. Weapons (`rpgcompanion.weapon.Weapon`) are added with
`Player.add_weapon`.

A player's sheet can be shown with `rpgcompanion.sheet.format_sheet(player)`,
or taken as ordered label/value pairs with
`rpgcompanion.sheet.player_sheet(player)`.

Generating names:

```python
from rpgcompanion.names import Gender, NameGenerator

generator = NameGenerator("data")
names = generator.generate(Gender.FEMALE, 5)
```

Names are read from `femaleNames.txt` and `maleNames.txt` in the data
directory, one name per line (see `rpgcompanion.names.load_names(path)`).
The names drawn in one call are all different; asking for more names than
the list holds raises `ValueError`, and a missing list raises `OSError`.

## What it does not do

Players are not saved. `rpgcompanion.storage.StorageManager.load_players()`
always returns an empty list, so every session starts with an empty roster
and the players added in it are lost when it ends. There is no graphical
window; the companion works through the command line or from Python.