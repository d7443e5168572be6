# farhorizons

Tools for setting up a game of Far Horizons, a turn-based space strategy
game played by mail: generating a new galaxy of stars, planets and natural
wormholes, and charting which stars a ship can reach from a starting point
without too high a risk of a jump mishap.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Commands

### `fh-newgal`

Creates a completely new galaxy and writes `galaxy.json`, `stars.json` and
`planets.json` into the current directory.

```
fh-newgal            # asks for the number of species, stars and radius
fh-newgal 15         # 15 species, defaults for everything else
```

Interactively, the program suggests a star count and a galactic radius
scaled from a standard game of 15 species, 90 stars and a radius of 20
parsecs, and asks again whenever a value is out of range (1–100 species,
12–1000 stars, a radius of 6–50 parsecs) or the radius does not suit the
number of stars. An argument starting with `?` prints the usage. It reports
the number of stars, planets and natural wormholes created. The dice are not
seeded, so every run gives a different galaxy.

### `fh-starchart`

Reads a JSON list of stars (`X`, `Y`, `Z` and an optional `Name`) and builds
a graph of the stars reachable, round by round, from an origin star, keeping
only jumps whose mishap chance stays within a limit. Unnamed stars are named
by their coordinates, the one at the origin `Origin`; duplicate names are an
error. The result is written as JSON with `nodes` (`id`, `group`) and `links`
(`source`, `target`, `value`), ready for a force-directed graph viewer.

| Option | Default | Meaning |
| --- | --- | --- |
| `-g`, `--gravitics-level` | 1 | gravitics level for jump calculations |
| `-l`, `--mishap-limit` | 40 | highest mishap chance, in percent, to chart |
| `-a`, `--ship-age` | 0 | age of the jumping ship |
| `-x`, `-y`, `-z` (`--x-origin` …) | 1 | coordinates to begin from |
| `-i`, `--star-list` | `starlist.json` | star list to read |
| `-o`, `--output` | `starChart.json` | chart file to write |

## Library use

```python
from farhorizons.dice import Dice
from farhorizons.galaxy import generate_galaxy, write_galaxy, suggested_star_count, suggested_radius
from farhorizons.planets import generate_planets

dice = Dice(0xC0FFEE)

stars = suggested_star_count(15)      # 90
radius = suggested_radius(stars)      # 20
galaxy = generate_galaxy(15, stars, radius, dice)
write_galaxy(galaxy, ".")             # the directory must exist

planets = generate_planets(5, dice)
```

Invalid parameters raise `GalaxyError` (a `ValueError`). The steps are also
available on their own: `check_parameters`, `place_stars`,
`number_of_planets` and `allocate_wormholes`. Star records are `StarData`
objects, stored with `save_stars` and read back with `load_stars`; planets
are `Planet` objects with `to_dict` and `planet_from_dict`.

Star charts can be built directly:

```python
from farhorizons.starchart import build_star_chart, load_star_list, mishap_chance, name_stars

stars = load_star_list("starlist.json")
origin = name_stars(stars, (1, 1, 1))
chart = build_star_chart(stars, origin, gravitics_level=1, mishap_limit=40, ship_age=0)
print(chart.to_dict())

print(mishap_chance(3, 4, 0, 2, 0))   # 1250, in hundredths of a percent
```

Lookup tables for gases, technologies, items, ship classes and commands live
in `farhorizons.tables` (`gas_symbol`, `tech_name`, `tech_abbr`,
`item_info`, `item_by_abbr`, `ship_class_info`, `command_by_abbr`,
`command_name`, `star_code`), and the game's enumerations in
`farhorizons.constants`.

Generation is deterministic for a given `Dice` seed, so a galaxy can be
reproduced exactly.

## What it does not do

The package only creates a galaxy and charts jumps. It does not place home
systems, set up species or players, read orders, run turns, resolve combat
or write reports. The enumerations for items, ships, commands and combat in
`farhorizons.constants` and `farhorizons.tables` are reference data only;
nothing in the package acts on them.