"""Creation of a completely new galaxy: star placement, planets and wormholes."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Sequence

from farhorizons.constants import (
    MAX_RADIUS,
    MAX_SPECIES,
    MAX_STARS,
    MIN_RADIUS,
    MIN_SPECIES,
    MIN_STARS,
    STANDARD_GALACTIC_RADIUS,
    STANDARD_NUMBER_OF_SPECIES,
    STANDARD_NUMBER_OF_STAR_SYSTEMS,
    StarColor,
    StarType,
)
from farhorizons.dice import Dice
from farhorizons.planets import Planet, generate_planets
from farhorizons.stars import StarData, save_stars

MIN_CHANCE_OF_STAR = 50
MAX_CHANCE_OF_STAR = 3200
MIN_WORMHOLE_LENGTH = 20

GALAXY_FILE = "galaxy.json"
STARS_FILE = "stars.json"
PLANETS_FILE = "planets.json"

_USAGE = (
    "\n  Usage: NewGalaxy [num_species]\n\n"
    "  This program will create files 'galaxy.json', 'stars.json' and 'planets.json'.\n"
    "  If num_species is given, then defaults will be used for everything else.\n"
)


class GalaxyError(ValueError):
    """Raised when galaxy parameters are out of range or inconsistent."""


@dataclass
class Galaxy:
    """A generated galaxy with its stars and their planets."""

    d_num_species: int
    radius: int
    num_species: int = 0
    turn_number: int = 0
    stars: list[StarData] = field(default_factory=list)
    planets: list[Planet] = field(default_factory=list)

    @property
    def num_planets(self) -> int:
        return len(self.planets)

    @property
    def num_wormholes(self) -> int:
        return sum(1 for star in self.stars if star.worm_here) // 2

    def to_dict(self) -> dict[str, Any]:
        """The galaxy header as a JSON-ready mapping."""
        return {
            "DNumSpecies": self.d_num_species,
            "NumSpecies": self.num_species,
            "Radius": self.radius,
            "TurnNumber": self.turn_number,
        }


def suggested_star_count(num_species: int) -> int:
    """Approximate number of star systems a game with this many species needs."""
    return (num_species * STANDARD_NUMBER_OF_STAR_SYSTEMS) // STANDARD_NUMBER_OF_SPECIES


def suggested_radius(num_stars: int) -> int:
    """Galactic radius in parsecs that suits the given number of stars."""
    volume = (
        num_stars
        * STANDARD_GALACTIC_RADIUS
        * STANDARD_GALACTIC_RADIUS
        * STANDARD_GALACTIC_RADIUS
        // STANDARD_NUMBER_OF_STAR_SYSTEMS
    )
    radius = 2
    while radius * radius * radius < volume:
        radius += 1
    return radius


def _chance_of_star(radius: int, num_stars: int) -> int:
    volume = (4 * 314 * radius * radius * radius) // 300
    return volume // num_stars


def check_parameters(num_species: int, num_stars: int, radius: int) -> int:
    """Validate galaxy parameters; return the one-in-N chance of a star at any point."""
    if not MIN_SPECIES <= num_species <= MAX_SPECIES:
        raise GalaxyError(
            f"a game must have between {MIN_SPECIES} and {MAX_SPECIES} species, inclusive"
        )
    if not MIN_STARS <= num_stars <= MAX_STARS:
        raise GalaxyError(
            f"a game must have between {MIN_STARS} and {MAX_STARS} star systems, inclusive"
        )
    if not MIN_RADIUS <= radius <= MAX_RADIUS:
        raise GalaxyError(
            f"radius must be between {MIN_RADIUS} and {MAX_RADIUS} parsecs, inclusive"
        )
    chance = _chance_of_star(radius, num_stars)
    if chance < MIN_CHANCE_OF_STAR:
        raise GalaxyError(f"galactic radius is too small for {num_stars} stars")
    if chance > MAX_CHANCE_OF_STAR:
        raise GalaxyError(f"galactic radius is too large for {num_stars} stars")
    return chance


def place_stars(num_stars: int, radius: int, dice: Dice) -> list[tuple[int, int, int]]:
    """Pick star coordinates inside the galactic sphere, at most one per x,y column.

    The result is ordered by x, then y.
    """
    if not 1 <= num_stars <= MAX_STARS:
        raise GalaxyError(f"number of stars must be between 1 and {MAX_STARS}")
    if not MIN_RADIUS <= radius <= MAX_RADIUS:
        raise GalaxyError(
            f"radius must be between {MIN_RADIUS} and {MAX_RADIUS} parsecs, inclusive"
        )
    diameter = 2 * radius
    columns: dict[tuple[int, int], int] = {}
    while len(columns) < num_stars:
        x = dice.roll(diameter) - 1
        y = dice.roll(diameter) - 1
        z = dice.roll(diameter) - 1
        rx, ry, rz = x - radius, y - radius, z - radius
        if rx * rx + ry * ry + rz * rz >= radius * radius:
            continue
        columns.setdefault((x, y), z)
    return [(x, y, z) for (x, y), z in sorted(columns.items())]


def number_of_planets(star_type: int, color: int, dice: Dice) -> int:
    """Roll the number of planets orbiting a star, between 1 and 9.

    Bigger, hotter stars roll bigger dice; giants roll more of them.
    """
    die_size = StarColor.RED + 2 - color
    rolls = star_type - 1 if star_type > 2 else star_type
    count = -2 + sum(dice.roll(die_size) for _ in range(rolls))
    while count > 9:
        count -= dice.roll(3)
    return max(count, 1)


def allocate_wormholes(stars: Sequence[StarData], dice: Dice) -> int:
    """Link random pairs of stars with natural wormholes; return how many were made."""
    count = 0
    for star in stars:
        if star.home_system or star.worm_here:
            continue
        if dice.roll(100) < 92:
            continue
        if not any(
            other is not star and not other.home_system and not other.worm_here
            for other in stars
        ):
            continue
        while True:
            other = stars[dice.roll(len(stars)) - 1]
            if other is star or other.home_system or other.worm_here:
                continue
            break
        dx, dy, dz = star.x - other.x, star.y - other.y, star.z - other.z
        if dx * dx + dy * dy + dz * dz < MIN_WORMHOLE_LENGTH * MIN_WORMHOLE_LENGTH:
            continue
        star.worm_here = True
        star.worm_x, star.worm_y, star.worm_z = other.x, other.y, other.z
        other.worm_here = True
        other.worm_x, other.worm_y, other.worm_z = star.x, star.y, star.z
        count += 1
    return count


def _generate_star(x: int, y: int, z: int, planet_index: int, dice: Dice) -> StarData:
    star_type = dice.roll(StarType.GIANT + 6)
    if star_type > StarType.GIANT:
        star_type = StarType.MAIN_SEQUENCE
    color = dice.roll(StarColor.RED)
    size = dice.roll(10) - 1
    return StarData(
        x=x,
        y=y,
        z=z,
        star_type=int(star_type),
        color=color,
        size=size,
        num_planets=number_of_planets(star_type, color, dice),
        planet_index=planet_index,
    )


def generate_galaxy(num_species: int, num_stars: int, radius: int, dice: Dice) -> Galaxy:
    """Generate a new galaxy with stars, planets and natural wormholes."""
    check_parameters(num_species, num_stars, radius)
    galaxy = Galaxy(d_num_species=num_species, radius=radius)
    for x, y, z in place_stars(num_stars, radius, dice):
        star = _generate_star(x, y, z, len(galaxy.planets), dice)
        galaxy.stars.append(star)
        galaxy.planets.extend(generate_planets(star.num_planets, dice))
    allocate_wormholes(galaxy.stars, dice)
    return galaxy


def write_galaxy(galaxy: Galaxy, directory: str | PathLike[str]) -> list[Path]:
    """Write galaxy, star and planet files into a directory; return their paths."""
    base = Path(directory)
    galaxy_path = base / GALAXY_FILE
    stars_path = base / STARS_FILE
    planets_path = base / PLANETS_FILE
    with open(galaxy_path, "w", encoding="utf-8") as handle:
        json.dump(galaxy.to_dict(), handle, indent=2)
        handle.write("\n")
    save_stars(galaxy.stars, stars_path)
    with open(planets_path, "w", encoding="utf-8") as handle:
        json.dump([planet.to_dict() for planet in galaxy.planets], handle, indent=2)
        handle.write("\n")
    return [galaxy_path, stars_path, planets_path]


def _read_int(prompt: str) -> int | None:
    text = input(prompt).strip()
    try:
        return int(text)
    except ValueError:
        return None


def _leading_int(text: str) -> int:
    digits = ""
    for char in text.strip():
        if char.isdigit() or (not digits and char in "+-"):
            digits += char
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return 0


def _gather_parameters(num_species: int | None, using_defaults: bool) -> tuple[int, int, int]:
    while True:
        if not using_defaults:
            num_species = _read_int("\nHow many species will be in the game? ")
        if num_species is None or not MIN_SPECIES <= num_species <= MAX_SPECIES:
            print(
                f"\n  A game must have between {MIN_SPECIES} and {MAX_SPECIES} "
                "species, inclusive. Try again."
            )
            using_defaults = False
            continue

        suggested = suggested_star_count(num_species)
        while True:
            if using_defaults:
                print(f"For {num_species} species, there should be about {suggested} stars.")
                num_stars: int | None = suggested
            else:
                print(f"\nFor {num_species} species, a game needs about {suggested} star systems.")
                num_stars = _read_int(
                    "Approximately how many star systems do you want me to generate? "
                )
            if num_stars is not None and MIN_STARS <= num_stars <= MAX_STARS:
                break
            print(
                f"\n  A game must have between {MIN_STARS} and {MAX_STARS} "
                "star systems, inclusive. Try again."
            )
            using_defaults = False

        radius_hint = suggested_radius(num_stars)
        while True:
            radius: int | None = radius_hint
            if not using_defaults:
                print(
                    f"\nFor {num_stars} stars, the galaxy should have a radius "
                    f"of about {radius_hint} parsecs."
                )
                radius = _read_int("What radius (in parsecs) do you want the galaxy to have? ")
            if radius is not None and MIN_RADIUS <= radius <= MAX_RADIUS:
                break
            print(
                f"\n  Radius must be between {MIN_RADIUS} and {MAX_RADIUS} "
                "parsecs, inclusive. Try again."
            )
            using_defaults = False

        chance = _chance_of_star(radius, num_stars)
        if chance < MIN_CHANCE_OF_STAR:
            print(f"\n  Galactic radius is too small for {num_stars} stars. Please try again.\n")
            using_defaults = False
            continue
        if chance > MAX_CHANCE_OF_STAR:
            print(f"\n  Galactic radius is too large for {num_stars} stars. Please try again.\n")
            using_defaults = False
            continue
        return num_species, num_stars, radius


def main(argv: Sequence[str] | None = None) -> int:
    """Create a new galaxy in the current directory, asking for anything not given."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        num_species: int | None = None
        using_defaults = False
    elif len(args) == 1 and not args[0].startswith("?"):
        num_species = _leading_int(args[0])
        using_defaults = True
    else:
        sys.stderr.write(_USAGE + "\n")
        return 0

    try:
        num_species, num_stars, radius = _gather_parameters(num_species, using_defaults)
    except EOFError:
        sys.stderr.write("\n  Unexpected end of input.\n")
        return 1

    galaxy = generate_galaxy(num_species, num_stars, radius, Dice())
    try:
        paths = write_galaxy(galaxy, os.getcwd())
    except OSError as exc:
        sys.stderr.write(f"\n  Cannot write galaxy files: {exc}\n")
        return 1

    print(
        f"\nThis galaxy contains a total of {len(galaxy.stars)} stars "
        f"and {galaxy.num_planets} planets."
    )
    print(f"  The galaxy contains {galaxy.num_wormholes} natural wormholes.\n")
    for path in paths:
        print(f"Created {path.name}")
    return 0