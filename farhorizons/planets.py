"""Planet records and the random generation of a star system's planets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from farhorizons.constants import Gas
from farhorizons.dice import Dice

GAS_SLOTS = 4
MAX_PLANETS_PER_STAR = 9

# Starting values taken from the planets of Earth's solar system.  Index 0 is
# a placeholder; index 5 stands for the asteroid belt.  Diameters are in
# thousands of kilometres.
_START_DIAMETER = (0, 5, 12, 13, 7, 20, 143, 121, 51, 49)
_START_TEMP_CLASS = (0, 29, 27, 11, 9, 8, 6, 5, 5, 3)

_INT_FIELDS = (
    ("temperature_class", "TemperatureClass"),
    ("pressure_class", "PressureClass"),
    ("special", "Special"),
)
_LIST_FIELDS = (
    ("gas", "Gas"),
    ("gas_percent", "GasPercent"),
)
_TRAILING_INT_FIELDS = (
    ("diameter", "Diameter"),
    ("gravity", "Gravity"),
    ("mining_difficulty", "MiningDifficulty"),
    ("econ_efficiency", "EconEfficiency"),
    ("md_increase", "MDIncrease"),
    ("message", "Message"),
)


def _empty_slots() -> list[int]:
    return [0] * GAS_SLOTS


@dataclass
class Planet:
    """One planet of a star system."""

    temperature_class: int = 0
    pressure_class: int = 0
    special: int = 0
    gas: list[int] = field(default_factory=_empty_slots)
    gas_percent: list[int] = field(default_factory=_empty_slots)
    diameter: int = 0
    gravity: int = 0
    mining_difficulty: int = 0
    econ_efficiency: int = 0
    md_increase: int = 0
    message: int = 0

    def to_dict(self) -> dict[str, Any]:
        """The record as a JSON-ready mapping."""
        data: dict[str, Any] = {}
        for attr, key in _INT_FIELDS:
            data[key] = getattr(self, attr)
        for attr, key in _LIST_FIELDS:
            data[key] = list(getattr(self, attr))
        for attr, key in _TRAILING_INT_FIELDS:
            data[key] = getattr(self, attr)
        return data


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def planet_from_dict(data: dict[str, Any]) -> Planet:
    """Build a planet from a mapping; keys match case-insensitively, missing keys stay zero."""
    if not isinstance(data, dict):
        raise ValueError(f"planet record must be an object, not {type(data).__name__}")
    folded = {key.lower(): value for key, value in data.items()}
    values: dict[str, Any] = {}
    for attr, key in _INT_FIELDS + _TRAILING_INT_FIELDS:
        value = folded.get(key.lower())
        if value is None:
            continue
        if not _is_int(value):
            raise ValueError(f"planet field {key} must be an integer, not {value!r}")
        values[attr] = value
    for attr, key in _LIST_FIELDS:
        value = folded.get(key.lower())
        slots = _empty_slots()
        if value is not None:
            if not isinstance(value, list):
                raise ValueError(f"planet field {key} must be an array")
            for position, entry in enumerate(value[:GAS_SLOTS]):
                if entry is None:
                    continue
                if not _is_int(entry):
                    raise ValueError(f"planet field {key} must hold integers")
                slots[position] = entry
        values[attr] = slots
    return Planet(**values)


def _jiggle(value: int, die_size: int, rolls: int, dice: Dice) -> int:
    """Randomly push a value up or down by a die roll, the given number of times."""
    for _ in range(rolls):
        if dice.roll(100) > 50:
            value += dice.roll(die_size)
        else:
            value -= dice.roll(die_size)
    return value


def _generate_atmosphere(tc: int, dice: Dice) -> tuple[list[int], list[int]]:
    """Pick the gases of an atmosphere and their percentages."""
    first_gas = min(max(100 * tc // 225, 1), 9)
    num_wanted = (dice.roll(4) + dice.roll(4)) // 2
    found: list[tuple[int, int]] = []

    while not found:
        for candidate in range(first_gas, first_gas + 5):
            if len(found) == num_wanted:
                break
            if candidate == Gas.HE:
                if dice.roll(3) > 1:
                    continue  # Don't want too many helium planets.
                if tc > 5:
                    continue  # Too hot for helium.
                found.append((candidate, dice.roll(20)))
            else:
                if dice.roll(3) == 3:
                    continue
                amount = dice.roll(50) if candidate == Gas.O2 else dice.roll(100)
                found.append((candidate, amount))

    quantity = sum(amount for _, amount in found)
    percents = [100 * amount // quantity for _, amount in found]
    percents[0] += 100 - sum(percents)  # Leftover goes to the first gas.

    gases = [gas for gas, _ in found]
    padding = [0] * (GAS_SLOTS - len(found))
    return gases + padding, percents + padding


def _generate_planet(
    planet_number: int, num_planets: int, warmest: int | None, dice: Dice
) -> Planet:
    if num_planets > 3:
        offset = (9 * planet_number) // num_planets
    else:
        offset = 2 * planet_number + 1
    dia = _START_DIAMETER[offset]
    tc = _START_TEMP_CLASS[offset]

    # Randomize the diameter; the minimum is 3,000 km.
    dia = _jiggle(dia, max(dia // 4, 2), 4, dice)
    while dia < 3:
        dia += dice.roll(4)

    gas_giant = dia > 40

    # Density times 100: 60..170 for gas giants, 370..570 for the others.
    if gas_giant:
        density = 58 + dice.roll(56) + dice.roll(56)
    else:
        density = 368 + dice.roll(101) + dice.roll(101)

    # Gravity times 100; the factor 72 gives 100 for Earth.
    gravity = (density * dia) // 72

    die_size = max(tc // 4, 2)
    rolls = dice.roll(3) + dice.roll(3) + dice.roll(3)
    tc = _jiggle(tc, die_size, rolls, dice)
    if gas_giant:
        while tc < 3:
            tc += dice.roll(2)
        while tc > 7:
            tc -= dice.roll(2)
    else:
        while tc < 1:
            tc += dice.roll(3)
        while tc > 30:
            tc -= dice.roll(3)

    # Inner planets of small systems are sometimes too cold; warm them up.
    if num_planets < 4 and planet_number < 3:
        while tc < 12:
            tc += dice.roll(4)

    # Planets farther out are never warmer than those closer in.
    if warmest is not None and warmest < tc:
        tc = warmest

    pc = gravity // 10
    die_size = max(pc // 4, 2)
    rolls = dice.roll(3) + dice.roll(3) + dice.roll(3)
    pc = _jiggle(pc, die_size, rolls, dice)
    if gas_giant:
        while pc < 11:
            pc += dice.roll(3)
        while pc > 29:
            pc -= dice.roll(3)
    else:
        while pc < 0:
            pc += dice.roll(3)
        while pc > 12:
            pc -= dice.roll(3)

    if gravity < 10:
        pc = 0  # Too little gravity to hold an atmosphere.
    if tc < 2 or tc > 27:
        pc = 0  # Too hot or too cold for an atmosphere.

    if pc == 0:
        gases, percents = _empty_slots(), _empty_slots()
    else:
        gases, percents = _generate_atmosphere(tc, dice)

    # Mining difficulty times 100, ending up between 0.88 and 11.00.
    mining = 0
    while mining < 40 or mining > 500:
        mining = (
            (dice.roll(3) + dice.roll(3) + dice.roll(3) - dice.roll(4)) * dice.roll(dia)
            + dice.roll(30)
            + dice.roll(30)
        )
    mining = mining * 11 // 5

    return Planet(
        temperature_class=tc,
        pressure_class=pc,
        special=0,
        gas=gases,
        gas_percent=percents,
        diameter=dia,
        gravity=gravity,
        mining_difficulty=mining,
    )


def generate_planets(num_planets: int, dice: Dice) -> list[Planet]:
    """Generate the planets of one star system, innermost first."""
    if not _is_int(num_planets) or not 1 <= num_planets <= MAX_PLANETS_PER_STAR:
        raise ValueError(
            f"number of planets must be between 1 and {MAX_PLANETS_PER_STAR}, "
            f"not {num_planets!r}"
        )
    planets: list[Planet] = []
    for planet_number in range(1, num_planets + 1):
        warmest = planets[-1].temperature_class if planets else None
        planets.append(_generate_planet(planet_number, num_planets, warmest, dice))
    return planets