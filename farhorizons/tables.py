"""Lookup tables for names, abbreviations, costs and display codes."""

from __future__ import annotations

from dataclasses import dataclass

from farhorizons.constants import Command, Gas, Item, ShipClass, ShipType, Tech

_TYPE_CHARS = " dD g"
_COLOR_CHARS = " OBAFGKM"
_SIZE_CHARS = "0123456789"

_NO_GAS_SYMBOL = "   "
_GAS_SYMBOLS = {
    Gas.H2: "H2",
    Gas.CH4: "CH4",
    Gas.HE: "He",
    Gas.NH3: "NH3",
    Gas.N2: "N2",
    Gas.CO2: "CO2",
    Gas.O2: "O2",
    Gas.HCL: "HCl",
    Gas.CL2: "Cl2",
    Gas.F2: "F2",
    Gas.H2O: "H2O",
    Gas.SO2: "SO2",
    Gas.H2S: "H2S",
}

# Each technology field maps to (abbreviation, full name).
_TECHS = {
    Tech.MI: ("MI", "Mining"),
    Tech.MA: ("MA", "Manufacturing"),
    Tech.ML: ("ML", "Military"),
    Tech.GV: ("GV", "Gravitics"),
    Tech.LS: ("LS", "Life Support"),
    Tech.BI: ("BI", "Biology"),
}

SHIP_TYPE_SUFFIX = {ShipType.FTL: "", ShipType.SUB_LIGHT: "S", ShipType.STARBASE: "S"}


@dataclass(frozen=True)
class ItemInfo:
    """Static description of an item."""

    item: Item
    name: str
    abbr: str
    cost: int
    carry_capacity: int
    critical_tech: Tech | None
    tech_requirement: int


@dataclass(frozen=True)
class ShipClassInfo:
    """Static description of a ship class."""

    ship_class: ShipClass
    abbr: str
    tonnage: int
    cost: int


def _item_rows():
    """Yield (name, abbr, cost, capacity, critical tech, requirement) in item order."""
    yield from (
        ("Raw Material Unit", "RM", 1, 1, Tech.MI, 1),
        ("Planetary Defense Unit", "PD", 1, 3, Tech.ML, 1),
        ("Starbase Unit", "SU", 110, 20, Tech.MA, 20),
        ("Damage Repair Unit", "DR", 50, 1, Tech.MA, 30),
        ("Colonist Unit", "CU", 1, 1, Tech.LS, 1),
        ("Colonial Mining Unit", "IU", 1, 1, Tech.MI, 1),
        ("Colonial Manufacturing Unit", "AU", 1, 1, Tech.MA, 1),
        ("Fail-Safe Jump Unit", "FS", 25, 1, Tech.GV, 20),
        ("Jump Portal Unit", "JP", 100, 10, Tech.GV, 25),
        ("Forced Misjump Unit", "FM", 100, 5, Tech.GV, 30),
        ("Forced Jump Unit", "FJ", 125, 5, Tech.GV, 40),
        ("Gravitic Telescope Unit", "GT", 500, 20, Tech.GV, 50),
        ("Field Distortion Unit", "FD", 50, 1, Tech.LS, 20),
        ("Terraforming Plant", "TP", 50000, 100, Tech.BI, 40),
        ("Germ Warfare Bomb", "GW", 1000, 100, Tech.BI, 50),
    )
    for prefix, label, tech in (("SG", "Shield Generator", Tech.LS), ("GU", "Gun Unit", Tech.ML)):
        for mark in range(1, 10):
            yield (f"Mark-{mark} {label}", f"{prefix}{mark}", 250 * mark, 5 * mark, tech, 10 * mark)
    for number in range(1, 6):
        yield (f"X{number} Unit", f"X{number}", 9999, 9999, None, 999)


_ITEMS = tuple(
    ItemInfo(item, name, abbr, cost, capacity, tech, requirement)
    for item, (name, abbr, cost, capacity, tech, requirement) in zip(Item, _item_rows(), strict=True)
)
_ITEMS_BY_ABBR = {info.abbr: info.item for info in _ITEMS}


def _ship_rows():
    """Yield (abbr, tonnage) in ship-class order; cost is 100 per ton."""
    warships = "PB CT ES FF DD CL CS CA CC BC BS DN SD BM BW BR".split()
    for index, abbr in enumerate(warships):
        yield abbr, (index + 1 if index < 2 else 5 * (index - 1))
    yield "BA", 1
    yield "TR", 1


_SHIP_CLASSES = tuple(
    ShipClassInfo(ship_class, abbr, tonnage, 100 * tonnage)
    for ship_class, (abbr, tonnage) in zip(ShipClass, _ship_rows(), strict=True)
)

_COMMAND_NAMES = """
    Undefined Ally Ambush Attack Auto Base Battle Build Continue Deep Destroy
    Develop Disband End Enemy Engage Estimate Haven Hide Hijack Ibuild
    Icontinue Install Intercept Jump Land Message Move Name Neutral Orbit
    Pjump Production Recycle Repair Research Scan Send Shipyard Start
    Summary Surrender Target Teach Tech Telescope Terraform Transfer Unload
    Upgrade Visited Withdraw Wormhole ZZZ
""".split()


def _command_abbr(name: str) -> str:
    return "   " if name == "Undefined" else name[:3].upper()


_COMMANDS_BY_ABBR = {
    _command_abbr(name): command for command, name in zip(Command, _COMMAND_NAMES, strict=True)
}


def _enum_member(enum_cls, value, what):
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"invalid {what}: {value!r}") from None


def _char_at(table: str, index: int, what: str) -> str:
    if not isinstance(index, int) or not 0 <= index < len(table):
        raise ValueError(f"invalid {what}: {index!r}")
    return table[index]


def gas_symbol(gas: int) -> str:
    """Chemical symbol of a gas; 0 (no gas) gives blanks."""
    if gas == 0:
        return _NO_GAS_SYMBOL
    return _GAS_SYMBOLS[_enum_member(Gas, gas, "gas")]


def tech_name(tech: int) -> str:
    """Full name of a technology field."""
    return _TECHS[_enum_member(Tech, tech, "tech")][1]


def tech_abbr(tech: int) -> str:
    """Two-letter abbreviation of a technology field."""
    return _TECHS[_enum_member(Tech, tech, "tech")][0]


def item_info(item: int) -> ItemInfo:
    """Static description of an item."""
    return _ITEMS[_enum_member(Item, item, "item")]


def item_by_abbr(abbr: str) -> Item:
    """Item with the given abbreviation, case-insensitive."""
    try:
        return _ITEMS_BY_ABBR[abbr.upper()]
    except KeyError:
        raise KeyError(f"unknown item abbreviation {abbr!r}") from None


def ship_class_info(ship_class: int) -> ShipClassInfo:
    """Static description of a ship class."""
    return _SHIP_CLASSES[_enum_member(ShipClass, ship_class, "ship class")]


def command_by_abbr(abbr: str) -> Command:
    """Command with the given three-letter abbreviation, case-insensitive."""
    try:
        return _COMMANDS_BY_ABBR[abbr.upper()]
    except KeyError:
        raise KeyError(f"unknown command abbreviation {abbr!r}") from None


def command_name(command: int) -> str:
    """Display name of a command."""
    return _COMMAND_NAMES[_enum_member(Command, command, "command")]


def star_code(star_type: int, color: int, size: int) -> str:
    """Three-character code for a star: type, spectral class and size."""
    return (
        _char_at(_TYPE_CHARS, star_type, "star type")
        + _char_at(_COLOR_CHARS, color, "star color")
        + _char_at(_SIZE_CHARS, size, "star size")
    )