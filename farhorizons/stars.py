"""Star system records and their JSON storage."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Iterable

from farhorizons.constants import NUM_CONTACT_WORDS

_INT_FIELDS = (
    ("x", "X"),
    ("y", "Y"),
    ("z", "Z"),
    ("star_type", "Type"),
    ("color", "Color"),
    ("size", "Size"),
    ("num_planets", "NumPlanets"),
    ("worm_x", "WormX"),
    ("worm_y", "WormY"),
    ("worm_z", "WormZ"),
    ("planet_index", "PlanetIndex"),
    ("message", "Message"),
)
_BOOL_FIELDS = (
    ("home_system", "HomeSystem"),
    ("worm_here", "WormHere"),
)
_VISITED_KEY = "VisitedBy"


def _empty_visited() -> list[int]:
    return [0] * NUM_CONTACT_WORDS


@dataclass
class StarData:
    """One star system."""

    x: int = 0
    y: int = 0
    z: int = 0
    star_type: int = 0
    color: int = 0
    size: int = 0
    num_planets: int = 0
    home_system: bool = False
    worm_here: bool = False
    worm_x: int = 0
    worm_y: int = 0
    worm_z: int = 0
    planet_index: int = 0
    message: int = 0
    visited_by: list[int] = field(default_factory=_empty_visited)

    def to_dict(self) -> dict[str, Any]:
        """The record as a JSON-ready mapping."""
        data: dict[str, Any] = {}
        for attr, key in _INT_FIELDS[:7]:
            data[key] = getattr(self, attr)
        for attr, key in _BOOL_FIELDS:
            data[key] = getattr(self, attr)
        for attr, key in _INT_FIELDS[7:]:
            data[key] = getattr(self, attr)
        data[_VISITED_KEY] = list(self.visited_by)
        return data


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def star_from_dict(data: dict[str, Any]) -> StarData:
    """Build a star from a mapping; keys match case-insensitively, missing keys stay zero."""
    if not isinstance(data, dict):
        raise ValueError(f"star record must be an object, not {type(data).__name__}")
    folded = {key.lower(): value for key, value in data.items()}
    values: dict[str, Any] = {}
    for attr, key in _INT_FIELDS:
        value = folded.get(key.lower())
        if value is None:
            continue
        if not _is_int(value):
            raise ValueError(f"star field {key} must be an integer, not {value!r}")
        values[attr] = value
    for attr, key in _BOOL_FIELDS:
        value = folded.get(key.lower())
        if value is None:
            continue
        if not isinstance(value, bool):
            raise ValueError(f"star field {key} must be a boolean, not {value!r}")
        values[attr] = value
    visited = folded.get(_VISITED_KEY.lower())
    words = _empty_visited()
    if visited is not None:
        if not isinstance(visited, list):
            raise ValueError(f"star field {_VISITED_KEY} must be an array")
        for position, word in enumerate(visited[:NUM_CONTACT_WORDS]):
            if word is None:
                continue
            if not _is_int(word):
                raise ValueError(f"star field {_VISITED_KEY} must hold integers")
            words[position] = word
    values["visited_by"] = words
    return StarData(**values)


def load_stars(path: str | PathLike[str]) -> list[StarData]:
    """Read a JSON array of star records."""
    with open(path, encoding="utf-8") as handle:
        try:
            records = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"cannot parse star data in {path}: {exc}") from exc
    if records is None:
        return []
    if not isinstance(records, list):
        raise ValueError(f"star data in {path} must be a JSON array")
    return [star_from_dict(record) for record in records]


def save_stars(stars: Iterable[StarData], path: str | PathLike[str]) -> None:
    """Write star records as a JSON array."""
    with open(path, "w", encoding="utf-8") as handle:
        json.dump([star.to_dict() for star in stars], handle, indent=2)
        handle.write("\n")