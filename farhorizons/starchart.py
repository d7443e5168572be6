"""Charts of the stars reachable from an origin within a tolerable jump mishap chance."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Sequence

MAX_MISHAP_CHANCE = 10000  # Hundredths of a percent.

DEFAULT_STAR_LIST = "starlist.json"
DEFAULT_CHART_FILE = "starChart.json"
ORIGIN_NAME = "Origin"


@dataclass
class ChartStar:
    """A star in the star list: coordinates and an optional name."""

    x: int = 0
    y: int = 0
    z: int = 0
    name: str = ""


@dataclass
class ChartNode:
    """A star on the chart and the jump round in which it was reached."""

    id: str
    group: int
    star: ChartStar = field(repr=False, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "group": self.group}


@dataclass(frozen=True)
class ChartLink:
    """A jump between two charted stars; value is the mishap chance in percent."""

    source: str
    target: str
    value: int

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source, "target": self.target, "value": self.value}


@dataclass
class StarChart:
    """Nodes and links of a star chart, in the order they were found."""

    nodes: list[ChartNode] = field(default_factory=list)
    links: list[ChartLink] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """The chart as a JSON-ready mapping of nodes and links."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "links": [link.to_dict() for link in self.links],
        }


def mishap_chance(dx: int, dy: int, dz: int, gravitics_level: int, ship_age: int) -> int:
    """Chance of a jump mishap, in hundredths of a percent (0 through 10000)."""
    if gravitics_level < 1:
        raise ValueError(f"gravitics level must be at least 1, not {gravitics_level}")
    chance = (100 * (dx * dx + dy * dy + dz * dz)) // gravitics_level
    if chance > MAX_MISHAP_CHANCE:
        return MAX_MISHAP_CHANCE
    if ship_age > 0:
        # Older ships are more likely to have a mishap.
        success = MAX_MISHAP_CHANCE - chance
        success -= (2 * ship_age * success) // 100
        success = max(success, 0)
        chance = MAX_MISHAP_CHANCE - success
    return chance


def name_stars(stars: Sequence[ChartStar], origin: tuple[int, int, int]) -> ChartStar:
    """Give every unnamed star a name and return the star at the origin.

    The star at the origin coordinates is named "Origin" when unnamed; other
    unnamed stars are named by their coordinates.  When no star sits at the
    origin, the first star is used.  Duplicate names raise ValueError.
    """
    if not stars:
        raise ValueError("the star list is empty")
    x, y, z = origin
    origin_star = stars[0]
    seen: set[str] = set()
    for star in stars:
        if (star.x, star.y, star.z) == (x, y, z):
            origin_star = star
            if not star.name:
                star.name = ORIGIN_NAME
        elif not star.name:
            star.name = f"{star.x},{star.y},{star.z}"
        if star.name in seen:
            raise ValueError(f"duplicate name {star.name!r}")
        seen.add(star.name)
    return origin_star


def build_star_chart(
    stars: Sequence[ChartStar],
    origin: ChartStar,
    gravitics_level: int,
    mishap_limit: int,
    ship_age: int,
) -> StarChart:
    """Chart every star reachable from the origin by jumps within the mishap limit.

    The origin is in group 1; stars first reached in jump round n are in group n + 1.
    """
    chart = StarChart()
    nodes: dict[str, ChartNode] = {origin.name: ChartNode(origin.name, 1, origin)}
    frontier = [nodes[origin.name]]
    group = 1
    while frontier:
        group += 1
        reached: list[ChartNode] = []
        for node in frontier:
            source = node.star
            for target in stars:
                if target is source:
                    continue
                chance = mishap_chance(
                    source.x - target.x,
                    source.y - target.y,
                    source.z - target.z,
                    gravitics_level,
                    ship_age,
                )
                if chance > mishap_limit * 100:
                    continue
                if target.name in nodes:
                    continue
                new_node = ChartNode(target.name, group, target)
                nodes[target.name] = new_node
                reached.append(new_node)
                chart.links.append(ChartLink(source.name, target.name, chance // 100))
        frontier = reached
    chart.nodes = list(nodes.values())
    return chart


def _star_from_record(record: Any) -> ChartStar:
    if not isinstance(record, dict):
        raise ValueError(f"star record must be an object, not {record!r}")
    folded = {str(key).lower(): value for key, value in record.items()}
    values: dict[str, Any] = {}
    for key in ("x", "y", "z"):
        value = folded.get(key)
        if value is None:
            continue
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"star field {key.upper()} must be an integer, not {value!r}")
        values[key] = value
    name = folded.get("name")
    if name is not None:
        if not isinstance(name, str):
            raise ValueError(f"star field Name must be a string, not {name!r}")
        values["name"] = name
    return ChartStar(**values)


def load_star_list(path: str | PathLike[str]) -> list[ChartStar]:
    """Read a JSON array of stars with X, Y, Z and optional Name."""
    with open(path, encoding="utf-8") as handle:
        try:
            records = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"cannot parse star list in {path}: {exc}") from exc
    if records is None:
        return []
    if not isinstance(records, list):
        raise ValueError(f"star list in {path} must be a JSON array")
    return [_star_from_record(record) for record in records]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="star-chart",
        description="Create a graph showing stars within a tolerable jump factor.",
    )
    parser.add_argument("-g", "--gravitics-level", type=int, default=1,
                        help="gravitics level for jump calculations")
    parser.add_argument("-l", "--mishap-limit", type=int, default=40,
                        help="maximum mishap threshold to map")
    parser.add_argument("-a", "--ship-age", type=int, default=0,
                        help="age of ship jumping")
    parser.add_argument("-x", "--x-origin", type=int, default=1,
                        help="x coordinate to begin from")
    parser.add_argument("-y", "--y-origin", type=int, default=1,
                        help="y coordinate to begin from")
    parser.add_argument("-z", "--z-origin", type=int, default=1,
                        help="z coordinate to begin from")
    parser.add_argument("-i", "--star-list", default=DEFAULT_STAR_LIST,
                        help="JSON file listing the stars")
    parser.add_argument("-o", "--output", default=DEFAULT_CHART_FILE,
                        help="JSON file to write the chart to")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Read a star list, chart the reachable stars and write the chart as JSON."""
    args = _parser().parse_args(argv)
    try:
        stars = load_star_list(args.star_list)
        origin = name_stars(stars, (args.x_origin, args.y_origin, args.z_origin))
        chart = build_star_chart(
            stars, origin, args.gravitics_level, args.mishap_limit, args.ship_age
        )
        with open(args.output, "w", encoding="utf-8") as handle:
            json.dump(chart.to_dict(), handle, indent=2)
            handle.write("\n")
    except (OSError, ValueError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    print(f"Created {json.dumps(str(args.output))}.")
    return 0