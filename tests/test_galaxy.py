import io
import json

import pytest

from farhorizons.dice import Dice
from farhorizons.galaxy import (
    Galaxy,
    GalaxyError,
    allocate_wormholes,
    check_parameters,
    generate_galaxy,
    main,
    number_of_planets,
    place_stars,
    suggested_radius,
    suggested_star_count,
    write_galaxy,
)
from farhorizons.planets import planet_from_dict
from farhorizons.stars import StarData, load_stars


def test_suggested_star_count_standard_game():
    assert suggested_star_count(15) == 90
    assert suggested_star_count(30) == 180


def test_suggested_radius_standard_game():
    assert suggested_radius(90) == 20


def test_suggested_radius_grows_with_stars():
    assert suggested_radius(500) >= suggested_radius(90)


@pytest.mark.parametrize(
    "species, stars, radius",
    [
        (0, 90, 20),
        (101, 90, 20),
        (15, 11, 20),
        (15, 1001, 20),
        (15, 90, 5),
        (15, 90, 51),
        (15, 1000, 6),
        (15, 12, 50),
    ],
)
def test_check_parameters_rejects(species, stars, radius):
    with pytest.raises(GalaxyError):
        check_parameters(species, stars, radius)


def test_check_parameters_accepts_standard_game():
    chance = check_parameters(15, 90, 20)
    assert 50 <= chance <= 3200


def test_place_stars_invariants():
    radius = 20
    coords = place_stars(90, radius, Dice(7))
    assert len(coords) == 90
    columns = {(x, y) for x, y, _ in coords}
    assert len(columns) == 90
    assert coords == sorted(coords)
    for x, y, z in coords:
        rx, ry, rz = x - radius, y - radius, z - radius
        assert rx * rx + ry * ry + rz * rz < radius * radius
        assert 0 <= z < 2 * radius


def test_place_stars_is_reproducible():
    first = place_stars(40, 15, Dice(3))
    second = place_stars(40, 15, Dice(3))
    assert len(first) == 40
    assert first == second


def test_place_stars_rejects_bad_count():
    with pytest.raises(GalaxyError):
        place_stars(0, 20, Dice(1))


@pytest.mark.parametrize("star_type", [1, 2, 3, 4])
@pytest.mark.parametrize("color", [1, 2, 3, 4, 5, 6, 7])
def test_number_of_planets_in_range(star_type, color):
    dice = Dice(star_type * 10 + color)
    for _ in range(50):
        assert 1 <= number_of_planets(star_type, color, dice) <= 9


def test_red_dwarf_has_one_planet():
    dice = Dice(11)
    assert {number_of_planets(1, 7, dice) for _ in range(30)} == {1}


def _spread_stars():
    return [StarData(x=i * 10, y=(i * 7) % 50, z=(i * 3) % 40) for i in range(60)]


def test_allocate_wormholes_links_are_symmetric_and_long():
    stars = _spread_stars()
    count = allocate_wormholes(stars, Dice(5))
    linked = [star for star in stars if star.worm_here]
    assert len(linked) == 2 * count
    by_coords = {(s.x, s.y, s.z): s for s in stars}
    for star in linked:
        other = by_coords[(star.worm_x, star.worm_y, star.worm_z)]
        assert other.worm_here
        assert (other.worm_x, other.worm_y, other.worm_z) == (star.x, star.y, star.z)
        dx, dy, dz = star.x - other.x, star.y - other.y, star.z - other.z
        assert dx * dx + dy * dy + dz * dz >= 400


def test_allocate_wormholes_skips_home_systems():
    stars = _spread_stars()
    for star in stars:
        star.home_system = True
    assert allocate_wormholes(stars, Dice(5)) == 0
    assert not any(star.worm_here for star in stars)


def test_generate_galaxy_consistency():
    galaxy = generate_galaxy(15, 90, 20, Dice(42))
    assert galaxy.d_num_species == 15
    assert galaxy.num_species == 0
    assert galaxy.turn_number == 0
    assert galaxy.radius == 20
    assert len(galaxy.stars) == 90
    assert galaxy.num_planets == sum(star.num_planets for star in galaxy.stars)
    index = 0
    for star in galaxy.stars:
        assert star.planet_index == index
        assert 1 <= star.star_type <= 4
        assert 1 <= star.color <= 7
        assert 0 <= star.size <= 9
        index += star.num_planets


def test_generate_galaxy_is_reproducible():
    first = generate_galaxy(5, 30, 12, Dice(9))
    second = generate_galaxy(5, 30, 12, Dice(9))
    assert first.stars == second.stars
    assert first.planets == second.planets


def test_generate_galaxy_rejects_bad_parameters():
    with pytest.raises(GalaxyError):
        generate_galaxy(0, 90, 20, Dice(1))


def test_galaxy_to_dict():
    galaxy = Galaxy(d_num_species=15, radius=20)
    assert galaxy.to_dict() == {
        "DNumSpecies": 15,
        "NumSpecies": 0,
        "Radius": 20,
        "TurnNumber": 0,
    }


def test_write_galaxy_round_trip(tmp_path):
    galaxy = generate_galaxy(5, 30, 12, Dice(17))
    paths = write_galaxy(galaxy, tmp_path)
    assert [p.name for p in paths] == ["galaxy.json", "stars.json", "planets.json"]
    header = json.loads((tmp_path / "galaxy.json").read_text(encoding="utf-8"))
    assert header == galaxy.to_dict()
    assert load_stars(tmp_path / "stars.json") == galaxy.stars
    records = json.loads((tmp_path / "planets.json").read_text(encoding="utf-8"))
    assert [planet_from_dict(r) for r in records] == galaxy.planets


def test_main_usage(capsys):
    assert main(["?"]) == 0
    assert "Usage" in capsys.readouterr().err


def test_main_with_defaults(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["15"]) == 0
    out = capsys.readouterr().out
    assert "there should be about 90 stars" in out
    assert "natural wormholes" in out
    assert len(load_stars(tmp_path / "stars.json")) == 90


def test_main_interactive_retries(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n5\n30\n12\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Try again" in out
    header = json.loads((tmp_path / "galaxy.json").read_text(encoding="utf-8"))
    assert header["DNumSpecies"] == 5
    assert header["Radius"] == 12
    assert len(load_stars(tmp_path / "stars.json")) == 30


def test_main_end_of_input(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert not (tmp_path / "galaxy.json").exists()