import json

import pytest

from farhorizons.constants import NUM_CONTACT_WORDS, StarColor, StarType
from farhorizons.stars import StarData, load_stars, save_stars, star_from_dict


def _sample_star():
    return StarData(
        x=3,
        y=14,
        z=7,
        star_type=StarType.GIANT,
        color=StarColor.ORANGE,
        size=9,
        num_planets=5,
        home_system=True,
        worm_here=True,
        worm_x=30,
        worm_y=2,
        worm_z=11,
        planet_index=40,
        message=2,
        visited_by=[1, 0, 5, 0],
    )


def test_dict_round_trip():
    star = _sample_star()
    assert star_from_dict(star.to_dict()) == star


def test_to_dict_uses_record_keys():
    data = _sample_star().to_dict()
    assert data["NumPlanets"] == 5
    assert data["HomeSystem"] is True
    assert len(data["VisitedBy"]) == NUM_CONTACT_WORDS


def test_missing_fields_default_to_zero():
    star = star_from_dict({"X": 4})
    assert star == StarData(x=4)
    assert star.visited_by == [0] * NUM_CONTACT_WORDS


def test_keys_match_case_insensitively():
    star = star_from_dict({"x": 1, "numplanets": 3, "wormhere": True})
    assert (star.x, star.num_planets, star.worm_here) == (1, 3, True)


def test_visited_by_padded_and_truncated():
    short = star_from_dict({"VisitedBy": [9]})
    assert short.visited_by == [9] + [0] * (NUM_CONTACT_WORDS - 1)
    extra = [1] * (NUM_CONTACT_WORDS + 3)
    assert star_from_dict({"VisitedBy": extra}).visited_by == [1] * NUM_CONTACT_WORDS


@pytest.mark.parametrize(
    "record",
    [{"X": "3"}, {"X": 1.5}, {"HomeSystem": 1}, {"VisitedBy": 3}, {"Y": True}],
)
def test_bad_field_types(record):
    with pytest.raises(ValueError):
        star_from_dict(record)


def test_save_and_load(tmp_path):
    path = tmp_path / "stars.json"
    stars = [_sample_star(), StarData(x=1, y=2, z=3)]
    save_stars(stars, path)
    assert load_stars(path) == stars
    assert isinstance(json.loads(path.read_text()), list)


def test_load_invalid_json(tmp_path):
    path = tmp_path / "stars.json"
    path.write_text("[{")
    with pytest.raises(ValueError):
        load_stars(path)


def test_load_non_array(tmp_path):
    path = tmp_path / "stars.json"
    path.write_text('{"X": 1}')
    with pytest.raises(ValueError):
        load_stars(path)


def test_load_null_entry_rejected(tmp_path):
    path = tmp_path / "stars.json"
    path.write_text("[null]")
    with pytest.raises(ValueError):
        load_stars(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_stars(tmp_path / "absent.json")