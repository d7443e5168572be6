import pytest

from farhorizons.constants import (
    Command,
    Gas,
    Item,
    ShipClass,
    StarColor,
    StarType,
    Tech,
)
from farhorizons.tables import (
    command_by_abbr,
    command_name,
    gas_symbol,
    item_by_abbr,
    item_info,
    ship_class_info,
    star_code,
    tech_abbr,
    tech_name,
)


def test_gas_symbols():
    assert gas_symbol(Gas.O2) == "O2"
    assert gas_symbol(Gas.HCL) == "HCl"
    assert gas_symbol(0) == "   "


@pytest.mark.parametrize("bad", [-1, 14])
def test_gas_symbol_out_of_range(bad):
    with pytest.raises(ValueError):
        gas_symbol(bad)


def test_tech_names_and_abbrs():
    assert tech_name(Tech.BI) == "Biology"
    assert tech_name(Tech.LS) == "Life Support"
    assert [tech_abbr(t) for t in Tech] == [t.name for t in Tech]


def test_tech_invalid():
    with pytest.raises(ValueError):
        tech_name(6)


def test_item_info_values():
    info = item_info(Item.TP)
    assert info.name == "Terraforming Plant"
    assert info.cost == 50000
    assert info.critical_tech is Tech.BI
    assert item_info(Item.X3).critical_tech is None


@pytest.mark.parametrize("item", list(Item))
def test_item_abbr_round_trip(item):
    info = item_info(item)
    assert info.item is item
    assert item_by_abbr(info.abbr) is item
    assert item_by_abbr(info.abbr.lower()) is item


def test_item_abbr_matches_enum_name():
    assert all(item_info(i).abbr == i.name for i in Item)


def test_item_by_abbr_unknown():
    with pytest.raises(KeyError):
        item_by_abbr("ZZ")


def test_ship_class_info():
    assert ship_class_info(ShipClass.BA).abbr == "BA"
    assert ship_class_info(ShipClass.TR).cost == 100
    tonnages = [ship_class_info(c).tonnage for c in ShipClass if c < ShipClass.BA]
    assert tonnages == sorted(tonnages)


def test_ship_class_invalid():
    with pytest.raises(ValueError):
        ship_class_info(18)


@pytest.mark.parametrize("command", list(Command)[1:])
def test_command_abbr_round_trip(command):
    name = command_name(command)
    assert command_by_abbr(name[:3]) is command


def test_command_name_values():
    assert command_name(Command.UNDEFINED) == "Undefined"
    assert command_name(Command.PJUMP) == "Pjump"


def test_command_by_abbr_unknown():
    with pytest.raises(KeyError):
        command_by_abbr("QQQ")


def test_star_code():
    assert star_code(StarType.DWARF, StarColor.BLUE, 5) == "dO5"
    assert star_code(StarType.GIANT, StarColor.RED, 9) == "gM9"
    assert star_code(StarType.MAIN_SEQUENCE, StarColor.YELLOW, 0)[0] == " "


@pytest.mark.parametrize("args", [(5, 1, 1), (1, 8, 1), (1, 1, 10), (1, 1, -1)])
def test_star_code_invalid(args):
    with pytest.raises(ValueError):
        star_code(*args)