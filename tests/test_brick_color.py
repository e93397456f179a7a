import json

import pytest

from robloxtypes.basic_types import Color3uint8
from robloxtypes.brick_color import BrickColor


def test_from_name():
    assert BrickColor.from_name("Pastel brown") is BrickColor.PASTEL_BROWN


def test_from_number():
    assert BrickColor.from_number(1030) is BrickColor.PASTEL_BROWN


def test_unknown_name_and_number():
    assert BrickColor.from_name("Not a color") is None
    assert BrickColor.from_number(4) is None
    assert BrickColor.from_number(0) is None


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Lilac", BrickColor.LILAC_2),
        ("Rust", BrickColor.RUST),
        ("Gold", BrickColor.GOLD),
        ("Deep orange", BrickColor.DEEP_ORANGE),
    ],
)
def test_name_collisions_pick_first(name, expected):
    assert BrickColor.from_name(name) is expected


def test_colliding_members_reachable_by_number():
    assert BrickColor.from_number(321) is BrickColor.LILAC
    assert BrickColor.from_number(345) is BrickColor.RUST_2
    assert BrickColor.from_number(333) is BrickColor.GOLD_2
    assert BrickColor.from_number(1017) is BrickColor.DEEP_ORANGE_2


def test_display():
    assert str(BrickColor.from_number(6)) == "Light green (Mint)"
    assert str(BrickColor.from_number(333)) == "Gold"


def test_color_and_number():
    assert BrickColor.WHITE.color == Color3uint8(242, 243, 243)
    assert BrickColor.HOT_PINK.number == 1032


def test_human_ser():
    assert json.dumps(BrickColor.GOLD_2.to_json()) == "333"


def test_human_de():
    assert BrickColor.from_json(json.loads("1021")) is BrickColor.CAMO


def test_round_trip():
    value = BrickColor.CORK
    assert BrickColor.from_json(value.to_json()) is value


def test_from_json_invalid_number():
    with pytest.raises(ValueError, match="4 is not a valid BrickColor number"):
        BrickColor.from_json(4)


def test_from_json_wrong_type():
    with pytest.raises(TypeError):
        BrickColor.from_json("White")


def test_names_round_trip_for_unique_names():
    for color in BrickColor:
        found = BrickColor.from_name(color.display_name)
        assert found.display_name == color.display_name