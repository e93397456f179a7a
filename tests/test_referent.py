import json

import pytest

from robloxtypes.referent import Ref

MAX = 2 ** 128 - 1


def test_display():
    assert str(Ref.none()) == "00000000000000000000000000000000"
    assert str(Ref(30)) == "0000000000000000000000000000001e"
    assert str(Ref(MAX)) == "ffffffffffffffffffffffffffffffff"


def test_from_str():
    assert Ref.from_str("00000000000000000000000000000000") == Ref.none()
    assert Ref.from_str("00000000300000e00f00000000000001") == Ref(
        14855284604576099720297971713
    )
    assert Ref.from_str("ffffffffffffffffffffffffffffffff") == Ref(MAX)


def test_from_str_short_and_signed():
    assert Ref.from_str("1e") == Ref(30)
    assert Ref.from_str("+1E") == Ref(30)


@pytest.mark.parametrize(
    "text",
    ["", "+", "xyz", "0x1e", " 1e", "1_0", "1" + "0" * 32],
)
def test_from_str_rejects(text):
    with pytest.raises(ValueError):
        Ref.from_str(text)


def test_none_and_some():
    assert Ref.none().is_none()
    assert not Ref.none().is_some()
    assert Ref(1).is_some()
    assert not Ref(1).is_none()


def test_new_is_random_and_some():
    first = Ref.new()
    second = Ref.new()
    assert first.is_some()
    assert second.is_some()
    assert first != second


def test_human_none():
    value = Ref.none()
    ser = json.dumps(value.to_json())
    assert ser == '"00000000000000000000000000000000"'
    assert Ref.from_json(json.loads(ser)) == value


def test_human_round_trip():
    value = Ref.new()
    assert Ref.from_json(json.loads(json.dumps(value.to_json()))) == value


def test_non_human_round_trip():
    value = Ref.new()
    assert Ref.from_json(value.value) == value


def test_value_range_checked():
    with pytest.raises(ValueError):
        Ref(-1)
    with pytest.raises(ValueError):
        Ref(MAX + 1)
    with pytest.raises(TypeError):
        Ref.from_json(1.5)


def test_hashable():
    assert len({Ref(5), Ref(5), Ref(6)}) == 2