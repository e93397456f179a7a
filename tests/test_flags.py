import json

import pytest

from robloxtypes.flags import Axes, Faces


def _dumps(value):
    return json.dumps(value, separators=(",", ":"))


def test_axes_human_de():
    assert Axes.from_json(json.loads("[]")) == Axes.empty()
    assert Axes.from_json(json.loads('["X"]')) == Axes.X
    assert Axes.from_json(json.loads('["X", "Y", "Z"]')) == Axes.all()


def test_axes_human_ser():
    assert _dumps(Axes.empty().to_json()) == "[]"
    assert _dumps(Axes.X.to_json()) == '["X"]'
    assert _dumps(Axes.all().to_json()) == '["X","Y","Z"]'


def test_axes_human_duplicate():
    assert Axes.from_json(json.loads('["X", "X", "X", "X"]')) == Axes.X


def test_axes_human_invalid():
    with pytest.raises(ValueError, match="invalid axis 'pizza'"):
        Axes.from_json(json.loads('["pizza"]'))


@pytest.mark.parametrize("value", [Axes.empty(), Axes.X, Axes.all()])
def test_axes_non_human(value):
    assert Axes.from_json(value.bits()) == value


def test_axes_bits_and_contains():
    assert Axes.all().bits() == 7
    both = Axes.X | Axes.Z
    assert both.bits() == 5
    assert both.contains(Axes.X)
    assert not both.contains(Axes.Y)
    assert len(both) == 2


def test_axes_from_bits_invalid():
    with pytest.raises(ValueError):
        Axes.from_bits(8)
    with pytest.raises(ValueError):
        Axes.from_json(255)


def test_axes_repr():
    assert repr(Axes.X | Axes.Y) == "Axes(X, Y)"
    assert repr(Axes.empty()) == "Axes()"


def test_faces_human_de():
    assert Faces.from_json(json.loads("[]")) == Faces.empty()
    assert Faces.from_json(json.loads('["Right"]')) == Faces.RIGHT
    all_faces = Faces.from_json(
        json.loads('["Right", "Top", "Back", "Left", "Bottom", "Front"]')
    )
    assert all_faces == Faces.all()


def test_faces_human_ser():
    assert _dumps(Faces.empty().to_json()) == "[]"
    assert _dumps(Faces.LEFT.to_json()) == '["Left"]'
    assert (
        _dumps(Faces.all().to_json())
        == '["Right","Top","Back","Left","Bottom","Front"]'
    )


def test_faces_human_duplicate():
    value = Faces.from_json(json.loads('["Right", "Right", "Right", "Right"]'))
    assert value == Faces.RIGHT


def test_faces_human_invalid():
    with pytest.raises(ValueError, match="invalid face 'calzone'"):
        Faces.from_json(json.loads('["calzone"]'))


@pytest.mark.parametrize("value", [Faces.empty(), Faces.RIGHT, Faces.all()])
def test_faces_non_human(value):
    assert Faces.from_json(value.bits()) == value


def test_faces_bits():
    assert Faces.all().bits() == 63
    assert Faces.FRONT.bits() == 32
    with pytest.raises(ValueError):
        Faces.from_bits(64)


def test_axes_and_faces_are_distinct():
    assert Axes.X != Faces.RIGHT
    with pytest.raises(TypeError):
        Axes.X.contains(Faces.RIGHT)


def test_combining_leaves_operands_unchanged():
    combined = Axes.X | Axes.Y
    assert combined.bits() == 3
    assert Axes.X.bits() == 1
    assert Axes.Y.bits() == 2
    assert (combined & Axes.Y).bits() == 2