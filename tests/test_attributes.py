import base64
import io

import pytest

from robloxtypes.attributes import Attributes, type_id_for, variant_type_for
from robloxtypes.basic_types import (
    Color3,
    ColorSequence,
    ColorSequenceKeypoint,
    NumberRange,
    NumberSequence,
    NumberSequenceKeypoint,
    Rect,
    UDim,
    UDim2,
    Vector2,
    Vector3,
)
from robloxtypes.binary_data import BinaryString
from robloxtypes.brick_color import BrickColor
from robloxtypes.errors import AttributeFormatError, RbxTypesError
from robloxtypes.variant import Variant, VariantType

ATTRIBUTES_BASE64 = (
    "DQAAAAcAAABCb29sZWFuAwEKAAAAQnJpY2tDb2xvcg7sAwAABgAAAENvbG9yMw+joiI/AAAA"
    "AAAAgD8NAAAAQ29sb3JTZXF1ZW5jZRkDAAAAAAAAAAAAAAAAAIA/AAAAAAAAAAAAAAAAAAAA"
    "PwAAAAAAAIA/AAAAAAAAAAAAAIA/AAAAAAAAAAAAAIA/BgAAAE51bWJlcgYAAAAAgBzIQAsA"
    "AABOdW1iZXJSYW5nZRsAAKBAAAAgQQ4AAABOdW1iZXJTZXF1ZW5jZRcDAAAAAAAAAAAAAAAA"
    "AIA/AAAAAAAAAD8AAAAAAAAAAAAAgD8AAIA/BAAAAFJlY3QcAACAPwAAAEAAAEBAAACAQAYA"
    "AABTdHJpbmcCDQAAAEhlbGxvLCB3b3JsZCEEAAAAVURpbQkAAAA/ZAAAAAUAAABVRGltMgoA"
    "AAA/CgAAADMzMz8eAAAABwAAAFZlY3RvcjIQAAAgQQAASEIHAAAAVmVjdG9yMxEAAIA/AAAA"
    "QAAAQEA="
)


@pytest.fixture
def raw():
    return base64.b64decode(ATTRIBUTES_BASE64)


@pytest.fixture
def decoded(raw):
    return Attributes.from_bytes(raw)


def test_decoded_keys_in_order(decoded):
    assert list(decoded) == [
        "Boolean",
        "BrickColor",
        "Color3",
        "ColorSequence",
        "Number",
        "NumberRange",
        "NumberSequence",
        "Rect",
        "String",
        "UDim",
        "UDim2",
        "Vector2",
        "Vector3",
    ]
    assert len(decoded) == 13


def test_decoded_simple_values(decoded):
    assert decoded.get("Boolean") == Variant(VariantType.Bool, True)
    assert decoded.get("BrickColor") == Variant(VariantType.BrickColor, BrickColor.REALLY_RED)
    assert decoded.get("Number") == Variant(VariantType.Float64, 12345.0)
    assert decoded.get("NumberRange") == Variant(VariantType.NumberRange, NumberRange(5.0, 10.0))
    assert decoded.get("String") == Variant(VariantType.BinaryString, BinaryString(b"Hello, world!"))
    assert decoded.get("UDim") == Variant(VariantType.UDim, UDim(0.5, 100))
    assert decoded.get("Vector2") == Variant(VariantType.Vector2, Vector2(10.0, 50.0))
    assert decoded.get("Vector3") == Variant(VariantType.Vector3, Vector3(1.0, 2.0, 3.0))
    assert decoded.get("Rect") == Variant(
        VariantType.Rect, Rect(Vector2(1.0, 2.0), Vector2(3.0, 4.0))
    )


def test_decoded_compound_values(decoded):
    color = decoded.get("Color3").value
    assert color.r == pytest.approx(0.6353, abs=1e-4)
    assert (color.g, color.b) == (0.0, 1.0)

    udim2 = decoded.get("UDim2").value
    assert udim2.x == UDim(0.5, 10)
    assert udim2.y.scale == pytest.approx(0.7, abs=1e-6)
    assert udim2.y.offset == 30

    assert decoded.get("ColorSequence").value == ColorSequence(
        (
            ColorSequenceKeypoint(0.0, Color3(1.0, 0.0, 0.0)),
            ColorSequenceKeypoint(0.5, Color3(0.0, 1.0, 0.0)),
            ColorSequenceKeypoint(1.0, Color3(0.0, 0.0, 1.0)),
        )
    )
    assert decoded.get("NumberSequence").value == NumberSequence(
        (
            NumberSequenceKeypoint(0.0, 1.0, 0.0),
            NumberSequenceKeypoint(0.5, 0.0, 0.0),
            NumberSequenceKeypoint(1.0, 1.0, 0.0),
        )
    )


def test_round_trip_attributes(decoded, raw):
    buffer = io.BytesIO()
    decoded.to_writer(buffer)
    written = buffer.getvalue()
    assert Attributes.from_reader(io.BytesIO(written)) == decoded
    assert written == raw


def test_attribute_removal():
    attributes = Attributes()
    attributes.insert("key", Variant(VariantType.Bool, True))
    assert attributes.remove("key") == Variant(VariantType.Bool, True)
    assert attributes.remove("key") is None
    assert len(attributes) == 0


def test_insert_returns_previous():
    attributes = Attributes()
    assert attributes.insert("a", 1.5) is None
    previous = attributes.insert("a", True)
    assert previous == Variant(VariantType.Float64, 1.5)
    assert attributes.get("a") == Variant(VariantType.Bool, True)


def test_items_sorted_by_key():
    attributes = Attributes({"b": True, "a": False, "c": True})
    assert [key for key, _ in attributes.items()] == ["a", "b", "c"]


def test_single_bool_encoding():
    attributes = Attributes({"a": True})
    assert attributes.to_bytes() == b"\x01\x00\x00\x00\x01\x00\x00\x00a\x03\x01"


def test_empty_encoding_round_trip():
    assert Attributes().to_bytes() == b"\x00\x00\x00\x00"
    assert len(Attributes.from_bytes(b"\x00\x00\x00\x00")) == 0


def test_json_round_trip():
    attributes = Attributes(
        {"flag": True, "pos": Vector3(1.0, 2.0, 3.0), "color": BrickColor.CAMO}
    )
    data = attributes.to_json()
    assert data == {
        "color": {"BrickColor": 1021},
        "flag": {"Bool": True},
        "pos": {"Vector3": [1.0, 2.0, 3.0]},
    }
    assert Attributes.from_json(data) == attributes


def test_type_ids():
    assert type_id_for(VariantType.Bool) == 0x03
    assert type_id_for(VariantType.Rect) == 0x1C
    assert type_id_for(VariantType.Int32) is None
    assert variant_type_for(0x19) is VariantType.ColorSequence
    assert variant_type_for(0x01) is None


def test_missing_length():
    with pytest.raises(AttributeFormatError, match="missing attribute list length"):
        Attributes.from_bytes(b"")


def test_missing_key():
    with pytest.raises(AttributeFormatError, match="missing attribute key name"):
        Attributes.from_bytes(b"\x01\x00\x00\x00")


def test_key_bad_unicode():
    with pytest.raises(AttributeFormatError, match="invalid UTF-8"):
        Attributes.from_bytes(b"\x01\x00\x00\x00\x01\x00\x00\x00\xff\x03\x01")


def test_missing_value_type():
    with pytest.raises(AttributeFormatError, match="missing attribute value type"):
        Attributes.from_bytes(b"\x01\x00\x00\x00\x01\x00\x00\x00a")


def test_invalid_value_type():
    with pytest.raises(AttributeFormatError, match="invalid value type: 1"):
        Attributes.from_bytes(b"\x01\x00\x00\x00\x01\x00\x00\x00a\x01")


def test_truncated_value():
    with pytest.raises(AttributeFormatError, match="deserialize Vector3 Y"):
        Attributes.from_bytes(b"\x01\x00\x00\x00\x01\x00\x00\x00a\x11\x00\x00\x80\x3f")


def test_invalid_brick_color():
    with pytest.raises(AttributeFormatError, match="invalid BrickColor value: 4"):
        Attributes.from_bytes(b"\x01\x00\x00\x00\x01\x00\x00\x00a\x0e\x04\x00\x00\x00")


def test_brick_color_number_truncated_to_16_bits():
    data = b"\x01\x00\x00\x00\x01\x00\x00\x00a\x0e\xec\x03\x01\x00"
    assert Attributes.from_bytes(data).get("a").value is BrickColor.REALLY_RED


def test_unsupported_type_on_write():
    attributes = Attributes({"n": Variant(VariantType.Int32, 5)})
    with pytest.raises(AttributeFormatError, match="Int32 values are not supported"):
        attributes.to_bytes()


def test_errors_share_base_class():
    with pytest.raises(RbxTypesError):
        Attributes.from_bytes(b"\x01")


def test_writer_failure_is_wrapped():
    class BrokenWriter:
        def write(self, data):
            raise OSError("disk full")

    with pytest.raises(AttributeFormatError, match="disk full"):
        Attributes({"a": True}).to_writer(BrokenWriter())


def test_non_string_key_rejected():
    with pytest.raises(TypeError):
        Attributes().insert(3, True)