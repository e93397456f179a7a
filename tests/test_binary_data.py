import json

import pytest

from robloxtypes.binary_data import BinaryString, Content


def test_binary_string_human():
    data = BinaryString(b"hello")
    ser = json.dumps(data.to_json())
    assert ser == '"aGVsbG8="'
    assert BinaryString.from_json(json.loads(ser)) == data


def test_binary_string_non_human():
    data = BinaryString(b"world")
    assert BinaryString.from_json(bytes(data)) == data


def test_binary_string_default_and_len():
    assert bytes(BinaryString()) == b""
    assert len(BinaryString(b"abc")) == 3
    assert bytes(BinaryString(bytearray([1, 2, 3]))) == b"\x01\x02\x03"


def test_binary_string_invalid_base64():
    with pytest.raises(ValueError):
        BinaryString.from_json("not base64!!")


def test_binary_string_rejects_str():
    with pytest.raises(TypeError):
        BinaryString("text")


def test_binary_string_hashable():
    assert len({BinaryString(b"a"), BinaryString(b"a"), BinaryString(b"b")}) == 2


def test_content_round_trip():
    content = Content("rbxassetid://12345")
    assert str(content) == "rbxassetid://12345"
    assert content.to_json() == "rbxassetid://12345"
    assert Content.from_json(content.to_json()) == content


def test_content_default_empty():
    assert str(Content()) == ""


def test_content_from_json_rejects_non_string():
    with pytest.raises(TypeError):
        Content.from_json(5)