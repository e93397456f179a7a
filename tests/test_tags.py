import json

import pytest

from robloxtypes.tags import Tags


def test_serialization():
    serialized = '["foo","grandma\'s","coat?","bar"]'
    expected = Tags(["foo", "grandma's", "coat?", "bar"])

    assert json.dumps(expected.to_json(), separators=(",", ":")) == serialized
    assert Tags.from_json(json.loads(serialized)) == expected


def test_decode_encode():
    value = b"ez\0pz"
    tags = Tags.decode(value)

    assert list(tags) == ["ez", "pz"]
    assert tags.encode() == value


def test_decode_empty():
    result = Tags.decode(b"")
    assert list(result) == []
    assert len(result) == 0


def test_decode_skips_empty_segments():
    assert list(Tags.decode(b"\0a\0\0b\0")) == ["a", "b"]


def test_decode_bad_utf8():
    with pytest.raises(UnicodeDecodeError):
        Tags.decode(b"ok\0\xff\xfe")


def test_push_allows_duplicates():
    tags = Tags()
    tags.push("one")
    tags.push("one")
    assert list(tags) == ["one", "one"]
    assert tags.encode() == b"one\0one"


def test_from_json_rejects_non_strings():
    with pytest.raises(TypeError):
        Tags.from_json(["a", 1])


def test_push_rejects_non_string():
    with pytest.raises(TypeError):
        Tags().push(5)