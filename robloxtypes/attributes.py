"""Attribute maps and their binary serialized form."""

from __future__ import annotations

import io
import math
import struct
from typing import Any, BinaryIO, Callable, Iterable, Iterator, Mapping, Optional, Union

from .basic_types import (
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
from .binary_data import BinaryString
from .brick_color import BrickColor
from .errors import AttributeFormatError
from .variant import Variant, VariantType

_TYPE_IDS: dict[VariantType, int] = {
    VariantType.BinaryString: 0x02,
    VariantType.Bool: 0x03,
    VariantType.Float32: 0x05,
    VariantType.Float64: 0x06,
    VariantType.UDim: 0x09,
    VariantType.UDim2: 0x0A,
    VariantType.BrickColor: 0x0E,
    VariantType.Color3: 0x0F,
    VariantType.Vector2: 0x10,
    VariantType.Vector3: 0x11,
    VariantType.NumberSequence: 0x17,
    VariantType.ColorSequence: 0x19,
    VariantType.NumberRange: 0x1B,
    VariantType.Rect: 0x1C,
}

_VARIANT_TYPES: dict[int, VariantType] = {tid: ty for ty, tid in _TYPE_IDS.items()}


def type_id_for(variant_type: VariantType) -> Optional[int]:
    """Return the attribute type byte for a variant type, or None."""
    return _TYPE_IDS.get(variant_type)


def variant_type_for(type_id: int) -> Optional[VariantType]:
    """Return the variant type for an attribute type byte, or None."""
    return _VARIANT_TYPES.get(type_id)


class _ShortRead(Exception):
    """The stream ended or failed before enough bytes were read."""


_U8 = struct.Struct("<B")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_F32 = struct.Struct("<f")
_F64 = struct.Struct("<d")


class _Reader:
    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def read_exact(self, size: int) -> bytes:
        chunks = []
        remaining = size
        while remaining:
            try:
                chunk = self._stream.read(remaining)
            except OSError as err:
                raise _ShortRead from err
            if not chunk:
                raise _ShortRead
            chunks.append(bytes(chunk))
            remaining -= len(chunk)
        return b"".join(chunks)

    def _unpack(self, fmt: struct.Struct) -> Any:
        return fmt.unpack(self.read_exact(fmt.size))[0]

    def u8(self) -> int:
        return self._unpack(_U8)

    def u32(self) -> int:
        return self._unpack(_U32)

    def i32(self) -> int:
        return self._unpack(_I32)

    def f32(self) -> float:
        return self._unpack(_F32)

    def f64(self) -> float:
        return self._unpack(_F64)

    def string(self) -> bytes:
        return self.read_exact(self.u32())

    def color3(self) -> Color3:
        return Color3(self.f32(), self.f32(), self.f32())

    def udim(self) -> UDim:
        return UDim(self.f32(), self.i32())

    def vector2(self) -> Vector2:
        return Vector2(self.f32(), self.f32())


def _field(what: str, read: Callable[[], Any]) -> Any:
    try:
        return read()
    except _ShortRead:
        raise AttributeFormatError.read_type(what) from None


def _read_brick_color(reader: _Reader) -> Any:
    number = _field("BrickColor", reader.u32)
    color = BrickColor.from_number(number & 0xFFFF)
    if color is None:
        raise AttributeFormatError.invalid_brick_color(number)
    return color


def _read_color_sequence(reader: _Reader) -> ColorSequence:
    size = _field("ColorSequence length", reader.u32)
    keypoints = []
    for _ in range(size):
        # The envelope is always zero and carries no information.
        _field("ColorSequenceKeypoint envelope", reader.f32)
        time = _field("ColorSequenceKeypoint time", reader.f32)
        color = _field("ColorSequenceKeypoint color", reader.color3)
        keypoints.append(ColorSequenceKeypoint(time, color))
    return ColorSequence(tuple(keypoints))


def _read_number_sequence(reader: _Reader) -> NumberSequence:
    size = _field("NumberSequence length", reader.u32)
    keypoints = []
    for _ in range(size):
        envelope = _field("NumberSequence envelope", reader.f32)
        time = _field("NumberSequence time", reader.f32)
        value = _field("NumberSequence value", reader.f32)
        keypoints.append(NumberSequenceKeypoint(time, value, envelope))
    return NumberSequence(tuple(keypoints))


_VALUE_READERS: dict[VariantType, Callable[[_Reader], Any]] = {
    VariantType.BrickColor: _read_brick_color,
    VariantType.Bool: lambda r: _field("bool", r.u8) != 0,
    VariantType.Color3: lambda r: _field("Color3", r.color3),
    VariantType.ColorSequence: _read_color_sequence,
    VariantType.Float32: lambda r: _field("float32", r.f32),
    VariantType.Float64: lambda r: _field("float64", r.f64),
    VariantType.NumberRange: lambda r: NumberRange(
        _field("NumberRange min", r.f32), _field("NumberRange max", r.f32)
    ),
    VariantType.NumberSequence: _read_number_sequence,
    VariantType.Rect: lambda r: Rect(
        _field("Rect min", r.vector2), _field("Rect max", r.vector2)
    ),
    VariantType.BinaryString: lambda r: BinaryString(_field("string", r.string)),
    VariantType.UDim: lambda r: _field("UDim", r.udim),
    VariantType.UDim2: lambda r: UDim2(
        _field("UDim2 X", r.udim), _field("UDim2 Y", r.udim)
    ),
    VariantType.Vector2: lambda r: Vector2(
        _field("Vector2 X", r.f32), _field("Vector2 Y", r.f32)
    ),
    VariantType.Vector3: lambda r: Vector3(
        _field("Vector3 X", r.f32),
        _field("Vector3 Y", r.f32),
        _field("Vector3 Z", r.f32),
    ),
}


def _read_attributes(stream: BinaryIO) -> dict[str, Variant]:
    reader = _Reader(stream)
    try:
        count = reader.u32()
    except _ShortRead:
        raise AttributeFormatError.invalid_length() from None

    attributes: dict[str, Variant] = {}
    for _ in range(count):
        try:
            key_bytes = reader.string()
        except _ShortRead:
            raise AttributeFormatError.no_key() from None
        try:
            key = key_bytes.decode("utf-8")
        except UnicodeDecodeError as err:
            raise AttributeFormatError.key_bad_unicode(err) from err

        try:
            type_id = reader.u8()
        except _ShortRead:
            raise AttributeFormatError.no_value_type() from None
        ty = variant_type_for(type_id)
        if ty is None:
            raise AttributeFormatError.invalid_value_type(type_id)

        read_value = _VALUE_READERS.get(ty)
        if read_value is None:
            raise AttributeFormatError.unsupported_variant_type(ty)
        attributes[key] = Variant(ty, read_value(reader))

    return attributes


def _pack_f32(value: float) -> bytes:
    try:
        return _F32.pack(value)
    except OverflowError:
        return _F32.pack(math.copysign(math.inf, value))


def _pack_u32(value: int) -> bytes:
    return _U32.pack(value)


def _pack_string(data: bytes) -> bytes:
    return _pack_u32(len(data)) + data


def _pack_color3(color: Color3) -> bytes:
    return _pack_f32(color.r) + _pack_f32(color.g) + _pack_f32(color.b)


def _pack_vector2(vector: Vector2) -> bytes:
    return _pack_f32(vector.x) + _pack_f32(vector.y)


def _pack_udim(udim: UDim) -> bytes:
    return _pack_f32(udim.scale) + _I32.pack(udim.offset)


def _pack_value(variant: Variant) -> bytes:
    ty = variant.ty()
    value = variant.value
    if ty is VariantType.Bool:
        return bytes([1 if value else 0])
    if ty is VariantType.BrickColor:
        return _pack_u32(value.number)
    if ty is VariantType.Color3:
        return _pack_color3(value)
    if ty is VariantType.ColorSequence:
        parts = [_pack_u32(len(value.keypoints))]
        for keypoint in value.keypoints:
            parts.append(_pack_f32(0.0))
            parts.append(_pack_f32(keypoint.time))
            parts.append(_pack_color3(keypoint.color))
        return b"".join(parts)
    if ty is VariantType.Float32:
        return _pack_f32(value)
    if ty is VariantType.Float64:
        return _F64.pack(value)
    if ty is VariantType.NumberRange:
        return _pack_f32(value.min) + _pack_f32(value.max)
    if ty is VariantType.NumberSequence:
        parts = [_pack_u32(len(value.keypoints))]
        for keypoint in value.keypoints:
            parts.append(_pack_f32(keypoint.envelope))
            parts.append(_pack_f32(keypoint.time))
            parts.append(_pack_f32(keypoint.value))
        return b"".join(parts)
    if ty is VariantType.Rect:
        return _pack_vector2(value.min) + _pack_vector2(value.max)
    if ty is VariantType.BinaryString:
        return _pack_string(bytes(value))
    if ty is VariantType.UDim:
        return _pack_udim(value)
    if ty is VariantType.UDim2:
        return _pack_udim(value.x) + _pack_udim(value.y)
    if ty is VariantType.Vector2:
        return _pack_vector2(value)
    if ty is VariantType.Vector3:
        return _pack_f32(value.x) + _pack_f32(value.y) + _pack_f32(value.z)
    raise AttributeFormatError.unsupported_variant_type(ty)


def _encode_attributes(items: Iterable[tuple[str, Variant]]) -> bytes:
    items = list(items)
    parts = [_pack_u32(len(items))]
    for name, variant in items:
        parts.append(_pack_string(name.encode("utf-8")))
        type_id = type_id_for(variant.ty())
        if type_id is None:
            raise AttributeFormatError.unsupported_variant_type(variant.ty())
        parts.append(bytes([type_id]))
        parts.append(_pack_value(variant))
    return b"".join(parts)


def _check_key(key: Any) -> str:
    if not isinstance(key, str):
        raise TypeError(f"attribute keys must be str, got {type(key).__name__}")
    return key


_Entries = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


class Attributes:
    """A map of attribute names to values, kept in key order."""

    __slots__ = ("_data",)

    def __init__(self, entries: Optional[_Entries] = None) -> None:
        self._data: dict[str, Variant] = {}
        if entries is None:
            return
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in pairs:
            self.insert(key, value)

    @classmethod
    def from_reader(cls, reader: BinaryIO) -> Attributes:
        """Read serialized attributes from a binary stream."""
        attributes = cls()
        attributes._data = _read_attributes(reader)
        return attributes

    @classmethod
    def from_bytes(cls, data: bytes) -> Attributes:
        """Read serialized attributes from a bytes object."""
        return cls.from_reader(io.BytesIO(bytes(data)))

    def to_writer(self, writer: BinaryIO) -> None:
        """Write the serialized attributes to a binary stream."""
        data = self.to_bytes()
        try:
            writer.write(data)
        except OSError as err:
            raise AttributeFormatError.io_error(err) from err

    def to_bytes(self) -> bytes:
        """Return the serialized attributes."""
        return _encode_attributes(self.items())

    def get(self, key: str) -> Optional[Variant]:
        """Return the attribute with this key, or None."""
        return self._data.get(key)

    def insert(self, key: str, value: Any) -> Optional[Variant]:
        """Set an attribute; return the value it replaced, if any."""
        key = _check_key(key)
        previous = self._data.get(key)
        self._data[key] = Variant.from_value(value)
        return previous

    def remove(self, key: str) -> Optional[Variant]:
        """Remove an attribute; return its value, if it existed."""
        return self._data.pop(key, None)

    def items(self) -> list[tuple[str, Variant]]:
        """Return the (key, value) pairs in key order."""
        return sorted(self._data.items(), key=lambda pair: pair[0])

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        inner = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"Attributes({{{inner}}})"

    def to_json(self) -> dict[str, Any]:
        """Return a mapping of keys to each value's JSON form."""
        return {key: value.to_json() for key, value in self.items()}

    @classmethod
    def from_json(cls, data: Any) -> Attributes:
        """Parse the form produced by :meth:`to_json`."""
        if not isinstance(data, dict):
            raise TypeError("expected Attributes as an object")
        return cls((key, Variant.from_json(value)) for key, value in data.items())