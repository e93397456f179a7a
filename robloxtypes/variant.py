"""A tagged value that can hold any of the supported types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .basic_types import (
    CFrame,
    Color3,
    Color3uint8,
    ColorSequence,
    EnumValue,
    NumberRange,
    NumberSequence,
    Ray,
    Rect,
    Region3,
    Region3int16,
    UDim,
    UDim2,
    Vector2,
    Vector2int16,
    Vector3,
    Vector3int16,
)
from .binary_data import BinaryString, Content
from .brick_color import BrickColor
from .flags import Axes, Faces
from .physical_properties import PhysicalProperties
from .referent import Ref
from .shared_string import SharedString
from .tags import Tags


class VariantType(Enum):
    """Every type a Variant can hold. Values are stable; new ones go last."""

    Axes = 0
    BinaryString = 1
    Bool = 2
    BrickColor = 3
    CFrame = 4
    Color3 = 5
    Color3uint8 = 6
    ColorSequence = 7
    Content = 8
    Enum = 9
    Faces = 10
    Float32 = 11
    Float64 = 12
    Int32 = 13
    Int64 = 14
    NumberRange = 15
    NumberSequence = 16
    PhysicalProperties = 17
    Ray = 18
    Rect = 19
    Ref = 20
    Region3 = 21
    Region3int16 = 22
    SharedString = 23
    String = 24
    UDim = 25
    UDim2 = 26
    Vector2 = 27
    Vector2int16 = 28
    Vector3 = 29
    Vector3int16 = 30
    OptionalCFrame = 31
    Tags = 32
    Attributes = 33


_CLASSES: dict[VariantType, type] = {
    VariantType.Axes: Axes,
    VariantType.BinaryString: BinaryString,
    VariantType.BrickColor: BrickColor,
    VariantType.CFrame: CFrame,
    VariantType.Color3: Color3,
    VariantType.Color3uint8: Color3uint8,
    VariantType.ColorSequence: ColorSequence,
    VariantType.Content: Content,
    VariantType.Enum: EnumValue,
    VariantType.Faces: Faces,
    VariantType.NumberRange: NumberRange,
    VariantType.NumberSequence: NumberSequence,
    VariantType.PhysicalProperties: PhysicalProperties,
    VariantType.Ray: Ray,
    VariantType.Rect: Rect,
    VariantType.Ref: Ref,
    VariantType.Region3: Region3,
    VariantType.Region3int16: Region3int16,
    VariantType.SharedString: SharedString,
    VariantType.UDim: UDim,
    VariantType.UDim2: UDim2,
    VariantType.Vector2: Vector2,
    VariantType.Vector2int16: Vector2int16,
    VariantType.Vector3: Vector3,
    VariantType.Vector3int16: Vector3int16,
    VariantType.Tags: Tags,
}

_INT_BOUNDS = {
    VariantType.Int32: (-(2 ** 31), 2 ** 31 - 1),
    VariantType.Int64: (-(2 ** 63), 2 ** 63 - 1),
}

_SHARED_STRING_MESSAGE = "SharedString cannot be {} as part of a Variant"


def _class_for(ty: VariantType) -> type:
    if ty is VariantType.Attributes:
        from .attributes import Attributes

        return Attributes
    return _CLASSES[ty]


def _checked(ty: VariantType, value: Any) -> Any:
    if ty is VariantType.Bool:
        if not isinstance(value, bool):
            raise TypeError("Bool variant needs a bool")
        return value
    if ty in (VariantType.Float32, VariantType.Float64):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{ty.name} variant needs a number")
        return float(value)
    if ty in _INT_BOUNDS:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{ty.name} variant needs an int")
        low, high = _INT_BOUNDS[ty]
        if not low <= value <= high:
            raise ValueError(f"{ty.name} value out of range: {value}")
        return value
    if ty is VariantType.String:
        if not isinstance(value, str):
            raise TypeError("String variant needs a str")
        return value
    if ty is VariantType.OptionalCFrame:
        if value is not None and not isinstance(value, CFrame):
            raise TypeError("OptionalCFrame variant needs a CFrame or None")
        return value
    expected = _class_for(ty)
    if not isinstance(value, expected):
        raise TypeError(
            f"{ty.name} variant needs a {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _type_of(value: Any) -> VariantType:
    if isinstance(value, bool):
        return VariantType.Bool
    if isinstance(value, int):
        return VariantType.Int64
    if isinstance(value, float):
        return VariantType.Float64
    if isinstance(value, str):
        return VariantType.String
    if value is None:
        return VariantType.OptionalCFrame
    for ty, cls in _CLASSES.items():
        if isinstance(value, cls):
            return ty
    if _class_for(VariantType.Attributes) is type(value):
        return VariantType.Attributes
    raise TypeError(f"{type(value).__name__} cannot be held in a Variant")


@dataclass(frozen=True)
class Variant:
    """A value tagged with its type."""

    variant_type: VariantType
    value: Any

    def __post_init__(self) -> None:
        if not isinstance(self.variant_type, VariantType):
            raise TypeError("variant_type must be a VariantType")
        object.__setattr__(self, "value", _checked(self.variant_type, self.value))

    def ty(self) -> VariantType:
        """Return the type of the held value."""
        return self.variant_type

    @classmethod
    def from_value(cls, value: Any) -> Variant:
        """Wrap a value, choosing its type from its Python type.

        ``int`` becomes Int64, ``float`` Float64, ``str`` String and
        ``None`` an empty OptionalCFrame. A Variant is returned unchanged.
        """
        if isinstance(value, Variant):
            return value
        return cls(_type_of(value), value)

    def to_json(self) -> dict[str, Any]:
        """Return ``{type_name: payload}``; SharedString raises ValueError."""
        ty = self.variant_type
        value = self.value
        if ty is VariantType.SharedString:
            raise ValueError(_SHARED_STRING_MESSAGE.format("serialized"))
        if ty is VariantType.OptionalCFrame:
            payload = None if value is None else value.to_json()
        elif isinstance(value, (bool, int, float, str)):
            payload = value
        else:
            payload = value.to_json()
        return {ty.name: payload}

    @classmethod
    def from_json(cls, data: Any) -> Variant:
        """Parse the form produced by :meth:`to_json`."""
        if not isinstance(data, dict) or len(data) != 1:
            raise TypeError("expected a Variant as an object with one key")
        ((name, payload),) = data.items()
        try:
            ty = VariantType[name]
        except KeyError:
            raise ValueError(f"unknown variant '{name}'") from None
        if ty is VariantType.SharedString:
            raise ValueError(_SHARED_STRING_MESSAGE.format("deserialized"))
        if ty is VariantType.OptionalCFrame:
            return cls(ty, None if payload is None else CFrame.from_json(payload))
        if ty in (
            VariantType.Bool,
            VariantType.Float32,
            VariantType.Float64,
            VariantType.Int32,
            VariantType.Int64,
            VariantType.String,
        ):
            return cls(ty, payload)
        return cls(ty, _class_for(ty).from_json(payload))