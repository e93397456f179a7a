"""Plain value types: vectors, colors, regions, UI dimensions and sequences."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

_F32_EPSILON = 2.0 ** -23

_INT16 = (-(2 ** 15), 2 ** 15 - 1)
_INT32 = (-(2 ** 31), 2 ** 31 - 1)
_UINT8 = (0, 2 ** 8 - 1)
_UINT32 = (0, 2 ** 32 - 1)


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    return float(value)


def _as_int(value: Any, name: str, bounds: tuple[int, int]) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")
    return value


def _coerce_floats(obj: Any, *names: str) -> None:
    for name in names:
        object.__setattr__(obj, name, _as_float(getattr(obj, name), name))


def _check_ints(obj: Any, bounds: tuple[int, int], *names: str) -> None:
    for name in names:
        _as_int(getattr(obj, name), name, bounds)


def _check_type(value: Any, expected: type, name: str) -> None:
    if not isinstance(value, expected):
        raise TypeError(
            f"{name} must be a {expected.__name__}, got {type(value).__name__}"
        )


def _sequence(data: Any, length: int, what: str) -> list:
    if not isinstance(data, (list, tuple)):
        raise TypeError(f"expected {what} as a list of {length} elements")
    if len(data) != length:
        raise ValueError(
            f"expected {what} as a list of {length} elements, got {len(data)}"
        )
    return list(data)


def _mapping(data: Any, keys: tuple[str, ...], what: str) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"expected {what} as an object")
    missing = [key for key in keys if key not in data]
    if missing:
        raise ValueError(f"{what} is missing field(s): {', '.join(missing)}")
    return data


@dataclass(frozen=True)
class EnumValue:
    """Any enum value; its meaning depends on where it is assigned."""

    value: int

    def __post_init__(self) -> None:
        _check_ints(self, _UINT32, "value")

    def to_json(self) -> int:
        """Return the raw number."""
        return self.value

    @classmethod
    def from_json(cls, data: Any) -> EnumValue:
        """Build from a raw number."""
        return cls(_as_int(data, "value", _UINT32))


@dataclass(frozen=True)
class Vector2:
    """A 2D vector of floats."""

    x: float
    y: float

    def __post_init__(self) -> None:
        _coerce_floats(self, "x", "y")

    def to_json(self) -> list[float]:
        """Return ``[x, y]``."""
        return [self.x, self.y]

    @classmethod
    def from_json(cls, data: Any) -> Vector2:
        """Parse ``[x, y]``."""
        x, y = _sequence(data, 2, "Vector2")
        return cls(_as_float(x, "x"), _as_float(y, "y"))


@dataclass(frozen=True)
class Vector2int16:
    """A 2D vector of signed 16-bit integers."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_ints(self, _INT16, "x", "y")

    def to_json(self) -> list[int]:
        """Return ``[x, y]``."""
        return [self.x, self.y]

    @classmethod
    def from_json(cls, data: Any) -> Vector2int16:
        """Parse ``[x, y]``."""
        x, y = _sequence(data, 2, "Vector2int16")
        return cls(x, y)


def _approx_unit_or_zero(value: float) -> Optional[int]:
    magnitude = abs(value)
    if magnitude <= _F32_EPSILON:
        return 0
    if magnitude - 1.0 <= _F32_EPSILON:
        return int(math.copysign(1.0, value))
    return None


def _normal_id(position: int, value: Optional[int]) -> Optional[int]:
    if value == 1:
        return position
    if value == -1:
        return position + 3
    return None


@dataclass(frozen=True)
class Vector3:
    """A 3D vector of floats."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        _coerce_floats(self, "x", "y", "z")

    def to_normal_id(self) -> Optional[int]:
        """Return the id of the basis vector this is, or None.

        +X, +Y, +Z map to 0, 1, 2 and -X, -Y, -Z to 3, 4, 5.
        """
        x = _approx_unit_or_zero(self.x)
        y = _approx_unit_or_zero(self.y)
        z = _approx_unit_or_zero(self.z)

        if x is not None and y == 0 and z == 0:
            return _normal_id(0, x)
        if x == 0 and y is not None and z == 0:
            return _normal_id(1, y)
        if x == 0 and y == 0 and z is not None:
            return _normal_id(2, z)
        return None

    def to_json(self) -> list[float]:
        """Return ``[x, y, z]``."""
        return [self.x, self.y, self.z]

    @classmethod
    def from_json(cls, data: Any) -> Vector3:
        """Parse ``[x, y, z]``."""
        x, y, z = _sequence(data, 3, "Vector3")
        return cls(_as_float(x, "x"), _as_float(y, "y"), _as_float(z, "z"))


@dataclass(frozen=True)
class Vector3int16:
    """A 3D vector of signed 16-bit integers, common in terrain work."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        _check_ints(self, _INT16, "x", "y", "z")

    def to_json(self) -> list[int]:
        """Return ``[x, y, z]``."""
        return [self.x, self.y, self.z]

    @classmethod
    def from_json(cls, data: Any) -> Vector3int16:
        """Parse ``[x, y, z]``."""
        x, y, z = _sequence(data, 3, "Vector3int16")
        return cls(x, y, z)


@dataclass(frozen=True)
class Matrix3:
    """A 3x3 rotation matrix given as three row vectors."""

    x: Vector3
    y: Vector3
    z: Vector3

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            _check_type(getattr(self, name), Vector3, name)

    @classmethod
    def identity(cls) -> Matrix3:
        """Return the identity matrix."""
        return cls(
            Vector3(1.0, 0.0, 0.0),
            Vector3(0.0, 1.0, 0.0),
            Vector3(0.0, 0.0, 1.0),
        )

    def transpose(self) -> Matrix3:
        """Return the transposed matrix."""
        return Matrix3(
            Vector3(self.x.x, self.y.x, self.z.x),
            Vector3(self.x.y, self.y.y, self.z.y),
            Vector3(self.x.z, self.y.z, self.z.z),
        )

    def to_json(self) -> list[list[float]]:
        """Return the three rows as nested lists."""
        return [self.x.to_json(), self.y.to_json(), self.z.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> Matrix3:
        """Parse three rows of three numbers."""
        x, y, z = _sequence(data, 3, "Matrix3")
        return cls(Vector3.from_json(x), Vector3.from_json(y), Vector3.from_json(z))


@dataclass(frozen=True)
class CFrame:
    """A position and orientation in 3D space."""

    position: Vector3
    orientation: Matrix3

    def __post_init__(self) -> None:
        _check_type(self.position, Vector3, "position")
        _check_type(self.orientation, Matrix3, "orientation")

    def to_json(self) -> dict[str, Any]:
        """Return ``{"position": ..., "orientation": ...}``."""
        return {
            "position": self.position.to_json(),
            "orientation": self.orientation.to_json(),
        }

    @classmethod
    def from_json(cls, data: Any) -> CFrame:
        """Parse the object form produced by :meth:`to_json`."""
        fields = _mapping(data, ("position", "orientation"), "CFrame")
        return cls(
            Vector3.from_json(fields["position"]),
            Matrix3.from_json(fields["orientation"]),
        )


@dataclass(frozen=True)
class Color3:
    """A color with float channels; channels may exceed 1 for HDR."""

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        _coerce_floats(self, "r", "g", "b")

    @classmethod
    def from_uint8(cls, value: Color3uint8) -> Color3:
        """Convert from 8-bit channels to the 0..1 range."""
        _check_type(value, Color3uint8, "value")
        return cls(value.r / 255.0, value.g / 255.0, value.b / 255.0)

    def to_json(self) -> list[float]:
        """Return ``[r, g, b]``."""
        return [self.r, self.g, self.b]

    @classmethod
    def from_json(cls, data: Any) -> Color3:
        """Parse ``[r, g, b]``."""
        r, g, b = _sequence(data, 3, "Color3")
        return cls(_as_float(r, "r"), _as_float(g, "g"), _as_float(b, "b"))


def _channel_to_uint8(value: float) -> int:
    if math.isnan(value):
        return 0
    clamped = min(max(value, 0.0), 1.0)
    return int(math.floor(clamped * 255.0 + 0.5))


@dataclass(frozen=True)
class Color3uint8:
    """A non-HDR color with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_ints(self, _UINT8, "r", "g", "b")

    @classmethod
    def from_color3(cls, value: Color3) -> Color3uint8:
        """Clamp each channel to 0..1 and scale it to 0..255, rounding."""
        _check_type(value, Color3, "value")
        return cls(
            _channel_to_uint8(value.r),
            _channel_to_uint8(value.g),
            _channel_to_uint8(value.b),
        )

    def to_json(self) -> list[int]:
        """Return ``[r, g, b]``."""
        return [self.r, self.g, self.b]

    @classmethod
    def from_json(cls, data: Any) -> Color3uint8:
        """Parse ``[r, g, b]``."""
        r, g, b = _sequence(data, 3, "Color3uint8")
        return cls(r, g, b)


@dataclass(frozen=True)
class Ray:
    """A ray in 3D space; the direction's length sets a maximum distance."""

    origin: Vector3
    direction: Vector3

    def __post_init__(self) -> None:
        _check_type(self.origin, Vector3, "origin")
        _check_type(self.direction, Vector3, "direction")

    def to_json(self) -> dict[str, Any]:
        """Return ``{"origin": ..., "direction": ...}``."""
        return {"origin": self.origin.to_json(), "direction": self.direction.to_json()}

    @classmethod
    def from_json(cls, data: Any) -> Ray:
        """Parse the object form produced by :meth:`to_json`."""
        fields = _mapping(data, ("origin", "direction"), "Ray")
        return cls(
            Vector3.from_json(fields["origin"]),
            Vector3.from_json(fields["direction"]),
        )


@dataclass(frozen=True)
class Region3:
    """A bounding box in 3D space."""

    min: Vector3
    max: Vector3

    def __post_init__(self) -> None:
        _check_type(self.min, Vector3, "min")
        _check_type(self.max, Vector3, "max")

    def to_json(self) -> list[list[float]]:
        """Return ``[min, max]``."""
        return [self.min.to_json(), self.max.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> Region3:
        """Parse ``[min, max]``."""
        low, high = _sequence(data, 2, "Region3")
        return cls(Vector3.from_json(low), Vector3.from_json(high))


@dataclass(frozen=True)
class Region3int16:
    """A bounding box in 3D space with 16-bit integer corners."""

    min: Vector3int16
    max: Vector3int16

    def __post_init__(self) -> None:
        _check_type(self.min, Vector3int16, "min")
        _check_type(self.max, Vector3int16, "max")

    def to_json(self) -> list[list[int]]:
        """Return ``[min, max]``."""
        return [self.min.to_json(), self.max.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> Region3int16:
        """Parse ``[min, max]``."""
        low, high = _sequence(data, 2, "Region3int16")
        return cls(Vector3int16.from_json(low), Vector3int16.from_json(high))


@dataclass(frozen=True)
class Rect:
    """A bounding rectangle in 2D space."""

    min: Vector2
    max: Vector2

    def __post_init__(self) -> None:
        _check_type(self.min, Vector2, "min")
        _check_type(self.max, Vector2, "max")

    def to_json(self) -> list[list[float]]:
        """Return ``[min, max]``."""
        return [self.min.to_json(), self.max.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> Rect:
        """Parse ``[min, max]``."""
        low, high = _sequence(data, 2, "Rect")
        return cls(Vector2.from_json(low), Vector2.from_json(high))


@dataclass(frozen=True)
class UDim:
    """A UI length: a fraction of the container plus a pixel offset."""

    scale: float
    offset: int

    def __post_init__(self) -> None:
        _coerce_floats(self, "scale")
        _check_ints(self, _INT32, "offset")

    def to_json(self) -> list:
        """Return ``[scale, offset]``."""
        return [self.scale, self.offset]

    @classmethod
    def from_json(cls, data: Any) -> UDim:
        """Parse ``[scale, offset]``."""
        scale, offset = _sequence(data, 2, "UDim")
        return cls(_as_float(scale, "scale"), offset)


@dataclass(frozen=True)
class UDim2:
    """A 2D UI size or position made of two UDims."""

    x: UDim
    y: UDim

    def __post_init__(self) -> None:
        _check_type(self.x, UDim, "x")
        _check_type(self.y, UDim, "y")

    def to_json(self) -> list[list]:
        """Return ``[x, y]``."""
        return [self.x.to_json(), self.y.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> UDim2:
        """Parse ``[x, y]``."""
        x, y = _sequence(data, 2, "UDim2")
        return cls(UDim.from_json(x), UDim.from_json(y))


@dataclass(frozen=True)
class NumberRange:
    """A range between two numbers."""

    min: float
    max: float

    def __post_init__(self) -> None:
        _coerce_floats(self, "min", "max")

    def to_json(self) -> list[float]:
        """Return ``[min, max]``."""
        return [self.min, self.max]

    @classmethod
    def from_json(cls, data: Any) -> NumberRange:
        """Parse ``[min, max]``."""
        low, high = _sequence(data, 2, "NumberRange")
        return cls(_as_float(low, "min"), _as_float(high, "max"))


@dataclass(frozen=True)
class ColorSequenceKeypoint:
    """A single color at a point in time of a ColorSequence."""

    time: float
    color: Color3

    def __post_init__(self) -> None:
        _coerce_floats(self, "time")
        _check_type(self.color, Color3, "color")

    def to_json(self) -> dict[str, Any]:
        """Return ``{"time": ..., "color": ...}``."""
        return {"time": self.time, "color": self.color.to_json()}

    @classmethod
    def from_json(cls, data: Any) -> ColorSequenceKeypoint:
        """Parse the object form produced by :meth:`to_json`."""
        fields = _mapping(data, ("time", "color"), "ColorSequenceKeypoint")
        return cls(_as_float(fields["time"], "time"), Color3.from_json(fields["color"]))


@dataclass(frozen=True)
class ColorSequence:
    """A series of colors that can be tweened through."""

    keypoints: tuple[ColorSequenceKeypoint, ...] = ()

    def __post_init__(self) -> None:
        keypoints = tuple(self.keypoints)
        for keypoint in keypoints:
            _check_type(keypoint, ColorSequenceKeypoint, "keypoint")
        object.__setattr__(self, "keypoints", keypoints)

    def to_json(self) -> dict[str, Any]:
        """Return ``{"keypoints": [...]}``."""
        return {"keypoints": [keypoint.to_json() for keypoint in self.keypoints]}

    @classmethod
    def from_json(cls, data: Any) -> ColorSequence:
        """Parse the object form produced by :meth:`to_json`."""
        fields = _mapping(data, ("keypoints",), "ColorSequence")
        items = fields["keypoints"]
        if not isinstance(items, (list, tuple)):
            raise TypeError("ColorSequence keypoints must be a list")
        return cls(tuple(ColorSequenceKeypoint.from_json(item) for item in items))


@dataclass(frozen=True)
class NumberSequenceKeypoint:
    """A value, envelope and point in time of a NumberSequence."""

    time: float
    value: float
    envelope: float

    def __post_init__(self) -> None:
        _coerce_floats(self, "time", "value", "envelope")

    def to_json(self) -> dict[str, float]:
        """Return ``{"time": ..., "value": ..., "envelope": ...}``."""
        return {"time": self.time, "value": self.value, "envelope": self.envelope}

    @classmethod
    def from_json(cls, data: Any) -> NumberSequenceKeypoint:
        """Parse the object form produced by :meth:`to_json`."""
        fields = _mapping(data, ("time", "value", "envelope"), "NumberSequenceKeypoint")
        return cls(
            _as_float(fields["time"], "time"),
            _as_float(fields["value"], "value"),
            _as_float(fields["envelope"], "envelope"),
        )


@dataclass(frozen=True)
class NumberSequence:
    """A sequence of numbers on a timeline."""

    keypoints: tuple[NumberSequenceKeypoint, ...] = ()

    def __post_init__(self) -> None:
        keypoints = tuple(self.keypoints)
        for keypoint in keypoints:
            _check_type(keypoint, NumberSequenceKeypoint, "keypoint")
        object.__setattr__(self, "keypoints", keypoints)

    def to_json(self) -> dict[str, Any]:
        """Return ``{"keypoints": [...]}``."""
        return {"keypoints": [keypoint.to_json() for keypoint in self.keypoints]}

    @classmethod
    def from_json(cls, data: Any) -> NumberSequence:
        """Parse the object form produced by :meth:`to_json`."""
        fields = _mapping(data, ("keypoints",), "NumberSequence")
        items = fields["keypoints"]
        if not isinstance(items, (list, tuple)):
            raise TypeError("NumberSequence keypoints must be a list")
        return cls(tuple(NumberSequenceKeypoint.from_json(item) for item in items))