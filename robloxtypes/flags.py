"""Bit-flag sets of 3D axes and cube faces."""

from __future__ import annotations

from typing import Any, ClassVar


class _FlagSet:
    """An immutable set of named single-bit flags packed into one byte."""

    __slots__ = ("_bits",)

    _MEMBERS: ClassVar[tuple[tuple[str, int], ...]] = ()
    _KIND: ClassVar[str] = "flag"

    def __init__(self, bits: int = 0) -> None:
        if isinstance(bits, bool) or not isinstance(bits, int):
            raise TypeError(f"{type(self).__name__} bits must be an int")
        if bits & ~self._mask():
            raise ValueError(f"value must a u8 bitmask of {self._KIND}s")
        object.__setattr__(self, "_bits", bits)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def _mask(cls) -> int:
        mask = 0
        for _, bit in cls._MEMBERS:
            mask |= bit
        return mask

    @classmethod
    def _from_bits(cls, bits: int):
        if isinstance(bits, bool) or not isinstance(bits, int):
            raise TypeError(f"{cls.__name__} bits must be an int")
        if bits < 0 or bits > 0xFF or bits & ~cls._mask():
            raise ValueError(f"value must a u8 bitmask of {cls._KIND}s")
        return cls(bits)

    @classmethod
    def _from_json(cls, data: Any):
        if isinstance(data, bool):
            raise TypeError(f"expected a list of strings representing {cls._KIND}s")
        if isinstance(data, int):
            return cls._from_bits(data)
        if not isinstance(data, (list, tuple)):
            raise TypeError(f"expected a list of strings representing {cls._KIND}s")
        lookup = dict(cls._MEMBERS)
        bits = 0
        for name in data:
            if not isinstance(name, str) or name not in lookup:
                raise ValueError(f"invalid {cls._KIND} '{name}'")
            bits |= lookup[name]
        return cls(bits)

    def _contains(self, other) -> bool:
        if type(other) is not type(self):
            raise TypeError(f"expected {type(self).__name__}, got {type(other).__name__}")
        return self._bits & other._bits == other._bits

    def names(self) -> list[str]:
        """Return the names of the flags present, in canonical order."""
        return [name for name, bit in self._MEMBERS if self._bits & bit]

    def __or__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._bits | other._bits)

    def __and__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._bits & other._bits)

    def __bool__(self) -> bool:
        return self._bits != 0

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._bits))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self.names())})"


class Axes(_FlagSet):
    """A set of zero or more 3D axes."""

    __slots__ = ()

    _MEMBERS = (("X", 1), ("Y", 2), ("Z", 4))
    _KIND = "axis"

    X: ClassVar[Axes]
    Y: ClassVar[Axes]
    Z: ClassVar[Axes]

    @classmethod
    def empty(cls) -> Axes:
        """Return the set holding no axes."""
        return cls(0)

    @classmethod
    def all(cls) -> Axes:
        """Return the set holding every axis."""
        return cls(cls._mask())

    def contains(self, other: Axes) -> bool:
        """Tell whether every axis of ``other`` is also in this set."""
        return self._contains(other)

    def bits(self) -> int:
        """Return the bitmask of this set."""
        return self._bits

    @classmethod
    def from_bits(cls, bits: int) -> Axes:
        """Build a set from its bitmask; raise ValueError on unknown bits."""
        return cls._from_bits(bits)

    def to_json(self) -> list[str]:
        """Return the human-readable form: a list of axis names."""
        return self.names()

    @classmethod
    def from_json(cls, data: Any) -> Axes:
        """Parse a list of axis names, or an integer bitmask."""
        return cls._from_json(data)


Axes.X = Axes(1)
Axes.Y = Axes(2)
Axes.Z = Axes(4)


class Faces(_FlagSet):
    """A set of zero or more faces of a cube."""

    __slots__ = ()

    _MEMBERS = (
        ("Right", 1),
        ("Top", 2),
        ("Back", 4),
        ("Left", 8),
        ("Bottom", 16),
        ("Front", 32),
    )
    _KIND = "face"

    RIGHT: ClassVar[Faces]
    TOP: ClassVar[Faces]
    BACK: ClassVar[Faces]
    LEFT: ClassVar[Faces]
    BOTTOM: ClassVar[Faces]
    FRONT: ClassVar[Faces]

    @classmethod
    def empty(cls) -> Faces:
        """Return the set holding no faces."""
        return cls(0)

    @classmethod
    def all(cls) -> Faces:
        """Return the set holding every face."""
        return cls(cls._mask())

    def contains(self, other: Faces) -> bool:
        """Tell whether every face of ``other`` is also in this set."""
        return self._contains(other)

    def bits(self) -> int:
        """Return the bitmask of this set."""
        return self._bits

    @classmethod
    def from_bits(cls, bits: int) -> Faces:
        """Build a set from its bitmask; raise ValueError on unknown bits."""
        return cls._from_bits(bits)

    def to_json(self) -> list[str]:
        """Return the human-readable form: a list of face names."""
        return self.names()

    @classmethod
    def from_json(cls, data: Any) -> Faces:
        """Parse a list of face names, or an integer bitmask."""
        return cls._from_json(data)


Faces.RIGHT = Faces(1)
Faces.TOP = Faces(2)
Faces.BACK = Faces(4)
Faces.LEFT = Faces(8)
Faces.BOTTOM = Faces(16)
Faces.FRONT = Faces(32)