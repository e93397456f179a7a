"""Unique, optional references to instances."""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from typing import Any

_MAX = 2 ** 128 - 1
_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class Ref:
    """A 128-bit reference to an instance; zero means it points to nothing."""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Ref value must be an int")
        if not 0 <= self.value <= _MAX:
            raise ValueError("Ref value must fit in 128 unsigned bits")

    @classmethod
    def new(cls) -> Ref:
        """Generate a new random, non-null reference."""
        while True:
            value = secrets.randbits(128)
            if value:
                return cls(value)

    @classmethod
    def none(cls) -> Ref:
        """Return the reference that points to nothing."""
        return cls(0)

    def is_some(self) -> bool:
        """Tell whether this reference points to something."""
        return self.value != 0

    def is_none(self) -> bool:
        """Tell whether this reference points to nothing."""
        return self.value == 0

    def __str__(self) -> str:
        return f"{self.value:032x}"

    @classmethod
    def from_str(cls, text: str) -> Ref:
        """Parse a hexadecimal reference; all zeros gives the null reference."""
        if not isinstance(text, str):
            raise TypeError("expected a string")
        digits = text[1:] if text.startswith("+") else text
        if not digits:
            raise ValueError("cannot parse integer from empty string")
        if not all(char in _HEX_DIGITS for char in digits):
            raise ValueError(f"invalid digit found in string: {text!r}")
        value = int(digits, 16)
        if value > _MAX:
            raise ValueError(f"number too large to fit in 128 bits: {text!r}")
        return cls(value)

    def to_json(self) -> str:
        """Return the 32-digit hexadecimal form."""
        return str(self)

    @classmethod
    def from_json(cls, data: Any) -> Ref:
        """Parse the hexadecimal form, or take a raw integer."""
        if isinstance(data, str):
            return cls.from_str(data)
        if isinstance(data, int) and not isinstance(data, bool):
            return cls(data)
        raise TypeError("expected a referent string")