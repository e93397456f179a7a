"""Containers for untyped binary data and asset references."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BinaryString:
    """Untyped binary data whose meaning is unknown or uninterpreted."""

    data: bytes = b""

    def __post_init__(self) -> None:
        if isinstance(self.data, str):
            raise TypeError("BinaryString holds bytes, not str")
        object.__setattr__(self, "data", bytes(self.data))

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def to_json(self) -> str:
        """Return the data encoded as base64 text."""
        return base64.b64encode(self.data).decode("ascii")

    @classmethod
    def from_json(cls, data: Any) -> BinaryString:
        """Decode base64 text, or take raw bytes as they are."""
        if isinstance(data, (bytes, bytearray, memoryview)):
            return cls(bytes(data))
        if not isinstance(data, str):
            raise TypeError("expected a base64 string")
        try:
            return cls(base64.b64decode(data, validate=True))
        except binascii.Error as err:
            raise ValueError(f"invalid base64: {err}") from err


@dataclass(frozen=True)
class Content:
    """A reference to an asset, held as a URL string."""

    url: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.url, str):
            raise TypeError("Content url must be a str")

    def __str__(self) -> str:
        return self.url

    def to_json(self) -> str:
        """Return the URL string."""
        return self.url

    @classmethod
    def from_json(cls, data: Any) -> Content:
        """Build from a URL string."""
        if not isinstance(data, str):
            raise TypeError("expected a string")
        return cls(data)