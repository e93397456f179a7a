"""Deduplicated binary data for contents that repeat often."""

from __future__ import annotations

import hashlib
import threading
import weakref
from dataclasses import dataclass


class _Buffer:
    __slots__ = ("data", "__weakref__")

    def __init__(self, data: bytes) -> None:
        self.data = data


_CACHE: "weakref.WeakValueDictionary[bytes, _Buffer]" = weakref.WeakValueDictionary()
_LOCK = threading.Lock()


def _digest(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


@dataclass(frozen=True, order=True)
class SharedStringHash:
    """The 32-byte content digest of a SharedString; ordered by its bytes."""

    digest: bytes

    def as_bytes(self) -> bytes:
        """Return the raw digest bytes."""
        return self.digest


class SharedString:
    """Binary data that is deduplicated against every live SharedString.

    Two SharedStrings made from equal data share one buffer while either is
    alive; the buffer leaves the cache once nothing refers to it.
    """

    __slots__ = ("_buffer", "_hash")

    def __init__(self, data: bytes) -> None:
        if isinstance(data, str):
            raise TypeError("SharedString holds bytes, not str")
        data = bytes(data)
        digest = _digest(data)
        with _LOCK:
            buffer = _CACHE.get(digest)
            if buffer is None:
                buffer = _Buffer(data)
                _CACHE[digest] = buffer
        self._buffer = buffer
        self._hash = digest

    def data(self) -> bytes:
        """Return the shared data."""
        return self._buffer.data

    def hash(self) -> SharedStringHash:
        """Return the content digest."""
        return SharedStringHash(self._hash)

    def __bytes__(self) -> bytes:
        return self._buffer.data

    def __len__(self) -> int:
        return len(self._buffer.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SharedString):
            return NotImplemented
        return self._hash == other._hash

    def __hash__(self) -> int:
        return hash(self._hash)

    def __repr__(self) -> str:
        return f"SharedString(hash={self._hash.hex()}, len={len(self._buffer.data)})"