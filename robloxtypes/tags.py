"""A list of tags that can be applied to an instance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


@dataclass
class Tags:
    """An ordered list of tag names; duplicates are allowed."""

    members: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        members = list(self.members)
        for tag in members:
            if not isinstance(tag, str):
                raise TypeError("tags must be strings")
        self.members = members

    def push(self, tag: str) -> None:
        """Append a tag."""
        if not isinstance(tag, str):
            raise TypeError("tags must be strings")
        self.members.append(tag)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    @classmethod
    def decode(cls, buf: bytes) -> Tags:
        """Decode NUL-delimited UTF-8 tag names, skipping empty ones.

        Raises UnicodeDecodeError if a tag is not valid UTF-8.
        """
        return cls([part.decode("utf-8") for part in bytes(buf).split(b"\0") if part])

    def encode(self) -> bytes:
        """Join the tags with NUL bytes."""
        return "\0".join(self.members).encode("utf-8")

    def to_json(self) -> list[str]:
        """Return the tags as a list of strings."""
        return list(self.members)

    @classmethod
    def from_json(cls, data: Any) -> Tags:
        """Build from a list of strings."""
        if not isinstance(data, (list, tuple)):
            raise TypeError("expected a list of strings")
        return cls(_strings(data))


def _strings(items: Iterable[Any]) -> list[str]:
    result = []
    for item in items:
        if not isinstance(item, str):
            raise TypeError("expected a list of strings")
        result.append(item)
    return result