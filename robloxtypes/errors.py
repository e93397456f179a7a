"""Exceptions raised by this package."""

from __future__ import annotations

from typing import Any


class RbxTypesError(Exception):
    """Base class for errors raised by fallible operations on these types."""


class AttributeFormatError(RbxTypesError, ValueError):
    """Serialized attributes could not be read or written."""

    @classmethod
    def invalid_length(cls) -> AttributeFormatError:
        """The attribute count is missing."""
        return cls("missing attribute list length")

    @classmethod
    def no_key(cls) -> AttributeFormatError:
        """An attribute's key name is missing."""
        return cls("missing attribute key name")

    @classmethod
    def key_bad_unicode(cls, source: UnicodeDecodeError) -> AttributeFormatError:
        """An attribute's key name is not valid UTF-8."""
        error = cls("attribute key contained invalid UTF-8")
        error.__cause__ = source
        return error

    @classmethod
    def no_value_type(cls) -> AttributeFormatError:
        """An attribute's value type byte is missing."""
        return cls("missing attribute value type")

    @classmethod
    def invalid_value_type(cls, type_id: int) -> AttributeFormatError:
        """An attribute's value type byte names no known type."""
        return cls(f"invalid value type: {type_id}")

    @classmethod
    def unsupported_variant_type(cls, variant_type: Any) -> AttributeFormatError:
        """A value of this type cannot be stored in attributes."""
        name = getattr(variant_type, "name", variant_type)
        return cls(f"{name} values are not supported in attributes")

    @classmethod
    def invalid_brick_color(cls, value: int) -> AttributeFormatError:
        """A BrickColor number names no color."""
        return cls(f"invalid BrickColor value: {value}")

    @classmethod
    def io_error(cls, source: OSError) -> AttributeFormatError:
        """Reading or writing the underlying stream failed."""
        error = cls(str(source))
        error.__cause__ = source
        return error

    @classmethod
    def read_type(cls, what: str) -> AttributeFormatError:
        """The data ended before a value of this kind could be read."""
        return cls(f"couldn't read bytes to deserialize {what}")