"""Physical properties that parts can have."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

_FIELDS = (
    ("density", "density"),
    ("friction", "friction"),
    ("elasticity", "elasticity"),
    ("friction_weight", "frictionWeight"),
    ("elasticity_weight", "elasticityWeight"),
)

_EXPECTING = 'the string "Default" or a CustomPhysicalProperties struct'


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    return float(value)


@dataclass(frozen=True)
class CustomPhysicalProperties:
    """Custom physics settings for a part."""

    density: float
    friction: float
    elasticity: float
    friction_weight: float
    elasticity_weight: float

    def __post_init__(self) -> None:
        for attr, _ in _FIELDS:
            object.__setattr__(self, attr, _as_float(getattr(self, attr), attr))

    def to_json(self) -> dict[str, float]:
        """Return an object with camelCase keys."""
        return {key: getattr(self, attr) for attr, key in _FIELDS}

    @classmethod
    def from_json(cls, data: Any) -> CustomPhysicalProperties:
        """Parse the object form produced by :meth:`to_json`."""
        if not isinstance(data, dict):
            raise TypeError("expected CustomPhysicalProperties as an object")
        missing = [key for _, key in _FIELDS if key not in data]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")
        return cls(**{attr: _as_float(data[key], key) for attr, key in _FIELDS})


@dataclass(frozen=True)
class PhysicalProperties:
    """Either the default physical properties or a custom set of them."""

    custom: Optional[CustomPhysicalProperties] = None

    def __post_init__(self) -> None:
        if self.custom is not None and not isinstance(self.custom, CustomPhysicalProperties):
            raise TypeError("custom must be CustomPhysicalProperties or None")

    @classmethod
    def default(cls) -> PhysicalProperties:
        """Return the default physical properties."""
        return cls(None)

    def is_default(self) -> bool:
        """Tell whether these are the default properties."""
        return self.custom is None

    def to_json(self) -> Any:
        """Return ``"Default"`` or the custom properties' object form."""
        if self.custom is None:
            return "Default"
        return self.custom.to_json()

    @classmethod
    def from_json(cls, data: Any) -> PhysicalProperties:
        """Parse ``"Default"`` or a custom properties object."""
        if isinstance(data, str):
            if data == "Default":
                return cls.default()
            raise ValueError(f"invalid value: string {data!r}, expected {_EXPECTING}")
        if isinstance(data, dict):
            return cls(CustomPhysicalProperties.from_json(data))
        raise TypeError(f"expected {_EXPECTING}")