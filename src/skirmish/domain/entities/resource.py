"""Clamped integer resource used for health and mana."""
from __future__ import annotations

from dataclasses import dataclass

from skirmish.domain.errors import ValidationError

RESOURCE_MIN = 0
RESOURCE_MAX = 999


def require_int(value: object, field: str) -> int:
    """Return ``value`` if it is a real integer (bools excluded)."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(field, "integer", value)
    return value


def _clamp(value: int) -> int:
    return max(RESOURCE_MIN, min(value, RESOURCE_MAX))


@dataclass(frozen=True, slots=True)
class BoundedResource:
    """An integer quantity kept within [0, 999].

    Arithmetic never fails on range: ``add`` and ``subtract`` clamp at the
    bounds and return a new instance.
    """

    value: int

    def __post_init__(self) -> None:
        self._validate(self.value, "value")

    @classmethod
    def create(cls, raw: object, *, field: str = "value") -> BoundedResource:
        """Build a resource, reporting violations against ``field``."""
        cls._validate(raw, field)
        return cls(raw)  # type: ignore[arg-type]

    @staticmethod
    def _validate(raw: object, field: str) -> None:
        value = require_int(raw, field)
        if not RESOURCE_MIN <= value <= RESOURCE_MAX:
            raise ValidationError(field, f"{RESOURCE_MIN} <= {field} <= {RESOURCE_MAX}", value)

    def add(self, delta: int) -> BoundedResource:
        return BoundedResource(_clamp(self.value + require_int(delta, "delta")))

    def subtract(self, delta: int) -> BoundedResource:
        return BoundedResource(_clamp(self.value - require_int(delta, "delta")))

    @property
    def is_zero(self) -> bool:
        return self.value == 0
