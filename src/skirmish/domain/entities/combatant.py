"""Shared shape for battle participants."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TypeVar

from skirmish.domain.errors import ValidationError

from .resource import BoundedResource

C = TypeVar("C", bound="CombatantEntity")


def require_id(value: object, field: str = "id") -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError(field, "non-empty string", value)
    return value


def build_resources(hp: object, mp: object, max_hp: object) -> dict[str, BoundedResource]:
    """Convert plain integers into named resources, failing on the first bad field."""
    return {
        "hp": BoundedResource.create(hp, field="hp"),
        "mp": BoundedResource.create(mp, field="mp"),
        "max_hp": BoundedResource.create(max_hp, field="max_hp"),
    }


@dataclass(frozen=True, slots=True)
class CombatantEntity:
    """Immutable identity plus bounded resources.

    Every mutator returns a new entity of the same concrete type; the
    receiver is never changed. Construction enforces ``hp <= max_hp``.
    Mutators and ``restore`` re-check each field on its own but leave that
    relation alone, so an ``add_hp`` overheal survives further mutation and
    a save round-trip.
    """

    id: str
    hp: BoundedResource
    mp: BoundedResource
    max_hp: BoundedResource

    def __post_init__(self) -> None:
        self._validate_fields()
        if self.hp.value > self.max_hp.value:
            raise ValidationError("hp", f"hp <= max_hp ({self.max_hp.value})", self.hp.value)

    def _validate_fields(self) -> None:
        require_id(self.id)
        for name in ("hp", "mp", "max_hp"):
            value = getattr(self, name)
            if not isinstance(value, BoundedResource):
                raise ValidationError(name, "BoundedResource", value)

    @classmethod
    def _assemble(cls: type[C], **values: object) -> C:
        entity = object.__new__(cls)
        for item in fields(cls):
            object.__setattr__(entity, item.name, values[item.name])
        entity._validate_fields()
        return entity

    def _derive(self: C, **changes: object) -> C:
        values = {item.name: getattr(self, item.name) for item in fields(self)}
        values.update(changes)
        return type(self)._assemble(**values)

    @property
    def is_dead(self) -> bool:
        return self.hp.is_zero

    def take_damage(self: C, amount: int) -> C:
        return self._derive(hp=self.hp.subtract(amount))

    def consume_mp(self: C, amount: int) -> C:
        # No insufficient-mana check: mana clamps at zero and the action proceeds.
        return self._derive(mp=self.mp.subtract(amount))

    def add_hp(self: C, amount: int) -> C:
        """Raise hp up to the absolute ceiling, ignoring max_hp.

        Never fails on range: the result may sit above max_hp. Use
        heal_to_max when the rule caps at max_hp.
        """
        return self._derive(hp=self.hp.add(amount))

    def heal_to_max(self: C, amount: int) -> C:
        healed = self.hp.add(amount)
        if healed.value > self.max_hp.value:
            # An overhealed entity keeps its surplus.
            healed = max(self.hp, self.max_hp, key=lambda resource: resource.value)
        return self._derive(hp=healed)
