"""Spell definitions.

Each spell kind is its own frozen class; ``Spell`` is the closed union that
dispatch points handle. A kind that a dispatch point does not handle is
reported as UnsupportedVariant rather than silently ignored.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from skirmish.core.types import SpellKind
from skirmish.domain.entities.combatant import require_id
from skirmish.domain.entities.resource import require_int
from skirmish.domain.errors import ValidationError

MAX_SPELL_VALUE = 999
MAX_BUFF_DURATION = 10


def _require_range(value: object, field: str, low: int, high: int) -> int:
    number = require_int(value, field)
    if not low <= number <= high:
        raise ValidationError(field, f"{low} <= {field} <= {high}", number)
    return number


def _require_name(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("name", "non-empty string", value)
    return value


@dataclass(frozen=True, slots=True)
class AttackSpell:
    id: str
    name: str
    cost: int
    damage: int

    kind: ClassVar[SpellKind] = "attack"

    def __post_init__(self) -> None:
        require_id(self.id)
        _require_name(self.name)
        _require_range(self.cost, "cost", 0, MAX_SPELL_VALUE)
        _require_range(self.damage, "damage", 1, MAX_SPELL_VALUE)


@dataclass(frozen=True, slots=True)
class HealSpell:
    id: str
    name: str
    cost: int
    heal_amount: int

    kind: ClassVar[SpellKind] = "heal"

    def __post_init__(self) -> None:
        require_id(self.id)
        _require_name(self.name)
        _require_range(self.cost, "cost", 0, MAX_SPELL_VALUE)
        _require_range(self.heal_amount, "heal_amount", 1, MAX_SPELL_VALUE)


@dataclass(frozen=True, slots=True)
class BuffSpell:
    """Timed effect spell. Defined for content data; casting is not handled yet."""

    id: str
    name: str
    cost: int
    effect: str
    duration: int

    kind: ClassVar[SpellKind] = "buff"

    def __post_init__(self) -> None:
        require_id(self.id)
        _require_name(self.name)
        _require_range(self.cost, "cost", 0, MAX_SPELL_VALUE)
        if not isinstance(self.effect, str) or not self.effect:
            raise ValidationError("effect", "non-empty string", self.effect)
        _require_range(self.duration, "duration", 1, MAX_BUFF_DURATION)


Spell = Union[AttackSpell, HealSpell, BuffSpell]


# Built-in spells used by fixed actions.
FIREBALL = AttackSpell(id="fireball", name="Fireball", cost=8, damage=16)
BASIC_ATTACK = AttackSpell(id="basic_attack", name="Attack", cost=5, damage=20)
