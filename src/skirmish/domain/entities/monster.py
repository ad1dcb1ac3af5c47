"""Monster entity."""
from __future__ import annotations

from dataclasses import dataclass

from .combatant import CombatantEntity, build_resources, require_id


@dataclass(frozen=True, slots=True)
class Monster(CombatantEntity):
    """Opponent combatant; shares the full combatant shape with no extras."""

    @classmethod
    def create(cls, *, id: str, hp: int, mp: int, max_hp: int) -> Monster:
        """Construct a monster from plain field values."""
        return cls(id=require_id(id), **build_resources(hp, mp, max_hp))

    @classmethod
    def restore(cls, *, id: str, hp: int, mp: int, max_hp: int) -> Monster:
        return cls._assemble(id=require_id(id), **build_resources(hp, mp, max_hp))
