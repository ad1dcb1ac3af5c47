"""Player entity."""
from __future__ import annotations

from dataclasses import dataclass

from skirmish.domain.errors import ValidationError

from .combatant import CombatantEntity, build_resources, require_id
from .resource import require_int


@dataclass(frozen=True, slots=True)
class Player(CombatantEntity):
    """Player combatant carrying cumulative experience and a level.

    The entity does not check that ``level`` matches ``exp``; LevelingService
    is the path that keeps them consistent.
    """

    exp: int = 0
    level: int = 1

    def _validate_fields(self) -> None:
        CombatantEntity._validate_fields(self)
        if require_int(self.exp, "exp") < 0:
            raise ValidationError("exp", "exp >= 0", self.exp)
        if require_int(self.level, "level") < 1:
            raise ValidationError("level", "level >= 1", self.level)

    @classmethod
    def create(
        cls,
        *,
        id: str,
        hp: int,
        mp: int,
        max_hp: int,
        exp: int = 0,
        level: int = 1,
    ) -> Player:
        """Construct a player from plain field values."""
        return cls(id=require_id(id), **build_resources(hp, mp, max_hp), exp=exp, level=level)

    @classmethod
    def restore(cls, *, id: str, hp: int, mp: int, max_hp: int, exp: int, level: int) -> Player:
        """Rebuild a saved player; hp may exceed max_hp after an overheal."""
        return cls._assemble(id=require_id(id), **build_resources(hp, mp, max_hp), exp=exp, level=level)

    def with_exp(self, gained: int) -> Player:
        return self._derive(exp=self.exp + require_int(gained, "gained"))

    def with_level(self, level: int) -> Player:
        return self._derive(level=level)
