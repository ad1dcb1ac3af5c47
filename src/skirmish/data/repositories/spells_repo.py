"""Spells repository."""
from __future__ import annotations

from skirmish.data.errors import DataValidationError
from skirmish.data.repositories.base import RepositoryBase
from skirmish.domain.defs import AttackSpell, BuffSpell, HealSpell, Spell
from skirmish.domain.errors import ValidationError

_KIND_FIELDS = {
    "attack": ("name", "cost", "damage"),
    "heal": ("name", "cost", "heal_amount"),
    "buff": ("name", "cost", "effect", "duration"),
}


class SpellsRepository(RepositoryBase[Spell]):
    """Loads spells of every kind, keyed by spell id."""

    def __init__(self, base_path=None) -> None:
        super().__init__("spells.json", base_path)

    def _build_entry(self, def_id: str, payload: dict[str, object]) -> Spell:
        context = f"spell '{def_id}'"
        kind = payload.get("kind")
        if not isinstance(kind, str) or kind not in _KIND_FIELDS:
            raise DataValidationError(f"{context} kind must be one of {sorted(_KIND_FIELDS)}.")
        self._assert_required(payload, _KIND_FIELDS[kind], context)
        try:
            if kind == "attack":
                return AttackSpell(id=def_id, name=payload["name"], cost=payload["cost"], damage=payload["damage"])
            if kind == "heal":
                return HealSpell(
                    id=def_id, name=payload["name"], cost=payload["cost"], heal_amount=payload["heal_amount"]
                )
            return BuffSpell(
                id=def_id,
                name=payload["name"],
                cost=payload["cost"],
                effect=payload["effect"],
                duration=payload["duration"],
            )
        except ValidationError as exc:
            raise DataValidationError(f"{context}: {exc}") from exc
