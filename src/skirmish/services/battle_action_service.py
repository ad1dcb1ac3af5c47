"""Stateless two-entity battle actions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from skirmish.core.logging_config import get_logger
from skirmish.domain.defs import FIREBALL, AttackSpell, HealSpell, Spell
from skirmish.domain.entities import CombatantEntity, Monster, Player
from skirmish.domain.errors import UnsupportedVariant

logger = get_logger(__name__)

CasterT = TypeVar("CasterT", bound=CombatantEntity)
TargetT = TypeVar("TargetT", bound=CombatantEntity)


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Both participants after a player-versus-monster action."""

    player: Player
    monster: Monster


@dataclass(frozen=True, slots=True)
class SpellOutcome(Generic[CasterT, TargetT]):
    """Caster and (optional) target after a spell resolves."""

    caster: CasterT
    target: TargetT | None


class BattleActionService:
    """Applies simultaneous resource changes to a caster and a target.

    Both sides are always updated together; a caster with no mana still
    acts, its mana simply staying clamped at zero.
    """

    def cast_fireball(self, player: Player, monster: Monster) -> ActionResult:
        return self.cast_simple_spell(player, monster, FIREBALL)

    def cast_simple_spell(self, player: Player, monster: Monster, spell: AttackSpell) -> ActionResult:
        logger.debug("Casting attack spell", spell_id=spell.id, caster_id=player.id, target_id=monster.id)
        return ActionResult(
            player=player.consume_mp(spell.cost),
            monster=monster.take_damage(spell.damage),
        )

    def cast_spell(
        self,
        spell: Spell,
        caster: CasterT,
        target: TargetT | None = None,
    ) -> SpellOutcome[CasterT, TargetT]:
        if isinstance(spell, AttackSpell):
            return SpellOutcome(
                caster=caster.consume_mp(spell.cost),
                target=target.take_damage(spell.damage) if target is not None else None,
            )
        if isinstance(spell, HealSpell):
            return SpellOutcome(
                caster=caster.consume_mp(spell.cost).add_hp(spell.heal_amount),
                target=target,
            )
        raise UnsupportedVariant("spell kind", getattr(spell, "kind", type(spell).__name__))
