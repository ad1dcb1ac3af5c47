"""Domain definition exports."""

from .archetype_def import ArchetypeDef
from .spell_def import BASIC_ATTACK, FIREBALL, AttackSpell, BuffSpell, HealSpell, Spell

__all__ = [
    "ArchetypeDef",
    "BASIC_ATTACK",
    "FIREBALL",
    "AttackSpell",
    "BuffSpell",
    "HealSpell",
    "Spell",
]
