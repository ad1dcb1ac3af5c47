"""Runtime entity exports."""

from .combatant import CombatantEntity
from .monster import Monster
from .player import Player
from .resource import RESOURCE_MAX, RESOURCE_MIN, BoundedResource

__all__ = [
    "BoundedResource",
    "CombatantEntity",
    "Monster",
    "Player",
    "RESOURCE_MAX",
    "RESOURCE_MIN",
]
