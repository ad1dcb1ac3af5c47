"""Factory for creating player entities."""
from __future__ import annotations

from skirmish.domain.entities import Player

from .id_factory import IdFactory

STARTER_HP = 16
STARTER_MP = 8


def create_starter_player(id_factory: IdFactory) -> Player:
    """Instantiate a fresh level 1 player with full starter resources."""
    return Player.create(
        id=id_factory("player"),
        hp=STARTER_HP,
        mp=STARTER_MP,
        max_hp=STARTER_HP,
        exp=0,
        level=1,
    )
