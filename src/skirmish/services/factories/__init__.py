"""Factory helpers for runtime entities."""

from .battle_factory import create_battle, create_flagged_battle
from .id_factory import IdFactory, RngIdFactory, make_instance_id
from .monster_factory import create_monster_from_level, create_starter_monster
from .player_factory import create_starter_player

__all__ = [
    "IdFactory",
    "RngIdFactory",
    "create_battle",
    "create_flagged_battle",
    "create_monster_from_level",
    "create_starter_monster",
    "create_starter_player",
    "make_instance_id",
]
