"""Factory for creating battles."""
from __future__ import annotations

from skirmish.domain.battle_models import BattleEntity, Preparation
from skirmish.domain.entities import Monster, Player

from .id_factory import IdFactory


def create_battle(player: Player, monster: Monster, id_factory: IdFactory) -> Preparation:
    """Open a new battle in its preparation phase."""
    return Preparation(id=id_factory("battle"), player=player, monster=monster)


def create_flagged_battle(player: Player, monster: Monster, id_factory: IdFactory) -> BattleEntity:
    """Open a battle using the two-phase ``is_finished`` shape."""
    return BattleEntity(id=id_factory("battle"), player=player, monster=monster, turn=0, is_finished=False)
