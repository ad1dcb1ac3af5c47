"""Service layer exports."""

from .battle_action_service import ActionResult, BattleActionService, SpellOutcome
from .battle_service import (
    AttackResolvedEvent,
    BattleEvent,
    BattleResolvedEvent,
    BattleService,
    BattleStartedEvent,
    CombatantDefeatedEvent,
)
from .errors import SaveLoadError
from .leveling_service import LevelingService
from .save_service import SaveService

__all__ = [
    "ActionResult",
    "AttackResolvedEvent",
    "BattleActionService",
    "BattleEvent",
    "BattleResolvedEvent",
    "BattleService",
    "BattleStartedEvent",
    "CombatantDefeatedEvent",
    "LevelingService",
    "SaveLoadError",
    "SaveService",
    "SpellOutcome",
]
