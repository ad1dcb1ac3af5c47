"""Battle service driving the phase state machine and reporting events."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from skirmish.core.logging_config import get_logger
from skirmish.core.types import Winner
from skirmish.domain.battle_models import BattlePhase, End, Execution
from skirmish.domain.entities import Monster, Player
from skirmish.domain.errors import InvalidStateError
from skirmish.services.factories import IdFactory, create_battle
from skirmish.services.leveling_service import LevelingService

logger = get_logger(__name__)

DEFAULT_MAX_TURNS = 1000


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class BattleStartedEvent(BattleEvent):
    battle_id: str
    player_id: str
    monster_id: str


@dataclass(slots=True)
class AttackResolvedEvent(BattleEvent):
    battle_id: str
    turn: int
    player_mp: int
    monster_hp: int


@dataclass(slots=True)
class CombatantDefeatedEvent(BattleEvent):
    combatant_id: str


@dataclass(slots=True)
class BattleResolvedEvent(BattleEvent):
    battle_id: str
    winner: Winner
    turns: int


class BattleService:
    """Runs battles from preparation to a winner.

    State lives entirely in the phase snapshots passed in and returned; the
    service keeps no battle state between calls.
    """

    def __init__(self, id_factory: IdFactory, leveling_service: LevelingService | None = None) -> None:
        self._id_factory = id_factory
        self._leveling_service = leveling_service or LevelingService()

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_battle(self, player: Player, monster: Monster) -> tuple[Execution, List[BattleEvent]]:
        """Open a battle and move it straight into its first turn."""
        preparation = create_battle(player, monster, self._id_factory)
        battle = preparation.start_battle()
        logger.info("Battle started", battle_id=battle.id, player_id=player.id, monster_id=monster.id)
        events: List[BattleEvent] = [
            BattleStartedEvent(battle_id=battle.id, player_id=player.id, monster_id=monster.id)
        ]
        return battle, events

    def execute_attack(self, battle: BattlePhase) -> tuple[Execution | End, List[BattleEvent]]:
        if not isinstance(battle, Execution):
            raise InvalidStateError(f"Battle '{battle.id}' cannot attack during the {battle.tag} phase.")

        outcome = battle.execute_attack()
        events: List[BattleEvent] = [
            AttackResolvedEvent(
                battle_id=battle.id,
                turn=battle.turn,
                player_mp=outcome.player.mp.value,
                monster_hp=outcome.monster.hp.value,
            )
        ]
        if isinstance(outcome, End):
            loser = outcome.monster if outcome.winner == "player" else outcome.player
            events.append(CombatantDefeatedEvent(combatant_id=loser.id))
            events.append(BattleResolvedEvent(battle_id=battle.id, winner=outcome.winner, turns=battle.turn))
            logger.info("Battle resolved", battle_id=battle.id, winner=outcome.winner, turns=battle.turn)
        else:
            logger.debug("Turn advanced", battle_id=battle.id, turn=outcome.turn)
        return outcome, events

    def resolve_battle(
        self,
        battle: BattlePhase,
        max_turns: int = DEFAULT_MAX_TURNS,
    ) -> tuple[End, List[BattleEvent]]:
        """Attack repeatedly until the battle reaches its end phase."""
        if isinstance(battle, End):
            return battle, []
        current: BattlePhase = battle.start_battle() if not isinstance(battle, Execution) else battle
        events: List[BattleEvent] = []
        for _ in range(max_turns):
            current, turn_events = self.execute_attack(current)
            events.extend(turn_events)
            if isinstance(current, End):
                return current, events
        raise InvalidStateError(f"Battle '{battle.id}' did not finish within {max_turns} turns.")

    # -----------------------
    # Rewards
    # -----------------------
    def claim_victory_exp(self, battle: End, exp_reward: int) -> Player:
        """Return the victorious player with ``exp_reward`` applied."""
        if not isinstance(battle, End):
            raise InvalidStateError(f"Battle '{battle.id}' has not ended.")
        if battle.winner != "player":
            raise InvalidStateError(f"Battle '{battle.id}' was not won by the player.")
        return self._leveling_service.add_exp(battle.player, exp_reward)
