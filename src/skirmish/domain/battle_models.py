"""Battle domain models.

A battle is exactly one of ``Preparation``, ``Execution`` or ``End``. Each
transition consumes one phase snapshot and returns a new one; ``End`` has no
transitions. ``BattleEntity`` is the older two-phase shape that tracks only
an ``is_finished`` flag.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Union

from skirmish.core.types import WINNERS, PhaseTag, Winner
from skirmish.domain.defs import BASIC_ATTACK, FIREBALL
from skirmish.domain.entities import Monster, Player
from skirmish.domain.entities.combatant import require_id
from skirmish.domain.entities.resource import require_int
from skirmish.domain.errors import InvalidStateError, ValidationError


def _validate_participants(battle_id: object, player: object, monster: object) -> None:
    require_id(battle_id)
    if not isinstance(player, Player):
        raise ValidationError("player", "Player", player)
    if not isinstance(monster, Monster):
        raise ValidationError("monster", "Monster", monster)


@dataclass(frozen=True, slots=True)
class Preparation:
    id: str
    player: Player
    monster: Monster

    tag: ClassVar[PhaseTag] = "preparation"

    def __post_init__(self) -> None:
        _validate_participants(self.id, self.player, self.monster)

    def start_battle(self) -> Execution:
        return Execution(id=self.id, player=self.player, monster=self.monster, turn=1)


@dataclass(frozen=True, slots=True)
class Execution:
    id: str
    player: Player
    monster: Monster
    turn: int

    tag: ClassVar[PhaseTag] = "execution"

    def __post_init__(self) -> None:
        _validate_participants(self.id, self.player, self.monster)
        if require_int(self.turn, "turn") < 1:
            raise ValidationError("turn", "turn >= 1", self.turn)

    def execute_attack(self) -> Execution | End:
        """Apply the basic attack and resolve the outcome.

        The player's death is checked before the monster's, so a double
        knockout ends with the monster as winner.
        """
        player = self.player.consume_mp(BASIC_ATTACK.cost)
        monster = self.monster.take_damage(BASIC_ATTACK.damage)
        if player.is_dead:
            return End(id=self.id, player=player, monster=monster, winner="monster")
        if monster.is_dead:
            return End(id=self.id, player=player, monster=monster, winner="player")
        return Execution(id=self.id, player=player, monster=monster, turn=self.turn + 1)


@dataclass(frozen=True, slots=True)
class End:
    id: str
    player: Player
    monster: Monster
    winner: Winner

    tag: ClassVar[PhaseTag] = "end"

    def __post_init__(self) -> None:
        _validate_participants(self.id, self.player, self.monster)
        if self.winner not in WINNERS:
            raise ValidationError("winner", f"one of {list(WINNERS)}", self.winner)


BattlePhase = Union[Preparation, Execution, End]


@dataclass(frozen=True, slots=True)
class BattleEntity:
    """Two-phase battle tracked by a single ``is_finished`` flag.

    This shape does not record a winner; once finished, who won cannot be
    recovered from the battle alone.
    """

    id: str
    player: Player
    monster: Monster
    turn: int = 0
    is_finished: bool = False

    def __post_init__(self) -> None:
        _validate_participants(self.id, self.player, self.monster)
        if require_int(self.turn, "turn") < 0:
            raise ValidationError("turn", "turn >= 0", self.turn)
        if not isinstance(self.is_finished, bool):
            raise ValidationError("is_finished", "bool", self.is_finished)

    def cast_fireball(self) -> BattleEntity:
        if self.is_finished:
            raise InvalidStateError(f"Battle '{self.id}' is already finished.")
        return replace(
            self,
            player=self.player.consume_mp(FIREBALL.cost),
            monster=self.monster.take_damage(FIREBALL.damage),
        )

    def next_turn(self) -> BattleEntity:
        return replace(
            self,
            turn=self.turn + 1,
            is_finished=self.player.is_dead or self.monster.is_dead,
        )
