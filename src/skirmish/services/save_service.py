"""Plain-field serialization for entities and battle snapshots."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from skirmish.domain.battle_models import BattleEntity, BattlePhase, End, Execution, Preparation
from skirmish.domain.entities import Monster, Player
from skirmish.domain.errors import UnsupportedVariant
from skirmish.services.errors import SaveLoadError

SavePayload = Dict[str, Any]

FLAGGED_BATTLE_TAG = "battle"
_PLAYER_FIELDS = ("id", "hp", "mp", "max_hp", "exp", "level")
_MONSTER_FIELDS = ("id", "hp", "mp", "max_hp")


class SaveService:
    """Converts entities and battles to/from JSON-compatible dicts.

    Ids stay strings, resources become plain integers and phases/winners are
    written as tags. Deserializing a serialized object yields an equal object,
    including a combatant healed past its max_hp. Missing or mistyped fields
    raise SaveLoadError; well-typed values that break a domain rule raise the
    domain's ValidationError unchanged.
    """

    # -----------------------
    # Entities
    # -----------------------
    def serialize_player(self, player: Player) -> SavePayload:
        return {
            "id": player.id,
            "hp": player.hp.value,
            "mp": player.mp.value,
            "max_hp": player.max_hp.value,
            "exp": player.exp,
            "level": player.level,
        }

    def deserialize_player(self, payload: Mapping[str, Any]) -> Player:
        data = self._require_fields(payload, _PLAYER_FIELDS, "player")
        return Player.restore(
            id=self._require_str(data, "id", "player"),
            hp=self._require_int(data, "hp", "player"),
            mp=self._require_int(data, "mp", "player"),
            max_hp=self._require_int(data, "max_hp", "player"),
            exp=self._require_int(data, "exp", "player"),
            level=self._require_int(data, "level", "player"),
        )

    def serialize_monster(self, monster: Monster) -> SavePayload:
        return {
            "id": monster.id,
            "hp": monster.hp.value,
            "mp": monster.mp.value,
            "max_hp": monster.max_hp.value,
        }

    def deserialize_monster(self, payload: Mapping[str, Any]) -> Monster:
        data = self._require_fields(payload, _MONSTER_FIELDS, "monster")
        return Monster.restore(
            id=self._require_str(data, "id", "monster"),
            hp=self._require_int(data, "hp", "monster"),
            mp=self._require_int(data, "mp", "monster"),
            max_hp=self._require_int(data, "max_hp", "monster"),
        )

    # -----------------------
    # Battles
    # -----------------------
    def serialize_battle(self, battle: BattlePhase | BattleEntity) -> SavePayload:
        payload: SavePayload = {
            "phase": FLAGGED_BATTLE_TAG if isinstance(battle, BattleEntity) else battle.tag,
            "id": battle.id,
            "player": self.serialize_player(battle.player),
            "monster": self.serialize_monster(battle.monster),
        }
        if isinstance(battle, (Execution, BattleEntity)):
            payload["turn"] = battle.turn
        if isinstance(battle, End):
            payload["winner"] = battle.winner
        if isinstance(battle, BattleEntity):
            payload["is_finished"] = battle.is_finished
        return payload

    def deserialize_battle(self, payload: Mapping[str, Any]) -> BattlePhase | BattleEntity:
        data = self._require_fields(payload, ("phase", "id", "player", "monster"), "battle")
        phase = self._require_str(data, "phase", "battle")
        battle_id = self._require_str(data, "id", "battle")
        player = self.deserialize_player(self._require_mapping(data["player"], "battle.player"))
        monster = self.deserialize_monster(self._require_mapping(data["monster"], "battle.monster"))

        if phase == Preparation.tag:
            return Preparation(id=battle_id, player=player, monster=monster)
        if phase == Execution.tag:
            self._require_fields(data, ("turn",), "battle")
            turn = self._require_int(data, "turn", "battle")
            return Execution(id=battle_id, player=player, monster=monster, turn=turn)
        if phase == End.tag:
            self._require_fields(data, ("winner",), "battle")
            winner = self._require_str(data, "winner", "battle")
            return End(id=battle_id, player=player, monster=monster, winner=winner)
        if phase == FLAGGED_BATTLE_TAG:
            self._require_fields(data, ("turn", "is_finished"), "battle")
            return BattleEntity(
                id=battle_id,
                player=player,
                monster=monster,
                turn=self._require_int(data, "turn", "battle"),
                is_finished=self._require_bool(data, "is_finished", "battle"),
            )
        raise UnsupportedVariant("battle phase", phase)

    # -----------------------
    # Helpers
    # -----------------------
    @staticmethod
    def _require_mapping(value: object, context: str) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise SaveLoadError(f"{context} must be an object.")
        return value

    def _require_fields(self, payload: object, fields: tuple[str, ...], context: str) -> Mapping[str, Any]:
        data = self._require_mapping(payload, context)
        missing = [name for name in fields if name not in data]
        if missing:
            raise SaveLoadError(f"{context} is missing fields: {missing}")
        return data

    @staticmethod
    def _require_int(data: Mapping[str, Any], field: str, context: str) -> int:
        value = data[field]
        if isinstance(value, bool) or not isinstance(value, int):
            raise SaveLoadError(f"{context}.{field} must be an integer, got {value!r}.")
        return value

    @staticmethod
    def _require_str(data: Mapping[str, Any], field: str, context: str) -> str:
        value = data[field]
        if not isinstance(value, str):
            raise SaveLoadError(f"{context}.{field} must be a string, got {value!r}.")
        return value

    @staticmethod
    def _require_bool(data: Mapping[str, Any], field: str, context: str) -> bool:
        value = data[field]
        if not isinstance(value, bool):
            raise SaveLoadError(f"{context}.{field} must be a boolean, got {value!r}.")
        return value
