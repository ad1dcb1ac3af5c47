import json

import pytest

from skirmish.domain.battle_models import BattleEntity, End, Execution, Preparation
from skirmish.domain.entities import Monster, Player
from skirmish.domain.errors import UnsupportedVariant, ValidationError
from skirmish.services.errors import SaveLoadError
from skirmish.services.save_service import SaveService


def test_player_round_trip_through_json() -> None:
    service = SaveService()
    player = Player.create(id="player_1", hp=70, mp=12, max_hp=100, exp=1028, level=3)

    payload = json.loads(json.dumps(service.serialize_player(player)))

    assert payload == {"id": "player_1", "hp": 70, "mp": 12, "max_hp": 100, "exp": 1028, "level": 3}
    assert service.deserialize_player(payload) == player


def test_monster_round_trip() -> None:
    service = SaveService()
    monster = Monster.create(id="monster_1", hp=0, mp=3, max_hp=40)

    assert service.deserialize_monster(service.serialize_monster(monster)) == monster


@pytest.mark.parametrize("phase", ["preparation", "execution", "end", "battle"])
def test_battle_round_trip_for_every_shape(phase: str) -> None:
    service = SaveService()
    battle = _battles()[phase]

    payload = json.loads(json.dumps(service.serialize_battle(battle)))
    restored = service.deserialize_battle(payload)

    assert payload["phase"] == phase
    assert type(restored) is type(battle)
    assert restored == battle


def test_end_payload_records_winner_tag() -> None:
    payload = SaveService().serialize_battle(_battles()["end"])

    assert payload["winner"] == "player"
    assert "turn" not in payload


def test_deserialize_battle_rejects_unknown_phase() -> None:
    payload = SaveService().serialize_battle(_battles()["preparation"])
    payload["phase"] = "intermission"

    with pytest.raises(UnsupportedVariant):
        SaveService().deserialize_battle(payload)


def test_deserialize_reports_missing_fields() -> None:
    payload = SaveService().serialize_battle(_battles()["execution"])
    del payload["turn"]

    with pytest.raises(SaveLoadError):
        SaveService().deserialize_battle(payload)
    with pytest.raises(SaveLoadError):
        SaveService().deserialize_player({"id": "player_1"})
    with pytest.raises(SaveLoadError):
        SaveService().deserialize_battle(["not", "a", "mapping"])  # type: ignore[arg-type]


def test_deserialize_propagates_domain_violations() -> None:
    payload = {"id": "monster_1", "hp": 1000, "mp": 0, "max_hp": 10}

    with pytest.raises(ValidationError):
        SaveService().deserialize_monster(payload)
    with pytest.raises(ValidationError):
        SaveService().deserialize_player({**payload, "hp": 5, "exp": -1, "level": 1})


def test_deserialize_rejects_mistyped_fields() -> None:
    execution = SaveService().serialize_battle(_battles()["execution"])
    execution["turn"] = "2"
    flagged = SaveService().serialize_battle(_battles()["battle"])
    flagged["is_finished"] = 0

    with pytest.raises(SaveLoadError):
        SaveService().deserialize_battle(execution)
    with pytest.raises(SaveLoadError):
        SaveService().deserialize_battle(flagged)
    with pytest.raises(SaveLoadError):
        SaveService().deserialize_monster({"id": "monster_1", "hp": "10", "mp": 0, "max_hp": 10})
    with pytest.raises(SaveLoadError):
        SaveService().deserialize_player(
            {"id": 7, "hp": 5, "mp": 0, "max_hp": 10, "exp": 0, "level": True}
        )


def test_overhealed_player_survives_round_trip() -> None:
    service = SaveService()
    player = Player.create(id="player_1", hp=95, mp=10, max_hp=100).add_hp(16)

    restored = service.deserialize_player(json.loads(json.dumps(service.serialize_player(player))))

    assert restored == player
    assert restored.hp.value == 111


def _battles() -> dict:
    player = Player.create(id="player_1", hp=100, mp=45, max_hp=100, exp=250, level=1)
    monster = Monster.create(id="monster_1", hp=60, mp=20, max_hp=80)
    return {
        "preparation": Preparation(id="battle_1", player=player, monster=monster),
        "execution": Execution(id="battle_1", player=player, monster=monster, turn=2),
        "end": End(id="battle_1", player=player, monster=monster.take_damage(60), winner="player"),
        "battle": BattleEntity(id="battle_1", player=player, monster=monster, turn=4, is_finished=False),
    }
