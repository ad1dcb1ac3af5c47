import pytest

from skirmish.domain.battle_models import BattleEntity, End, Execution, Preparation
from skirmish.domain.entities import Monster, Player
from skirmish.domain.errors import InvalidStateError, ValidationError


def test_start_battle_enters_first_turn() -> None:
    preparation = Preparation(id="battle_1", player=_player(), monster=_monster(hp=80))

    execution = preparation.start_battle()

    assert isinstance(execution, Execution)
    assert execution.turn == 1
    assert execution.id == "battle_1"
    assert execution.player == preparation.player


def test_execute_attack_applies_fixed_cost_and_damage() -> None:
    execution = Preparation(id="battle_1", player=_player(), monster=_monster(hp=80)).start_battle()

    next_phase = execution.execute_attack()

    assert isinstance(next_phase, Execution)
    assert next_phase.turn == 2
    assert next_phase.player.mp.value == 45
    assert next_phase.monster.hp.value == 60
    assert execution.monster.hp.value == 80


def test_monster_with_twenty_hp_falls_after_one_attack() -> None:
    execution = Preparation(id="battle_1", player=_player(), monster=_monster(hp=20)).start_battle()

    outcome = execution.execute_attack()

    assert isinstance(outcome, End)
    assert outcome.winner == "player"
    assert outcome.monster.is_dead


def test_repeated_attacks_reach_end() -> None:
    phase = Preparation(id="battle_1", player=_player(), monster=_monster(hp=70)).start_battle()
    attacks = 0
    while isinstance(phase, Execution):
        phase = phase.execute_attack()
        attacks += 1

    assert isinstance(phase, End)
    assert phase.winner == "player"
    assert attacks == 4


def test_dead_player_loses_even_when_monster_also_falls() -> None:
    dead_player = _player().take_damage(999)
    execution = Execution(id="battle_1", player=dead_player, monster=_monster(hp=20), turn=3)

    outcome = execution.execute_attack()

    assert isinstance(outcome, End)
    assert outcome.monster.is_dead
    assert outcome.winner == "monster"


def test_attack_proceeds_without_mana() -> None:
    player = Player.create(id="player_1", hp=10, mp=0, max_hp=10)
    execution = Execution(id="battle_1", player=player, monster=_monster(hp=80), turn=1)

    next_phase = execution.execute_attack()

    assert next_phase.player.mp.value == 0
    assert next_phase.monster.hp.value == 60


def test_end_has_no_transitions() -> None:
    end = End(id="battle_1", player=_player(), monster=_monster(hp=0), winner="player")

    assert not hasattr(end, "execute_attack")
    assert not hasattr(end, "start_battle")


def test_phase_validation() -> None:
    with pytest.raises(ValidationError):
        Execution(id="battle_1", player=_player(), monster=_monster(hp=10), turn=0)
    with pytest.raises(ValidationError):
        End(id="battle_1", player=_player(), monster=_monster(hp=10), winner="draw")  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        Preparation(id="battle_1", player=_monster(hp=10), monster=_monster(hp=10))  # type: ignore[arg-type]


def test_flagged_battle_finishes_without_winner() -> None:
    battle = BattleEntity(id="battle_1", player=_player(), monster=_monster(hp=32))

    draft = battle.cast_fireball().next_turn().cast_fireball().next_turn()

    assert draft.turn == 2
    assert draft.is_finished
    assert draft.monster.hp.value == 0
    assert draft.player.mp.value == 34
    assert not hasattr(draft, "winner")


def test_flagged_battle_rejects_fireball_after_finish() -> None:
    battle = BattleEntity(id="battle_1", player=_player(), monster=_monster(hp=16)).cast_fireball().next_turn()

    with pytest.raises(InvalidStateError):
        battle.cast_fireball()


def test_flagged_next_turn_without_deaths_keeps_running() -> None:
    battle = BattleEntity(id="battle_1", player=_player(), monster=_monster(hp=80))

    advanced = battle.cast_fireball().next_turn()

    assert advanced.turn == 1
    assert not advanced.is_finished


def _player() -> Player:
    return Player.create(id="player_1", hp=100, mp=50, max_hp=100)


def _monster(*, hp: int) -> Monster:
    return Monster.create(id="monster_1", hp=hp, mp=20, max_hp=max(hp, 1))
