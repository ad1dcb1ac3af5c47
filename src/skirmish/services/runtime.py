"""Wires repositories and services together from a SkirmishConfig."""
from __future__ import annotations

from dataclasses import dataclass

from skirmish.core.config import SkirmishConfig, load_config
from skirmish.core.logging_config import configure_logging, get_logger
from skirmish.core.rng import RNG
from skirmish.data.repositories import ArchetypesRepository, SpellsRepository
from skirmish.domain.experience import ExperienceEngine
from skirmish.services.battle_action_service import BattleActionService
from skirmish.services.battle_service import BattleService
from skirmish.services.factories import RngIdFactory
from skirmish.services.leveling_service import LevelingService
from skirmish.services.save_service import SaveService

logger = get_logger(__name__)


@dataclass(slots=True)
class Runtime:
    """Everything a caller needs to spawn combatants and run battles."""

    config: SkirmishConfig
    id_factory: RngIdFactory
    archetypes_repo: ArchetypesRepository
    spells_repo: SpellsRepository
    leveling_service: LevelingService
    battle_action_service: BattleActionService
    battle_service: BattleService
    save_service: SaveService


def build_runtime(config: SkirmishConfig | None = None) -> Runtime:
    """Create a runtime; loads the on-disk config when none is given."""
    resolved = config or load_config()
    configure_logging(resolved.log_level, json_output=resolved.log_json)

    id_factory = RngIdFactory(RNG(resolved.rng_seed))
    leveling_service = LevelingService(ExperienceEngine())
    runtime = Runtime(
        config=resolved,
        id_factory=id_factory,
        archetypes_repo=ArchetypesRepository(base_path=resolved.definitions_path),
        spells_repo=SpellsRepository(base_path=resolved.definitions_path),
        leveling_service=leveling_service,
        battle_action_service=BattleActionService(),
        battle_service=BattleService(id_factory, leveling_service),
        save_service=SaveService(),
    )
    logger.debug("Runtime built", rng_seed=resolved.rng_seed, definitions_path=str(resolved.definitions_path))
    return runtime
