"""Experience gain and level recalculation."""
from __future__ import annotations

from skirmish.core.logging_config import get_logger
from skirmish.domain.entities import Player
from skirmish.domain.entities.resource import require_int
from skirmish.domain.errors import ValidationError
from skirmish.domain.experience import ExperienceEngine

logger = get_logger(__name__)


class LevelingService:
    """Applies experience so that ``level`` always follows ``exp``."""

    def __init__(self, exp_engine: ExperienceEngine | None = None) -> None:
        self._exp_engine = exp_engine or ExperienceEngine()

    def add_exp(self, player: Player, gained: int) -> Player:
        if require_int(gained, "gained") < 0:
            raise ValidationError("gained", "gained >= 0", gained)
        new_exp = player.exp + gained
        new_level = self._exp_engine.calculate_level(new_exp)
        if new_level != player.level:
            logger.debug(
                "Player level changed",
                player_id=player.id,
                old_level=player.level,
                new_level=new_level,
                exp=new_exp,
            )
        return player.with_exp(gained).with_level(new_level)

    def exp_to_next_level(self, player: Player) -> int:
        """Experience still needed to reach the level after the current one."""
        current = self._exp_engine.calculate_level(player.exp)
        return self._exp_engine.required_exp(current + 1) - player.exp
