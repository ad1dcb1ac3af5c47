"""Experience thresholds and level calculation."""
from __future__ import annotations

from skirmish.domain.entities.resource import require_int
from skirmish.domain.errors import ValidationError

EXP_PER_LEVEL_SQUARED = 100
MIN_LEVEL = 1


class ExperienceEngine:
    """Pure level/experience arithmetic: required_exp(L) = L^2 * 100."""

    def required_exp(self, level: int) -> int:
        if require_int(level, "level") < MIN_LEVEL:
            raise ValidationError("level", f"level >= {MIN_LEVEL}", level)
        return level * level * EXP_PER_LEVEL_SQUARED

    def calculate_level(self, exp: int) -> int:
        """Return the highest level whose threshold ``exp`` has reached (at least 1)."""
        if require_int(exp, "exp") < 0:
            raise ValidationError("exp", "exp >= 0", exp)
        level = MIN_LEVEL
        while self.required_exp(level) <= exp:
            level += 1
        return max(MIN_LEVEL, level - 1)
