"""Monster archetype definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ArchetypeDef:
    """Per-level multipliers used to scale a spawned monster."""

    id: str
    name: str
    hp_per_level: int
    mp_per_level: int
