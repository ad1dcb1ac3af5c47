"""Repository exports."""

from .archetypes_repo import ArchetypesRepository
from .spells_repo import SpellsRepository

__all__ = [
    "ArchetypesRepository",
    "SpellsRepository",
]
