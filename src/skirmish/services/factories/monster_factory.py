"""Factory for creating monster entities."""
from __future__ import annotations

from skirmish.data.repositories import ArchetypesRepository
from skirmish.domain.entities import Monster
from skirmish.domain.entities.resource import require_int
from skirmish.domain.errors import UnsupportedVariant, ValidationError

from .id_factory import IdFactory

STARTER_HP = 16
STARTER_MP = 8


def create_starter_monster(id_factory: IdFactory) -> Monster:
    """Instantiate the default practice opponent."""
    return Monster.create(id=id_factory("monster"), hp=STARTER_HP, mp=STARTER_MP, max_hp=STARTER_HP)


def create_monster_from_level(
    archetype_id: str,
    level: int,
    archetypes_repo: ArchetypesRepository,
    id_factory: IdFactory,
) -> Monster:
    """Spawn a monster whose stats scale linearly with ``level``.

    hp and max_hp are ``level * hp_per_level``; mp is ``level * mp_per_level``.
    Results above the resource ceiling fail validation instead of clamping.
    """
    try:
        archetype = archetypes_repo.get(archetype_id)
    except KeyError as exc:
        raise UnsupportedVariant("archetype", archetype_id) from exc

    if require_int(level, "level") < 1:
        raise ValidationError("level", "level >= 1", level)

    hp = level * archetype.hp_per_level
    return Monster.create(
        id=id_factory(archetype.id),
        hp=hp,
        mp=level * archetype.mp_per_level,
        max_hp=hp,
    )
