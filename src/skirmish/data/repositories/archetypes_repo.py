"""Monster archetypes repository."""
from __future__ import annotations

from skirmish.data.repositories.base import RepositoryBase
from skirmish.domain.defs import ArchetypeDef


class ArchetypesRepository(RepositoryBase[ArchetypeDef]):
    """Loads per-level stat multipliers for spawnable monsters."""

    def __init__(self, base_path=None) -> None:
        super().__init__("archetypes.json", base_path)

    def _build_entry(self, def_id: str, payload: dict[str, object]) -> ArchetypeDef:
        context = f"archetype '{def_id}'"
        self._assert_required(payload, ("name", "hp_per_level", "mp_per_level"), context)
        return ArchetypeDef(
            id=def_id,
            name=self._require_str(payload["name"], f"{context} name"),
            hp_per_level=self._require_int(payload["hp_per_level"], f"{context} hp_per_level", minimum=1),
            mp_per_level=self._require_int(payload["mp_per_level"], f"{context} mp_per_level", minimum=0),
        )
