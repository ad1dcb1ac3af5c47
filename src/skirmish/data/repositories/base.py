"""Cached loading and field checks shared by definition repositories."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, Iterable, TypeVar

from skirmish.data import paths
from skirmish.data.errors import DataValidationError
from skirmish.data.json_loader import load_definition_table

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Loads one JSON file of ``{id: payload}`` entries on first access."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    @property
    def file_path(self) -> Path:
        return paths.resolve_definitions_dir(self._base_path) / self._filename

    def _build_entry(self, def_id: str, payload: dict[str, object]) -> T:
        """Convert one validated payload mapping into a definition."""
        raise NotImplementedError

    def _ensure_loaded(self) -> Dict[str, T]:
        if self._definitions is None:
            raw = load_definition_table(self.file_path)
            definitions: Dict[str, T] = {}
            for def_id, payload in raw.items():
                context = f"{self._filename} entry '{def_id}'"
                definitions[def_id] = self._build_entry(def_id, self._require_mapping(payload, context))
            self._definitions = definitions
        return self._definitions

    def get(self, def_id: str) -> T:
        """Return a definition by id, raising KeyError when unknown."""
        definitions = self._ensure_loaded()
        try:
            return definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by id."""
        definitions = self._ensure_loaded()
        return [definitions[key] for key in sorted(definitions)]

    def ids(self) -> list[str]:
        return sorted(self._ensure_loaded())

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object.")
        return value

    @staticmethod
    def _assert_required(payload: dict[str, object], required: Iterable[str], context: str) -> None:
        missing = set(required) - payload.keys()
        if missing:
            raise DataValidationError(f"{context} missing fields: {sorted(missing)}")

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str) or not value:
            raise DataValidationError(f"{context} must be a non-empty string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str, *, minimum: int | None = None) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise DataValidationError(f"{context} must be an integer.")
        if minimum is not None and value < minimum:
            raise DataValidationError(f"{context} must be >= {minimum}.")
        return value
