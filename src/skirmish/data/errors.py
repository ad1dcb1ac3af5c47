"""Exceptions raised while loading definition files."""
from __future__ import annotations

from pathlib import Path


class DataError(Exception):
    """Base exception for the data layer; ``path`` names the offending file when known."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)


class DataLoadError(DataError):
    """A definition file is missing, unreadable or not valid JSON."""


class DataValidationError(DataError):
    """A definition file decoded but its content has the wrong structure."""
