"""Reads definition tables (``{id: {...}}`` JSON objects) from disk."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

from .errors import DataLoadError, DataValidationError

DefinitionTable = Dict[str, object]


def load_definition_table(path: Path) -> DefinitionTable:
    """Decode ``path`` and return its top-level object keyed by definition id.

    Read and parse failures raise DataLoadError; a document whose top level
    is not an object, or whose keys are blank, raises DataValidationError.
    Entry payloads are returned undecoded for the repository to check.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise DataLoadError("definition file not found", path=path) from exc
    except OSError as exc:
        raise DataLoadError(f"unable to read definition file ({exc})", path=path) from exc
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"invalid JSON at line {exc.lineno}: {exc.msg}", path=path) from exc

    if not isinstance(raw, dict):
        raise DataValidationError(f"expected a top-level object, got {type(raw).__name__}", path=path)
    blank = [key for key in raw if not key.strip()]
    if blank:
        raise DataValidationError("definition ids must be non-empty", path=path)
    return raw
