"""Resolution of the definitions directory."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_ENV_VAR = "SKIRMISH_DEFINITIONS"

# src/skirmish/data/paths.py -> repository root
_BUNDLED_DEFINITIONS = Path(__file__).resolve().parents[3] / "data" / "definitions"


def resolve_definitions_dir(base_path: Path | str | None = None) -> Path:
    """Pick the definitions directory.

    An explicit ``base_path`` wins, then the SKIRMISH_DEFINITIONS environment
    variable, then the ``data/definitions`` directory of the source checkout.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get(DEFINITIONS_ENV_VAR)
    if override:
        return Path(override)
    return _BUNDLED_DEFINITIONS
