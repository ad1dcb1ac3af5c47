"""Runtime configuration loading and persistence."""
from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict

from skirmish.core.logging_config import normalize_log_level

CONFIG_ENV_VAR = "SKIRMISH_CONFIG"
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_SEED = 0


@dataclass(frozen=True, slots=True)
class SkirmishConfig:
    """Settings shared by the data and service layers."""

    definitions_path: Path | None = None
    log_level: str = _DEFAULT_LOG_LEVEL
    log_json: bool = False
    rng_seed: int = _DEFAULT_SEED

    def to_payload(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["definitions_path"] = str(self.definitions_path) if self.definitions_path else None
        return payload


def get_user_config_dir() -> Path:
    """Return the per-user configuration directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Skirmish"
        return Path.home() / "Skirmish"
    return Path.home() / ".config" / "skirmish"


def get_default_config_path() -> Path:
    """Return the config path, honouring the SKIRMISH_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return get_user_config_dir() / "config.json"


def _normalize_definitions_path(value: object) -> Path | None:
    if isinstance(value, str) and value.strip():
        return Path(value)
    return None


def _normalize_seed(value: object) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return _DEFAULT_SEED


def config_from_payload(raw: object) -> SkirmishConfig:
    """Build a config from decoded JSON, replacing unusable values with defaults."""
    if not isinstance(raw, dict):
        return SkirmishConfig()
    return SkirmishConfig(
        definitions_path=_normalize_definitions_path(raw.get("definitions_path")),
        log_level=normalize_log_level(raw.get("log_level", _DEFAULT_LOG_LEVEL)),
        log_json=raw.get("log_json") is True,
        rng_seed=_normalize_seed(raw.get("rng_seed")),
    )


def load_config(path: Path | None = None) -> SkirmishConfig:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return SkirmishConfig()
    except (OSError, json.JSONDecodeError):
        return SkirmishConfig()
    return config_from_payload(raw)


def save_config(config: SkirmishConfig, path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config.to_payload(), indent=2, sort_keys=True), encoding="utf-8")
