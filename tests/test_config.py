import json
from pathlib import Path

import pytest

from skirmish.core import config as config_module
from skirmish.core.config import SkirmishConfig, load_config, save_config
from skirmish.services.runtime import build_runtime


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "missing.json") == SkirmishConfig()


def test_load_config_invalid_json_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")

    assert load_config(path) == SkirmishConfig()


def test_load_config_normalizes_values(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"log_level": "debug", "log_json": "yes", "rng_seed": True, "definitions_path": "defs"}),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.log_level == "DEBUG"
    assert config.log_json is False
    assert config.rng_seed == 0
    assert config.definitions_path == Path("defs")


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    original = SkirmishConfig(definitions_path=tmp_path, log_level="INFO", log_json=True, rng_seed=42)

    save_config(original, path)

    assert load_config(path) == original


def test_env_var_overrides_default_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "custom.json"
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(path))

    assert config_module.get_default_config_path() == path


def test_build_runtime_uses_config_seed() -> None:
    runtime_a = build_runtime(SkirmishConfig(rng_seed=99))
    runtime_b = build_runtime(SkirmishConfig(rng_seed=99))

    assert runtime_a.id_factory("battle") == runtime_b.id_factory("battle")
    assert runtime_a.archetypes_repo.get("slime").hp_per_level == 8


@pytest.mark.parametrize(("raw", "expected"), [("info", "INFO"), ("ERROR", "ERROR"), ("loud", "WARNING"), (3, "WARNING")])
def test_normalize_log_level(raw: object, expected: str) -> None:
    from skirmish.core.logging_config import normalize_log_level

    assert normalize_log_level(raw) == expected
