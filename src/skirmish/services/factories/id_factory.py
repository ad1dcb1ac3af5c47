"""Identifier generation injected into every factory."""
from __future__ import annotations

from typing import Protocol

from skirmish.core.rng import RNG


class IdFactory(Protocol):
    """Callable returning a fresh identifier for the given prefix."""

    def __call__(self, prefix: str) -> str: ...


def make_instance_id(prefix: str, rng: RNG) -> str:
    """Generate a deterministic identifier using the provided RNG."""
    return f"{prefix}_{rng.hex_token(12)}"


class RngIdFactory:
    """IdFactory drawing suffixes from a seeded RNG."""

    def __init__(self, rng: RNG) -> None:
        self._rng = rng

    def __call__(self, prefix: str) -> str:
        return make_instance_id(prefix, self._rng)
