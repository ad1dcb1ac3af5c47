"""Seeded RNG wrapper used for deterministic identifier generation."""
from __future__ import annotations

from random import Random


class RNG:
    """Wrapper around random.Random exposing only deterministic helpers."""

    def __init__(self, seed: int) -> None:
        self._random = Random(seed)

    def hex_token(self, length: int = 8) -> str:
        """Return a lowercase hex string of the requested length."""
        if length <= 0:
            raise ValueError("Token length must be positive.")
        return f"{self._random.getrandbits(length * 4):0{length}x}"
