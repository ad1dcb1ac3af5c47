"""Shared type aliases for the core and domain layers."""
from typing import Literal

Winner = Literal["player", "monster"]
PhaseTag = Literal["preparation", "execution", "end"]
SpellKind = Literal["attack", "heal", "buff"]

WINNERS: tuple[Winner, ...] = ("player", "monster")

__all__ = ["PhaseTag", "SpellKind", "WINNERS", "Winner"]
