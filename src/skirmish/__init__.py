"""Deterministic turn-based combat core."""

__version__ = "0.1.0"
