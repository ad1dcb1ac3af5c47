"""Domain-level exceptions.

All of these are deterministic: retrying with the same input raises the
same error again.
"""
from __future__ import annotations


class DomainError(Exception):
    """Base exception for the domain layer."""


class ValidationError(DomainError):
    """Raised when construction input violates a field constraint."""

    def __init__(self, field: str, constraint: str, value: object) -> None:
        self.field = field
        self.constraint = constraint
        self.value = value
        super().__init__(f"{field} must satisfy {constraint} (got {value!r})")


class InvalidStateError(DomainError):
    """Raised when an operation is attempted in a phase that forbids it."""


class UnsupportedVariant(DomainError):
    """Raised when a dispatch point receives an unrecognized tag."""

    def __init__(self, kind: str, tag: object) -> None:
        self.kind = kind
        self.tag = tag
        super().__init__(f"Unsupported {kind}: {tag!r}")
