# src/axconv/core/errors.py
"""Error kinds raised by the type-change core."""
from __future__ import annotations

__all__ = [
    "TypeChangeError",
    "DimensionalityError",
    "UnsupportedRepresentation",
    "DegenerateInput",
]


class TypeChangeError(ValueError):
    """Base class for all conversion failures (caller-input errors)."""


class DimensionalityError(TypeChangeError):
    """Malformed axis list, mismatched shape, or out-of-range axis reference."""


class UnsupportedRepresentation(TypeChangeError):
    """The requested numeric representation cannot be allocated."""


class DegenerateInput(TypeChangeError):
    """An axis with zero extent where at least one sample is required."""
