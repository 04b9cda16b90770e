# src/axconv/core/domains.py
"""
Numeric sample domains and the registry that names them.

A :class:`NumericDomain` carries everything the converter needs about a
representation as plain data (width, signedness, real range, storage dtype),
so one conversion routine serves every type.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Union

import numpy as np

from .errors import UnsupportedRepresentation

__all__ = [
    "NumericDomain",
    "DOMAINS",
    "get_domain",
    "available_domains",
    "domain_for_dtype",
    "as_domain",
]


@dataclass(frozen=True)
class NumericDomain:
    """
    Immutable description of a sample representation.

    Attributes
    ----------
    name : str
        Registry identifier, e.g. "uint8", "float32".
    bits : int
        Significant bits per sample (1 for binary masks, 12 for uint12 ...).
    signed : bool
        True if negative values are representable.
    real : bool
        True for floating point representations.
    min, max : float
        Smallest / largest representable real value.
    dtype : str
        numpy storage dtype name. Narrow domains share a wider storage type
        (bit → bool, uint12 → uint16).
    """
    name: str
    bits: int
    signed: bool
    real: bool
    min: float
    max: float
    dtype: str

    @property
    def treat_source_as_binary(self) -> bool:
        return self.bits == 1

    @property
    def is_integer(self) -> bool:
        return not self.real

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


def _unsigned(name: str, bits: int, dtype: str) -> NumericDomain:
    return NumericDomain(name, bits, False, False, 0.0, float(2**bits - 1), dtype)


def _signed(name: str, bits: int, dtype: str) -> NumericDomain:
    half = 2 ** (bits - 1)
    return NumericDomain(name, bits, True, False, float(-half), float(half - 1), dtype)


def _floating(name: str, dtype: str) -> NumericDomain:
    info = np.finfo(dtype)
    return NumericDomain(name, info.bits, True, True, float(info.min), float(info.max), dtype)


DOMAINS: Dict[str, NumericDomain] = {
    d.name: d
    for d in (
        _unsigned("bit", 1, "bool"),
        _unsigned("uint2", 2, "uint8"),
        _unsigned("uint4", 4, "uint8"),
        _signed("int8", 8, "int8"),
        _unsigned("uint8", 8, "uint8"),
        _unsigned("uint12", 12, "uint16"),
        _signed("int16", 16, "int16"),
        _unsigned("uint16", 16, "uint16"),
        _signed("int32", 32, "int32"),
        _unsigned("uint32", 32, "uint32"),
        _signed("int64", 64, "int64"),
        _unsigned("uint64", 64, "uint64"),
        _floating("float32", "float32"),
        _floating("float64", "float64"),
    )
}

_ALIASES = {
    "1-bit": "bit",
    "binary": "bit",
    "8-bit": "uint8",
    "12-bit": "uint12",
    "16-bit": "uint16",
    "32-bit": "float32",
    "float": "float32",
    "double": "float64",
}

# canonical domain for each storage dtype
_BY_DTYPE = {
    "bool": "bit",
    "int8": "int8",
    "uint8": "uint8",
    "int16": "int16",
    "uint16": "uint16",
    "int32": "int32",
    "uint32": "uint32",
    "int64": "int64",
    "uint64": "uint64",
    "float32": "float32",
    "float64": "float64",
}


def available_domains() -> List[str]:
    return list(DOMAINS)


def get_domain(name: str) -> NumericDomain:
    """
    Look up a domain by identifier (case-insensitive, aliases accepted).

    Raises
    ------
    UnsupportedRepresentation
        If the identifier is unknown.
    """
    key = str(name).strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return DOMAINS[key]
    except KeyError:
        raise UnsupportedRepresentation(
            f"Unknown representation {name!r}; expected one of {', '.join(DOMAINS)}"
        ) from None


def domain_for_dtype(dtype: Union[np.dtype, str, type]) -> NumericDomain:
    """Canonical domain stored in numpy ``dtype``."""
    try:
        dt = np.dtype(dtype)
    except TypeError as exc:
        raise UnsupportedRepresentation(f"Not a numpy dtype: {dtype!r}") from exc
    if dt.name not in _BY_DTYPE:
        raise UnsupportedRepresentation(f"No numeric domain for dtype {dt.name!r}")
    return DOMAINS[_BY_DTYPE[dt.name]]


def as_domain(domain: Union[NumericDomain, str]) -> NumericDomain:
    if isinstance(domain, NumericDomain):
        return domain
    if isinstance(domain, str):
        return get_domain(domain)
    raise UnsupportedRepresentation(
        f"Domain must be a NumericDomain or identifier, got {type(domain).__name__}"
    )
