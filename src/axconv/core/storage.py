# src/axconv/core/storage.py
"""numpy-backed sample storage: allocation and real → storage writes."""
from __future__ import annotations

from typing import Sequence

import numpy as np

from .domains import NumericDomain
from .errors import DegenerateInput, UnsupportedRepresentation

__all__ = ["storage_dtype", "allocate", "store", "check_range", "is_narrow"]


def storage_dtype(domain: NumericDomain) -> np.dtype:
    """
    numpy dtype backing ``domain``.

    Raises
    ------
    UnsupportedRepresentation
        If numpy has no such dtype or it cannot hold the domain's range.
    """
    try:
        dt = np.dtype(domain.dtype)
    except TypeError as exc:
        raise UnsupportedRepresentation(
            f"Cannot allocate storage {domain.dtype!r} for domain {domain.name!r}"
        ) from exc

    if dt == np.bool_:
        ok = domain.min >= 0 and domain.max <= 1
    elif np.issubdtype(dt, np.integer):
        info = np.iinfo(dt)
        ok = (
            not domain.real
            and float(info.min) <= domain.min
            and domain.max <= float(info.max)
        )
    elif np.issubdtype(dt, np.floating):
        info = np.finfo(dt)
        ok = float(info.min) <= domain.min and domain.max <= float(info.max)
    else:
        ok = False

    if not ok:
        raise UnsupportedRepresentation(
            f"Storage {dt.name!r} cannot represent domain {domain.name!r} "
            f"[{domain.min}, {domain.max}]"
        )
    return dt


def allocate(shape: Sequence[int], domain: NumericDomain) -> np.ndarray:
    """Zeroed C-order buffer of ``shape`` for ``domain``."""
    dt = storage_dtype(domain)
    shape = tuple(int(n) for n in shape)
    if any(n < 0 for n in shape):
        raise DegenerateInput(f"Negative extent in shape {shape}")
    return np.zeros(shape, dtype=dt)


def check_range(values: np.ndarray, domain: NumericDomain) -> None:
    """
    Raise if any non-NaN sample lies outside ``[domain.min, domain.max]``.

    Raises
    ------
    UnsupportedRepresentation
        If a sample cannot be represented in ``domain``.
    """
    v = np.asarray(values)
    if v.size == 0:
        return
    if np.issubdtype(v.dtype, np.floating):
        v = v[~np.isnan(v)]
        if v.size == 0:
            return
    lo, hi = v.min(), v.max()
    if lo < domain.min or hi > domain.max:
        raise UnsupportedRepresentation(
            f"Samples [{lo}, {hi}] fall outside domain {domain.name!r} "
            f"[{domain.min}, {domain.max}]"
        )


def is_narrow(domain: NumericDomain) -> bool:
    """True if the storage dtype holds values the domain does not allow."""
    dt = storage_dtype(domain)
    if domain.real or dt == np.bool_:
        return False
    info = np.iinfo(dt)
    return float(info.min) < domain.min or domain.max < float(info.max)


def store(values: np.ndarray, domain: NumericDomain) -> np.ndarray:
    """
    Cast already-clamped real values into the domain's storage type.

    Integer domains round half up (floor(v + 0.5)) and map NaN to 0.
    The bit domain stores ``v >= 0.5``.
    """
    dt = storage_dtype(domain)
    v = np.asarray(values, dtype=np.float64)

    if domain.real:
        return v.astype(dt)

    v = np.floor(v + 0.5)
    v = np.where(np.isnan(v), 0.0, v)
    v = np.asarray(np.clip(v, domain.min, domain.max))
    if dt == np.bool_:
        return np.asarray(v >= 0.5)

    # 64-bit maxima are not exactly representable as float64
    info = np.iinfo(dt)
    with np.errstate(invalid="ignore", over="ignore"):
        out = v.astype(dt)
    out[v >= float(info.max)] = info.max
    return out
