# src/axconv/typechange/convert.py
"""Element-wise type conversion with range clamping (no axis changes)."""
from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Union

import numpy as np

from axconv.core.dataset import Dataset
from axconv.core.domains import NumericDomain, as_domain
from axconv.core.points import PointSpace
from axconv.core.storage import allocate, store

__all__ = [
    "STRATEGIES",
    "convert_value",
    "convert_samples",
    "convert_array",
    "run_slabs",
    "validate_strategy",
]

STRATEGIES = ("vectorized", "walk")


def convert_value(
    sample: float,
    source_domain: NumericDomain,
    dest_domain: NumericDomain,
) -> float:
    """
    Clamp one real sample into ``dest_domain``.

    A positive sample from a one-bit source maps to ``dest_domain.max``;
    anything else saturates at the destination bounds. NaN passes through.
    """
    value = float(sample)
    if source_domain.treat_source_as_binary and value > 0:
        return dest_domain.max
    if math.isnan(value):
        return value
    return max(dest_domain.min, min(dest_domain.max, value))


def convert_samples(
    values: np.ndarray,
    source_domain: NumericDomain,
    dest_domain: NumericDomain,
) -> np.ndarray:
    """Array form of :func:`convert_value`; returns float64."""
    v = np.asarray(values, dtype=np.float64)
    out = np.clip(v, dest_domain.min, dest_domain.max)
    if source_domain.treat_source_as_binary:
        out = np.where(v > 0, dest_domain.max, out)
    return out


def validate_strategy(strategy: str, jobs: int) -> None:
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy {strategy!r}; expected one of {STRATEGIES}")
    if int(jobs) < 1:
        raise ValueError(f"jobs must be >= 1, got {jobs!r}")


def run_slabs(
    slabs: Iterable[PointSpace],
    work: Callable[[PointSpace], None],
    jobs: int = 1,
) -> None:
    """
    Apply ``work`` to every slab, serially or on a thread pool.

    Slabs must cover disjoint destination coordinates. Worker exceptions
    propagate to the caller.
    """
    if jobs <= 1:
        for slab in slabs:
            work(slab)
        return
    with ThreadPoolExecutor(max_workers=int(jobs)) as pool:
        for fut in [pool.submit(work, slab) for slab in slabs]:
            fut.result()


def convert_array(
    source: Dataset,
    dest_domain: Union[NumericDomain, str],
    *,
    strategy: str = "vectorized",
    jobs: int = 1,
) -> Dataset:
    """
    Copy ``source`` into a new dataset of ``dest_domain``, clamping values.

    Parameters
    ----------
    source : Dataset
        Input; never modified.
    dest_domain : NumericDomain or str
        Target representation.
    strategy : {"vectorized", "walk"}
        "walk" visits every point of the full point space; "vectorized"
        applies the same policy to the whole buffer at once.
    jobs : int
        Worker threads for the "walk" strategy (slabs along axis 0).

    Returns
    -------
    Dataset
        Same axes, name and composite flags; freshly allocated samples.

    Notes
    -----
    Samples pass through float64, so int64/uint64 magnitudes above 2**53
    are rounded to the nearest representable double before being stored.
    Values in the overlap of the two ranges are otherwise unchanged.
    """
    dest = as_domain(dest_domain)
    validate_strategy(strategy, jobs)
    src_domain = source.domain

    if strategy == "vectorized":
        samples = store(convert_samples(source.samples, src_domain, dest), dest)
    else:
        samples = allocate(source.shape, dest)
        src = source.samples

        def work(space: PointSpace) -> None:
            for pt in space:
                samples[pt] = store(convert_value(src[pt], src_domain, dest), dest)

        if source.ndim == 0:
            samples[()] = store(convert_value(src[()], src_domain, dest), dest)
        elif src.size:
            full = PointSpace.full(source.shape)
            run_slabs(full.slabs(0), work, jobs)

    return Dataset(
        samples=samples,
        axes=source.axes,
        domain=dest,
        name=source.name,
        composite_channel_count=source.composite_channel_count,
        rgb_merged=source.rgb_merged,
    )
