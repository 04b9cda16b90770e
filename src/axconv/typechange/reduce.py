# src/axconv/typechange/reduce.py
"""
Channel reduction: collapse the channel axis by averaging.

For every point of the array with the channel coordinate pinned to 0 (the
outer space), the samples of the whole channel column (the inner space) are
averaged in float64, clamped with the converter policy and written to the
destination at the same point with the channel coordinate removed.
"""
from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np

from axconv.core.axes import AxisModel
from axconv.core.dataset import Dataset
from axconv.core.domains import NumericDomain, as_domain
from axconv.core.errors import DegenerateInput, DimensionalityError
from axconv.core.iterators import CrossAxisIterator, channel_spaces
from axconv.core.points import Point, PointSpace
from axconv.core.storage import allocate, store
from axconv.typechange.convert import (
    validate_strategy,
    convert_samples,
    convert_value,
    run_slabs,
)

__all__ = [
    "output_axes",
    "output_point",
    "channel_extent",
    "reduce_channels",
]


def output_axes(axes: AxisModel, channel_index: Optional[int]) -> AxisModel:
    """Axes (tags, extents, calibration) of the reduced array."""
    if channel_index is None:
        return axes
    return axes.without(channel_index)


def output_point(channel_index: Optional[int], point: Sequence[int]) -> Point:
    """Strip the channel component from an input coordinate."""
    if channel_index is None:
        return tuple(point)
    return tuple(p for i, p in enumerate(point) if i != channel_index)


def channel_extent(source: Dataset, channel_index: Optional[int]) -> int:
    """
    Length of the channel column, validated.

    Raises
    ------
    DimensionalityError
        If ``channel_index`` is not an axis of ``source``.
    DegenerateInput
        If the channel axis has zero extent.
    """
    if channel_index is None:
        return 1
    if not 0 <= channel_index < source.ndim:
        raise DimensionalityError(
            f"Channel axis index {channel_index} out of range for {source.ndim} axes"
        )
    n = source.axes[channel_index].extent
    if n == 0:
        raise DegenerateInput(
            f"Channel axis {source.axes[channel_index].tag!r} has zero extent"
        )
    return n


def _walk(
    source: Dataset,
    channel_index: Optional[int],
    dest: NumericDomain,
    out: np.ndarray,
    jobs: int,
) -> None:
    src = source.samples
    src_domain = source.domain
    inner, outer = channel_spaces(source.shape, channel_index)

    def work(space: PointSpace) -> None:
        for anchor, column in CrossAxisIterator(inner, space):
            total = 0.0
            for pt in column:
                total += float(src[pt])
            value = convert_value(total / len(column), src_domain, dest)
            out[output_point(channel_index, anchor)] = store(value, dest)

    # split along the first axis that is not the channel axis
    split = next((i for i in range(source.ndim) if i != channel_index), None)
    if split is None or jobs <= 1:
        work(outer)
    else:
        run_slabs(outer.slabs(split), work, jobs)


def reduce_channels(
    source: Dataset,
    channel_index: Optional[int],
    dest_domain: Union[NumericDomain, str],
    *,
    strategy: str = "vectorized",
    jobs: int = 1,
) -> Dataset:
    """
    Average the channel column of ``source`` into a lower-rank dataset.

    Parameters
    ----------
    source : Dataset
        Input; never modified.
    channel_index : int or None
        Axis to collapse. None means no channel axis: each column is a single
        sample and the rank is preserved.
    dest_domain : NumericDomain or str
        Target representation.
    strategy : {"vectorized", "walk"}
        "walk" uses :class:`~axconv.core.iterators.CrossAxisIterator`;
        "vectorized" takes ``mean(axis=channel_index)``. Results are equal.
    jobs : int
        Worker threads for the "walk" strategy.

    Returns
    -------
    Dataset
        Channel axis removed, ``composite_channel_count=1``, not RGB-merged.
    """
    dest = as_domain(dest_domain)
    validate_strategy(strategy, jobs)
    channel_extent(source, channel_index)

    axes = output_axes(source.axes, channel_index)
    if any(n == 0 for n in source.shape):
        # nothing to average; keep the (empty) reduced shape
        samples = allocate(axes.shape, dest)
    elif strategy == "vectorized":
        values = source.samples.astype(np.float64)
        if channel_index is not None:
            values = values.mean(axis=channel_index)
        samples = store(convert_samples(values, source.domain, dest), dest)
    else:
        samples = allocate(axes.shape, dest)
        _walk(source, channel_index, dest, samples, int(jobs))

    return Dataset(
        samples=samples,
        axes=axes,
        domain=dest,
        name=source.name,
        composite_channel_count=1,
        rgb_merged=False,
    )

