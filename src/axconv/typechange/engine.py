# src/axconv/typechange/engine.py
"""Public entry point: change a dataset's numeric representation."""
from __future__ import annotations

from typing import Union

from axconv.core.dataset import Dataset
from axconv.core.domains import NumericDomain, as_domain
from axconv.core.errors import DimensionalityError
from axconv.core.storage import storage_dtype
from axconv.typechange.convert import convert_array, validate_strategy
from axconv.typechange.reduce import channel_extent, reduce_channels

__all__ = ["change_type"]


def change_type(
    source: Dataset,
    dest_domain: Union[NumericDomain, str],
    *,
    strategy: str = "vectorized",
    jobs: int = 1,
) -> Dataset:
    """
    Convert ``source`` to ``dest_domain``.

    - Same representation and not a color composite: an equal, independently
      owned copy is returned.
    - Color composite (composite channel count == channel extent): the
      channel axis is averaged away; the result has one composite channel and
      is not RGB-merged.
    - Otherwise: element-wise clamped conversion, axes and composite flags
      unchanged.

    Parameters
    ----------
    source : Dataset
        Input; never modified.
    dest_domain : NumericDomain or str
        Target representation (registry identifiers such as "uint8" accepted).
    strategy : {"vectorized", "walk"}
    jobs : int
        Worker threads for the "walk" strategy.

    Returns
    -------
    Dataset

    Raises
    ------
    DimensionalityError
        Source has no axes, or its channel axis reference is out of range.
    UnsupportedRepresentation
        Destination storage cannot be allocated.
    DegenerateInput
        Zero-extent channel axis on a color composite.
    """
    dest = as_domain(dest_domain)
    storage_dtype(dest)
    validate_strategy(strategy, jobs)

    if source.ndim < 1:
        raise DimensionalityError("Cannot change type of a dataset with no axes")

    is_color = source.is_color_composite
    if source.domain == dest and not is_color:
        return source.copy()

    if is_color:
        channel_extent(source, source.channel_index)
        return reduce_channels(
            source,
            source.channel_index,
            dest,
            strategy=strategy,
            jobs=jobs,
        )

    return convert_array(source, dest, strategy=strategy, jobs=jobs)
