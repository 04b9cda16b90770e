# src/axconv/core/dataset.py
"""Axis-tagged sample array container."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .axes import AxisModel
from .domains import NumericDomain, as_domain, domain_for_dtype
from .errors import DimensionalityError, UnsupportedRepresentation
from .storage import check_range, is_narrow, storage_dtype, store

__all__ = ["Dataset"]


@dataclass(eq=False)
class Dataset:
    """
    N-dimensional grid of samples with named axes.

    Attributes
    ----------
    samples : np.ndarray
        Sample buffer, shape == axes.shape, dtype == domain storage dtype.
        The dataset owns it; conversions never alias it.
    axes : AxisModel
        One entry per array dimension.
    domain : NumericDomain
        Numeric representation of the samples.
    name : str
        Free-form dataset name.
    composite_channel_count : int
        How many channels form a color composite for display. The dataset is
        a color composite only when this equals the channel axis extent.
    rgb_merged : bool
        Display hint carried over from RGB sources.
    """
    samples: np.ndarray
    axes: AxisModel
    domain: NumericDomain
    name: str = ""
    composite_channel_count: int = 1
    rgb_merged: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.samples, np.ndarray):
            raise TypeError(f"samples must be a numpy array, got {type(self.samples).__name__}")
        if self.samples.ndim != len(self.axes):
            raise DimensionalityError(
                f"{self.samples.ndim}-D samples but {len(self.axes)} axes {self.axes.tags}"
            )
        if self.samples.shape != self.axes.shape:
            raise DimensionalityError(
                f"samples shape {self.samples.shape} != axis extents {self.axes.shape}"
            )
        if self.samples.dtype != storage_dtype(self.domain):
            raise UnsupportedRepresentation(
                f"samples dtype {self.samples.dtype.name!r} does not store "
                f"domain {self.domain.name!r} ({self.domain.dtype})"
            )
        if is_narrow(self.domain):
            # e.g. uint12 in uint16 storage
            check_range(self.samples, self.domain)
        if int(self.composite_channel_count) < 1:
            raise DimensionalityError(
                f"composite_channel_count must be >= 1, got {self.composite_channel_count}"
            )
        self.composite_channel_count = int(self.composite_channel_count)

    @classmethod
    def from_array(
        cls,
        array: np.ndarray,
        tags: Optional[Sequence[str]] = None,
        *,
        scales: Optional[Sequence[float]] = None,
        domain: Union[NumericDomain, str, None] = None,
        name: str = "",
        composite_channel_count: int = 1,
        rgb_merged: bool = False,
    ) -> "Dataset":
        """
        Wrap a bare ndarray. The domain defaults to the canonical one for the
        array dtype; an explicit domain (e.g. "uint12") casts to its storage.

        Raises
        ------
        UnsupportedRepresentation
            If an explicit domain cannot hold every sample. Values are never
            wrapped or clamped here; use :func:`~axconv.typechange.change_type`
            for that.
        """
        arr = np.array(array, copy=True)
        if domain is None:
            dom = domain_for_dtype(arr.dtype)
        else:
            dom = as_domain(domain)
            check_range(arr, dom)
            if np.issubdtype(arr.dtype, np.floating) and not dom.real:
                # round half up, NaN -> 0
                arr = store(arr, dom)
            else:
                arr = arr.astype(storage_dtype(dom), copy=False)
        axes = AxisModel.from_shape(arr.shape, tags, scales)
        return cls(
            samples=arr,
            axes=axes,
            domain=dom,
            name=name,
            composite_channel_count=composite_channel_count,
            rgb_merged=rgb_merged,
        )

    # ------------------------------------------------------------------

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(self.samples.shape)

    @property
    def ndim(self) -> int:
        return int(self.samples.ndim)

    @property
    def channel_index(self) -> Optional[int]:
        return self.axes.channel_index

    @property
    def channel_count(self) -> int:
        idx = self.channel_index
        return 1 if idx is None else self.axes[idx].extent

    @property
    def is_color_composite(self) -> bool:
        if self.channel_index is None:
            return False
        return self.composite_channel_count == self.channel_count

    def copy(self) -> "Dataset":
        return Dataset(
            samples=np.array(self.samples, copy=True),
            axes=self.axes,
            domain=self.domain,
            name=self.name,
            composite_channel_count=self.composite_channel_count,
            rgb_merged=self.rgb_merged,
        )

    def equals(self, other: "Dataset") -> bool:
        """Value equality: samples, axes, domain, name and composite flags."""
        return (
            self.axes == other.axes
            and self.domain == other.domain
            and self.name == other.name
            and self.composite_channel_count == other.composite_channel_count
            and self.rgb_merged == other.rgb_merged
            and np.array_equal(self.samples, other.samples)
        )
