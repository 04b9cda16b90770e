# src/axconv/core/axes.py
"""Axis-tagged dimensional model: ordered (tag, extent, scale) tuples."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from .errors import DimensionalityError

__all__ = [
    "X",
    "Y",
    "Z",
    "CHANNEL",
    "TIME",
    "Axis",
    "AxisModel",
    "default_tags",
]

X = "X"
Y = "Y"
Z = "Z"
CHANNEL = "Channel"
TIME = "Time"


@dataclass(frozen=True)
class Axis:
    """
    One named dimension.

    Attributes
    ----------
    tag : str
        Axis identity, e.g. "X", "Y", "Channel".
    extent : int
        Number of samples along the axis (>= 0).
    scale : float
        Calibration in physical units per sample.
    """
    tag: str
    extent: int
    scale: float = 1.0

    def __post_init__(self) -> None:
        if int(self.extent) != self.extent or self.extent < 0:
            raise DimensionalityError(
                f"Axis {self.tag!r} extent must be a non-negative integer, got {self.extent!r}"
            )
        object.__setattr__(self, "extent", int(self.extent))
        object.__setattr__(self, "scale", float(self.scale))


def default_tags(ndim: int) -> Tuple[str, ...]:
    """
    Guess axis tags for a bare array of rank ``ndim``.

    1 → (X,), 2 → (Y, X), 3 → (Y, X, Channel), 4 → (Z, Y, X, Channel),
    5 → (Time, Z, Y, X, Channel).
    """
    table = {
        1: (X,),
        2: (Y, X),
        3: (Y, X, CHANNEL),
        4: (Z, Y, X, CHANNEL),
        5: (TIME, Z, Y, X, CHANNEL),
    }
    if ndim not in table:
        raise DimensionalityError(f"No default axis tags for rank {ndim}; pass tags explicitly")
    return table[ndim]


class AxisModel:
    """
    Ordered, immutable list of :class:`Axis` with unique tags.

    Supports ``len()``, indexing, iteration and lookup by tag.
    """

    __slots__ = ("_axes",)

    def __init__(self, axes: Sequence[Axis]) -> None:
        axes = tuple(axes)
        seen = set()
        for ax in axes:
            if not isinstance(ax, Axis):
                raise DimensionalityError(f"Expected Axis, got {type(ax).__name__}")
            if ax.tag in seen:
                raise DimensionalityError(f"Duplicate axis tag {ax.tag!r}")
            seen.add(ax.tag)
        self._axes: Tuple[Axis, ...] = axes

    @classmethod
    def from_shape(
        cls,
        shape: Sequence[int],
        tags: Optional[Sequence[str]] = None,
        scales: Optional[Sequence[float]] = None,
    ) -> "AxisModel":
        shape = tuple(int(n) for n in shape)
        if tags is None:
            tags = default_tags(len(shape))
        if scales is None:
            scales = [1.0] * len(shape)
        if len(tags) != len(shape) or len(scales) != len(shape):
            raise DimensionalityError(
                f"tags/scales length must match rank {len(shape)}, "
                f"got {len(tags)} tags and {len(scales)} scales"
            )
        return cls([Axis(t, n, s) for t, n, s in zip(tags, shape, scales)])

    # ------------------------------------------------------------------
    # sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._axes)

    def __iter__(self) -> Iterator[Axis]:
        return iter(self._axes)

    def __getitem__(self, index: int) -> Axis:
        return self._axes[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AxisModel):
            return NotImplemented
        return self._axes == other._axes

    def __hash__(self) -> int:
        return hash(self._axes)

    def __repr__(self) -> str:
        inner = ", ".join(f"{a.tag}={a.extent}" for a in self._axes)
        return f"AxisModel({inner})"

    # ------------------------------------------------------------------
    # views
    # ------------------------------------------------------------------

    @property
    def ndim(self) -> int:
        return len(self._axes)

    @property
    def tags(self) -> Tuple[str, ...]:
        return tuple(a.tag for a in self._axes)

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(a.extent for a in self._axes)

    @property
    def calibration(self) -> Tuple[float, ...]:
        return tuple(a.scale for a in self._axes)

    @property
    def channel_index(self) -> Optional[int]:
        return self.index_of(CHANNEL)

    def index_of(self, tag: str) -> Optional[int]:
        """Position of the axis tagged ``tag``, or None if absent."""
        for i, ax in enumerate(self._axes):
            if ax.tag == tag:
                return i
        return None

    # ------------------------------------------------------------------
    # derived models
    # ------------------------------------------------------------------

    def without(self, index: int) -> "AxisModel":
        """Drop the axis at ``index``; surviving axes keep their order."""
        if not 0 <= index < len(self._axes):
            raise DimensionalityError(
                f"Axis index {index} out of range for {len(self._axes)} axes"
            )
        return AxisModel(self._axes[:index] + self._axes[index + 1:])

    def replace_extents(self, shape: Sequence[int]) -> "AxisModel":
        shape = tuple(shape)
        if len(shape) != len(self._axes):
            raise DimensionalityError(
                f"Expected {len(self._axes)} extents, got {len(shape)}"
            )
        return AxisModel([Axis(a.tag, n, a.scale) for a, n in zip(self._axes, shape)])
