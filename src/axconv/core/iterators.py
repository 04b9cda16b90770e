# src/axconv/core/iterators.py
"""Outer × inner traversal: for each outer anchor, the inner points around it."""
from __future__ import annotations

from typing import Iterator, Optional, Tuple

from .errors import DimensionalityError
from .points import Point, PointSpace

__all__ = ["CrossAxisIterator", "channel_spaces"]


class CrossAxisIterator:
    """
    Walk an outer space; at every outer point, offset the whole inner space.

    Yields ``(anchor, points)`` where ``points[k] = anchor + inner[k]``
    coordinate-wise. The inner space is built once; each pass over the
    iterator restarts the outer walk.

    Parameters
    ----------
    inner : PointSpace
        Offsets relative to the anchor (usually only the channel axis varies).
    outer : PointSpace
        Anchors (usually every axis but the channel, channel pinned to 0).
    """

    def __init__(self, inner: PointSpace, outer: PointSpace) -> None:
        if inner.ndim != outer.ndim:
            raise DimensionalityError(
                f"inner space is {inner.ndim}-D but outer space is {outer.ndim}-D"
            )
        self.inner = inner
        self.outer = outer
        self._offsets: Tuple[Point, ...] = tuple(inner.iterate())

    def __len__(self) -> int:
        return self.outer.size()

    def anchors(self) -> Iterator[Point]:
        return self.outer.iterate()

    def __iter__(self) -> Iterator[Tuple[Point, Tuple[Point, ...]]]:
        offsets = self._offsets
        for anchor in self.outer.iterate():
            points = tuple(
                tuple(a + o for a, o in zip(anchor, off)) for off in offsets
            )
            yield anchor, points


def channel_spaces(
    shape: Tuple[int, ...], channel_index: Optional[int]
) -> Tuple[PointSpace, PointSpace]:
    """
    Inner (channel column) and outer (everything else) spaces for ``shape``.

    With ``channel_index=None`` the inner space is the single origin point and
    the outer space covers the whole array.
    """
    ndim = len(shape)
    inner_max = [0] * ndim
    outer_max = [n - 1 for n in shape]
    if channel_index is not None:
        inner_max[channel_index] = shape[channel_index] - 1
        outer_max[channel_index] = 0
    return PointSpace([0] * ndim, inner_max), PointSpace([0] * ndim, outer_max)
