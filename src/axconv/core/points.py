# src/axconv/core/points.py
"""Hyper-rectangular integer point sets."""
from __future__ import annotations

from itertools import product
from typing import Iterator, Sequence, Tuple

from .errors import DimensionalityError

__all__ = ["Point", "PointSpace"]

Point = Tuple[int, ...]


class PointSpace:
    """
    Closed hyper-rectangle ``[min_i, max_i]`` of integer coordinates.

    Iteration is row-major (last axis fastest, numpy C order), lazy and
    restartable: every call to :meth:`iterate` starts from ``min``.

    Parameters
    ----------
    min, max : sequence of int
        Inclusive corners, equal length. An axis with ``min_i == max_i``
        contributes exactly one coordinate.
    """

    __slots__ = ("_min", "_max")

    def __init__(self, min: Sequence[int], max: Sequence[int]) -> None:  # noqa: A002
        lo = tuple(int(v) for v in min)
        hi = tuple(int(v) for v in max)
        if len(lo) != len(hi):
            raise DimensionalityError(
                f"min has {len(lo)} coordinates but max has {len(hi)}"
            )
        for i, (a, b) in enumerate(zip(lo, hi)):
            if b < a:
                raise DimensionalityError(f"Axis {i}: max {b} < min {a}")
        self._min: Point = lo
        self._max: Point = hi

    @classmethod
    def full(cls, shape: Sequence[int]) -> "PointSpace":
        """Every coordinate of an array of ``shape`` (all extents >= 1)."""
        shape = tuple(int(n) for n in shape)
        return cls([0] * len(shape), [n - 1 for n in shape])

    @property
    def min(self) -> Point:
        return self._min

    @property
    def max(self) -> Point:
        return self._max

    @property
    def ndim(self) -> int:
        return len(self._min)

    @property
    def extents(self) -> Tuple[int, ...]:
        return tuple(b - a + 1 for a, b in zip(self._min, self._max))

    def size(self) -> int:
        n = 1
        for e in self.extents:
            n *= e
        return n

    def iterate(self) -> Iterator[Point]:
        ranges = [range(a, b + 1) for a, b in zip(self._min, self._max)]
        return product(*ranges)

    def __iter__(self) -> Iterator[Point]:
        return self.iterate()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, point: object) -> bool:
        try:
            pt = tuple(point)  # type: ignore[arg-type]
        except TypeError:
            return False
        if len(pt) != self.ndim:
            return False
        return all(a <= p <= b for p, a, b in zip(pt, self._min, self._max))

    def slabs(self, axis: int) -> Iterator["PointSpace"]:
        """Sub-spaces pinned at each coordinate along ``axis``."""
        if not 0 <= axis < self.ndim:
            raise DimensionalityError(f"Axis {axis} out of range for {self.ndim}-D space")
        for c in range(self._min[axis], self._max[axis] + 1):
            lo = list(self._min)
            hi = list(self._max)
            lo[axis] = hi[axis] = c
            yield PointSpace(lo, hi)

    def __repr__(self) -> str:
        return f"PointSpace(min={self._min}, max={self._max})"
