"""
Tests for PointSpace and CrossAxisIterator.
"""

import numpy as np
import pytest

from axconv.core import CrossAxisIterator, DimensionalityError, PointSpace, channel_spaces


def test_point_space_row_major_last_axis_fastest():
    space = PointSpace([0, 1], [1, 3])
    assert space.size() == 6
    assert list(space) == [(0, 1), (0, 2), (0, 3), (1, 1), (1, 2), (1, 3)]


def test_point_space_order_matches_numpy_c_order():
    shape = (2, 3, 4)
    points = list(PointSpace.full(shape))
    flat = [int(np.ravel_multi_index(p, shape)) for p in points]
    assert flat == list(range(24))


def test_point_space_is_restartable():
    space = PointSpace([0, 0], [2, 2])
    first = list(space.iterate())
    second = list(space.iterate())
    assert first == second
    assert len(first) == len(space) == 9


def test_degenerate_axis_contributes_one_value():
    space = PointSpace([0, 5, 0], [1, 5, 0])
    assert space.size() == 2
    assert list(space) == [(0, 5, 0), (1, 5, 0)]


def test_point_space_validation():
    with pytest.raises(DimensionalityError):
        PointSpace([0, 0], [1])
    with pytest.raises(DimensionalityError):
        PointSpace([2], [1])


def test_slabs_partition_space():
    space = PointSpace([0, 0], [2, 1])
    slabs = list(space.slabs(0))
    assert len(slabs) == 3
    assert sum(s.size() for s in slabs) == space.size()
    assert [p for s in slabs for p in s] == list(space)


def test_channel_spaces_pin_channel_slot():
    inner, outer = channel_spaces((2, 2, 3), 2)
    assert list(inner) == [(0, 0, 0), (0, 0, 1), (0, 0, 2)]
    assert outer.size() == 4
    assert all(p[2] == 0 for p in outer)


def test_cross_axis_iterator_columns():
    inner, outer = channel_spaces((2, 3, 2), 1)
    it = CrossAxisIterator(inner, outer)
    assert len(it) == outer.size() == 4

    items = list(it)
    assert [a for a, _ in items] == [(0, 0, 0), (0, 0, 1), (1, 0, 0), (1, 0, 1)]
    anchor, column = items[3]
    assert column == ((1, 0, 1), (1, 1, 1), (1, 2, 1))

    # restartable
    assert list(it) == items


def test_cross_axis_iterator_without_channel_axis():
    inner, outer = channel_spaces((2, 2), None)
    items = list(CrossAxisIterator(inner, outer))
    assert len(items) == 4
    assert all(column == (anchor,) for anchor, column in items)


def test_cross_axis_iterator_rank_mismatch():
    with pytest.raises(DimensionalityError):
        CrossAxisIterator(PointSpace([0], [1]), PointSpace([0, 0], [1, 1]))
