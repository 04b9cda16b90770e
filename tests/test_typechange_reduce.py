import numpy as np
import pytest

from axconv.core import (
    DegenerateInput,
    DimensionalityError,
    Dataset,
    AxisModel,
    get_domain,
)
from axconv.typechange import output_axes, output_point, reduce_channels


def test_average_of_four_channels():
    samples = np.array([10, 20, 30, 40], dtype=np.uint8).reshape(1, 1, 4)
    ds = Dataset.from_array(samples, composite_channel_count=4)
    for strategy in ("vectorized", "walk"):
        out = reduce_channels(ds, 2, "uint8", strategy=strategy)
        assert out.shape == (1, 1)
        assert out.samples[0, 0] == 25


def test_output_axes_drop_channel(stack_dataset):
    axes = output_axes(stack_dataset.axes, 1)
    assert axes.tags == ("Time", "Y", "X")
    assert axes.shape == (2, 3, 5)
    assert axes.calibration == (2.0, 0.1, 0.2)
    assert output_axes(stack_dataset.axes, None) is stack_dataset.axes


def test_output_point_strips_channel():
    assert output_point(1, (4, 0, 2, 3)) == (4, 2, 3)
    assert output_point(None, (4, 0, 2)) == (4, 0, 2)


def test_reduce_middle_channel_axis(stack_dataset):
    out = reduce_channels(stack_dataset, 1, "float32")
    assert out.axes.tags == ("Time", "Y", "X")
    assert out.ndim == stack_dataset.ndim - 1
    expected = stack_dataset.samples.astype(np.float64).mean(axis=1)
    np.testing.assert_allclose(out.samples, expected.astype(np.float32))
    assert out.composite_channel_count == 1
    assert not out.rgb_merged


@pytest.mark.parametrize("jobs", [1, 2])
def test_walk_matches_vectorized(stack_dataset, jobs):
    vec = reduce_channels(stack_dataset, 1, "uint8")
    walk = reduce_channels(stack_dataset, 1, "uint8", strategy="walk", jobs=jobs)
    assert walk.equals(vec)
    assert vec.samples.max() == 255


def test_mean_is_computed_before_clamping():
    # int16 channels whose mean fits uint8 although single samples do not
    samples = np.array([-100, 300], dtype=np.int16).reshape(1, 2)
    ds = Dataset.from_array(samples, tags=("X", "Channel"), composite_channel_count=2)
    out = reduce_channels(ds, 1, "uint8", strategy="walk")
    assert out.samples.tolist() == [100]


def test_binary_source_reduction():
    samples = np.array([[[True, False, False]], [[False, False, False]]])
    ds = Dataset.from_array(samples, composite_channel_count=3)
    out = reduce_channels(ds, 2, "uint8", strategy="walk")
    np.testing.assert_array_equal(out.samples, [[255], [0]])


def test_no_channel_axis_keeps_rank(gray_dataset):
    out = reduce_channels(gray_dataset, None, "uint8", strategy="walk")
    assert out.axes == gray_dataset.axes
    assert out.samples[0, 3] == 1


def test_zero_extent_channel_is_degenerate():
    axes = AxisModel.from_shape((2, 2, 0))
    ds = Dataset(np.zeros((2, 2, 0), np.uint8), axes, get_domain("uint8"))
    with pytest.raises(DegenerateInput):
        reduce_channels(ds, 2, "uint8")


def test_channel_index_out_of_range(rgb_dataset):
    with pytest.raises(DimensionalityError):
        reduce_channels(rgb_dataset, 3, "uint8")
