import numpy as np
import pytest

from axconv.assign import assign_values, gamma_data_values
from axconv.core import Dataset


def test_gamma_float_values():
    ds = Dataset.from_array(np.array([[0.0, 0.25, 1.0, 4.0]], dtype=np.float32))
    out = gamma_data_values(ds, 0.5)
    np.testing.assert_allclose(out.samples, [[0.0, 0.5, 1.0, 2.0]])
    assert out.domain is ds.domain
    assert out.axes == ds.axes


def test_gamma_clamps_to_own_domain():
    ds = Dataset.from_array(np.array([[2, 10, 16]], dtype=np.uint8))
    out = gamma_data_values(ds, 2.0)
    np.testing.assert_array_equal(out.samples, [[4, 100, 255]])
    assert out.samples.dtype == np.uint8


def test_gamma_non_positive_samples_become_zero(gray_dataset):
    out = gamma_data_values(gray_dataset, 1.0)
    expected = np.where(gray_dataset.samples > 0, gray_dataset.samples, 0)
    np.testing.assert_array_equal(out.samples, expected)


def test_gamma_constant_bounds(gray_dataset):
    with pytest.raises(ValueError):
        gamma_data_values(gray_dataset, 0.0)
    with pytest.raises(ValueError):
        gamma_data_values(gray_dataset, 5.5)


def test_assign_values_keeps_flags(rgb_dataset):
    out = assign_values(rgb_dataset, lambda v: v + 250)
    assert out.is_color_composite
    assert out.rgb_merged
    assert out.samples.max() == 255
    assert out.samples.min() == 250


def test_assign_values_rejects_shape_change(gray_dataset):
    with pytest.raises(ValueError):
        assign_values(gray_dataset, lambda v: v.ravel())
