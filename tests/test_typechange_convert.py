import numpy as np
import pytest

from axconv.core import Dataset, get_domain
from axconv.typechange import convert_array, convert_samples, convert_value

U8 = get_domain("uint8")
I16 = get_domain("int16")
BIT = get_domain("bit")
F32 = get_domain("float32")


def test_convert_value_clamps_to_destination():
    assert convert_value(-5.0, I16, U8) == 0.0
    assert convert_value(300.0, I16, U8) == 255.0
    assert convert_value(42.0, I16, U8) == 42.0


def test_convert_value_in_range_is_identity():
    for v in (-128.0, -1.5, 0.0, 3.25, 127.0):
        assert convert_value(v, F32, get_domain("int8")) == v


def test_binary_source_maps_positive_to_max():
    assert convert_value(1.0, BIT, U8) == 255.0
    assert convert_value(1.0, BIT, I16) == 32767.0
    assert convert_value(0.0, BIT, U8) == 0.0
    # magnitude of the positive sample does not matter
    assert convert_value(0.001, BIT, U8) == 255.0


def test_convert_samples_matches_scalar_policy():
    values = np.array([-1e9, -3.0, 0.0, 0.5, 77.0, 255.0, 1e9])
    out = convert_samples(values, I16, U8)
    expected = [convert_value(v, I16, U8) for v in values]
    np.testing.assert_array_equal(out, expected)
    assert out.dtype == np.float64


def test_convert_array_keeps_axes(gray_dataset):
    out = convert_array(gray_dataset, "uint8")
    assert out.axes == gray_dataset.axes
    assert out.shape == gray_dataset.shape
    assert out.name == gray_dataset.name
    assert out.domain is U8
    assert out.samples.dtype == np.uint8
    np.testing.assert_array_equal(
        out.samples,
        [[0, 0, 0, 1], [100, 200, 255, 255], [255, 255, 0, 128]],
    )


def test_convert_array_output_within_domain(gray_dataset):
    for name in ("bit", "uint2", "uint4", "int8", "uint8", "uint12"):
        dom = get_domain(name)
        out = convert_array(gray_dataset, dom)
        vals = out.samples.astype(np.float64)
        assert vals.min() >= dom.min
        assert vals.max() <= dom.max


@pytest.mark.parametrize("jobs", [1, 3])
def test_walk_matches_vectorized(stack_dataset, jobs):
    vec = convert_array(stack_dataset, "uint8", strategy="vectorized")
    walk = convert_array(stack_dataset, "uint8", strategy="walk", jobs=jobs)
    assert walk.equals(vec)


def test_convert_array_does_not_touch_source(gray_dataset):
    before = gray_dataset.samples.copy()
    out = convert_array(gray_dataset, "float32")
    out.samples[...] = 0
    np.testing.assert_array_equal(gray_dataset.samples, before)


def test_binary_source_array():
    mask = Dataset.from_array(np.array([[True, False], [False, True]]))
    assert mask.domain is BIT
    out = convert_array(mask, "uint16")
    np.testing.assert_array_equal(out.samples, [[65535, 0], [0, 65535]])


def test_unknown_strategy(gray_dataset):
    with pytest.raises(ValueError):
        convert_array(gray_dataset, "uint8", strategy="magic")
    with pytest.raises(ValueError):
        convert_array(gray_dataset, "uint8", jobs=0)


def test_64_bit_values_pass_through_float64():
    src = Dataset.from_array(np.array([[7, 2**53 + 1]], dtype=np.int64))
    out = convert_array(src, "uint64")
    assert out.samples[0, 0] == 7
    # above 2**53 the nearest double is stored
    assert out.samples[0, 1] == 2**53
