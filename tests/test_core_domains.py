import numpy as np
import pytest

from axconv.core import (
    DOMAINS,
    NumericDomain,
    UnsupportedRepresentation,
    allocate,
    available_domains,
    domain_for_dtype,
    get_domain,
    store,
)


def test_registry_ranges():
    assert (get_domain("bit").min, get_domain("bit").max) == (0.0, 1.0)
    assert (get_domain("uint8").min, get_domain("uint8").max) == (0.0, 255.0)
    assert (get_domain("int8").min, get_domain("int8").max) == (-128.0, 127.0)
    assert get_domain("uint12").max == 4095.0
    assert get_domain("uint12").dtype == "uint16"
    assert get_domain("float32").max == float(np.finfo(np.float32).max)
    assert get_domain("float32").min == -get_domain("float32").max
    assert "uint16" in available_domains()


def test_lookup_aliases_and_case():
    assert get_domain("8-bit") is DOMAINS["uint8"]
    assert get_domain("  UINT16 ") is DOMAINS["uint16"]
    assert get_domain("double") is DOMAINS["float64"]
    with pytest.raises(UnsupportedRepresentation):
        get_domain("complex128")


def test_binary_flag_only_for_one_bit():
    assert get_domain("bit").treat_source_as_binary
    assert not any(d.treat_source_as_binary for n, d in DOMAINS.items() if n != "bit")


def test_domain_for_dtype():
    assert domain_for_dtype(np.uint8).name == "uint8"
    assert domain_for_dtype(np.bool_).name == "bit"
    assert domain_for_dtype("float64").name == "float64"
    with pytest.raises(UnsupportedRepresentation):
        domain_for_dtype(np.complex64)


def test_allocate_rejects_unrepresentable_domain():
    too_wide = NumericDomain("uint128", 128, False, False, 0.0, 2.0**128 - 1, "uint64")
    with pytest.raises(UnsupportedRepresentation):
        allocate((2, 2), too_wide)
    no_dtype = NumericDomain("weird", 8, False, False, 0.0, 255.0, "not-a-dtype")
    with pytest.raises(UnsupportedRepresentation):
        allocate((2, 2), no_dtype)


def test_allocate_zeroed():
    buf = allocate((2, 3), get_domain("uint12"))
    assert buf.dtype == np.uint16
    assert buf.shape == (2, 3)
    assert not buf.any()


def test_store_rounds_half_up_and_maps_nan():
    out = store(np.array([0.4, 0.5, 1.5, 2.5, np.nan]), get_domain("uint8"))
    assert out.dtype == np.uint8
    np.testing.assert_array_equal(out, [0, 1, 2, 3, 0])

    bits = store(np.array([0.0, 0.49, 0.5, 1.0]), get_domain("bit"))
    assert bits.dtype == np.bool_
    np.testing.assert_array_equal(bits, [False, False, True, True])


def test_store_64_bit_maximum():
    dom = get_domain("uint64")
    out = store(np.array([dom.max]), dom)
    assert out[0] == np.iinfo(np.uint64).max
