# tests/conftest.py
from __future__ import annotations

import numpy as np
import pytest

from axconv.core import Dataset


@pytest.fixture
def rgb_dataset() -> Dataset:
    """2x2 RGB color composite, axes (Y, X, Channel)."""
    samples = np.array(
        [
            [[10, 20, 30], [0, 0, 255]],
            [[255, 255, 255], [1, 2, 4]],
        ],
        dtype=np.uint8,
    )
    return Dataset.from_array(
        samples,
        scales=(0.5, 0.25, 1.0),
        name="rgb",
        composite_channel_count=3,
        rgb_merged=True,
    )


@pytest.fixture
def gray_dataset() -> Dataset:
    """3x4 int16 plane with values outside the uint8 range."""
    samples = np.array(
        [
            [-500, -1, 0, 1],
            [100, 200, 255, 256],
            [1000, 32767, -32768, 128],
        ],
        dtype=np.int16,
    )
    return Dataset.from_array(samples, name="gray")


@pytest.fixture
def stack_dataset() -> Dataset:
    """Time x Channel x Y x X stack, 4 channels, composite count 4."""
    rng = np.random.default_rng(42)
    samples = rng.integers(0, 4096, size=(2, 4, 3, 5), dtype=np.uint16)
    return Dataset.from_array(
        samples,
        tags=("Time", "Channel", "Y", "X"),
        scales=(2.0, 1.0, 0.1, 0.2),
        domain="uint12",
        name="stack",
        composite_channel_count=4,
    )
