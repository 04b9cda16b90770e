# src/axconv/assign/gamma.py
"""Gamma correction of dataset sample values."""
from __future__ import annotations

from typing import Callable

import numpy as np

from axconv.core.dataset import Dataset
from axconv.core.storage import store
from axconv.typechange.convert import convert_samples

__all__ = [
    "GAMMA_MIN",
    "GAMMA_MAX",
    "GAMMA_STEP",
    "assign_values",
    "gamma_data_values",
]

GAMMA_MIN = 0.05
GAMMA_MAX = 5.0
GAMMA_STEP = 0.05


def assign_values(
    dataset: Dataset,
    op: Callable[[np.ndarray], np.ndarray],
) -> Dataset:
    """
    Apply a real-valued unary operation to every sample.

    ``op`` receives the samples as float64 and must return an array of the
    same shape. Results are clamped to the dataset's own domain and written
    into a new dataset; axes, name and composite flags are kept.
    """
    values = np.asarray(op(dataset.samples.astype(np.float64)), dtype=np.float64)
    if values.shape != dataset.shape:
        raise ValueError(
            f"operation changed shape {dataset.shape} -> {values.shape}"
        )
    clamped = convert_samples(values, dataset.domain, dataset.domain)
    return Dataset(
        samples=store(clamped, dataset.domain),
        axes=dataset.axes,
        domain=dataset.domain,
        name=dataset.name,
        composite_channel_count=dataset.composite_channel_count,
        rgb_merged=dataset.rgb_merged,
    )


def gamma_data_values(dataset: Dataset, constant: float) -> Dataset:
    """
    Raise every positive sample to ``constant``; non-positive samples become 0.

    Parameters
    ----------
    dataset : Dataset
    constant : float
        Gamma exponent in [GAMMA_MIN, GAMMA_MAX].
        - constant < 1: brighten (for values above 1)
        - constant > 1: darken (for values below 1)

    Returns
    -------
    Dataset
        Same representation as the input, values clamped to its domain.
    """
    constant = float(constant)
    if not GAMMA_MIN <= constant <= GAMMA_MAX:
        raise ValueError(
            f"gamma constant must be in [{GAMMA_MIN}, {GAMMA_MAX}], got {constant!r}"
        )

    def op(v: np.ndarray) -> np.ndarray:
        out = np.zeros_like(v)
        pos = v > 0
        out[pos] = np.power(v[pos], constant)
        return out

    return assign_values(dataset, op)
