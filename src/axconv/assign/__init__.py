"""
axconv.assign
=============

Value assignment operations that keep a dataset's representation.

Submodules
----------
- :mod:`axconv.assign.gamma` : Gamma correction and generic unary assignment.
"""

from .gamma import GAMMA_MIN, GAMMA_MAX, GAMMA_STEP, assign_values, gamma_data_values

__all__ = [
    "GAMMA_MIN",
    "GAMMA_MAX",
    "GAMMA_STEP",
    "assign_values",
    "gamma_data_values",
]
