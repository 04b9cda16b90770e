"""
axconv.typechange
=================

Representation changes for :class:`~axconv.core.dataset.Dataset`.

Submodules
----------
- :mod:`axconv.typechange.convert` : Element-wise clamped conversion.
- :mod:`axconv.typechange.reduce`  : Channel-axis averaging (color → gray).
- :mod:`axconv.typechange.engine`  : ``change_type``, the public entry point.
"""

from .convert import (
    STRATEGIES,
    convert_value,
    convert_samples,
    convert_array,
)
from .reduce import output_axes, output_point, channel_extent, reduce_channels
from .engine import change_type

__all__ = [
    "STRATEGIES",
    # converter
    "convert_value",
    "convert_samples",
    "convert_array",
    # channel reducer
    "output_axes",
    "output_point",
    "channel_extent",
    "reduce_channels",
    # engine
    "change_type",
]
