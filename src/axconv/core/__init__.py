"""
axconv.core
===========

Data model and traversal primitives for axis-aware type conversion.

Submodules
----------
- :mod:`axconv.core.axes`      : Axis / AxisModel (tag, extent, calibration).
- :mod:`axconv.core.domains`   : NumericDomain and the representation registry.
- :mod:`axconv.core.storage`   : numpy buffer allocation and storage casts.
- :mod:`axconv.core.dataset`   : Dataset, the axis-tagged sample array.
- :mod:`axconv.core.points`    : PointSpace, hyper-rectangular point sets.
- :mod:`axconv.core.iterators` : CrossAxisIterator (outer anchors × inner column).
- :mod:`axconv.core.errors`    : Error kinds.
"""

from .errors import (
    TypeChangeError,
    DimensionalityError,
    UnsupportedRepresentation,
    DegenerateInput,
)
from .axes import X, Y, Z, CHANNEL, TIME, Axis, AxisModel, default_tags
from .domains import (
    NumericDomain,
    DOMAINS,
    get_domain,
    available_domains,
    domain_for_dtype,
    as_domain,
)
from .storage import storage_dtype, allocate, store, check_range, is_narrow
from .dataset import Dataset
from .points import Point, PointSpace
from .iterators import CrossAxisIterator, channel_spaces

__all__ = [
    # errors
    "TypeChangeError",
    "DimensionalityError",
    "UnsupportedRepresentation",
    "DegenerateInput",
    # axes
    "X",
    "Y",
    "Z",
    "CHANNEL",
    "TIME",
    "Axis",
    "AxisModel",
    "default_tags",
    # domains
    "NumericDomain",
    "DOMAINS",
    "get_domain",
    "available_domains",
    "domain_for_dtype",
    "as_domain",
    # storage
    "storage_dtype",
    "allocate",
    "store",
    "check_range",
    "is_narrow",
    # dataset
    "Dataset",
    # traversal
    "Point",
    "PointSpace",
    "CrossAxisIterator",
    "channel_spaces",
]
