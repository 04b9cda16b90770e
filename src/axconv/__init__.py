"""
axconv
Axis-aware pixel type conversion toolkit.
"""

# Version detection that works even when not installed
try:
    from importlib import metadata as _metadata
except ImportError:  # environment quirks
    _metadata = None  # type: ignore

try:
    __version__ = _metadata.version("axconv") if _metadata else "0.0.0.dev0"
except Exception:
    # Not installed (dev mode) or no metadata available
    __version__ = "0.0.0.dev0"

from . import core, typechange, assign, io  # noqa: E402
from .core import Dataset, NumericDomain, get_domain  # noqa: E402
from .typechange import change_type  # noqa: E402

__all__ = [
    "core",
    "typechange",
    "assign",
    "io",
    "Dataset",
    "NumericDomain",
    "get_domain",
    "change_type",
    "__version__",
]
