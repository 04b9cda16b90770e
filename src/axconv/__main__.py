"""
Command-line entry for the axconv package.

Usage
-----
$ python -m axconv
"""

import numpy as np
from .core import Dataset, PointSpace, CrossAxisIterator, channel_spaces
from .typechange import change_type
from . import __version__


def _diagnostics():
    print(f"axconv pixel type conversion toolkit v{__version__}\n")

    print("Point space walk:")
    space = PointSpace([0, 0, 0], [1, 2, 0])
    print(f"  size={space.size()} first={next(iter(space))} last={list(space)[-1]}")

    print("\nCross-axis walk (2x2 image, 3 channels):")
    inner, outer = channel_spaces((2, 2, 3), 2)
    anchor, column = next(iter(CrossAxisIterator(inner, outer)))
    print(f"  {len(outer)} anchors, first anchor {anchor} -> column {column}")

    print("\nColor composite -> uint8:")
    rgb = np.arange(12, dtype=np.uint8).reshape(2, 2, 3) * 20
    ds = Dataset.from_array(rgb, composite_channel_count=3)
    gray = change_type(ds, "uint8")
    print(f"  {ds.axes.tags} {ds.shape} -> {gray.axes.tags} {gray.shape}")
    print(f"  values: {gray.samples.tolist()}")

    print("\nClamping int16 -> uint8:")
    wide = Dataset.from_array(np.array([[-300, 0, 128, 999]], dtype=np.int16))
    print(f"  {wide.samples.tolist()} -> {change_type(wide, 'uint8').samples.tolist()}")

    print("\nAll checks done ✅")


if __name__ == "__main__":
    _diagnostics()
