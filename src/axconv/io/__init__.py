"""
axconv.io
=========

Dataset read/write helpers.

Submodules:
- axconv.io.image
"""

from .image import (
    IMAGE_EXTS,
    ARCHIVE_EXT,
    read_dataset,
    write_dataset,
)

__all__ = [
    "IMAGE_EXTS",
    "ARCHIVE_EXT",
    "read_dataset",
    "write_dataset",
]
