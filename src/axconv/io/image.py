# axconv/io/image.py
"""
Dataset I/O: standard images via Pillow, lossless N-d archives via numpy."""
from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from axconv.core.axes import CHANNEL, X, Y, AxisModel
from axconv.core.dataset import Dataset
from axconv.core.domains import get_domain

PathLike = Union[str, Path]

__all__ = [
    "IMAGE_EXTS",
    "ARCHIVE_EXT",
    "read_dataset",
    "write_dataset",
]

IMAGE_EXTS = (".png", ".tif", ".tiff", ".bmp", ".jpg", ".jpeg", ".gif")
ARCHIVE_EXT = ".npz"

# Pillow mode -> domain of np.asarray(image); 16-bit modes may be big-endian
_MODE_DOMAINS = {
    "1": "bit",
    "L": "uint8",
    "I;16": "uint16",
    "I;16L": "uint16",
    "I;16B": "uint16",
    "I;16N": "uint16",
    "I": "int32",
    "F": "float32",
    "RGB": "uint8",
    "RGBA": "uint8",
}

# domains Pillow can write for a single plane
_WRITABLE_2D = ("bit", "uint8", "uint16", "int32", "float32")


def _pathify(path: PathLike) -> Path:
    return Path(path)


def _read_archive(p: Path) -> Dataset:
    with np.load(p, allow_pickle=False) as data:
        samples = np.array(data["samples"])
        tags = [str(t) for t in data["tags"]]
        scales = [float(s) for s in data["scales"]]
        domain = get_domain(str(data["domain"]))
        name = str(data["name"])
        composite = int(data["composite_channel_count"])
        rgb_merged = bool(data["rgb_merged"])
    axes = AxisModel.from_shape(samples.shape, tags, scales)
    return Dataset(
        samples=samples,
        axes=axes,
        domain=domain,
        name=name,
        composite_channel_count=composite,
        rgb_merged=rgb_merged,
    )


def _read_image(p: Path) -> Dataset:
    with Image.open(p) as im:
        if im.mode not in _MODE_DOMAINS:
            # palette, LA, CMYK, YCbCr ... are presented as RGB(A)
            im = im.convert("RGBA" if "A" in im.getbands() else "RGB")
        mode = im.mode
        arr = np.array(im)

    domain = get_domain(_MODE_DOMAINS[mode])
    if arr.ndim == 3:
        n_channels = arr.shape[2]
        return Dataset(
            samples=arr,
            axes=AxisModel.from_shape(arr.shape, (Y, X, CHANNEL)),
            domain=domain,
            name=p.stem,
            composite_channel_count=n_channels,
            rgb_merged=True,
        )
    return Dataset(
        # astype to the native dtype also undoes ">u2" byte order
        samples=arr.astype(domain.dtype, copy=False),
        axes=AxisModel.from_shape(arr.shape, (Y, X)),
        domain=domain,
        name=p.stem,
    )


def read_dataset(path: PathLike) -> Dataset:
    """
    Read a dataset from disk.

    Parameters
    ----------
    path : str or Path
        - ``.npz``: archive written by :func:`write_dataset`; axes,
          calibration, domain, name and composite flags are restored.
        - image formats: read via Pillow. Gray images give axes (Y, X);
          RGB/RGBA give (Y, X, Channel) flagged as a color composite.

    Returns
    -------
    Dataset
    """
    p = _pathify(path)
    if p.suffix.lower() == ARCHIVE_EXT:
        return _read_archive(p)
    return _read_image(p)


def _write_archive(p: Path, dataset: Dataset) -> None:
    np.savez(
        p,
        samples=dataset.samples,
        tags=np.array(dataset.axes.tags, dtype=str),
        scales=np.array(dataset.axes.calibration, dtype=np.float64),
        domain=np.array(dataset.domain.name),
        name=np.array(dataset.name),
        composite_channel_count=np.array(dataset.composite_channel_count),
        rgb_merged=np.array(dataset.rgb_merged),
    )


def _write_image(p: Path, dataset: Dataset) -> None:
    arr = dataset.samples
    dom = dataset.domain.name
    if arr.ndim == 2:
        if dom == "uint12":
            dom = "uint16"
        if dom not in _WRITABLE_2D:
            raise ValueError(
                f"Cannot write {dataset.domain.name} plane as {p.suffix}; use {ARCHIVE_EXT}"
            )
    elif arr.ndim == 3:
        c = dataset.channel_index
        if c != 2 or arr.shape[2] not in (3, 4) or dom != "uint8":
            raise ValueError(
                f"Only uint8 (Y, X, Channel) with 3 or 4 channels can be written as "
                f"{p.suffix}; got {dom} {dataset.axes.tags} {arr.shape}. Use {ARCHIVE_EXT}"
            )
    else:
        raise ValueError(f"Expected 2D or 3D dataset, got {arr.shape}")

    img = Image.fromarray(np.ascontiguousarray(arr))
    img.save(str(p))


def write_dataset(path: PathLike, dataset: Dataset) -> Path:
    """
    Save a dataset.

    ``.npz`` stores any dataset losslessly; image extensions go through
    Pillow and accept 2-D planes or uint8 (Y, X, Channel) RGB/RGBA.

    Returns
    -------
    Path
        The written file.
    """
    p = _pathify(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    if p.suffix.lower() == ARCHIVE_EXT:
        _write_archive(p, dataset)
    elif p.suffix.lower() in IMAGE_EXTS:
        _write_image(p, dataset)
    else:
        raise ValueError(f"Unsupported output extension {p.suffix!r}")
    return p
