"""Indexed image loading and saving using Pillow, with NumPy arrays.

All processing in this project occurs on NumPy arrays of palette indices.
These helpers only convert between Pillow "P" images and ``(H, W)`` uint8
index arrays plus their flat RGB palette for IO.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
from PIL import Image

from .image import BACKGROUND, ensure_indexed

Array = np.ndarray

# Greyscale ramp written when no palette is given, one entry per index.
DEFAULT_PALETTE = [v for i in range(256) for v in (i, i, i)]


def load_indexed(path: Union[str, Path]) -> tuple[Array, Optional[list[int]]]:
    """Load an image file into a palette-index NumPy array (uint8).

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow.

    Returns
    -------
    tuple[np.ndarray, list[int] | None]
        Array of shape (H, W), dtype=uint8, and the flat ``[r, g, b, ...]``
        palette. Images that are not already palette based are quantised to
        an adaptive palette of at most 255 colours stored from index 1 on;
        index 0 is reserved for the background and receives every fully
        transparent pixel.
    """
    p = Path(path)
    with Image.open(p) as im:
        if im.mode == "P":
            arr = np.array(im, dtype=np.uint8)
            palette = im.getpalette()
            return arr, palette

        rgba = np.array(im.convert("RGBA"), dtype=np.uint8)

    # Quantise the colours only, then shift them past the background index.
    quantised = Image.fromarray(np.ascontiguousarray(rgba[:, :, :3])).quantize(colors=255)
    arr = np.array(quantised, dtype=np.int32) + 1
    arr[rgba[:, :, 3] == 0] = BACKGROUND
    palette = [0, 0, 0] + quantised.getpalette()[: 255 * 3]
    return arr.astype(np.uint8), palette


def save_indexed(
    arr: Array,
    path: Union[str, Path],
    palette: Optional[Sequence[int]] = None,
    transparent: bool = True,
) -> None:
    """Save a palette-index NumPy array (uint8) to an image file via Pillow.

    Parameters
    ----------
    arr : np.ndarray
        Array of shape (H, W), dtype=uint8.
    path : str | Path
        Output file path. The format is inferred from the extension.
    palette : sequence of int | None
        Flat RGB palette. A greyscale ramp is used when omitted.
    transparent : bool
        Mark the background index as transparent in the written file.
    """
    ensure_indexed(arr, "arr")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")

    h, w = arr.shape
    im = Image.frombytes("P", (w, h), np.ascontiguousarray(arr).tobytes())
    palette = list(palette) if palette else DEFAULT_PALETTE
    # Pad short palettes so every index keeps 8 bits per pixel on save.
    im.putpalette(palette + [0] * (768 - len(palette)))

    p = Path(path)
    if transparent:
        im.save(p, transparency=BACKGROUND)
    else:
        im.save(p)
