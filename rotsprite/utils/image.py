"""Indexed image buffer helpers operating on NumPy arrays.

An indexed image is a 2D array of shape (H, W) whose values are palette
indices. Coordinates passed to these helpers are (x, y) = (column, row), the
way sprite code addresses pixels, while the arrays themselves are indexed
``arr[y, x]``.

Reads outside the image return :data:`BACKGROUND` instead of raising.
"""
from __future__ import annotations

import numpy as np

Array = np.ndarray

# Palette index used for transparent/background pixels.
BACKGROUND = 0


def ensure_indexed(img: Array, name: str = "image") -> None:
    """Raise if ``img`` is not a 2D integer array of palette indices."""
    if not isinstance(img, np.ndarray) or img.ndim != 2:
        raise ValueError(f"{name} must be an indexed image with shape (H, W)")
    if not np.issubdtype(img.dtype, np.integer):
        raise TypeError(f"{name} must have an integer dtype, got {img.dtype}")


def create_image(width: int, height: int, dtype=np.uint8) -> Array:
    """Create a ``width x height`` image filled with :data:`BACKGROUND`."""
    if width < 0 or height < 0:
        raise ValueError("width and height must be >= 0")
    return np.full((height, width), BACKGROUND, dtype=dtype)


def clone_image(img: Array) -> Array:
    ensure_indexed(img)
    return img.copy()


def image_size(img: Array) -> tuple[int, int]:
    """Return ``(width, height)``."""
    h, w = img.shape
    return w, h


def get_pixel(img: Array, x: int, y: int) -> int:
    """Return the colour at column ``x``, row ``y``.

    Out-of-range coordinates yield :data:`BACKGROUND`.
    """
    h, w = img.shape
    if 0 <= x < w and 0 <= y < h:
        return int(img[y, x])
    return BACKGROUND


def set_pixel(img: Array, x: int, y: int, color: int) -> None:
    """Write ``color`` at column ``x``, row ``y`` in place.

    Writes outside the image are ignored.
    """
    h, w = img.shape
    if 0 <= x < w and 0 <= y < h:
        img[y, x] = color
