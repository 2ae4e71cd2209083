"""Pixel-art up-scalers and a unified entry-point for application.

Exported API
------------
- apply_scale(image, factor, edge="edge")
- scale_repeat(image, times, factor=2)
- scale2x(image, edge="edge")
- scale3x(image, edge="edge")

Supported factors
-----------------
- 1 : copy of the input
- 2 : Scale2x (EPX)
- 3 : Scale3x

Implementation notes
--------------------
All scalers operate on indexed NumPy arrays of shape (H, W) and work on
whole shifted neighbour planes rather than per-pixel loops. Output values
are always copied from the input: no blending, so palette indices are
preserved exactly.
"""
from __future__ import annotations

import numpy as np

from .edges import EDGE_MODES
from .scale2x import scale2x
from .scale3x import scale3x
from ..utils.image import ensure_indexed

Array = np.ndarray

SCALE_FACTORS = (1, 2, 3)


def apply_scale(image: Array, factor: int, edge: str = "edge") -> Array:
    """Scale an indexed image by ``factor`` (1, 2 or 3).

    Parameters
    ----------
    image : np.ndarray
        Indexed image of shape (H, W), integer dtype.
    factor : int
        Scale factor.
    edge : str
        Border policy, ``"edge"`` or ``"background"``.

    Returns
    -------
    np.ndarray
        Scaled image of shape (factor*H, factor*W).
    """
    ensure_indexed(image)
    if factor == 1:
        return image.copy()
    if factor == 2:
        return scale2x(image, edge=edge)
    if factor == 3:
        return scale3x(image, edge=edge)

    raise ValueError(f"Unsupported scale factor: {factor} (expected one of {SCALE_FACTORS})")


def scale_repeat(image: Array, times: int, factor: int = 2, edge: str = "edge") -> Array:
    """Apply :func:`apply_scale` ``times`` times in a row."""
    ensure_indexed(image)
    if times < 0:
        raise ValueError("times must be >= 0")
    out = image.copy()
    for _ in range(times):
        out = apply_scale(out, factor, edge=edge)
    return out


__all__ = ["EDGE_MODES", "SCALE_FACTORS", "apply_scale", "scale_repeat", "scale2x", "scale3x"]
