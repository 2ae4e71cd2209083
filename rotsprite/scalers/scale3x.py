"""Scale3x: the EPX-family pixel-art tripling filter."""
from __future__ import annotations

import logging

import numpy as np

from ..utils.image import ensure_indexed
from .edges import pad_edges

Array = np.ndarray

logger = logging.getLogger(__name__)


def scale3x(arr: Array, edge: str = "edge") -> Array:
    """Triple the size of an indexed image with the Scale3x rules.

    Each source pixel E and its neighbours::

        ABC
        DEF
        GHI

    become a 3x3 block ``E0..E8`` (row-major) that defaults to E. The centre
    E4 is always E; corners and edge midpoints take a neighbour's colour
    according to the published rule table::

        E0 = D  if D==B and B!=F and D!=H
        E1 = B  if (D==B and B!=F and D!=H and E!=C)
                or (B==F and B!=D and F!=H and E!=A)
        E2 = F  if B==F and B!=D and F!=H
        E3 = D  if (D==B and B!=F and D!=H and E!=G)
                or (D==H and D!=B and H!=F and E!=A)
        E5 = F  if (B==F and B!=D and F!=H and E!=I)
                or (H==F and D!=H and B!=F and E!=C)
        E6 = D  if D==H and D!=B and H!=F
        E7 = H  if (D==H and D!=B and H!=F and E!=I)
                or (H==F and D!=H and B!=F and E!=G)
        E8 = F  if H==F and D!=H and B!=F

    Parameters
    ----------
    arr : np.ndarray
        Indexed image of shape (H, W), integer dtype.
    edge : str
        ``"edge"`` or ``"background"``, see :func:`scale2x`.

    Returns
    -------
    np.ndarray
        Image of shape (3H, 3W) with the same dtype.
    """
    ensure_indexed(arr, "arr")
    H, W = arr.shape
    out = np.empty((H * 3, W * 3), dtype=arr.dtype)
    if arr.size == 0:
        return out

    padded = pad_edges(arr, edge)
    a = padded[:-2, :-2]
    b = padded[:-2, 1:-1]
    c = padded[:-2, 2:]
    d = padded[1:-1, :-2]
    e = arr
    f = padded[1:-1, 2:]
    g = padded[2:, :-2]
    h = padded[2:, 1:-1]
    i = padded[2:, 2:]

    # Corner patterns: the two neighbours meeting at a corner match while the
    # other two orthogonal neighbours differ from them.
    top_left = (d == b) & (b != f) & (d != h)
    top_right = (b == f) & (b != d) & (f != h)
    bottom_left = (d == h) & (d != b) & (h != f)
    bottom_right = (h == f) & (d != h) & (b != f)

    out[0::3, 0::3] = np.where(top_left, d, e)
    out[0::3, 1::3] = np.where((top_left & (e != c)) | (top_right & (e != a)), b, e)
    out[0::3, 2::3] = np.where(top_right, f, e)
    out[1::3, 0::3] = np.where((top_left & (e != g)) | (bottom_left & (e != a)), d, e)
    out[1::3, 1::3] = e
    out[1::3, 2::3] = np.where((top_right & (e != i)) | (bottom_right & (e != c)), f, e)
    out[2::3, 0::3] = np.where(bottom_left, d, e)
    out[2::3, 1::3] = np.where((bottom_left & (e != i)) | (bottom_right & (e != g)), h, e)
    out[2::3, 2::3] = np.where(bottom_right, f, e)

    logger.debug("scale3x %dx%d -> %dx%d (edge=%s)", W, H, W * 3, H * 3, edge)
    return out
