"""Scale2x: the EPX pixel-art doubling filter.

For every source pixel P with its four neighbours::

    .A.
    CPB
    .D.

the 2x2 output block

    12
    34

starts as P everywhere and takes a neighbour's colour in a corner only when
the two neighbours forming that corner agree and the opposite ones do not::

    1 = A  if C == A and C != D and A != B
    2 = B  if A == B and A != C and B != D
    3 = C  if D == C and D != B and C != A
    4 = D  if B == D and B != A and D != C

Output colours are always copied from the input, never blended, so palette
indices survive unchanged.
"""
from __future__ import annotations

import logging

import numpy as np

from ..utils.image import ensure_indexed
from .edges import pad_edges

Array = np.ndarray

logger = logging.getLogger(__name__)


def scale2x(arr: Array, edge: str = "edge") -> Array:
    """Double the size of an indexed image with the Scale2x rules.

    Parameters
    ----------
    arr : np.ndarray
        Indexed image of shape (H, W), integer dtype.
    edge : str
        Value of reads beyond the border: ``"edge"`` replicates the border
        pixel, ``"background"`` reads the background index.

    Returns
    -------
    np.ndarray
        Image of shape (2H, 2W) with the same dtype.
    """
    ensure_indexed(arr, "arr")
    H, W = arr.shape
    out = np.empty((H * 2, W * 2), dtype=arr.dtype)
    if arr.size == 0:
        return out

    padded = pad_edges(arr, edge)
    p = arr
    a = padded[:-2, 1:-1]
    b = padded[1:-1, 2:]
    c = padded[1:-1, :-2]
    d = padded[2:, 1:-1]

    out[0::2, 0::2] = np.where((c == a) & (c != d) & (a != b), a, p)
    out[0::2, 1::2] = np.where((a == b) & (a != c) & (b != d), b, p)
    out[1::2, 0::2] = np.where((d == c) & (d != b) & (c != a), c, p)
    out[1::2, 1::2] = np.where((b == d) & (b != a) & (d != c), d, p)

    logger.debug("scale2x %dx%d -> %dx%d (edge=%s)", W, H, W * 2, H * 2, edge)
    return out
