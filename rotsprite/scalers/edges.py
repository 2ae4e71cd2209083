"""Border handling shared by the neighbour-rule scalers."""
from __future__ import annotations

import numpy as np

from ..utils.image import BACKGROUND

Array = np.ndarray

EDGE_MODES = ("edge", "background")


def pad_edges(arr: Array, edge: str) -> Array:
    """Pad ``arr`` by one pixel on every side.

    ``"edge"`` replicates the border pixels; ``"background"`` fills the
    border with :data:`BACKGROUND`.
    """
    if edge == "edge":
        return np.pad(arr, 1, mode="edge")
    if edge == "background":
        return np.pad(arr, 1, mode="constant", constant_values=BACKGROUND)
    raise ValueError(f"Unknown edge mode: {edge!r} (expected one of {EDGE_MODES})")
