"""Minimal sprite entity for the command-line tools and tests."""
from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .utils.image import ensure_indexed

_ids = itertools.count()


@dataclass
class Sprite:
    image: np.ndarray
    id: int = field(default_factory=lambda: next(_ids))
    palette: Optional[list[int]] = None
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        ensure_indexed(self.image)

    @property
    def width(self) -> int:
        return self.image.shape[1]

    @property
    def height(self) -> int:
        return self.image.shape[0]

    def set_image(self, image: np.ndarray) -> None:
        ensure_indexed(image)
        self.image = image
