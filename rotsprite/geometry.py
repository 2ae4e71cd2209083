"""Cartesian point and polar vector value types.

Both are immutable tuples. Their fields may hold plain numbers or NumPy
arrays of equal shape, so the same helpers convert a single coordinate or a
whole grid of destination pixels at once.
"""
from __future__ import annotations

from typing import NamedTuple

import numpy as np


def round_half_up(v):
    """Round to the nearest integer, halves towards +infinity."""
    return np.floor(np.asarray(v, dtype=np.float64) + 0.5).astype(np.int64)


class Point(NamedTuple):
    x: object
    y: object

    def offset_from(self, center: "Point") -> "Point":
        return Point(self.x - center.x, self.y - center.y)

    def translate(self, dx, dy) -> "Point":
        return Point(self.x + dx, self.y + dy)


class PolarVector(NamedTuple):
    """Vector given by length and direction (radians, y axis pointing down)."""

    magnitude: object
    direction: object

    @classmethod
    def from_point(cls, point: Point, center: Point = Point(0, 0)) -> "PolarVector":
        """Vector from ``center`` to ``point``."""
        dx, dy = point.offset_from(center)
        return cls(np.hypot(dx, dy), np.arctan2(dy, dx))

    def rotated(self, delta) -> "PolarVector":
        return PolarVector(self.magnitude, self.direction + delta)

    def to_point(self, center: Point = Point(0, 0), scale: int = 1) -> Point:
        """Convert back to integer Cartesian coordinates.

        Both the vector and ``center`` are multiplied by ``scale`` first, so
        the point lands in an image ``scale`` times larger than the one the
        vector was measured in.
        """
        mag = self.magnitude * scale
        x = center.x * scale + mag * np.cos(self.direction)
        y = center.y * scale + mag * np.sin(self.direction)
        return Point(round_half_up(x), round_half_up(y))
