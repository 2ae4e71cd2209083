"""Utility functions for RotSprite.

Modules:
- image: Indexed image buffer helpers and the background index contract.
- loader: Load/save Pillow "P" images <-> NumPy index arrays.
"""
from .image import (
    BACKGROUND,
    clone_image,
    create_image,
    ensure_indexed,
    get_pixel,
    image_size,
    set_pixel,
)
from .loader import load_indexed, save_indexed

__all__ = [
    "BACKGROUND",
    "clone_image",
    "create_image",
    "ensure_indexed",
    "get_pixel",
    "image_size",
    "set_pixel",
    "load_indexed",
    "save_indexed",
]
