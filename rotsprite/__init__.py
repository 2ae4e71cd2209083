from __future__ import annotations

# Public API: rotation engine, pixel scalers and indexed image IO.
from .rotation import (  # noqa: F401
    SUPERSAMPLE,
    RotationRegistry,
    RotationState,
    change_rotation,
    default_registry,
    get_rotation,
    normalize_angle,
    rotate,
    rotate_to,
)
from .scalers import apply_scale, scale2x, scale3x, scale_repeat  # noqa: F401
from .sprite import Sprite  # noqa: F401
from .utils.image import BACKGROUND, clone_image, create_image, get_pixel, set_pixel  # noqa: F401
from .utils.loader import load_indexed, save_indexed  # noqa: F401

__all__ = [
    "SUPERSAMPLE",
    "RotationRegistry",
    "RotationState",
    "change_rotation",
    "default_registry",
    "get_rotation",
    "normalize_angle",
    "rotate",
    "rotate_to",
    "apply_scale",
    "scale2x",
    "scale3x",
    "scale_repeat",
    "Sprite",
    "BACKGROUND",
    "clone_image",
    "create_image",
    "get_pixel",
    "set_pixel",
    "load_indexed",
    "save_indexed",
]
