"""Sprite rotation with a supersampled source image.

Every tracked entity keeps a :class:`RotationState`: a private copy of its
source image, a copy doubled with Scale2x, and the current angle. Rotating
to a right angle permutes pixels exactly. Any other angle is rendered by
inverse rotation: each destination pixel is rotated back around the image
centre and the nearest pixel of the doubled image is copied. Sampling the
doubled image instead of the original smooths the stair-stepping of plain
nearest-neighbour rotation without blending colours.

Angles are in degrees. Positive angles rotate clockwise on screen (y axis
pointing down), negative angles counter-clockwise.

States live in a :class:`RotationRegistry`. The module-level
:func:`change_rotation`, :func:`rotate_to` and :func:`get_rotation` use a
shared default registry for callers that do not need more than one.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Union

import numpy as np

from .geometry import Point, PolarVector
from .scalers import apply_scale
from .utils.image import BACKGROUND, ensure_indexed

Array = np.ndarray

logger = logging.getLogger(__name__)

# Scale of the sampled copy relative to the original image.
SUPERSAMPLE = 2


class RotatableEntity(Protocol):
    """What the registry needs from a host sprite."""

    id: int
    image: Array

    def set_image(self, image: Array) -> None:
        ...


@dataclass
class RotationState:
    entity_id: int
    angle: float
    original: Array
    supersampled: Array

    @classmethod
    def create(cls, entity_id: int, image: Array, angle: float = 0) -> "RotationState":
        """Copy ``image`` and build its supersampled version.

        The supersampled image is computed here once and never refreshed; a
        new state must be created to pick up a changed source image. It is
        doubled with the scalers' default ``edge="edge"`` border, so reads
        past the sprite border repeat the border pixel instead of returning
        :data:`BACKGROUND`; a sprite touching its frame keeps its outer
        corners in the supersampled copy.
        """
        ensure_indexed(image)
        original = image.copy()
        supersampled = apply_scale(original, SUPERSAMPLE)
        return cls(entity_id, angle, original, supersampled)


def normalize_angle(angle: float) -> float:
    """Reduce ``angle`` into [0, 360) using floored modulo."""
    angle = angle % 360
    # Tiny negative floats round up to exactly 360.
    if angle >= 360:
        angle -= 360
    return angle


def _right_angle(src: Array, angle: float) -> Optional[Array]:
    """Exact pixel permutation for 0/90/180/270 degrees, else None.

    With W, H the source size and (x, y) a destination pixel:

    - 90:  dst(x, y) = src(y, H - 1 - x), size H x W
    - 180: dst(x, y) = src(W - 1 - x, H - 1 - y), size W x H
    - 270: dst(x, y) = src(W - 1 - y, x), size H x W
    """
    if angle == 0:
        return src.copy()
    if angle == 90:
        return np.ascontiguousarray(np.rot90(src, k=-1))
    if angle == 180:
        return np.ascontiguousarray(np.rot90(src, k=2))
    if angle == 270:
        return np.ascontiguousarray(np.rot90(src, k=1))
    return None


def _sample_rotated(original: Array, supersampled: Array, angle: float) -> Array:
    H, W = original.shape
    out = np.full((H, W), BACKGROUND, dtype=original.dtype)
    if original.size == 0:
        return out

    center = Point(W >> 1, H >> 1)
    ys, xs = np.mgrid[0:H, 0:W]
    # Destination -> source: turn each offset back by the rotation angle.
    vec = PolarVector.from_point(Point(xs, ys), center).rotated(-math.radians(angle))
    src = vec.to_point(center, scale=SUPERSAMPLE)

    sh, sw = supersampled.shape
    inside = (src.x >= 0) & (src.x < sw) & (src.y >= 0) & (src.y < sh)
    out[inside] = supersampled[src.y[inside], src.x[inside]]
    return out


def rotate(state: Union[RotationState, Array], angle: float) -> Array:
    """Return the image of ``state`` rotated by ``angle`` degrees.

    Parameters
    ----------
    state : RotationState | np.ndarray
        Rotation state, or a bare indexed image for one-off rotations.
    angle : float
        Rotation in degrees; any value is accepted and normalised.

    Returns
    -------
    np.ndarray
        Rotated image. Right angles swap the dimensions as needed; any other
        angle keeps the original size and leaves pixels whose source falls
        outside the supersampled image at the background index.
    """
    if not isinstance(state, RotationState):
        state = RotationState.create(-1, state)

    angle = normalize_angle(angle)
    out = _right_angle(state.original, angle)
    if out is not None:
        logger.debug("entity %s: exact rotation to %s degrees", state.entity_id, angle)
        return out

    logger.debug("entity %s: sampled rotation to %s degrees", state.entity_id, angle)
    return _sample_rotated(state.original, state.supersampled, angle)


def _entity_id(entity: Union[RotatableEntity, int]) -> int:
    if isinstance(entity, (int, np.integer)):
        return int(entity)
    return entity.id


class RotationRegistry:
    """Rotation states keyed by entity id.

    Single-threaded: callers that share one registry across threads must
    serialise access themselves.
    """

    def __init__(self) -> None:
        self._states: Dict[int, RotationState] = {}

    def __contains__(self, entity) -> bool:
        return _entity_id(entity) in self._states

    def __len__(self) -> int:
        return len(self._states)

    def register(self, entity: RotatableEntity, angle: float = 0) -> RotationState:
        """Start (or restart) tracking ``entity`` from its current image."""
        state = RotationState.create(entity.id, entity.image, angle)
        if entity.id in self._states:
            logger.debug("entity %s: replacing rotation state", entity.id)
        else:
            logger.debug("entity %s: tracking rotation", entity.id)
        self._states[entity.id] = state
        return state

    def state_for(self, entity: Union[RotatableEntity, int]) -> Optional[RotationState]:
        return self._states.get(_entity_id(entity))

    def _ensure(self, entity: RotatableEntity) -> RotationState:
        state = self._states.get(entity.id)
        if state is None:
            state = self.register(entity)
        return state

    def change_rotation(self, entity: RotatableEntity, delta: float) -> Array:
        """Rotate ``entity`` by ``delta`` degrees relative to its current angle."""
        state = self._ensure(entity)
        return self.rotate_to(entity, state.angle + delta)

    def rotate_to(self, entity: RotatableEntity, angle: float) -> Array:
        """Rotate ``entity`` to an absolute ``angle`` and update its image."""
        state = self._ensure(entity)
        state.angle = angle
        image = rotate(state, angle)
        entity.set_image(image)
        return image

    def get_rotation(self, entity: Union[RotatableEntity, int]) -> float:
        """Current angle in [0, 360); 0 for untracked entities."""
        state = self._states.get(_entity_id(entity))
        if state is None:
            return 0
        return normalize_angle(state.angle)

    def forget(self, entity: Union[RotatableEntity, int]) -> bool:
        """Drop the state of ``entity``. Returns whether it was tracked."""
        state = self._states.pop(_entity_id(entity), None)
        if state is not None:
            logger.debug("entity %s: rotation state dropped", state.entity_id)
        return state is not None

    def entity_destroyed(self, entity_id: int) -> None:
        """Host callback for destroyed entities.

        Ids may be reused by the host; without this call a new entity with a
        recycled id would inherit the old entity's image and angle.
        """
        self.forget(entity_id)

    def clear(self) -> None:
        self._states.clear()


_default_registry = RotationRegistry()


def default_registry() -> RotationRegistry:
    return _default_registry


def change_rotation(entity: RotatableEntity, delta: float) -> Array:
    return _default_registry.change_rotation(entity, delta)


def rotate_to(entity: RotatableEntity, angle: float) -> Array:
    return _default_registry.rotate_to(entity, angle)


def get_rotation(entity: Union[RotatableEntity, int]) -> float:
    return _default_registry.get_rotation(entity)
