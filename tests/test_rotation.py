"""
Tests for the rotation engine and the rotation registry.

Tests cover:
- Angle normalisation and full-turn identity
- Exact right-angle permutations
- Inverse-rotation sampling bounds
- Registry lifecycle: lazy creation, accumulation, removal, re-registration
- Module-level default registry
"""
import math

import numpy as np
import pytest

from rotsprite import rotation
from rotsprite.geometry import Point, PolarVector
from rotsprite.rotation import (
    SUPERSAMPLE,
    RotationRegistry,
    RotationState,
    normalize_angle,
    rotate,
)
from rotsprite.sprite import Sprite
from rotsprite.utils.image import BACKGROUND


# ── Angles ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "angle, expected",
    [(0, 0), (360, 0), (-90, 270), (725, 5), (-720, 0), (359, 359), (-30.5, 329.5)],
)
def test_normalize_angle(angle, expected):
    assert normalize_angle(angle) == expected


def test_rotate_zero_is_clone(triangle):
    out = rotate(triangle, 0)
    np.testing.assert_array_equal(out, triangle)
    assert out is not triangle
    out[0, 0] = 99
    assert triangle[0, 0] == 1


@pytest.mark.parametrize("k", [-2, -1, 1, 3])
def test_full_turns_match_zero(triangle, k):
    np.testing.assert_array_equal(rotate(triangle, 360 * k), rotate(triangle, 0))


@pytest.mark.parametrize("angle", [30, 45, 90, 200])
def test_angles_equal_modulo_full_turn(triangle, angle):
    np.testing.assert_array_equal(rotate(triangle, angle), rotate(triangle, angle + 360))
    np.testing.assert_array_equal(rotate(triangle, angle), rotate(triangle, angle - 720))


# ── Right angles ─────────────────────────────────────────────────────────

def test_rotate_90(asymmetric):
    out = rotate(asymmetric, 90)
    expected = np.array([[4, 1], [5, 2], [6, 3]], dtype=np.uint8)
    assert out.shape == (3, 2)
    np.testing.assert_array_equal(out, expected)


def test_rotate_180(asymmetric):
    expected = np.array([[6, 5, 4], [3, 2, 1]], dtype=np.uint8)
    np.testing.assert_array_equal(rotate(asymmetric, 180), expected)


def test_rotate_270(asymmetric):
    expected = np.array([[3, 6], [2, 5], [1, 4]], dtype=np.uint8)
    np.testing.assert_array_equal(rotate(asymmetric, 270), expected)
    np.testing.assert_array_equal(rotate(asymmetric, -90), expected)


def test_quarter_turns_compose(asymmetric):
    out = asymmetric
    for _ in range(4):
        out = rotate(out, 90)
    np.testing.assert_array_equal(out, asymmetric)


def test_right_angles_keep_every_pixel(triangle):
    for angle in (90, 180, 270):
        out = rotate(triangle, angle)
        assert sorted(out.ravel()) == sorted(triangle.ravel())


# ── Sampled angles ───────────────────────────────────────────────────────

def test_rotate_45_samples_inside_supersampled_buffer():
    img = np.full((4, 4), 3, dtype=np.uint8)
    out = rotate(img, 45)
    assert out.shape == (4, 4)

    center = Point(2, 2)
    size = 4 * SUPERSAMPLE
    for y in range(4):
        for x in range(4):
            vec = PolarVector.from_point(Point(x, y), center).rotated(-math.radians(45))
            src = vec.to_point(center, scale=SUPERSAMPLE)
            inside = 0 <= src.x < size and 0 <= src.y < size
            assert out[y, x] == (3 if inside else BACKGROUND), (x, y)

    assert out[0, 0] == BACKGROUND
    assert out[2, 2] == 3


def test_sampled_rotation_keeps_size_and_colors(triangle):
    out = rotate(triangle, 30)
    assert out.shape == triangle.shape
    assert set(np.unique(out)) <= {BACKGROUND, 1, 2}


def test_sampled_rotation_of_wide_image():
    img = np.arange(1, 16, dtype=np.uint8).reshape(3, 5)
    out = rotate(img, 10)
    assert out.shape == (3, 5)
    assert out[1, 2] == img[1, 2]


def test_empty_image():
    img = np.zeros((0, 0), dtype=np.uint8)
    assert rotate(img, 45).shape == (0, 0)


# ── State ────────────────────────────────────────────────────────────────

def test_state_owns_copies(triangle):
    state = RotationState.create(7, triangle)
    triangle[0, 0] = 9
    assert state.original[0, 0] == 1
    assert state.supersampled.shape == (8, 8)
    assert state.angle == 0


# ── Registry ─────────────────────────────────────────────────────────────

def test_get_rotation_untracked_has_no_side_effect(registry, triangle):
    sprite = Sprite(triangle)
    assert registry.get_rotation(sprite) == 0
    assert len(registry) == 0
    assert sprite not in registry


def test_change_rotation_creates_state_and_updates_image(registry, asymmetric):
    sprite = Sprite(asymmetric)
    image = registry.change_rotation(sprite, 90)
    assert sprite in registry
    assert sprite.image is image
    assert sprite.image.shape == (3, 2)
    assert registry.get_rotation(sprite) == 90


def test_change_rotation_accumulates_to_full_turn(registry, triangle):
    sprite = Sprite(triangle)
    for _ in range(12):
        registry.change_rotation(sprite, 30)
    assert registry.get_rotation(sprite) == 0
    np.testing.assert_array_equal(sprite.image, triangle)


def test_rotation_always_starts_from_original(registry, triangle):
    sprite = Sprite(triangle)
    registry.rotate_to(sprite, 37)
    registry.rotate_to(sprite, 90)
    np.testing.assert_array_equal(sprite.image, rotate(triangle, 90))
    registry.rotate_to(sprite, 0)
    np.testing.assert_array_equal(sprite.image, triangle)


def test_rotate_to_negative_angle(registry, asymmetric):
    sprite = Sprite(asymmetric)
    registry.rotate_to(sprite, -90)
    assert registry.get_rotation(sprite) == 270
    np.testing.assert_array_equal(sprite.image, rotate(asymmetric, 270))


def test_supersampled_image_computed_once(registry, triangle):
    sprite = Sprite(triangle)
    registry.change_rotation(sprite, 10)
    state = registry.state_for(sprite)
    supersampled = state.supersampled
    registry.change_rotation(sprite, 10)
    assert registry.state_for(sprite) is state
    assert state.supersampled is supersampled
    assert registry.state_for(sprite.id) is state


def test_register_picks_up_new_image(registry, triangle, asymmetric):
    sprite = Sprite(triangle)
    registry.rotate_to(sprite, 180)
    sprite.set_image(asymmetric)
    registry.register(sprite)
    assert registry.get_rotation(sprite) == 0
    registry.rotate_to(sprite, 90)
    assert sprite.image.shape == (3, 2)


def test_forget_and_entity_destroyed(registry, triangle):
    first = Sprite(triangle)
    second = Sprite(triangle)
    registry.change_rotation(first, 45)
    registry.change_rotation(second, 45)
    assert len(registry) == 2

    assert registry.forget(first) is True
    assert registry.forget(first) is False
    registry.entity_destroyed(second.id)
    assert len(registry) == 0
    assert registry.get_rotation(second) == 0


def test_registries_are_independent(triangle):
    sprite = Sprite(triangle)
    a = RotationRegistry()
    b = RotationRegistry()
    a.rotate_to(sprite, 90)
    assert a.get_rotation(sprite) == 90
    assert b.get_rotation(sprite) == 0


def test_clear(registry, triangle):
    registry.rotate_to(Sprite(triangle), 45)
    registry.clear()
    assert len(registry) == 0


@pytest.fixture
def default_registry():
    reg = rotation.default_registry()
    reg.clear()
    yield reg
    reg.clear()


def test_module_level_functions(default_registry, asymmetric):
    sprite = Sprite(asymmetric)
    assert rotation.get_rotation(sprite) == 0
    rotation.change_rotation(sprite, 45)
    rotation.change_rotation(sprite, 45)
    assert rotation.get_rotation(sprite) == 90
    rotation.rotate_to(sprite, 180)
    assert default_registry.get_rotation(sprite) == 180
    np.testing.assert_array_equal(sprite.image, rotate(asymmetric, 180))


def test_normalize_tiny_negative_angle_stays_below_full_turn(triangle):
    assert normalize_angle(-1e-20) == 0
    assert 0 <= normalize_angle(-1e-13) < 360
    np.testing.assert_array_equal(rotate(triangle, -1e-20), triangle)


def test_supersampled_copy_keeps_sprite_corners():
    img = np.full((3, 3), 4, dtype=np.uint8)
    state = RotationState.create(1, img)
    assert np.all(state.supersampled == 4)
