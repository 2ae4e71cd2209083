"""
Shared fixtures for RotSprite tests.

Provides small literal sprites and a fresh rotation registry.
"""
import numpy as np
import pytest

from rotsprite.rotation import RotationRegistry


# ── Literal sprites ──────────────────────────────────────────────────────

# Two solid triangles split by the main diagonal: 1 on and below it, 2 above.
TRIANGLE = np.array(
    [
        [1, 2, 2, 2],
        [1, 1, 2, 2],
        [1, 1, 1, 2],
        [1, 1, 1, 1],
    ],
    dtype=np.uint8,
)

# Width 3, height 2, every pixel distinct.
ASYMMETRIC = np.array(
    [
        [1, 2, 3],
        [4, 5, 6],
    ],
    dtype=np.uint8,
)


@pytest.fixture
def triangle():
    return TRIANGLE.copy()


@pytest.fixture
def asymmetric():
    return ASYMMETRIC.copy()


@pytest.fixture
def registry():
    return RotationRegistry()
