"""Shared fixtures for cg2d tests."""

import math

import numpy as np
import pytest

from cg2d.geom import Pt
from cg2d.triangulator import Triangulator


UNIT_SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]


@pytest.fixture
def square():
    return Triangulator(UNIT_SQUARE)


@pytest.fixture
def polygon16():
    """Правильний 16-кутник радіуса 10 навколо (0, 0)."""
    return [
        (10.0 * math.cos(2 * math.pi * i / 16), 10.0 * math.sin(2 * math.pi * i / 16))
        for i in range(16)
    ]


@pytest.fixture
def interior_points():
    """60 випадкових точок строго всередині polygon16 (детерміновано)."""
    rng = np.random.default_rng(42)
    r = 8.0 * np.sqrt(rng.random(60))
    phi = 2 * np.pi * rng.random(60)
    return [Pt(float(x), float(y)) for x, y in zip(r * np.cos(phi), r * np.sin(phi))]
