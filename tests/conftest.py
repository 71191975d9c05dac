"""Shared fixtures for the ray tracer tests."""

import random

import pytest

from core.utils import PixelCenter
from core.vector import Point
from geometry.sphere import Sphere
from geometry.world import HittableList


@pytest.fixture
def rng():
    """Seeded random source so jittered samples are reproducible."""
    return random.Random(1234)


@pytest.fixture
def center_sampler():
    """Random source that always samples the pixel center."""
    return PixelCenter()


@pytest.fixture
def two_sphere_world():
    """Small sphere at (0, 0, -1) resting on a radius-100 ground sphere."""
    world = HittableList()
    world.add(Sphere(Point(0.0, 0.0, -1.0), 0.5))
    world.add(Sphere(Point(0.0, -100.5, -1.0), 100.0))
    return world


def assert_vec_close(actual, expected, tol=1e-9):
    """Component-wise comparison of two Vector3-like triples."""
    for a, e in zip(actual, expected):
        assert a == pytest.approx(e, abs=tol)
