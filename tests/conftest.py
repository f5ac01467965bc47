"""Shared fixtures for the renderer tests."""

import random

import pytest

from core.vector import Vector3
from geometry.world import HittableList
from materials.lambertian import Lambertian


@pytest.fixture(autouse=True)
def seeded_random():
    """Seed the module-level generator so stochastic tests are repeatable."""
    random.seed(1234)
    yield
    random.seed()


@pytest.fixture
def grey():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def sphere_grid():
    """A handful of spheres spread along x, z and y for acceleration tests.

    Each sphere has its own material so a hit can be traced back to its object.
    """
    from geometry.sphere import Sphere

    rng = random.Random(7)
    spheres = [
        Sphere(Vector3(rng.uniform(-10, 10), rng.uniform(-3, 3), rng.uniform(-10, 10)),
               rng.uniform(0.2, 1.5), Lambertian(Vector3(rng.random(), rng.random(), rng.random())))
        for _ in range(40)
    ]
    return HittableList(spheres)
