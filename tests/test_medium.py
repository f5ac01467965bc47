"""Unit tests for constant-density participating media."""

import math

import pytest

from core.errors import SceneConfigurationError
from core.ray import Ray
from core.vector import Vector3
from geometry.medium import ConstantMedium
from geometry.sphere import Sphere
from materials.isotropic import Isotropic


@pytest.fixture
def boundary(grey):
    return Sphere(Vector3(0, 0, 0), 1.0, grey)


class TestConstantMedium:
    """Tests for free-path sampling inside a boundary."""

    @pytest.mark.parametrize("density", [0.0, -1.0])
    def test_non_positive_density_raises(self, boundary, density):
        with pytest.raises(SceneConfigurationError):
            ConstantMedium(boundary, density, Vector3(1, 1, 1))

    def test_dense_medium_scatters_inside_boundary(self, boundary):
        medium = ConstantMedium(boundary, 100.0, Vector3(0.5, 0.5, 0.5))
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        for _ in range(50):
            rec = medium.hit(ray, 0.001, math.inf)
            assert rec is not None
            assert 4.0 <= rec.t <= 6.0
            assert rec.p.length() <= 1.0 + 1e-9
            assert isinstance(rec.material, Isotropic)
            assert rec.front_face

    def test_thin_medium_lets_rays_through(self, boundary):
        medium = ConstantMedium(boundary, 1e-9, Vector3(0.5, 0.5, 0.5))
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert all(medium.hit(ray, 0.001, math.inf) is None for _ in range(50))

    def test_ray_missing_boundary(self, boundary):
        medium = ConstantMedium(boundary, 100.0, Vector3(1, 1, 1))
        assert medium.hit(Ray(Vector3(0, 5, -5), Vector3(0, 0, 1)), 0.001, math.inf) is None

    def test_ray_starting_inside(self, boundary):
        medium = ConstantMedium(boundary, 100.0, Vector3(1, 1, 1))
        rec = medium.hit(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)), 0.001, math.inf)
        assert rec is not None
        assert 0.001 <= rec.t <= 1.0

    def test_interval_before_boundary(self, boundary):
        medium = ConstantMedium(boundary, 100.0, Vector3(1, 1, 1))
        assert medium.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)), 0.001, 3.0) is None

    def test_bounding_box_is_boundary_box(self, boundary):
        medium = ConstantMedium(boundary, 1.0, Vector3(1, 1, 1))
        box = medium.bounding_box(0, 0)
        assert box.minimum == Vector3(-1, -1, -1)
        assert box.maximum == Vector3(1, 1, 1)
