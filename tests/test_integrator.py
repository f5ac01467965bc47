"""Unit tests for the path integrator and the camera."""

import math
import random

import pytest

from camera.camera import Camera
from core.ray import Ray
from core.vector import Vector3
from geometry.rect import XYRect, XZRect
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from renderer.integrator import SKY_BLUE, SKY_WHITE, ray_color, sky_color

BLACK = Vector3(0, 0, 0)


class TestRayColor:
    """Tests for the recursive radiance estimate."""

    def test_depth_exhausted_is_black(self, grey):
        world = HittableList([Sphere(Vector3(0, 0, 0), 1.0, grey)])
        assert ray_color(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), None, world, 0) == BLACK

    def test_escaping_ray_returns_background(self):
        background = Vector3(0.2, 0.3, 0.4)
        assert ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), background, HittableList()) == background

    def test_sky_gradient(self):
        up = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
        down = Ray(Vector3(0, 0, 0), Vector3(0, -1, 0))
        assert sky_color(up) == SKY_BLUE
        assert sky_color(down) == SKY_WHITE
        assert ray_color(up, None, HittableList()) == SKY_BLUE

    def test_light_seen_directly(self):
        world = HittableList([XYRect(-1, 1, -1, 1, -2, DiffuseLight(Vector3(4, 4, 4)))])
        color = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), BLACK, world, 1)
        assert color == Vector3(4, 4, 4)

    def test_diffuse_sphere_lit_by_area_light(self):
        """A diffuse sphere under a large lamp in a black world receives light."""
        world = HittableList([
            Sphere(Vector3(0, 0, 0), 1.0, Lambertian(Vector3(0.5, 0.5, 0.5))),
            XZRect(-10, 10, -10, 10, 3, DiffuseLight(Vector3(4, 4, 4))),
        ])
        world.build_bvh(rng=random.Random(0))
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        total = Vector3(0, 0, 0)
        samples = 200
        for _ in range(samples):
            color = ray_color(ray, BLACK, world, 10)
            assert all(math.isfinite(c) and c >= 0 for c in color)
            total = total + color
        average = total / samples
        assert average.x > 0.2
        # Some paths escape downwards into the black background
        assert average.x < 4.0


class TestCamera:
    """Tests for primary ray generation."""

    def test_center_ray_points_at_target(self):
        camera = Camera(Vector3(0, 0, 5), Vector3(0, 0, 0), Vector3(0, 1, 0), 40.0, 2.0)
        ray = camera.get_ray(0.5, 0.5)
        assert ray.origin == Vector3(0, 0, 5)
        direction = ray.direction.normalize()
        assert direction.x == pytest.approx(0.0, abs=1e-12)
        assert direction.z == pytest.approx(-1.0)

    def test_corners_follow_field_of_view(self):
        camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0), 90.0, 1.0,
                        focus_dist=1.0)
        top_right = camera.get_ray(1.0, 1.0).direction
        assert top_right.x == pytest.approx(1.0)
        assert top_right.y == pytest.approx(1.0)
        assert top_right.z == pytest.approx(-1.0)

    def test_ray_time_within_shutter(self):
        camera = Camera(Vector3(0, 0, 5), Vector3(0, 0, 0), Vector3(0, 1, 0), 40.0, 1.0,
                        time0=0.25, time1=0.75)
        for _ in range(50):
            assert 0.25 <= camera.get_ray(0.3, 0.6).time <= 0.75

    def test_lens_offsets_origin(self):
        camera = Camera(Vector3(0, 0, 5), Vector3(0, 0, 0), Vector3(0, 1, 0), 40.0, 1.0,
                        aperture=2.0, focus_dist=5.0)
        for _ in range(50):
            ray = camera.get_ray(0.5, 0.5)
            assert (ray.origin - Vector3(0, 0, 5)).length() < 1.0
            # Every lens sample converges on the focus plane
            hit = ray.at(1.0)
            assert hit.z == pytest.approx(0.0, abs=1e-9)
