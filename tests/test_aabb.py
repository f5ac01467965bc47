"""Unit tests for vectors and axis-aligned bounding boxes.

Tests cover:
- Vector arithmetic used throughout the tracer
- Slab test hits and misses
- Zero (and negative zero) direction components
- Union boxes containing both inputs
"""

import math

import pytest

from core.aabb import AABB
from core.ray import Ray
from core.vector import Vector3


UNIT_BOX = AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))


class TestVector3:
    """Tests for the Vector3 value type."""

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert -a == Vector3(-1, -2, -3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * b == Vector3(4, 10, 18)
        assert b / 2 == Vector3(2, 2.5, 3)

    def test_dot_cross_length(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert Vector3(3, 4, 0).length() == pytest.approx(5.0)
        assert Vector3(0, 0, 2).normalize() == Vector3(0, 0, 1)

    def test_indexing_by_axis(self):
        v = Vector3(7, 8, 9)
        assert (v[0], v[1], v[2]) == (7, 8, 9)
        assert list(v) == [7, 8, 9]

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-3, 0, 0).near_zero()


class TestAABBHit:
    """Tests for the slab intersection test."""

    def test_hit_head_on(self):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert UNIT_BOX.hit(ray, 0.001, math.inf)

    def test_miss_beside_box(self):
        ray = Ray(Vector3(5, 5, -5), Vector3(0, 0, 1))
        assert not UNIT_BOX.hit(ray, 0.001, math.inf)

    def test_box_behind_ray(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, 1))
        assert not UNIT_BOX.hit(ray, 0.001, math.inf)

    def test_interval_ends_before_box(self):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert not UNIT_BOX.hit(ray, 0.001, 3.0)

    def test_diagonal_ray(self):
        ray = Ray(Vector3(-5, -5, -5), Vector3(1, 1, 1))
        assert UNIT_BOX.hit(ray, 0.001, math.inf)

    def test_zero_component_inside_slab(self):
        """A ray parallel to a slab and inside it is limited by the other axes only."""
        ray = Ray(Vector3(0.5, 0, -5), Vector3(0, 0, 1))
        assert UNIT_BOX.hit(ray, 0.001, math.inf)

    def test_zero_component_outside_slab(self):
        ray = Ray(Vector3(2, 0, -5), Vector3(0, 0, 1))
        assert not UNIT_BOX.hit(ray, 0.001, math.inf)

    def test_negative_zero_component(self):
        inside = Ray(Vector3(0.5, 0, -5), Vector3(-0.0, 0, 1))
        outside = Ray(Vector3(-2, 0, -5), Vector3(-0.0, 0, 1))
        assert UNIT_BOX.hit(inside, 0.001, math.inf)
        assert not UNIT_BOX.hit(outside, 0.001, math.inf)

    def test_zero_component_on_slab_boundary_does_not_raise(self):
        ray = Ray(Vector3(1, 0, -5), Vector3(0, 0, 1))
        assert isinstance(UNIT_BOX.hit(ray, 0.001, math.inf), bool)


class TestAABBHelpers:
    """Tests for union, containment and corner helpers."""

    def test_surrounding_box_contains_both(self):
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = AABB(Vector3(-2, 0.5, 3), Vector3(-1, 4, 5))
        union = AABB.surrounding_box(a, b)
        for box in (a, b):
            for corner in box.corners():
                assert union.contains(corner)
        assert union.minimum == Vector3(-2, 0, 0)
        assert union.maximum == Vector3(1, 4, 5)

    def test_corners(self):
        corners = list(UNIT_BOX.corners())
        assert len(corners) == 8
        assert Vector3(-1, 1, -1) in corners

    def test_translated(self):
        moved = UNIT_BOX.translated(Vector3(10, 0, 0))
        assert moved.minimum == Vector3(9, -1, -1)
        assert moved.maximum == Vector3(11, 1, 1)

    def test_surface_area(self):
        assert UNIT_BOX.surface_area() == pytest.approx(24.0)

    def test_flat_box_parallel_ray_outside_slab(self):
        flat = AABB(Vector3(-1, -1, 0), Vector3(1, 1, 0))
        assert not flat.hit(Ray(Vector3(0, 0, 0.5), Vector3(1, 0, 0)), 0.001, math.inf)
        assert not flat.hit(Ray(Vector3(-5, 0, -0.5), Vector3(1, 0, 0)), 0.001, math.inf)
