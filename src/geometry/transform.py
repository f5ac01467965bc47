# geometry/transform.py
"""
Instancing wrappers: move or rotate an existing object without copying it.

Both wrappers transform the incoming ray into the object's local frame,
delegate the intersection, and map the resulting point (and normal) back to
world space. The normal keeps the orientation the wrapped object gave it, so
front_face is carried over unchanged.
"""
import math
from typing import Optional
from core.aabb import AABB
from core.ray import Ray
from core.utils import degrees_to_radians
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    def __init__(self, hittable: Hittable, offset: Vector3):
        self.hittable = hittable
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        moved_ray = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.hittable.hit(moved_ray, t_min, t_max)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.hittable.bounding_box(time0, time1)
        if box is None:
            return None
        return box.translated(self.offset)

class RotateY(Hittable):
    """
    Rotates the wrapped object by `angle` degrees about the y axis.

    The bounding box is computed once, over [time0, time1], by rotating the
    eight corners of the child's box.
    """
    def __init__(self, hittable: Hittable, angle: float, time0: float = 0.0, time1: float = 1.0):
        self.hittable = hittable
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        child_box = hittable.bounding_box(time0, time1)
        if child_box is None:
            self.bbox = None
            return

        minimum = [math.inf, math.inf, math.inf]
        maximum = [-math.inf, -math.inf, -math.inf]
        for corner in child_box.corners():
            tester = self._to_world(corner)
            for c in range(3):
                minimum[c] = min(minimum[c], tester[c])
                maximum[c] = max(maximum[c], tester[c])
        self.bbox = AABB(Vector3(*minimum), Vector3(*maximum))

    def _to_local(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rotated_ray = Ray(self._to_local(ray.origin), self._to_local(ray.direction), ray.time)
        rec = self.hittable.hit(rotated_ray, t_min, t_max)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        return self.bbox
