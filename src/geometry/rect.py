# geometry/rect.py
from typing import Optional
from core.aabb import AABB
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord

# Half-thickness given to the flat axis so the bounding box keeps a volume.
RECT_THICKNESS = 0.0001

class AxisAlignedRect(Hittable):
    """
    Rectangle lying in the plane `axis == k`, spanning [a0, a1] along
    `u_axis` and [b0, b1] along `v_axis`. The outward normal is the positive
    direction of the fixed axis.
    """
    axis = 2
    u_axis = 0
    v_axis = 1

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def _point(self, a: float, b: float, k: float) -> Vector3:
        coords = [0.0, 0.0, 0.0]
        coords[self.u_axis] = a
        coords[self.v_axis] = b
        coords[self.axis] = k
        return Vector3(*coords)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = ray.direction[self.axis]
        if d == 0.0:
            # Parallel to the plane
            return None
        t = (self.k - ray.origin[self.axis]) / d
        if t <= t_min or t >= t_max:
            return None

        a = ray.origin[self.u_axis] + t * ray.direction[self.u_axis]
        b = ray.origin[self.v_axis] + t * ray.direction[self.v_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.u = (a - self.a0) / (self.a1 - self.a0)
        rec.v = (b - self.b0) / (self.b1 - self.b0)
        rec.t = t
        rec.set_face_normal(ray, self._point(0.0, 0.0, 1.0))
        rec.material = self.material
        rec.p = ray.at(t)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return AABB(self._point(self.a0, self.b0, self.k - RECT_THICKNESS),
                    self._point(self.a1, self.b1, self.k + RECT_THICKNESS))

class XYRect(AxisAlignedRect):
    """Rectangle x0..x1 by y0..y1 in the plane z = k."""
    axis, u_axis, v_axis = 2, 0, 1

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)

class XZRect(AxisAlignedRect):
    """Rectangle x0..x1 by z0..z1 in the plane y = k."""
    axis, u_axis, v_axis = 1, 0, 2

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)

class YZRect(AxisAlignedRect):
    """Rectangle y0..y1 by z0..z1 in the plane x = k."""
    axis, u_axis, v_axis = 0, 1, 2

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
