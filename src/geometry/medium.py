# geometry/medium.py
import logging
import math
import random
from typing import Optional, Union
from core.aabb import AABB
from core.errors import SceneConfigurationError
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord
from materials.isotropic import Isotropic
from materials.textures import Texture

logger = logging.getLogger(__name__)

# Offset past the entry point when looking for the exit crossing.
EXIT_SEARCH_EPSILON = 0.0001

class ConstantMedium(Hittable):
    """
    Homogeneous participating medium (smoke, fog) filling a closed boundary.

    A ray entering the boundary travels an exponentially distributed free
    path before scattering; if the path is longer than the chord through the
    boundary the ray passes through untouched. Repeated queries with the same
    ray therefore give different answers.

    The normal and front_face of a medium hit are placeholders: shading that
    depends on them is undefined inside a volume.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        if not density > 0:
            logger.error("ConstantMedium density must be positive, got %r", density)
            raise SceneConfigurationError(f"ConstantMedium density must be positive, got {density!r}")
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, -math.inf, math.inf)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + EXIT_SEARCH_EPSILON, math.inf)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], keeping the logarithm finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - random.random())
        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        rec.normal = Vector3(1.0, 0.0, 0.0)  # arbitrary
        rec.front_face = True  # also arbitrary
        rec.material = self.phase_function
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
