# src/materials/dielectric.py
import math
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.utils import reflect, refract, schlick
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import Material

WHITE = Vector3(1.0, 1.0, 1.0)

class Dielectric(Material):
    """
    Clear refractive material (glass, water). Reflects on total internal
    reflection or when a Schlick-weighted coin flip says so, refracts otherwise.
    """
    def __init__(self, ref_idx: float):
        super().__init__()
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Vector3]]:
        attenuation = WHITE  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        etai_over_etat = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()

        # Calculate cosine using the angle between incoming ray and normal
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        # Check for total internal reflection
        if etai_over_etat * sin_theta > 1.0:
            reflected = reflect(unit_direction, rec.normal)
            return Ray(rec.p, reflected, ray_in.time), attenuation

        # Calculate reflection probability using Schlick's approximation
        reflect_prob = schlick(cos_theta, etai_over_etat)
        if random.random() < reflect_prob:
            reflected = reflect(unit_direction, rec.normal)
            return Ray(rec.p, reflected, ray_in.time), attenuation

        refracted = refract(unit_direction, rec.normal, etai_over_etat)
        return Ray(rec.p, refracted, ray_in.time), attenuation
