# materials/isotropic.py
from typing import Tuple, Union
from core.ray import Ray
from core.utils import random_in_unit_sphere
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Isotropic(Material):
    """
    Phase function of a participating medium: scatters in a uniformly
    random direction, ignoring the incoming one.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Ray, Vector3]:
        scattered = Ray(rec.p, random_in_unit_sphere(), ray_in.time)
        return scattered, self.get_texture_color(rec.u, rec.v, rec.p)
