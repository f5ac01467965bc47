# materials/lambertian.py
from typing import Tuple, Union
from core.ray import Ray
from core.utils import random_unit_vector
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Lambertian(Material):
    """
    Ideal diffuse surface. Bounces are cosine-distributed around the normal
    (normal plus a random unit vector) and tinted by the albedo texture.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Ray, Vector3]:
        direction = rec.normal + random_unit_vector()
        # The unit vector can cancel the normal almost exactly
        if direction.near_zero():
            direction = rec.normal
        return Ray(rec.p, direction, ray_in.time), self.get_texture_color(rec.u, rec.v, rec.p)
