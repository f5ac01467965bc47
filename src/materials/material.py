# materials/material.py
from typing import Optional, Tuple
from core.errors import MaterialConfigurationError
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.textures import as_texture  # noqa: F401  re-exported for material subclasses

BLACK = Vector3(0.0, 0.0, 0.0)

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials that read a texture keep it in self.texture.
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        """
        Radiance emitted at the hit point. Non-emissive materials return black.
        """
        return BLACK

    def get_texture_color(self, u: float, v: float, point: Vector3) -> Vector3:
        """
        Get the color from the texture at the given UV coordinates and point.

        Raises:
            MaterialConfigurationError: if the material has no texture.
        """
        if self.texture is None:
            raise MaterialConfigurationError(f"{type(self).__name__} has no texture assigned")
        return self.texture.sample(u, v, point)
