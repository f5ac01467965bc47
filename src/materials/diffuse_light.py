# materials/diffuse_light.py
from typing import Union
from core.vector import Vector3
from materials.material import Material, as_texture
from materials.textures import Texture

class DiffuseLight(Material):
    """
    Area light material. It emits its texture's color in every direction
    and absorbs whatever reaches it, so paths end at a light.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def scatter(self, ray_in, rec):
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.get_texture_color(u, v, p)
