# materials/textures.py
import math
from typing import Union
import numpy as np
from core.vector import Vector3
from materials.perlin import Perlin

class Texture:
    """Base class for all textures."""
    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        """Sample the texture at surface coordinates (u, v) and world point p."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

def as_texture(value: Union[Vector3, Texture, None]) -> Texture:
    """Wraps a plain color in a SolidTexture; textures (and None) pass through."""
    return SolidTexture(value) if isinstance(value, Vector3) else value

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(sx) sin(sy) sin(sz) selects
    between the even and odd textures, so the pattern follows world space
    rather than the surface parametrization.
    """
    def __init__(self, even: Union[Vector3, Texture], odd: Union[Vector3, Texture], scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.sample(u, v, p)
        return self.even.sample(u, v, p)

class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 5.0, perlin: Perlin = None):
        self.noise = perlin if perlin is not None else Perlin()
        self.scale = scale

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        value = 0.5 * (1.0 + math.sin(self.scale * p.z + 10.0 * self.noise.turb(p)))
        return Vector3(value, value, value)

class ImageTexture(Texture):
    """
    A texture backed by decoded image pixels.

    Args:
        pixels: (height, width, 3) array with channels in [0, 255], top row first.
    """
    def __init__(self, pixels: np.ndarray):
        pixels = np.asarray(pixels)
        if pixels.ndim != 3 or pixels.shape[2] < 3 or pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError(f"Expected a non-empty (height, width, 3) pixel array, got shape {pixels.shape}")
        # Normalize to [0,1]
        self.data = pixels[:, :, :3].astype(np.float64) / 255.0
        self.height, self.width = self.data.shape[0], self.data.shape[1]

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        # Clamp input texture coordinates to [0,1] x [1,0]
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)  # Flip V to image coordinates

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))
