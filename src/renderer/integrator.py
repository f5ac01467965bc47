# renderer/integrator.py
"""
Recursive Monte Carlo estimator of the radiance arriving along a ray.

Each call follows one path: find the nearest surface, add what it emits and,
if its material scatters, recurse along the scattered ray weighted by the
attenuation. Paths are cut after a fixed number of bounces.
"""
import math
from typing import Optional
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable

# Default bounce budget per path
MAX_DEPTH = 50

# Lower bound of the hit interval; avoids re-hitting the surface a ray left from.
T_MIN = 0.001

BLACK = Vector3(0.0, 0.0, 0.0)
SKY_WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def sky_color(ray: Ray) -> Vector3:
    """Vertical white-to-blue gradient used when a scene has no background color."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_WHITE * (1.0 - t) + SKY_BLUE * t

def ray_color(ray: Ray, background: Optional[Vector3], world: Hittable, depth: int = MAX_DEPTH) -> Vector3:
    """
    Estimate the radiance carried back along `ray`.

    Args:
        ray: The ray to follow.
        background: Radiance of rays that escape the scene; None selects the sky gradient.
        world: Scene to intersect (usually a HittableList with a BVH).
        depth: Remaining bounces. Zero or less returns black.

    Returns:
        The radiance estimate as an RGB Vector3.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return sky_color(ray) if background is None else background

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    scatter = rec.material.scatter(ray, rec)
    if scatter is None:
        return emitted

    scattered, attenuation = scatter
    return emitted + attenuation * ray_color(scattered, background, world, depth - 1)
