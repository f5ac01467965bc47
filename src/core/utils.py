# core/utils.py
import math
import random
from core.vector import Vector3

# Rejection samplers accept with probability >= pi/6 per draw; reaching this
# many attempts means the random source is broken.
MAX_REJECTION_ATTEMPTS = 10000

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def clamp(x: float, low: float, high: float) -> float:
    if x < low:
        return low
    if x > high:
        return high
    return x

def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """
    Returns a random real in [low, high).
    """
    return low + (high - low) * random.random()

def random_vector(low: float = 0.0, high: float = 1.0) -> Vector3:
    return Vector3(random_double(low, high), random_double(low, high), random_double(low, high))

def random_in_unit_sphere() -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    for _ in range(MAX_REJECTION_ATTEMPTS):
        p = Vector3(random.uniform(-1, 1),
                    random.uniform(-1, 1),
                    random.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p
    raise RuntimeError("random_in_unit_sphere: rejection sampling did not converge")

def random_unit_vector() -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    for _ in range(MAX_REJECTION_ATTEMPTS):
        p = random_in_unit_sphere()
        # Points too close to the origin cannot be normalized reliably.
        if p.length_squared() > 1e-12:
            return p.normalize()
    raise RuntimeError("random_unit_vector: rejection sampling did not converge")

def random_in_unit_disk(rng=random) -> Vector3:
    """Random point in the unit disk on the z = 0 plane (lens sampling)."""
    for _ in range(MAX_REJECTION_ATTEMPTS):
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p
    raise RuntimeError("random_in_unit_disk: rejection sampling did not converge")

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n using
    Snell's law. The caller is responsible for ruling out total internal
    reflection.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
