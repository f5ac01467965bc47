# camera/camera.py
import math
import random
from core.vector import Vector3
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk

class Camera:
    """
    Thin-lens camera looking from `lookfrom` towards `lookat`.

    Args:
        vfov: Vertical field of view in degrees.
        aperture: Lens diameter; 0 gives a pinhole camera.
        focus_dist: Distance to the plane in perfect focus.
        time0, time1: Shutter interval; each ray gets a uniform time inside it.
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        self.position = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        self.w = (self.position - self.lookat).normalize()
        self.right = self.vup.cross(self.w).normalize()
        self.up = self.w.cross(self.right)

        # Compute viewport dimensions based on fov
        half_height = math.tan(degrees_to_radians(self.vfov) / 2)
        half_width = self.aspect_ratio * half_height

        # Scale by focus distance
        self.horizontal = self.right * (2.0 * half_width * self.focus_dist)
        self.vertical = self.up * (2.0 * half_height * self.focus_dist)

        self.lower_left_corner = (self.position -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng=random) -> Ray:
        """Generates a ray through viewport coordinates (s, t) in [0, 1]^2."""
        time = rng.uniform(self.time0, self.time1) if self.time1 > self.time0 else self.time0
        if self.aperture <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         self.position)
            return Ray(self.position, direction, time)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.right * rd.x + self.up * rd.y

        # Update ray origin and direction for depth of field
        ray_origin = self.position + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)

        return Ray(ray_origin, ray_direction, time)
