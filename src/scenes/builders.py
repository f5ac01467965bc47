# scenes/builders.py
"""
Ready-made scenes. Each builder produces the world (BVH-accelerated), a
camera for a given aspect ratio and the background color of the scene
(None means the sky gradient).
"""
import logging
import random
from typing import Dict, Optional, Type
import numpy as np
from camera.camera import Camera
from core.vector import Vector3
from geometry.box import Box
from geometry.medium import ConstantMedium
from geometry.rect import XYRect, XZRect, YZRect
from geometry.sphere import MovingSphere, Sphere
from geometry.transform import RotateY, Translate
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.perlin import Perlin
from materials.texture_loader import load_texture
from materials.textures import CheckerTexture, NoiseTexture

logger = logging.getLogger(__name__)

BLACK = Vector3(0.0, 0.0, 0.0)
UP = Vector3(0.0, 1.0, 0.0)

class SceneBuilder:
    """Base class for scene builders."""
    name = ""
    background: Optional[Vector3] = None
    # Shutter interval of the camera; also the interval the BVH must cover.
    time0 = 0.0
    time1 = 0.0

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def build_world(self) -> HittableList:
        raise NotImplementedError("build_world() must be implemented by scene builders.")

    def create_camera(self, aspect_ratio: float) -> Camera:
        raise NotImplementedError("create_camera() must be implemented by scene builders.")

    def build_scene(self) -> HittableList:
        """Build the world and its BVH."""
        world = self.build_world()
        world.build_bvh(self.time0, self.time1, rng=self.rng)
        logger.info("Scene '%s' built with %d objects", self.name, len(world))
        return world

    def _perlin(self) -> Perlin:
        return Perlin(np.random.default_rng(self.rng.randrange(2 ** 32)))

class RandomSpheresScene(SceneBuilder):
    """
    Large grey ground sphere, a 22x22 grid of small random spheres and three
    big spheres (glass, diffuse, metal).
    """
    name = "random_spheres"

    def create_camera(self, aspect_ratio: float) -> Camera:
        return Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), UP, 20.0, aspect_ratio,
                      aperture=0.1, focus_dist=10.0, time0=self.time0, time1=self.time1)

    def _ground(self):
        return Lambertian(Vector3(0.5, 0.5, 0.5))

    def _diffuse_sphere(self, center: Vector3, material):
        return Sphere(center, 0.2, material)

    def build_world(self) -> HittableList:
        rng = self.rng
        world = HittableList()
        world.add(Sphere(Vector3(0, -1000, 0), 1000, self._ground()))

        for a in range(-11, 11):
            for b in range(-11, 11):
                choose_mat = rng.random()
                center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
                if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                    continue
                if choose_mat < 0.8:
                    # diffuse
                    albedo = Vector3(rng.random(), rng.random(), rng.random()) * \
                        Vector3(rng.random(), rng.random(), rng.random())
                    world.add(self._diffuse_sphere(center, Lambertian(albedo)))
                elif choose_mat < 0.95:
                    # metal
                    albedo = Vector3(rng.uniform(0.5, 1), rng.uniform(0.5, 1), rng.uniform(0.5, 1))
                    world.add(Sphere(center, 0.2, Metal(albedo, rng.uniform(0, 0.5))))
                else:
                    # glass
                    world.add(Sphere(center, 0.2, Dielectric(1.5)))

        world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
        world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
        world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))
        return world

class BouncingSpheresScene(RandomSpheresScene):
    """Random spheres on a checkered ground, with the diffuse ones moving up during the exposure."""
    name = "bouncing_spheres"
    time1 = 1.0

    def _ground(self):
        return Lambertian(CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9)))

    def _diffuse_sphere(self, center: Vector3, material):
        center1 = center + Vector3(0, self.rng.uniform(0, 0.5), 0)
        return MovingSphere(center, center1, self.time0, self.time1, 0.2, material)

class TwoPerlinSpheresScene(SceneBuilder):
    name = "two_perlin_spheres"

    def create_camera(self, aspect_ratio: float) -> Camera:
        return Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), UP, 20.0, aspect_ratio,
                      aperture=0.0, focus_dist=10.0)

    def build_world(self) -> HittableList:
        marble = Lambertian(NoiseTexture(4.0, self._perlin()))
        return HittableList([
            Sphere(Vector3(0, -1000, 0), 1000, marble),
            Sphere(Vector3(0, 2, 0), 2, marble),
        ])

class SimpleLightScene(TwoPerlinSpheresScene):
    """Marble spheres lit by a single rectangular lamp in an otherwise black world."""
    name = "simple_light"
    background = BLACK

    def create_camera(self, aspect_ratio: float) -> Camera:
        return Camera(Vector3(26, 3, 6), Vector3(0, 2, 0), UP, 20.0, aspect_ratio,
                      aperture=0.0, focus_dist=10.0)

    def build_world(self) -> HittableList:
        world = super().build_world()
        world.add(XYRect(3, 5, 1, 3, -2, DiffuseLight(Vector3(4, 4, 4))))
        return world

class CornellBoxScene(SceneBuilder):
    name = "cornell_box"
    background = BLACK
    light_intensity = 15.0

    def create_camera(self, aspect_ratio: float) -> Camera:
        return Camera(Vector3(278, 278, -800), Vector3(278, 278, 0), UP, 40.0, aspect_ratio,
                      aperture=0.0, focus_dist=10.0)

    def _walls(self, world: HittableList):
        red = Lambertian(Vector3(0.65, 0.05, 0.05))
        white = Lambertian(Vector3(0.73, 0.73, 0.73))
        green = Lambertian(Vector3(0.12, 0.45, 0.15))
        world.add(YZRect(0, 555, 0, 555, 555, green))
        world.add(YZRect(0, 555, 0, 555, 0, red))
        world.add(XZRect(0, 555, 0, 555, 0, white))
        world.add(XZRect(0, 555, 0, 555, 555, white))
        world.add(XYRect(0, 555, 0, 555, 555, white))
        return white

    def _light(self, world: HittableList):
        light = DiffuseLight(Vector3(self.light_intensity, self.light_intensity, self.light_intensity))
        world.add(XZRect(213, 343, 227, 332, 554, light))

    def _blocks(self, white):
        tall = Translate(RotateY(Box(Vector3(0, 0, 0), Vector3(165, 330, 165), white), 15),
                         Vector3(265, 0, 295))
        short = Translate(RotateY(Box(Vector3(0, 0, 0), Vector3(165, 165, 165), white), -18),
                          Vector3(130, 0, 65))
        return tall, short

    def build_world(self) -> HittableList:
        world = HittableList()
        white = self._walls(world)
        self._light(world)
        for block in self._blocks(white):
            world.add(block)
        return world

class CornellSmokeScene(CornellBoxScene):
    """Cornell box whose two blocks are replaced by black and white smoke."""
    name = "cornell_smoke"
    light_intensity = 7.0

    def _light(self, world: HittableList):
        light = DiffuseLight(Vector3(self.light_intensity, self.light_intensity, self.light_intensity))
        world.add(XZRect(113, 443, 127, 432, 554, light))

    def build_world(self) -> HittableList:
        world = HittableList()
        white = self._walls(world)
        self._light(world)
        tall, short = self._blocks(white)
        world.add(ConstantMedium(tall, 0.01, Vector3(0, 0, 0)))
        world.add(ConstantMedium(short, 0.01, Vector3(1, 1, 1)))
        return world

class EarthScene(SceneBuilder):
    """A single sphere wrapped in an image texture (e.g. an earth map)."""
    name = "earth"

    def __init__(self, seed: Optional[int] = None, texture_path: Optional[str] = None):
        super().__init__(seed)
        if texture_path is None:
            raise ValueError("The earth scene needs a texture image (texture_path)")
        self.texture_path = texture_path

    def create_camera(self, aspect_ratio: float) -> Camera:
        return Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), UP, 20.0, aspect_ratio,
                      aperture=0.0, focus_dist=10.0)

    def build_world(self) -> HittableList:
        surface = Lambertian(load_texture(self.texture_path))
        return HittableList([Sphere(Vector3(0, 0, 0), 2, surface)])

SCENES: Dict[str, Type[SceneBuilder]] = {
    builder.name: builder
    for builder in (RandomSpheresScene, BouncingSpheresScene, TwoPerlinSpheresScene,
                    SimpleLightScene, CornellBoxScene, CornellSmokeScene, EarthScene)
}

def get_scene_builder(name: str, seed: Optional[int] = None, texture_path: Optional[str] = None) -> SceneBuilder:
    """
    Instantiate the builder registered under `name`.

    Raises:
        ValueError: for unknown scene names or a missing texture for `earth`.
    """
    if name not in SCENES:
        raise ValueError(f"Unknown scene: {name!r} (available: {', '.join(sorted(SCENES))})")
    if name == EarthScene.name:
        return EarthScene(seed, texture_path=texture_path)
    return SCENES[name](seed)
