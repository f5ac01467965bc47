# renderer/raytracer.py
import logging
import random
import time
from concurrent.futures import FIRST_COMPLETED, ProcessPoolExecutor, wait
from typing import List, Optional, Tuple
import numpy as np
from core.errors import RenderCancelled
from core.vector import Vector3
from renderer.integrator import ray_color
from renderer.settings import RenderSettings
from renderer.tone_mapping import tone_map

logger = logging.getLogger(__name__)

# Scene installed once per worker process by _init_worker
_worker_state = None

def render_tile(world, camera, background: Optional[Vector3], settings: RenderSettings,
                seed: int, row_start: int, row_end: int) -> np.ndarray:
    """
    Render image rows [row_start, row_end) (row 0 is the top of the image).

    The module-level `random` generator, which every sampler draws from, is
    reseeded with `seed` first, so a tile's result only depends on its seed.
    Its previous state is restored afterwards, so rendering in the calling
    process leaves the caller's random sequence untouched.

    Returns:
        (row_end - row_start, width, 3) array of radiance sums over
        settings.samples_per_pixel samples.
    """
    width, height = settings.width, settings.height
    spp = settings.samples_per_pixel
    max_depth = settings.max_depth

    tile = np.zeros((row_end - row_start, width, 3), dtype=np.float64)
    saved_state = random.getstate()
    random.seed(seed)
    try:
        for row in range(row_start, row_end):
            j = height - 1 - row
            for i in range(width):
                r = g = b = 0.0
                for _ in range(spp):
                    u = (i + random.random()) / width
                    v = (j + random.random()) / height
                    color = ray_color(camera.get_ray(u, v, random), background, world, max_depth)
                    r += color.x
                    g += color.y
                    b += color.z
                tile[row - row_start, i] = (r, g, b)
    finally:
        random.setstate(saved_state)
    return tile

def _init_worker(world, camera, background, settings):
    global _worker_state
    _worker_state = (world, camera, background, settings)

def _render_tile_in_worker(seed: int, row_start: int, row_end: int):
    world, camera, background, settings = _worker_state
    return row_start, render_tile(world, camera, background, settings, seed, row_start, row_end)

class Renderer:
    """
    Samples every pixel of the image through the path integrator.

    The image is cut into horizontal tiles of `settings.tile_rows` rows.
    Tiles are independent: each has its own seed and writes a disjoint row
    range, so they can be rendered by a pool of worker processes sharing a
    read-only copy of the scene.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.width = settings.width
        self.height = settings.height
        self.accumulation_buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        self.samples = 0

    def tiles(self, base_seed: int) -> List[Tuple[int, int, int]]:
        """(seed, row_start, row_end) for every tile, top to bottom."""
        step = self.settings.tile_rows
        return [(base_seed + index, start, min(start + step, self.height))
                for index, start in enumerate(range(0, self.height, step))]

    def render(self, world, camera, background: Optional[Vector3] = None,
               cancel_event=None) -> np.ndarray:
        """
        Render the scene and return per-pixel radiance sums.

        Args:
            world: Scene to render; shared read-only by all tiles.
            camera: Camera generating the primary rays.
            background: Color of escaping rays; None selects the sky gradient.
            cancel_event: Optional object with is_set(), checked between tiles.

        Returns:
            (height, width, 3) float64 array of sums over samples_per_pixel samples.

        Raises:
            RenderCancelled: if cancel_event is set before all tiles are done.
        """
        settings = self.settings
        base_seed = settings.seed
        if base_seed is None:
            base_seed = random.SystemRandom().randrange(2 ** 32)
        tiles = self.tiles(base_seed)

        logger.info("Rendering %dx%d, %d spp, depth %d, %d tiles on %d worker(s)",
                    self.width, self.height, settings.samples_per_pixel,
                    settings.max_depth, len(tiles), settings.workers)
        start_time = time.time()
        self.accumulation_buffer.fill(0.0)
        self.samples = 0

        if settings.workers == 1:
            for done, (seed, row_start, row_end) in enumerate(tiles, start=1):
                self._check_cancelled(cancel_event)
                self.accumulation_buffer[row_start:row_end] = render_tile(
                    world, camera, background, settings, seed, row_start, row_end)
                logger.debug("Tile %d/%d done (rows %d-%d)", done, len(tiles), row_start, row_end - 1)
        else:
            self._render_parallel(world, camera, background, tiles, cancel_event)

        self.samples = settings.samples_per_pixel
        logger.info("Render finished in %.2fs", time.time() - start_time)
        return self.accumulation_buffer

    def _render_parallel(self, world, camera, background, tiles, cancel_event):
        settings = self.settings
        with ProcessPoolExecutor(max_workers=settings.workers, initializer=_init_worker,
                                 initargs=(world, camera, background, settings)) as pool:
            pending = {pool.submit(_render_tile_in_worker, *tile) for tile in tiles}
            done_count = 0
            try:
                while pending:
                    self._check_cancelled(cancel_event)
                    finished, pending = wait(pending, timeout=0.5, return_when=FIRST_COMPLETED)
                    for future in finished:
                        row_start, block = future.result()
                        self.accumulation_buffer[row_start:row_start + block.shape[0]] = block
                        done_count += 1
                        logger.debug("Tile %d/%d done (rows %d-%d)", done_count, len(tiles),
                                     row_start, row_start + block.shape[0] - 1)
            except BaseException:
                # Running tiles finish; queued ones are dropped.
                for future in pending:
                    future.cancel()
                raise

    @staticmethod
    def _check_cancelled(cancel_event):
        if cancel_event is not None and cancel_event.is_set():
            logger.warning("Render cancelled")
            raise RenderCancelled("Render cancelled before all tiles were finished")

    def to_image(self) -> np.ndarray:
        """Tone-mapped 8-bit copy of the last render."""
        if self.samples == 0:
            raise RuntimeError("Nothing rendered yet. Call render() first.")
        return tone_map(self.accumulation_buffer, self.samples)
