# renderer/settings.py
from dataclasses import dataclass
from typing import Optional


@dataclass
class RenderSettings:
    """
    Image and sampling parameters for one render.

    Attributes:
        width, height: Image size in pixels.
        samples_per_pixel: Camera rays averaged per pixel.
        max_depth: Bounce budget per path.
        workers: Worker processes; 1 renders in the calling process.
        tile_rows: Rows per tile handed to a worker.
        seed: Base seed; tile i is rendered with seed + i. None draws one at random.
    """
    width: int = 400
    height: int = 225
    samples_per_pixel: int = 100
    max_depth: int = 50
    workers: int = 1
    tile_rows: int = 16
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ("width", "height", "samples_per_pixel", "max_depth", "workers", "tile_rows"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height
