# renderer/image_output.py
import logging
from pathlib import Path
from typing import TextIO, Union
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def write_ppm(out: Union[str, Path, TextIO], pixels: np.ndarray) -> None:
    """
    Write 8-bit pixels as a plain-text P3 image.

    Args:
        out: Path or text stream to write to.
        pixels: (height, width, 3) array, top row first.
    """
    if isinstance(out, (str, Path)):
        with open(out, "w", encoding="ascii") as stream:
            write_ppm(stream, pixels)
        return

    height, width = pixels.shape[0], pixels.shape[1]
    out.write(f"P3\n{width} {height}\n255\n")
    for row in pixels:
        out.write("".join(f"{int(r)} {int(g)} {int(b)}\n" for r, g, b in row[:, :3]))

def save_image(path: Union[str, Path], pixels: np.ndarray) -> None:
    """
    Save 8-bit pixels; `.ppm` writes the P3 text format, any other
    extension is encoded by Pillow.
    """
    path = Path(path)
    if path.suffix.lower() == ".ppm":
        write_ppm(path, pixels)
    else:
        Image.fromarray(np.ascontiguousarray(pixels[:, :, :3], dtype=np.uint8)).save(path)
    logger.info("Saved %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
