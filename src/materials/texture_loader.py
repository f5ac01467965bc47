# materials/texture_loader.py
import logging
from pathlib import Path
import numpy as np
from PIL import Image, UnidentifiedImageError
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)

def decode_image(image_path) -> np.ndarray:
    """
    Read an image file with Pillow into a (height, width, 3) uint8 array,
    top row first. Palette, grayscale and alpha images are converted to RGB.

    Raises:
        FileNotFoundError: the path does not exist.
        ValueError: Pillow cannot decode the file.
    """
    path = Path(image_path)
    if not path.exists():
        raise FileNotFoundError(f"Texture file not found: {path}")

    try:
        with Image.open(path) as img:
            rgb = img if img.mode == "RGB" else img.convert("RGB")
            return np.asarray(rgb, dtype=np.uint8).copy()
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Cannot decode texture {path}: {e}") from e

def load_texture(image_path) -> ImageTexture:
    pixels = decode_image(image_path)
    logger.debug("Loaded texture %s (%dx%d)", image_path, pixels.shape[1], pixels.shape[0])
    return ImageTexture(pixels)

def create_image_material(image_path, material_class, **material_params):
    """Build `material_class(texture, **material_params)` around an image texture."""
    return material_class(load_texture(image_path), **material_params)
