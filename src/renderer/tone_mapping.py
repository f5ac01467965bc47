# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit(cache=False)
def _gamma2_kernel(accumulated, scale, output_image):
    height, width = accumulated.shape[0], accumulated.shape[1]
    for y in range(height):
        for x in range(width):
            for c in range(3):
                value = accumulated[y, x, c] * scale
                # NaN from a degenerate path counts as black
                if value != value or value < 0.0:
                    value = 0.0
                value = math.sqrt(value)
                if value > 0.999:
                    value = 0.999
                output_image[y, x, c] = int(256.0 * value)

def tone_map(accumulated, samples_per_pixel: int):
    """
    Convert per-pixel radiance sums into 8-bit channels.

    Averages over the sample count, applies gamma 2 (square root) and clamps
    to [0, 0.999] before scaling by 256, so every channel lands in [0, 255].

    Args:
        accumulated: (height, width, 3) array of radiance sums.
        samples_per_pixel: Number of samples summed into each pixel.

    Returns:
        (height, width, 3) uint8 array.
    """
    if samples_per_pixel <= 0:
        raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
    accumulated = np.ascontiguousarray(accumulated, dtype=np.float64)
    output_image = np.zeros(accumulated.shape, dtype=np.uint8)
    _gamma2_kernel(accumulated, 1.0 / samples_per_pixel, output_image)
    return output_image
