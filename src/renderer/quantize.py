# renderer/quantize.py
import math

import numpy as np
from numba import njit


@njit
def quantize_kernel(framebuffer, max_color, out):
    """
    Maps each float channel c of a (height, width, 3) buffer to
    floor(c * (max_color + 0.999)), clamped into [0, max_color].
    NaN channels become 0.
    """
    scale = max_color + 0.999
    height, width, channels = framebuffer.shape
    for y in range(height):
        for x in range(width):
            for k in range(channels):
                c = framebuffer[y, x, k]
                if c != c:
                    out[y, x, k] = 0
                    continue
                s = c * scale
                if s <= 0.0:
                    out[y, x, k] = 0
                elif s >= max_color:
                    out[y, x, k] = max_color
                else:
                    out[y, x, k] = int(math.floor(s))


def quantize(framebuffer, max_color: int = 255) -> np.ndarray:
    """
    Convert a float framebuffer with colors in [0, 1] to integer channels in
    [0, max_color]. Returns a new int64 array of the same shape.
    """
    framebuffer = np.ascontiguousarray(framebuffer, dtype=np.float64)
    if framebuffer.ndim != 3 or framebuffer.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) framebuffer, got shape {framebuffer.shape}")
    out = np.empty(framebuffer.shape, dtype=np.int64)
    quantize_kernel(framebuffer, int(max_color), out)
    return out
