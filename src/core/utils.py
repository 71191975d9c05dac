# core/utils.py
import math
from typing import Tuple

INFINITY = math.inf


def sample_square(rng) -> Tuple[float, float]:
    """
    Returns a random (dx, dy) offset inside the unit square centered on the
    origin, i.e. each component in [-0.5, 0.5].

    rng is anything with a random.Random-style uniform(a, b) method.
    """
    return rng.uniform(-0.5, 0.5), rng.uniform(-0.5, 0.5)


class PixelCenter:
    """
    Stand-in random source whose draws always land on the middle of the
    requested interval. Passing it to the camera turns jitter off so every
    sample goes through the pixel center.
    """
    def uniform(self, a: float, b: float) -> float:
        return (a + b) / 2.0

    def __repr__(self) -> str:
        return "PixelCenter()"
