# camera/camera.py
import math
import random
from typing import Optional
from core.vector import Color, Point, Vector3, lerp
from core.ray import Ray
from core.utils import INFINITY, sample_square
from geometry.hittable import Hittable
from renderer.ppm import MAX_COLOR, PPMImage, ProgressFn

ASPECT_RATIO = 16.0 / 9.0
DEFAULT_IMAGE_WIDTH = 400
DEFAULT_SAMPLES_PER_PIXEL = 100

# Distance from the camera center to the viewport, and viewport height,
# both in world units.
FOCAL_LENGTH = 1.0
VIEWPORT_HEIGHT = 2.0

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def get_height(image_width: int, aspect_ratio: float) -> int:
    """Image height for the given width and aspect ratio, at least 1."""
    return max(1, int(image_width / aspect_ratio))


def background(ray: Ray) -> Color:
    """Vertical white-to-blue sky gradient seen by rays that hit nothing."""
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return lerp(WHITE, SKY_BLUE, a)


class Camera:
    """
    A pinhole camera at the origin looking down -z.

    The viewport sits at FOCAL_LENGTH in front of the camera and is
    VIEWPORT_HEIGHT tall; its width follows the pixel grid so pixels stay
    square. Image rows grow downward while world y grows upward.
    """
    def __init__(self, aspect_ratio: float = ASPECT_RATIO,
                 image_width: int = DEFAULT_IMAGE_WIDTH,
                 samples_per_pixel: int = DEFAULT_SAMPLES_PER_PIXEL):
        if not (aspect_ratio > 0 and math.isfinite(aspect_ratio)):
            raise ValueError(f"aspect_ratio must be a positive number, got {aspect_ratio}")
        if image_width < 1:
            raise ValueError(f"image_width must be at least 1, got {image_width}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")

        self.aspect_ratio = aspect_ratio
        self.image_width = int(image_width)
        self.image_height = get_height(self.image_width, aspect_ratio)
        self.samples_per_pixel = int(samples_per_pixel)
        self.center = Point(0.0, 0.0, 0.0)

        viewport_width = VIEWPORT_HEIGHT * self.image_width / self.image_height

        # Vectors across the horizontal and down the vertical viewport edges.
        viewport_u = Vector3(viewport_width, 0.0, 0.0)
        viewport_v = Vector3(0.0, -VIEWPORT_HEIGHT, 0.0)

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center
                               - Vector3(0.0, 0.0, FOCAL_LENGTH)
                               - viewport_u / 2
                               - viewport_v / 2)
        # Center of pixel (0, 0), half a pixel in from the corner.
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

    def get_ray(self, px: int, py: int, rng) -> Ray:
        """
        Ray from the camera center through a random point inside pixel
        (px, py). rng supplies uniform(a, b) draws for the jitter.
        """
        offset_u, offset_v = sample_square(rng)
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (px + offset_u)
                        + self.pixel_delta_v * (py + offset_v))
        return Ray(self.center, pixel_sample - self.center)

    def ray_color(self, ray: Ray, world: Hittable) -> Color:
        rec = world.hit(ray, 0.0, INFINITY)
        if rec is not None:
            # Map the normal from [-1, 1] to [0, 1] per channel.
            return (rec.normal + WHITE) * 0.5
        return background(ray)

    def pixel_color(self, world: Hittable, px: int, py: int, rng) -> Color:
        """Box-filtered average of samples_per_pixel jittered rays."""
        total = Color(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            total = total + self.ray_color(self.get_ray(px, py, rng), world)
        return total / self.samples_per_pixel

    def render(self, world: Hittable, filename, rng=None,
               progress: Optional[ProgressFn] = None):
        """
        Renders world and writes it to filename as a PPM image.

        rng defaults to a fresh, unseeded random.Random; pass a seeded one for
        reproducible output, or core.utils.PixelCenter to disable jitter.
        """
        if rng is None:
            rng = random.Random()
        image = PPMImage(self.image_width, self.image_height, MAX_COLOR)
        image.write_fn(filename, lambda x, y: self.pixel_color(world, x, y, rng), progress)

    def __repr__(self) -> str:
        return (f"Camera(aspect_ratio={self.aspect_ratio}, image_width={self.image_width}, "
                f"samples_per_pixel={self.samples_per_pixel})")
