# scene/scenes.py
from typing import Callable, Dict, List, Optional
from core.vector import Color, Point
from geometry.sphere import Sphere
from geometry.world import HittableList
from renderer.ppm import MAX_COLOR, PPMImage, ProgressFn

GRADIENT = "gradient"
GRADIENT_SIZE = 256


def gradient_color(width: int, height: int) -> Callable[[int, int], Color]:
    """
    Test pattern: green grows left to right, blue grows top to bottom.
    """
    def color(x: int, y: int) -> Color:
        g = x / (width - 1) if width > 1 else 0.0
        b = y / (height - 1) if height > 1 else 0.0
        return Color(0.0, g, b)
    return color


def render_gradient(filename, width: int = GRADIENT_SIZE, height: int = GRADIENT_SIZE,
                    progress: Optional[ProgressFn] = None):
    """Writes the gradient test pattern straight through the image writer."""
    image = PPMImage(width, height, MAX_COLOR)
    image.write_fn(filename, gradient_color(width, height), progress)


def sky_world() -> HittableList:
    """Nothing to hit: only the background gradient shows."""
    return HittableList()


def spheres_world() -> HittableList:
    """A small sphere resting on a large ground sphere."""
    world = HittableList()
    world.add(Sphere(Point(0.0, 0.0, -1.0), 0.5))
    world.add(Sphere(Point(0.0, -100.5, -1.0), 100.0))
    return world


# Scenes rendered through the camera.
SCENES: Dict[str, Callable[[], HittableList]] = {
    "sky": sky_world,
    "spheres": spheres_world,
}


def scene_names() -> List[str]:
    return [GRADIENT] + sorted(SCENES)


def build_world(name: str) -> HittableList:
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene '{name}', expected one of {', '.join(sorted(SCENES))}") from None
    return builder()
