# main.py
import argparse
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from camera.camera import ASPECT_RATIO, DEFAULT_IMAGE_WIDTH, DEFAULT_SAMPLES_PER_PIXEL, Camera
from core.utils import PixelCenter
from scene.scenes import GRADIENT, GRADIENT_SIZE, build_world, render_gradient, scene_names


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a scene to a plain PPM image.")
    parser.add_argument("scene", choices=scene_names(), help="Scene to render")
    parser.add_argument("--width", type=int, default=DEFAULT_IMAGE_WIDTH,
                        help=f"Image width in pixels (default: {DEFAULT_IMAGE_WIDTH})")
    parser.add_argument("--aspect-ratio", type=float, default=ASPECT_RATIO,
                        help="Image width divided by height (default: 16/9)")
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES_PER_PIXEL,
                        help=f"Samples per pixel (default: {DEFAULT_SAMPLES_PER_PIXEL})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for anti-aliasing jitter (default: unseeded)")
    parser.add_argument("--no-jitter", action="store_true",
                        help="Sample every pixel at its center")
    parser.add_argument("--output-dir", type=str, default="output",
                        help="Directory for the rendered image (default: output)")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    log = (lambda *a: None) if args.quiet else print

    try:
        output_dir = Path(args.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / f"{args.scene}.ppm"

        start = time.perf_counter()
        log(f"=== Rendering '{args.scene}' ===")
        if args.scene == GRADIENT:
            log(f"Resolution: {GRADIENT_SIZE}x{GRADIENT_SIZE}")
            with tqdm(total=GRADIENT_SIZE * GRADIENT_SIZE, unit="px", disable=args.quiet) as bar:
                render_gradient(output_path, progress=bar.update)
        else:
            camera = Camera(args.aspect_ratio, args.width, args.samples)
            world = build_world(args.scene)
            rng = PixelCenter() if args.no_jitter else random.Random(args.seed)
            log(f"Resolution: {camera.image_width}x{camera.image_height}")
            log(f"Samples per pixel: {camera.samples_per_pixel}")
            log(f"Objects in world: {len(world)}")
            total = camera.image_width * camera.image_height
            with tqdm(total=total, unit="px", disable=args.quiet) as bar:
                camera.render(world, output_path, rng=rng, progress=bar.update)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log(f"Wrote {output_path} in {time.perf_counter() - start:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
