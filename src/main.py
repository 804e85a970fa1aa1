# main.py
import argparse
import random
import sys
import time
import traceback
from core.vector import Color, Point3, Vector3
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from renderer.settings import QUALITY_LEVELS, RenderSettings
from renderer.raytracer import Renderer
from renderer.image_output import save_image, write_ppm


def log(message: str = "") -> None:
    # Diagnostics go to stderr, stdout may carry the image itself.
    print(message, file=sys.stderr)


def create_world() -> HittableList:
    """
    Ground, a diffuse center sphere, a hollow glass sphere on the left
    and a polished gold sphere on the right.
    """
    world = HittableList()

    material_ground = Lambertian(Color(0.8, 0.8, 0.0))
    material_center = Lambertian(Color(0.1, 0.2, 0.5))
    material_left = Dielectric(1.5)
    material_right = Metal(Color(0.8, 0.6, 0.2), 0.0)

    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, material_ground))
    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, material_center))
    # Negative inner radius makes the glass sphere a thin hollow shell
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, material_left))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), -0.45, material_left))
    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, material_right))
    return world


def create_camera(aspect_ratio: float) -> Camera:
    look_from = Point3(3.0, 3.0, 2.0)
    look_at = Point3(0.0, 0.0, -1.0)
    dist_to_focus = (look_from - look_at).length()
    return Camera(
        look_from=look_from,
        look_at=look_at,
        vup=Vector3(0.0, 1.0, 0.0),
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=2.0,
        focus_dist=dist_to_focus,
    )


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the demo sphere scene with a Monte Carlo path tracer.",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--quality",
        choices=sorted(QUALITY_LEVELS),
        default="final",
        help="Sample/bounce preset (default: final)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=None,
        help="Samples per pixel, overrides the quality preset",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum bounces per path, overrides the quality preset",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random number generator",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file (.ppm, .png, ...); plain PPM on stdout if omitted",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the finished render in a window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> RenderSettings:
    overrides = {"image_width": args.width}
    if args.samples is not None:
        overrides["samples_per_pixel"] = args.samples
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    return RenderSettings.from_quality(args.quality, **overrides).validate()


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        settings = build_settings(args)
        rng = random.Random(args.seed)

        world = create_world()
        camera = create_camera(settings.aspect_ratio)
        renderer = Renderer(settings)

        progress = None
        if not args.quiet:
            log("=== Rendering ===")
            log(f"Resolution: {settings.image_width}x{settings.image_height}")
            log(f"Quality settings: {args.quality}")
            log(f"Samples per pixel: {settings.samples_per_pixel}")
            log(f"Max bounces: {settings.max_depth}")
            log(f"Objects: {len(world)}")

            def progress(remaining: int) -> None:
                log(f"Scanlines remaining: {remaining}")

        start = time.perf_counter()
        image = renderer.render_image(world, camera, rng, progress)
        elapsed = time.perf_counter() - start

        if args.output:
            save_image(image, args.output)
        else:
            write_ppm(image, sys.stdout)
            sys.stdout.flush()

        if not args.quiet:
            if args.output:
                log(f"Saved render to {args.output}")
            log(f"Render time: {elapsed:.2f}s")
            log("Done")

        if args.preview:
            from renderer.preview import show_preview
            show_preview(image)
    except Exception as e:
        log(f"Error during execution: {e}")
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
