# renderer/raytracer.py
import random
from typing import Callable, Optional
import numpy as np
from core.ray import Ray
from core.vector import Color
from geometry.hittable import Hittable
from renderer.settings import RenderSettings
from renderer.tone_mapping import to_display

# Quick hack to avoid floating point error causing self intersections
MIN_INTERSECTION_DISTANCE = 1e-4
INFINITY = float('inf')

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def background(ray: Ray) -> Color:
    """
    Vertical gradient sky, white at the bottom and blue at the top.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - t) * WHITE + t * SKY_BLUE


def ray_color(ray: Ray, world: Hittable, depth: int, rng=random,
              t_min: float = MIN_INTERSECTION_DISTANCE) -> Color:
    """
    Returns the color seen along the ray. If the ray hits an object, the material
    scatter is computed recursively up to 'depth' bounces.
    """
    if depth <= 0:
        return BLACK  # Bounce budget exhausted, no more light is gathered.

    rec = world.hit(ray, t_min, INFINITY)
    if rec is None:
        return background(ray)

    scatter_result = rec.material.scatter(ray, rec, rng)
    if scatter_result is None:
        return BLACK
    scattered, attenuation = scatter_result
    return attenuation * ray_color(scattered, world, depth - 1, rng, t_min)


class Renderer:
    """
    Single-threaded scanline renderer.

    Sums samples_per_pixel jittered camera samples into a linear radiance
    accumulation buffer of shape (height, width, 3) where row 0 is the
    top of the image.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings.validate()
        self.width = settings.image_width
        self.height = settings.image_height
        self.accumulation_buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        self.samples = 0

    def reset_accumulation(self):
        self.accumulation_buffer.fill(0.0)
        self.samples = 0

    def render_pixel(self, i: int, j: int, world: Hittable, camera, rng=random) -> Color:
        settings = self.settings
        pixel_color = Color(0.0, 0.0, 0.0)
        for _ in range(settings.samples_per_pixel):
            u = (i + rng.random()) / (self.width - 1)
            v = (j + rng.random()) / (self.height - 1)
            ray = camera.get_ray(u, v, rng)
            pixel_color = pixel_color + ray_color(ray, world, settings.max_depth, rng,
                                                  settings.min_hit_distance)
        return pixel_color

    def render(self, world: Hittable, camera, rng=random,
               progress: Optional[Callable[[int], None]] = None) -> np.ndarray:
        """
        Render the whole image and return the accumulation buffer.

        Scanlines are traced from the top of the viewport (j = height - 1)
        down to the bottom. progress, if given, is called before each
        scanline with the number of scanlines remaining.
        """
        self.reset_accumulation()
        for j in range(self.height - 1, -1, -1):
            if progress is not None:
                progress(j)
            row = self.height - 1 - j
            for i in range(self.width):
                pixel_color = self.render_pixel(i, j, world, camera, rng)
                self.accumulation_buffer[row, i] = (pixel_color.x, pixel_color.y, pixel_color.z)
        self.samples = self.settings.samples_per_pixel
        return self.accumulation_buffer

    def render_image(self, world: Hittable, camera, rng=random,
                     progress: Optional[Callable[[int], None]] = None) -> np.ndarray:
        """
        Render and convert to a gamma-corrected (height, width, 3) uint8 image.
        """
        accumulated = self.render(world, camera, rng, progress)
        return to_display(accumulated, self.samples)
