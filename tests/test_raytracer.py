"""Tests for the path integrator and the scanline renderer.

Tests cover:
- Sky gradient for escaping rays
- Depth cut-off and absorption returning black
- Attenuation chaining across bounces
- Determinism for a fixed random sequence
- End-to-end render dimensions and pixel range
"""

import random

import numpy as np
import pytest

from core.ray import Ray
from core.vector import Color, Point3, Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.material import Material
from renderer.raytracer import MIN_INTERSECTION_DISTANCE, Renderer, background, ray_color
from renderer.settings import RenderSettings
from main import create_camera


class Absorber(Material):
    def scatter(self, ray_in, rec, rng=random):
        return None


class SkyMirror(Material):
    """Sends every ray straight up with a fixed attenuation."""

    def __init__(self, attenuation):
        self.attenuation = attenuation

    def scatter(self, ray_in, rec, rng=random):
        return Ray(rec.point, Vector3(0.0, 1.0, 0.0)), self.attenuation


def single_sphere_world(material):
    return HittableList([Sphere(Point3(0.0, 0.0, -1.0), 0.5, material)])


def ray_down_z():
    return Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))


class TestBackground:
    def test_straight_up_is_sky_blue(self, forbidden_rng):
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert tuple(ray_color(ray, HittableList(), 10, forbidden_rng)) == (0.5, 0.7, 1.0)

    def test_straight_down_is_white(self, forbidden_rng):
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, -1.0, 0.0))
        assert tuple(ray_color(ray, HittableList(), 10, forbidden_rng)) == (1.0, 1.0, 1.0)

    def test_horizon_is_halfway(self):
        color = background(Ray(Point3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0)))
        assert tuple(color) == pytest.approx((0.75, 0.85, 1.0))

    def test_direction_length_does_not_matter(self):
        a = background(Ray(Point3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 0.0)))
        b = background(Ray(Point3(0.0, 0.0, 0.0), Vector3(10.0, 10.0, 0.0)))
        assert tuple(a) == pytest.approx(tuple(b))


class TestRayColor:
    def test_zero_depth_is_black(self, forbidden_rng):
        world = single_sphere_world(Lambertian(Color(0.5, 0.5, 0.5)))
        assert tuple(ray_color(ray_down_z(), world, 0, forbidden_rng)) == (0.0, 0.0, 0.0)

    def test_zero_depth_is_black_on_miss(self, forbidden_rng):
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert tuple(ray_color(ray, HittableList(), 0, forbidden_rng)) == (0.0, 0.0, 0.0)

    def test_absorbed_ray_is_black(self, forbidden_rng):
        world = single_sphere_world(Absorber())
        assert tuple(ray_color(ray_down_z(), world, 5, forbidden_rng)) == (0.0, 0.0, 0.0)

    def test_attenuation_multiplies_sky(self, forbidden_rng):
        world = single_sphere_world(SkyMirror(Color(0.5, 0.5, 0.5)))
        color = ray_color(ray_down_z(), world, 2, forbidden_rng)
        assert tuple(color) == pytest.approx((0.25, 0.35, 0.5))

    def test_last_bounce_gathers_nothing(self, forbidden_rng):
        """With one bounce left the scattered ray hits the depth limit."""
        world = single_sphere_world(SkyMirror(Color(0.5, 0.5, 0.5)))
        assert tuple(ray_color(ray_down_z(), world, 1, forbidden_rng)) == (0.0, 0.0, 0.0)

    def test_recursion_stops_within_depth(self, center_rng):
        """Inside a diffuse shell every bounce hits again until the budget runs out."""
        shell = HittableList([Sphere(Point3(0.0, 0.0, 0.0), 5.0, Lambertian(Color(0.9, 0.9, 0.9)))])
        calls = []

        class CountingWorld:
            def hit(self, ray, t_min, t_max):
                calls.append(t_min)
                return shell.hit(ray, t_min, t_max)

        color = ray_color(ray_down_z(), CountingWorld(), 7, center_rng)
        assert tuple(color) == (0.0, 0.0, 0.0)
        assert len(calls) == 7
        assert all(t_min == MIN_INTERSECTION_DISTANCE for t_min in calls)

    def test_fixed_sequence_gives_fixed_color(self, sequence_rng):
        world = HittableList([
            Sphere(Point3(0.0, -100.5, -1.0), 100.0, Lambertian(Color(0.8, 0.8, 0.0))),
            Sphere(Point3(0.0, 0.0, -1.0), 0.5, Lambertian(Color(0.1, 0.2, 0.5))),
        ])
        values = [0.13, 0.57, 0.91, 0.42, 0.08, 0.66, 0.29]
        first = ray_color(ray_down_z(), world, 10, sequence_rng(values))
        second = ray_color(ray_down_z(), world, 10, sequence_rng(values))
        assert tuple(first) == tuple(second)


class TestRenderer:
    def test_invalid_settings_rejected(self):
        with pytest.raises(ValueError):
            Renderer(RenderSettings(image_width=1))

    def test_progress_counts_down_scanlines(self, center_rng):
        settings = RenderSettings(image_width=4, aspect_ratio=2.0, samples_per_pixel=1, max_depth=2)
        renderer = Renderer(settings)
        seen = []
        renderer.render(HittableList(), create_camera(settings.aspect_ratio), center_rng, seen.append)
        assert seen == [1, 0]

    def test_top_row_is_bluer_than_bottom_row(self, center_rng):
        """Row 0 of the buffer is the top of the image."""
        settings = RenderSettings(image_width=4, aspect_ratio=1.0, samples_per_pixel=1, max_depth=2)
        from camera.camera import Camera
        camera = Camera(Point3(0.0, 0.0, 0.0), Point3(0.0, 0.0, -1.0), Vector3(0.0, 1.0, 0.0),
                        90.0, 1.0)
        buffer = Renderer(settings).render(HittableList(), camera, center_rng)
        # Red channel fades from 1.0 at the bottom toward 0.5 at the top
        assert buffer[0, 0, 0] < buffer[-1, 0, 0]

    def test_end_to_end_render(self):
        settings = RenderSettings(image_width=8, aspect_ratio=2.0, samples_per_pixel=2, max_depth=5)
        world = HittableList([
            Sphere(Point3(0.0, -100.5, -1.0), 100.0, Lambertian(Color(0.8, 0.8, 0.0))),
            Sphere(Point3(0.0, 0.0, -1.0), 0.5, Lambertian(Color(0.1, 0.2, 0.5))),
        ])
        renderer = Renderer(settings)
        image = renderer.render_image(world, create_camera(settings.aspect_ratio), random.Random(1))

        assert image.shape == (4, 8, 3)
        assert image.dtype == np.uint8
        assert image.min() >= 0
        assert image.max() <= 255
        assert renderer.samples == 2

    def test_render_is_reproducible_with_seed(self):
        settings = RenderSettings(image_width=6, aspect_ratio=2.0, samples_per_pixel=2, max_depth=4)
        world = single_sphere_world(Lambertian(Color(0.5, 0.5, 0.5)))
        camera = create_camera(settings.aspect_ratio)
        a = Renderer(settings).render(world, camera, random.Random(9)).copy()
        b = Renderer(settings).render(world, camera, random.Random(9)).copy()
        np.testing.assert_array_equal(a, b)
