# camera/camera.py
import math
import random
from core.vector import Point3, Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    Look-at camera with a thin lens for depth of field.

    vfov is the vertical field of view in degrees. Objects at focus_dist
    from look_from are in perfect focus; aperture sets the lens diameter
    and therefore the strength of the defocus blur.
    """
    def __init__(self, look_from: Point3, look_at: Point3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0, focus_dist: float = 1.0):
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0

        theta = math.radians(vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height

        # Orthonormal frame; the camera looks down -w
        self.w = (look_from - look_at).normalize()
        self.u = vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = look_from
        # Scale by focus distance so the viewport lies on the focus plane
        self.horizontal = self.u * (viewport_width * focus_dist)
        self.vertical = self.v * (viewport_height * focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * focus_dist)

    def get_ray(self, s: float, t: float, rng=random) -> Ray:
        """Generates a ray through viewport coordinates (s, t) with depth of field."""
        target = (self.lower_left_corner +
                  self.horizontal * s +
                  self.vertical * t)
        if self.lens_radius <= 0:
            return Ray(self.origin, target - self.origin)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        return Ray(ray_origin, target - ray_origin)

    def __repr__(self) -> str:
        return (f"Camera(origin={self.origin}, vfov={self.vfov}, "
                f"aperture={self.aperture}, focus_dist={self.focus_dist})")
