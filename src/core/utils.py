# core/utils.py
"""
Monte Carlo sampling helpers.

Every sampler takes the random source explicitly. Any object with a
``random()`` method returning uniform floats in [0, 1) works; the
``random`` module itself is the default.
"""
import random
from core.vector import Vector3

def random_double(rng=random, min: float = 0.0, max: float = 1.0) -> float:
    """
    Returns a random float in [min, max).
    """
    return min + (max - min) * rng.random()

def random_vector(rng=random, min: float = 0.0, max: float = 1.0) -> Vector3:
    x = random_double(rng, min, max)
    y = random_double(rng, min, max)
    z = random_double(rng, min, max)
    return Vector3(x, y, z)

def random_in_unit_disk(rng=random) -> Vector3:
    """
    Returns a random point inside the unit disk in the z=0 plane.
    """
    while True:
        x = random_double(rng, -1, 1)
        y = random_double(rng, -1, 1)
        p = Vector3(x, y, 0)
        if p.length_squared() < 1.0:
            return p

def random_in_unit_sphere(rng=random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = random_vector(rng, -1, 1)
        if p.length_squared() < 1.0:
            return p

def random_unit_vector(rng=random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def random_in_hemisphere(normal: Vector3, rng=random) -> Vector3:
    """
    Returns a random point in the unit sphere on the same side as normal.
    """
    in_unit_sphere = random_in_unit_sphere(rng)
    if in_unit_sphere.dot(normal) > 0.0:
        return in_unit_sphere
    return -in_unit_sphere

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
