"""Diffuse and Blinn specular lighting with hard shadows."""

from __future__ import annotations

import math

from .colour import Colour
from .intersection import Intersection, intersect_sphere, intersect_triangle
from .scene import Light, Scene
from .texturing import surface_colour
from .vectors import Ray


def _power(base: float, exponent: float) -> float:
    """``base ** exponent`` that saturates to infinity instead of raising."""
    try:
        return base ** exponent
    except (OverflowError, ZeroDivisionError):
        return math.inf


def in_shadow(scene: Scene, light_ray: Ray, light_distance: float) -> bool:
    """Whether any object lies on the light ray before the light is reached."""
    if any(intersect_sphere(s, light_ray, light_distance) is not None for s in scene.spheres):
        return True
    return any(
        intersect_triangle(t, light_ray, light_distance) is not None for t in scene.triangles
    )


def diffuse(light_ray: Ray, light: Light, hit: Intersection) -> Colour:
    """Lambertian contribution of one light, using the material's texture."""
    colour = surface_colour(hit.material, hit.pos)
    lambert = light_ray.dir.dot(hit.normal)
    return lambert * light.intensity * colour


def specular(
    light_ray: Ray, light: Light, light_projection: float, view_ray: Ray, hit: Intersection
) -> Colour:
    """Blinn specular contribution of one light."""
    blinn_dir = light_ray.dir - view_ray.dir
    length_squared = blinn_dir.length_squared()
    inverse_length = math.inf if length_squared == 0.0 else 1.0 / math.sqrt(length_squared)
    blinn = inverse_length * max(light_projection - hit.view_projection, 0.0)
    blinn = _power(blinn, hit.material.power)
    return blinn * hit.material.specular * light.intensity


def apply_lighting(scene: Scene, view_ray: Ray, hit: Intersection) -> Colour:
    """Sum the diffuse and specular light reaching a point from every unshadowed light."""
    output = Colour()
    for light in scene.lights:
        direction = light.pos - hit.pos
        facing = direction.dot(hit.normal)
        # The light is behind the surface.
        if facing <= 0.0:
            continue

        light_distance = math.sqrt(direction.length_squared())
        inverse_distance = 1.0 / light_distance
        light_projection = inverse_distance * facing
        light_ray = Ray(hit.pos, direction * inverse_distance)

        if not in_shadow(scene, light_ray, light_distance):
            output = output + diffuse(light_ray, light, hit)
            output = output + specular(light_ray, light, light_projection, view_ray, hit)
    return output