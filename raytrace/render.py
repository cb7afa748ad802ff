"""Tracing rays through a scene and rendering it to a pixel buffer."""

from __future__ import annotations

import math

from .colour import Colour
from .intersection import Intersection, find_intersection
from .lighting import apply_lighting
from .scene import Scene
from .vectors import DEFAULT_REFRACTIVE_INDEX, PIOVER180, Ray, Vec3


def reflect(view_ray: Ray, hit: Intersection) -> Ray:
    """The view ray mirrored about the surface normal at the hit point."""
    return Ray(hit.pos, view_ray.dir - hit.normal * hit.view_projection * 2.0)


def refract(view_ray: Ray, hit: Intersection, refractive_index: float) -> tuple[Ray, float]:
    """The view ray bent through the surface, and the refractive index beyond it."""
    new_index = DEFAULT_REFRACTIVE_INDEX if hit.inside_object else hit.material.density
    if new_index == 0.0:
        raise ValueError("material density must be non-zero to refract")
    ratio = refractive_index / new_index

    cos_i = abs(hit.view_projection)
    if cos_i >= 1.0:
        # Ray arrives along the normal.
        cos_t = 1.0
    else:
        sin_t = ratio * math.sqrt(1.0 - cos_i * cos_i)
        # Beyond the critical angle the surface is purely reflective.
        cos_t = 0.0 if sin_t * sin_t >= 1.0 else math.sqrt(1.0 - sin_t * sin_t)

    direction = (view_ray.dir + hit.normal * cos_i) * ratio - hit.normal * cos_t
    return Ray(hit.pos, direction), new_index


def trace_ray(scene: Scene, ray: Ray) -> Colour:
    """The colour seen along a ray.

    The first surface hit is lit directly; a ray starting inside an object
    sees black, and a ray that hits nothing sees the skybox material.
    """
    hit = find_intersection(scene, ray)
    if hit is None:
        return 1.0 * scene.materials[scene.skybox_material_id].diffuse
    if hit.inside_object:
        return Colour()
    return apply_lighting(scene, ray, hit)


def render(scene: Scene, width: int, height: int, samples: int) -> list[int]:
    """Render the scene as ``width * height`` packed 0x00BBGGRR pixels.

    Each pixel averages ``samples * samples`` rays.  Rows run from the
    bottom of the view upward; odd dimensions lose their last row or
    column, and the unused tail of the buffer is left black.
    """
    if samples < 1:
        raise ValueError("samples must be at least 1")
    if width < 0 or height < 0:
        raise ValueError("image size must not be negative")

    dir_step = 1.0 / (0.5 * width / math.tan(PIOVER180 * 0.5 * scene.camera_field_of_view))
    sample_ratio = 1.0 / (samples * samples)
    offsets = [i / samples for i in range(samples)]
    cos_r = math.cos(scene.camera_rotation)
    sin_r = math.sin(scene.camera_rotation)

    pixels: list[int] = []
    for y in range(-(height // 2), height // 2):
        for x in range(-(width // 2), width // 2):
            output = Colour()
            for dx in offsets:
                for dy in offsets:
                    fx = (x + dx) * dir_step
                    fy = (y + dy) * dir_step
                    rotated = Vec3(fx * cos_r - sin_r, fy, fx * sin_r + cos_r)
                    view_ray = Ray(scene.camera_position, rotated.normalised())
                    output = output + sample_ratio * trace_ray(scene, view_ray)
            pixels.append(output.to_pixel(scene.exposure))

    pixels.extend([0] * (width * height - len(pixels)))
    return pixels