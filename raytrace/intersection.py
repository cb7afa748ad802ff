"""Ray intersection tests against spheres, triangles and whole scenes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .scene import Material, Scene, Sphere, Triangle
from .vectors import EPSILON, MAX_RAY_DISTANCE, Ray, Vec3


@dataclass(frozen=True)
class Intersection:
    """What a ray hit and how the surface faces it."""

    pos: Vec3
    normal: Vec3
    view_projection: float
    inside_object: bool
    material: Material
    target: Sphere | Triangle
    distance: float


def intersect_sphere(sphere: Sphere, ray: Ray, limit: float) -> float | None:
    """Distance to the sphere along a unit-direction ray, if nearer than ``limit``."""
    dist = sphere.pos - ray.start
    b = ray.dir.dot(dist)
    d = b * b - dist.dot(dist) + sphere.size * sphere.size
    if d < 0.0:
        return None
    root = math.sqrt(d)
    for t in (b - root, b + root):
        if EPSILON < t < limit:
            return t
    return None


def intersect_triangle(triangle: Triangle, ray: Ray, limit: float) -> float | None:
    """Distance to the triangle along the ray, if nearer than ``limit``."""
    e1 = triangle.p2 - triangle.p1
    e2 = triangle.p3 - triangle.p1
    h = ray.dir.cross(e2)
    det = e1.dot(h)
    # Ray parallel to the triangle's plane.
    if -EPSILON < det < EPSILON:
        return None
    inv_det = 1.0 / det

    s = ray.start - triangle.p1
    u = inv_det * s.dot(h)
    if u < 0.0 or u > 1.0:
        return None

    q = s.cross(e1)
    v = inv_det * q.dot(ray.dir)
    if v < 0.0 or u + v > 1.0:
        return None

    t = inv_det * e2.dot(q)
    if EPSILON < t < limit:
        return t
    return None


def find_intersection(scene: Scene, ray: Ray) -> Intersection | None:
    """The nearest object the ray hits, with the surface response at that point."""
    limit = MAX_RAY_DISTANCE
    target: Sphere | Triangle | None = None

    for sphere in scene.spheres:
        t = intersect_sphere(sphere, ray, limit)
        if t is not None:
            limit, target = t, sphere

    for triangle in scene.triangles:
        t = intersect_triangle(triangle, ray, limit)
        if t is not None:
            limit, target = t, triangle

    if target is None:
        return None

    pos = ray.start + ray.dir * limit
    if isinstance(target, Sphere):
        normal = (pos - target.pos).normalised()
    else:
        normal = target.normal
    material = scene.materials[target.material_id]

    view_projection = ray.dir.dot(normal)
    inside = normal.dot(ray.dir) > 0.0
    if inside:
        normal = -normal

    return Intersection(
        pos=pos,
        normal=normal,
        view_projection=view_projection,
        inside_object=inside,
        material=material,
        target=target,
        distance=limit,
    )