"""Procedural surface textures."""

from __future__ import annotations

import math

from .colour import Colour
from .scene import Material, MaterialType
from .vectors import Vec3


def _local(material: Material, position: Vec3) -> Vec3:
    return (position - material.offset) / material.size


def _pick(material: Material, which: int) -> Colour:
    return material.diffuse if which & 1 else material.diffuse2


def checkerboard(material: Material, position: Vec3) -> Colour:
    """Alternate the two diffuse colours over a 3D grid of cubes."""
    p = _local(material, position)
    return _pick(material, math.floor(p.x) + math.floor(p.y) + math.floor(p.z))


def circles(material: Material, position: Vec3) -> Colour:
    """Alternate the two diffuse colours over concentric spherical shells."""
    p = _local(material, position)
    return _pick(material, math.floor(p.length()))


def wood(material: Material, position: Vec3) -> Colour:
    """Alternate the two diffuse colours over distorted shells, like wood grain."""
    p = _local(material, position)
    squiggled = Vec3(
        p.x * math.cos(p.y * 0.996) * math.sin(p.z * 1.023),
        math.cos(p.x) * p.y * math.sin(p.z * 1.211),
        math.cos(p.x * 1.473) * math.cos(p.y * 0.795) * p.z,
    )
    return _pick(material, math.floor(squiggled.length()))


def surface_colour(material: Material, position: Vec3) -> Colour:
    """The diffuse colour of a material at a point, by its texture type."""
    if material.kind is MaterialType.CHECKERBOARD:
        return checkerboard(material, position)
    if material.kind is MaterialType.CIRCLES:
        return circles(material, position)
    if material.kind is MaterialType.WOOD:
        return wood(material, position)
    return material.diffuse