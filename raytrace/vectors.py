"""Three-component vectors, rays and the numeric constants of the tracer."""

from __future__ import annotations

import math
from dataclasses import dataclass

MAX_WIDTH = 2048
MAX_HEIGHT = 2048

PI = math.pi
PIOVER180 = math.pi / 180.0

# Keeps a ray from re-hitting the surface it has just left.
EPSILON = 0.01

MAX_RAY_DISTANCE = 2000000.0
MAX_RAYS_CAST = 10
DEFAULT_REFRACTIVE_INDEX = 1.0


@dataclass(frozen=True)
class Vec3:
    """A point or a direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self * scalar

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Vector product with another vector."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalised(self) -> Vec3:
        """The vector scaled to unit length."""
        return self * (1.0 / math.sqrt(self.length_squared()))


@dataclass(frozen=True)
class Ray:
    """A ray cast from a starting point in a direction."""

    start: Vec3
    dir: Vec3