"""Scene objects and loading of scene description files."""

from __future__ import annotations

import enum
import math
import os
from dataclasses import dataclass, field

from .colour import Colour
from .config import Config, ConfigError
from .vectors import PIOVER180, Vec3

SCENE_VERSION_MAJOR = 1
SCENE_VERSION_MINOR = 5

_NAN_VECTOR = Vec3(math.nan, math.nan, math.nan)


class SceneError(ValueError):
    """Raised when a scene file is missing, malformed or inconsistent."""


class MaterialType(enum.Enum):
    """How a material colours a surface."""

    GOURAUD = "gouraud"
    CHECKERBOARD = "checkerboard"
    CIRCLES = "circles"
    WOOD = "wood"


@dataclass(frozen=True)
class Material:
    """Surface properties shared by the objects that use it."""

    kind: MaterialType = MaterialType.GOURAUD
    diffuse: Colour = Colour()
    diffuse2: Colour = Colour()
    offset: Vec3 = Vec3()
    size: float = 0.0
    specular: Colour = Colour()
    power: float = 0.0
    reflection: float = 0.0
    refraction: float = 0.0
    density: float = 0.0


@dataclass(frozen=True)
class Sphere:
    pos: Vec3
    size: float
    material_id: int = 0


@dataclass(frozen=True)
class Light:
    pos: Vec3
    intensity: Colour


@dataclass(frozen=True)
class Triangle:
    p1: Vec3
    p2: Vec3
    p3: Vec3
    normal: Vec3
    material_id: int = 0


@dataclass
class Scene:
    """A complete static scene: camera settings and the objects in view."""

    camera_position: Vec3 = Vec3()
    camera_rotation: float = 0.0
    camera_field_of_view: float = 45.0
    exposure: float = 1.0
    skybox_material_id: int = 0
    materials: list[Material] = field(default_factory=list)
    spheres: list[Sphere] = field(default_factory=list)
    triangles: list[Triangle] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)


_MATERIAL_TYPES = {
    "checkerboard": MaterialType.CHECKERBOARD,
    "wood": MaterialType.WOOD,
    "circles": MaterialType.CIRCLES,
}


def _unit_or_nan(vector: Vec3) -> Vec3:
    """Normalise, giving NaN components for a zero-length vector."""
    if vector.length_squared() == 0.0:
        return _NAN_VECTOR
    return vector.normalised()


def read_material(config: Config) -> Material:
    """Read a material from the config's current section."""
    return Material(
        kind=_MATERIAL_TYPES.get(config.get_string("Type", ""), MaterialType.GOURAUD),
        size=config.get_float("Size", 0.0),
        offset=config.get_vector("Offset", Vec3()),
        diffuse=config.get_float_or_colour("Diffuse"),
        diffuse2=config.get_float_or_colour("Diffuse2"),
        reflection=config.get_float("Reflection", 0.0),
        refraction=config.get_float("Refraction", 0.0),
        density=config.get_float("Density", 0.0),
        specular=config.get_float_or_colour("Specular"),
        power=config.get_float("Power", 0.0),
    )


def read_model(config: Config) -> list[Triangle]:
    """Read the triangles of a model from the config's current section.

    Each triangle's normal is taken from its unscaled corners; the corners
    are then scaled by ``Size`` and moved by ``Center``.
    """
    offset = config.get_vector("Center", Vec3())
    scale = config.get_float("Size", 1.0)
    count = config.get_int("Triangles", 0)
    material_id = config.get_int("Material.Id", 0)
    zero = (Vec3(), Vec3(), Vec3())

    triangles = []
    for index in range(count):
        p1, p2, p3 = config.get_triangle(f"Triangle{index}", zero)
        normal = _unit_or_nan((p2 - p1).cross(p3 - p1))
        triangles.append(
            Triangle(
                p1=p1 * scale + offset,
                p2=p2 * scale + offset,
                p3=p3 * scale + offset,
                normal=normal,
                material_id=material_id,
            )
        )
    return triangles


def read_sphere(config: Config, num_materials: int) -> Sphere:
    """Read a sphere from the config's current section, checking its material id."""
    sphere = Sphere(
        pos=config.get_vector("Center", Vec3()),
        size=config.get_float("Size", 0.0),
        material_id=config.get_int("Material.Id", 0),
    )
    if not 0 <= sphere.material_id < num_materials:
        raise SceneError("Malformed Scene file: Sphere Material Id not valid.")
    return sphere


def read_light(config: Config) -> Light:
    """Read a light from the config's current section."""
    return Light(
        pos=config.get_vector("Position", Vec3()),
        intensity=config.get_float_or_colour("Intensity"),
    )


def _enter(config: Config, section: str, kind: str) -> None:
    try:
        config.set_section(section)
    except ConfigError as exc:
        raise SceneError(f"Malformed Scene file: Missing {kind} section.") from exc


def _count(config: Config, name: str) -> int:
    value = config.get_int(name, 0)
    if value < 0:
        raise SceneError(f"Malformed Scene file: negative {name}.")
    return value


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read a scene description file."""
    try:
        config = Config(path)
        config.set_section("Scene")
    except ConfigError as exc:
        raise SceneError("Malformed Scene file: No Scene section.") from exc

    major = config.get_int("Version.Major", 0)
    minor = config.get_int("Version.Minor", 0)
    if major != SCENE_VERSION_MAJOR or minor != SCENE_VERSION_MINOR:
        raise SceneError("Malformed Scene file: Wrong scene file version.")

    scene = Scene()
    scene.skybox_material_id = config.get_int("Skybox.Material.Id", 0)
    scene.camera_position = config.get_vector("Camera.Position", Vec3())
    scene.camera_rotation = -config.get_float("Camera.Rotation", 45.0) * PIOVER180
    scene.camera_field_of_view = config.get_float("Camera.FieldOfView", 45.0)
    if not 0.0 < scene.camera_field_of_view < 189.0:
        raise SceneError("Malformed Scene file: Out of range FOV.")
    scene.exposure = config.get_float("Exposure", 1.0)

    num_materials = _count(config, "NumberOfMaterials")
    num_spheres = _count(config, "NumberOfSpheres")
    num_lights = _count(config, "NumberOfLights")
    num_models = _count(config, "NumberOfModels")

    # Every model section must exist before anything else is read.
    for index in range(num_models):
        _enter(config, f"Model{index}", "Model")

    for index in range(num_materials):
        _enter(config, f"Material{index}", "Material")
        scene.materials.append(read_material(config))

    for index in range(num_models):
        _enter(config, f"Model{index}", "Model")
        scene.triangles.extend(read_model(config))

    for index in range(num_spheres):
        _enter(config, f"Sphere{index}", "Sphere")
        scene.spheres.append(read_sphere(config, num_materials))

    for index in range(num_lights):
        _enter(config, f"Light{index}", "Light")
        scene.lights.append(read_light(config))

    return scene