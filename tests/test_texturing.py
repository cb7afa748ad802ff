import pytest

from raytrace.colour import Colour
from raytrace.scene import Material, MaterialType
from raytrace.texturing import checkerboard, circles, surface_colour, wood
from raytrace.vectors import Vec3

RED = Colour(1.0, 0.0, 0.0)
BLUE = Colour(0.0, 0.0, 1.0)


def material(kind=MaterialType.CHECKERBOARD, size=1.0, offset=Vec3()):
    return Material(kind=kind, diffuse=RED, diffuse2=BLUE, size=size, offset=offset)


@pytest.mark.parametrize(
    "position, expected",
    [
        (Vec3(0.5, 0.5, 0.5), BLUE),
        (Vec3(1.5, 0.5, 0.5), RED),
        (Vec3(1.5, 1.5, 0.5), BLUE),
        (Vec3(-0.5, 0.5, 0.5), RED),
        (Vec3(-0.5, -0.5, 0.5), BLUE),
    ],
)
def test_checkerboard(position, expected):
    assert checkerboard(material(), position) == expected


def test_checkerboard_offset_and_size():
    shifted = material(offset=Vec3(5.0, 0.0, 0.0))
    assert checkerboard(shifted, Vec3(5.5, 0.5, 0.5)) == BLUE
    scaled = material(size=2.0)
    assert checkerboard(scaled, Vec3(1.5, 0.5, 0.5)) == BLUE


@pytest.mark.parametrize(
    "position, expected",
    [
        (Vec3(0.5, 0.0, 0.0), BLUE),
        (Vec3(1.5, 0.0, 0.0), RED),
        (Vec3(0.0, -2.5, 0.0), BLUE),
    ],
)
def test_circles(position, expected):
    assert circles(material(MaterialType.CIRCLES), position) == expected


def test_wood_flat_along_x_axis():
    mat = material(MaterialType.WOOD)
    for x in (0.0, 1.7, 3.2, -4.4):
        assert wood(mat, Vec3(x, 0.0, 0.0)) == BLUE


def test_wood_along_z_axis():
    mat = material(MaterialType.WOOD)
    assert wood(mat, Vec3(0.0, 0.0, 1.5)) == RED
    assert wood(mat, Vec3(0.0, 0.0, 0.5)) == BLUE


def test_wood_only_uses_material_colours():
    mat = material(MaterialType.WOOD)
    for i in range(20):
        point = Vec3(i * 0.37, i * -0.53, i * 0.71)
        assert wood(mat, point) in (RED, BLUE)


def test_surface_colour_gouraud_is_diffuse():
    mat = material(MaterialType.GOURAUD, size=0.0)
    assert surface_colour(mat, Vec3(1.5, 0.5, 0.5)) == RED


@pytest.mark.parametrize(
    "kind, texture",
    [
        (MaterialType.CHECKERBOARD, checkerboard),
        (MaterialType.CIRCLES, circles),
        (MaterialType.WOOD, wood),
    ],
)
def test_surface_colour_dispatch(kind, texture):
    mat = material(kind)
    for point in (Vec3(0.5, 0.5, 0.5), Vec3(1.5, 0.2, 2.5), Vec3(-1.2, 0.7, 0.3)):
        assert surface_colour(mat, point) == texture(mat, point)