import pytest

from raytrace.colour import Colour
from raytrace.intersection import Intersection, find_intersection
from raytrace.lighting import apply_lighting
from raytrace.render import reflect, refract, render, trace_ray
from raytrace.scene import Light, Material, Scene, Sphere
from raytrace.vectors import Ray, Vec3


def _hit(material, inside=False, normal=Vec3(0.0, 0.0, -1.0), view_projection=-1.0):
    return Intersection(
        pos=Vec3(0.0, 0.0, -1.0),
        normal=normal,
        view_projection=view_projection,
        inside_object=inside,
        material=material,
        target=Sphere(Vec3(), 1.0, 0),
        distance=4.0,
    )


def test_reflect_head_on_reverses_direction():
    view = Ray(Vec3(0.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0))
    result = reflect(view, _hit(Material()))
    assert result.dir == -view.dir
    assert result.start == Vec3(0.0, 0.0, -1.0)


def test_reflect_mirrors_projection():
    direction = Vec3(1.0, 0.0, 1.0).normalised()
    normal = Vec3(0.0, 0.0, -1.0)
    view = Ray(Vec3(), direction)
    hit = _hit(Material(), normal=normal, view_projection=direction.dot(normal))
    result = reflect(view, hit)
    assert result.dir.dot(normal) == pytest.approx(-direction.dot(normal))
    assert result.dir.length() == pytest.approx(1.0)


def test_refract_matching_index_passes_straight():
    direction = Vec3(0.3, 0.0, 1.0).normalised()
    normal = Vec3(0.0, 0.0, -1.0)
    hit = _hit(Material(density=1.0), normal=normal, view_projection=direction.dot(normal))
    ray, index = refract(Ray(Vec3(), direction), hit, 1.0)
    assert index == 1.0
    assert ray.dir.x == pytest.approx(direction.x)
    assert ray.dir.z == pytest.approx(direction.z)


def test_refract_entering_takes_material_density():
    hit = _hit(Material(density=1.5))
    _, index = refract(Ray(Vec3(), Vec3(0.0, 0.0, 1.0)), hit, 1.0)
    assert index == 1.5


def test_refract_leaving_restores_default_index():
    hit = _hit(Material(density=1.5), inside=True)
    _, index = refract(Ray(Vec3(), Vec3(0.0, 0.0, 1.0)), hit, 1.5)
    assert index == 1.0


def test_refract_zero_density_raises():
    with pytest.raises(ValueError):
        refract(Ray(Vec3(), Vec3(0.0, 0.0, 1.0)), _hit(Material(density=0.0)), 1.0)


def _lit_scene():
    material = Material(diffuse=Colour(0.5, 0.5, 0.5))
    sky = Material(diffuse=Colour(0.2, 0.4, 0.6))
    return Scene(
        materials=[material, sky],
        skybox_material_id=1,
        spheres=[Sphere(Vec3(), 1.0, 0)],
        lights=[Light(Vec3(0.0, 0.0, -10.0), Colour(1.0, 1.0, 1.0))],
        exposure=-1.0,
    )


def test_trace_ray_miss_sees_skybox():
    scene = _lit_scene()
    ray = Ray(Vec3(0.0, 5.0, -5.0), Vec3(0.0, 0.0, 1.0))
    assert trace_ray(scene, ray) == Colour(0.2, 0.4, 0.6)


def test_trace_ray_hit_is_lit():
    scene = _lit_scene()
    ray = Ray(Vec3(0.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0))
    expected = apply_lighting(scene, ray, find_intersection(scene, ray))
    assert trace_ray(scene, ray) == expected


def test_trace_ray_from_inside_is_black():
    scene = _lit_scene()
    ray = Ray(Vec3(), Vec3(0.0, 0.0, 1.0))
    assert trace_ray(scene, ray) == Colour(0.0, 0.0, 0.0)


def test_render_empty_scene_fills_with_skybox():
    sky = Colour(0.2, 0.4, 0.6)
    scene = Scene(materials=[Material(diffuse=sky)], exposure=-1.0)
    pixels = render(scene, 4, 2, 1)
    assert pixels == [sky.to_pixel(-1.0)] * 8


def test_render_supersampled_uniform_scene_is_uniform():
    scene = Scene(materials=[Material(diffuse=Colour(0.3, 0.3, 0.3))], exposure=-1.0)
    pixels = render(scene, 4, 4, 2)
    assert len(pixels) == 16
    assert len(set(pixels)) == 1


def test_render_odd_size_pads_with_black():
    sky = Colour(0.5, 0.5, 0.5)
    scene = Scene(materials=[Material(diffuse=sky)], exposure=-1.0)
    pixels = render(scene, 3, 3, 1)
    assert len(pixels) == 9
    assert pixels[:4] == [sky.to_pixel(-1.0)] * 4
    assert pixels[4:] == [0] * 5


def test_render_sphere_in_view_differs_from_background():
    scene = _lit_scene()
    scene.camera_position = Vec3(0.0, 0.0, -5.0)
    scene.camera_rotation = 0.0
    pixels = render(scene, 8, 8, 1)
    background = Colour(0.2, 0.4, 0.6).to_pixel(-1.0)
    assert pixels[0] == background
    assert any(p != background for p in pixels)


def test_render_rejects_zero_samples():
    with pytest.raises(ValueError):
        render(Scene(materials=[Material()]), 2, 2, 0)