# raytrace

A compact ray tracer written in plain Python, with no dependencies outside
the standard library. It reads a text scene description that holds
materials, spheres, triangle models and point lights. It renders the scene
with diffuse and Blinn specular lighting, hard shadows and procedural
textures (checkerboard, circles, wood), and writes the result as a 24-bit
BMP image.

## Installation

```
pip install .
```

To install the test dependencies as well, use `pip install .[test]`.

## Command line

```
raytrace -input scenes/cornell.txt -size 640 480 -samples 2 -output cornell.bmp
```

Options:

- `-size W H`: image width and height. The default is 500 × 300. The
  image may hold at most 2048 × 2048 pixels in total.
- `-samples N`: anti-aliasing samples per pixel axis, so each pixel
  averages N × N rays. The default is 1.
- `-input PATH`: the scene file to render. The default is
  `../Scenes/cornell.txt`.
- `-output PATH`: the BMP file to write. If you leave it out, the name is
  `../Outputs/<scene>_<W>x<H>x<N>_<program>.bmp`.
- `-runs N`: render N times and print the average time taken, in
  milliseconds.
- `-threads N`, `-colourise` and `-blockSize N`: these are accepted but
  have no effect.

The command reports each unknown argument on standard error and then
ignores it. It exits with status 2 in these cases:

- a flag is missing its value
- the size is not positive or is too large
- the samples or runs count is below 1

It exits with status 1 if the scene file cannot be read or is malformed,
or if the image cannot be written.

## Scene files

A scene file is a set of named sections, each holding `Name = value;`
pairs. `//` starts a comment, and all whitespace is ignored.

```
Scene
{
    Version.Major = 1;
    Version.Minor = 5;
    Camera.Position = 0.0, 0.0, -10.0;
    Camera.Rotation = 0.0;
    Camera.FieldOfView = 60.0;
    Exposure = -1.0;
    NumberOfMaterials = 1;
    NumberOfSpheres = 1;
    NumberOfLights = 1;
}
Material0 { Diffuse = 0.8, 0.2, 0.2; Specular = 1.0; Power = 60; }
Sphere0   { Center = 0.0, 0.0, 0.0; Size = 2.0; Material.Id = 0; }
Light0    { Position = 5.0, 5.0, -10.0; Intensity = 1.0; }
```

Version rules:

- The version must be 1.5.
- The field of view must lie strictly between 0 and 189 degrees.

Materials:

- `Type` can be `checkerboard`, `circles` or `wood`. Anything else gives a
  plain diffuse colour.
- A colour value is either a single grey level or three comma-separated
  channels.
- A sphere's `Material.Id` must name an existing material.
- Rays that hit nothing take the diffuse colour of the material named by
  `Skybox.Material.Id`, which is 0 by default.

Triangle models go in `Model0`, `Model1`, … sections. Each such section has
these entries:

- `Triangles`: the number of triangles in the model.
- `Center`: where the model is placed.
- `Size`: the scale applied to the model.
- `Material.Id`: the material the model uses.
- `Triangle0`, `Triangle1`, …: one per triangle, each holding nine
  comma-separated coordinates.

The brightness of a pixel is `1 - exp(colour * Exposure)`. A negative
exposure therefore maps brighter light to brighter pixels.

## Library use

```python
from raytrace.scene import load_scene
from raytrace.render import render
from raytrace.imageio import write_bmp

scene = load_scene("scenes/cornell.txt")
pixels = render(scene, 320, 240, 1)
write_bmp("out.bmp", pixels, 320, 240, 320)
```

### Loading scenes

- `raytrace.scene.load_scene` raises `SceneError` when a file is missing
  or malformed.
- `raytrace.config.Config` is the parser for the file format. It can also
  be built from a string with `Config.from_text`, and it raises
  `ConfigError`.

### Rendering

- `raytrace.render.render` returns a flat list of `width * height` packed
  `0x00BBGGRR` pixels. The rows run from the bottom of the view upwards.
- `raytrace.render.trace_ray` gives the colour seen along a single `Ray`.
- `raytrace.intersection.find_intersection` gives the nearest hit of a ray
  in a scene.
- `raytrace.lighting.apply_lighting` computes the light falling on a hit.

### Writing images

- `raytrace.imageio` has `write_bmp` and `write_tga`, which write files.
- It also has `bmp_bytes` and `tga_bytes`, which return the encoded bytes
  instead.

## Limitations

- `trace_ray` lights only the first surface a ray hits. It does not follow
  reflected or refracted rays. The helpers `raytrace.render.reflect` and
  `raytrace.render.refract` exist, but the renderer does not use them. A
  ray that starts inside an object sees black.
- Rendering runs in a single thread of pure Python, so it is slow for
  large images or high sample counts.
- BMP rows are written without padding. Images whose width is not a
  multiple of four may not open in strict viewers.
- There is no image reading and no preview window. Output goes only to
  BMP (from the command line) or to BMP and TGA (from the library).