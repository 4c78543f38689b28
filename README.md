# minirt

Building blocks for a small ray tracer: a reader for `.rt` scene files,
vector and colour arithmetic, camera viewports that generate primary rays,
ray intersection with spheres, planes, squares, triangles and cylinders,
and a writer for 32-bit uncompressed BMP images.

## Installation

```
pip install .
```

## Modules

- `minirt.vectors` – `Vec3` (addition, subtraction, scaling, division,
  `dot`, `cross`, `length`, `normalized`), `Ray` with `at(t)`, and the
  rotations `rotate_x`, `rotate_y`, `rotate_z` and `rotate` (angles in
  degrees; `rotate` applies X, Y, Z in turn and normalises).
- `minirt.colors` – `Color` with channel-wise addition and multiplication,
  scaling, division, `clamped()` (limits channels to 0..1) and
  `to_rgb_int()` (packs into `0xRRGGBB`).
- `minirt.numparse` – `parse_number(text)`, the lenient number reader used
  by the scene format.
- `minirt.scene` – the element classes `Sphere`, `Plane`, `Square`,
  `Triangle`, `Cylinder`, `Light`, `Camera`, `Ambient`, the `Scene` that
  collects them, and `SceneError`.
- `minirt.lineparse` – field-level parsing: `normalize_line`,
  `split_fields`, `parse_vector`, `parse_orientation`, `parse_color`,
  `parse_scalar` and the optional rotation/translation handling
  `transform_camera`, `transform_light`, `transform_object`.
- `minirt.parser` – `check_scene_path`, `parse_line`, `parse_scene` and
  `load_scene`.
- `minirt.camera` – `make_viewport(camera, width, height)` returning a
  `Viewport` whose `ray(i, j)` gives the ray through pixel `(i, j)`, row 0
  at the top.
- `minirt.intersect` – `intersect_sphere`, `intersect_plane`,
  `intersect_square`, `intersect_triangle`, `intersect_cylinder`,
  `intersect`, `closest_hit` and `normal_at`, with `Hit` results.
- `minirt.bmp` – `encode_bmp(pixels, width, height)` and
  `write_bmp(path, pixels, width, height)`; pixels are `0xRRGGBB` integers,
  row-major, top row first.

## Scene format

One element per line; fields are separated by whitespace, and vector or
colour components by commas. Lines that start with anything else are
ignored.

```
R 800 600
A 0.2 255,255,255
c 0,0,-5 0,0,1 70
l 5,5,-5 0.7 255,255,255
sp 0,0,0 1 255,0,0
pl 0,-1,0 0,1,0 200,200,200
sq 0,0,3 0,0,1 2 0,255,0
cy 2,0,0 0,1,0 0,0,255 1 2
tr -1,0,0 1,0,0 0,1,0 255,255,0
```

- `R` resolution (width height), at most once.
- `A` ambient ratio in [0, 1] and colour, at most once.
- `c` camera: position, orientation (components in [-1, 1]), field of view
  in [0, 180], optional rotation (degrees about x, y, z) and translation.
- `l` light: position, brightness in [0, 1], colour, optional translation.
- `sp` sphere: centre, radius, colour, optional translation.
- `pl` plane: point, normal, colour, optional rotation and translation.
- `sq` square: centre, normal, side, colour, optional rotation and translation.
- `cy` cylinder: base, axis, colour, diameter, height, optional rotation and
  translation.
- `tr` triangle: three points, colour, optional translation.

Colour components lie in [0, 255]. A scene must have a resolution, an
ambient light and at least one camera. `load_scene` also requires the file
name to have the form `name.rt`. Every problem raises `SceneError` with a
message describing it. `load_scene` and `parse_scene` accept an optional
`max_resolution=(width, height)` that the resolution is clamped to.

## Example

Write an image showing each object's flat colour where the first camera's
rays hit it:

```python
from minirt.bmp import write_bmp
from minirt.camera import make_viewport
from minirt.intersect import closest_hit
from minirt.parser import load_scene

scene = load_scene("scene.rt")
width, height = int(scene.width), int(scene.height)
viewport = make_viewport(scene.cameras[0], width, height)

pixels = []
for j in range(height):
    for i in range(width):
        hit = closest_hit(scene.objects, viewport.ray(i, j))
        pixels.append(0 if hit is None else (hit.obj.color / 255).clamped().to_rgb_int())

write_bmp("flat.bmp", pixels, width, height)
```

## What this package does not do

There is no lighting or shading step: ambient, diffuse and specular light
and shadows are not computed, so the lights and ambient setting of a scene
are read and checked but not used by anything here. There is also no
command-line program and no window; rendering a scene to an image is left
to code like the example above.