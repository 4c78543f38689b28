"""Reading scene descriptions into :class:`~minirt.scene.Scene` objects."""

from __future__ import annotations

import os
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from minirt.lineparse import (
    normalize_line,
    parse_color,
    parse_orientation,
    parse_scalar,
    parse_vector,
    split_fields,
    transform_camera,
    transform_light,
    transform_object,
)
from minirt.numparse import parse_number
from minirt.scene import (
    Ambient,
    Camera,
    Cylinder,
    Light,
    Plane,
    Scene,
    SceneError,
    Sphere,
    Square,
    Triangle,
)

Resolution = Optional[Tuple[float, float]]
PathLike = Union[str, "os.PathLike[str]"]


def check_scene_path(path: PathLike) -> str:
    """Check that ``path`` names a ``.rt`` file with a plain ``name.rt`` form.

    Returns the path as a string.
    """
    text = os.fspath(path)
    if len(text) < 3 or not text.endswith(".rt"):
        raise SceneError("The file should end with .rt")
    components = [part for part in text.split("/") if part]
    if components:
        name_parts = [part for part in components[-1].split(".") if part]
        if len(name_parts) != 2:
            raise SceneError("The name file in begin with point.")
    return text


def _check_count(fields: Sequence[str], low: int, high: int, message: str) -> None:
    if not low <= len(fields) <= high:
        raise SceneError(message)


def _parse_resolution(
    scene: Scene, fields: Sequence[str], max_resolution: Resolution
) -> None:
    if scene.width != 0 or scene.height != 0:
        raise SceneError("You can't use the resolution twice in scene.")
    if len(fields) != 3 or "," in fields[0]:
        raise SceneError("The resolution have a width and height.")
    width = parse_number(fields[1])
    height = parse_number(fields[2])
    if width <= 0 or height <= 0:
        raise SceneError("The resolution can't be negative or null")
    if max_resolution is not None:
        max_width, max_height = max_resolution
        width = min(width, max_width)
        height = min(height, max_height)
    scene.width = width
    scene.height = height


def _parse_ambient(scene: Scene, fields: Sequence[str]) -> None:
    if scene.ambient is not None:
        raise SceneError("The ambiant lighting use once in scene.")
    if len(fields) != 3:
        raise SceneError("The ambiant lighting have a color and ratio.")
    ratio = parse_scalar(fields[1], "Check the ambient ratio.", 0, 1)
    scene.ambient = Ambient(ratio=ratio, color=parse_color(fields[2]))


def _parse_light(scene: Scene, fields: Sequence[str]) -> None:
    _check_count(fields, 4, 5, "Check the light scene.")
    ratio = parse_scalar(fields[2], "check the brightnes ratio at light.", 0, 1)
    position = parse_vector(fields[1])
    color = parse_color(fields[3])
    light = Light(position=position, ratio=ratio, color=color)
    scene.add_light(transform_light(light, fields))


def _parse_camera(scene: Scene, fields: Sequence[str]) -> None:
    _check_count(fields, 4, 6, "Please! Check the camera in the scene.")
    eye = parse_vector(fields[1])
    look_at = parse_orientation(fields[2])
    fov = parse_scalar(
        fields[3], "Please! Check the field of view in camera.", 0, 180
    )
    camera = Camera(eye=eye, look_at=look_at, fov=fov)
    scene.add_camera(transform_camera(camera, fields))


def _parse_sphere(scene: Scene, fields: Sequence[str]) -> None:
    _check_count(fields, 4, 5, "Please check the sphere infos in scene.")
    center = parse_vector(fields[1])
    radius = parse_scalar(fields[2], "Check the radius sphere.", low=0)
    color = parse_color(fields[3])
    sphere = Sphere(center=center, radius=radius, color=color)
    scene.add_object(transform_object(sphere, fields))


def _parse_plane(scene: Scene, fields: Sequence[str]) -> None:
    if len(fields) < 4:
        raise SceneError("Check plane line in scene.")
    point = parse_vector(fields[1])
    normal = parse_orientation(fields[2])
    color = parse_color(fields[3])
    plane = Plane(point=point, normal=normal, color=color)
    scene.add_object(transform_object(plane, fields))


def _parse_square(scene: Scene, fields: Sequence[str]) -> None:
    _check_count(fields, 5, 7, "Check the square struct in scene.")
    center = parse_vector(fields[1])
    normal = parse_orientation(fields[2])
    side = parse_scalar(
        fields[3], "Check the square size_side it's mybe negative.", low=0
    )
    color = parse_color(fields[4])
    square = Square(center=center, normal=normal, side=side, color=color)
    scene.add_object(transform_object(square, fields))


def _parse_cylinder(scene: Scene, fields: Sequence[str]) -> None:
    _check_count(fields, 6, 8, "Check the cylinder infos in scene.")
    position = parse_vector(fields[1])
    normal = parse_orientation(fields[2])
    color = parse_color(fields[3])
    diameter = parse_scalar(fields[4], "Check cylinder diameter.", low=0)
    height = parse_scalar(fields[5], "Check cylinder height.", low=0)
    cylinder = Cylinder(
        position=position,
        normal=normal,
        diameter=diameter,
        height=height,
        color=color,
    )
    scene.add_object(transform_object(cylinder, fields))


def _parse_triangle(scene: Scene, fields: Sequence[str]) -> None:
    _check_count(fields, 5, 6, "Check the triangle line.")
    triangle = Triangle(
        first=parse_vector(fields[1]),
        second=parse_vector(fields[2]),
        third=parse_vector(fields[3]),
        color=parse_color(fields[4]),
    )
    scene.add_object(transform_object(triangle, fields))


_HANDLERS: Dict[str, Callable[[Scene, Sequence[str]], None]] = {
    "A": _parse_ambient,
    "c ": _parse_camera,
    "l ": _parse_light,
    "pl": _parse_plane,
    "sp": _parse_sphere,
    "sq": _parse_square,
    "cy": _parse_cylinder,
    "tr": _parse_triangle,
}


def parse_line(scene: Scene, line: str, max_resolution: Resolution = None) -> None:
    """Parse one scene line into ``scene``; unrecognised lines are ignored.

    ``max_resolution`` is an optional ``(width, height)`` the resolution is
    clamped to.
    """
    text = normalize_line(line)
    if text.startswith("R"):
        _parse_resolution(scene, split_fields(text), max_resolution)
        return
    handler = _HANDLERS.get(text[:2]) or _HANDLERS.get(text[:1])
    if handler is not None:
        handler(scene, split_fields(text))


def parse_scene(text: str, max_resolution: Resolution = None) -> Scene:
    """Parse a whole scene description and check it is complete."""
    scene = Scene()
    lines: List[str] = text.split("\n")
    for line in lines:
        parse_line(scene, line, max_resolution)
    return scene.validate()


def load_scene(path: PathLike, max_resolution: Resolution = None) -> Scene:
    """Read and parse the ``.rt`` scene file at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape") as handle:
            text = handle.read()
    except OSError as exc:
        raise SceneError(exc.strerror or str(exc)) from exc
    check_scene_path(path)
    return parse_scene(text, max_resolution)