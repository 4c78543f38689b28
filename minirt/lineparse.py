"""Field-level parsing of scene lines: vectors, colours and transforms."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence

from minirt.colors import Color
from minirt.numparse import parse_number
from minirt.scene import (
    Camera,
    Cylinder,
    Light,
    Plane,
    SceneError,
    SceneObject,
    Sphere,
    Square,
    Triangle,
)
from minirt.vectors import Vec3, rotate

_BLANKS = frozenset(" \t\n\v\f\r")


def is_blank(char: str) -> bool:
    """Return whether ``char`` is one of the scene format's blank characters."""
    return char in _BLANKS


def _fix_commas(chars: List[str]) -> None:
    """Fill blanks around commas in place, as the scene reader does."""
    size = len(chars)
    for i in range(size):
        if chars[i] != ",":
            continue
        j = i - 1
        while j >= 0 and is_blank(chars[j]):
            chars[j] = "."
            j -= 1
        j = i + 1
        while j < size and is_blank(chars[j]):
            chars[j] = "0"
            j += 1
        if j < size and chars[j] == "-" and chars[j - 1] != ",":
            chars[j] = "0"
            target = j - i + 1
            if target < size:
                chars[target] = "-"


def normalize_line(line: str) -> str:
    """Prepare a raw scene line for splitting into fields.

    Blanks before a comma become ``.``, blanks after it become ``0``;
    leading blanks are dropped and every other blank becomes a space.
    """
    chars = list(line)
    _fix_commas(chars)
    text = "".join(chars).lstrip("".join(_BLANKS))
    return "".join(" " if is_blank(ch) else ch for ch in text)


def _split(text: str, separator: str) -> List[str]:
    return [part for part in text.split(separator) if part]


def split_fields(line: str) -> List[str]:
    """Split a normalised line on spaces, dropping empty fields."""
    return _split(line, " ")


def _triple(field: str, message: str) -> Vec3:
    parts = _split(field, ",")
    if len(parts) != 3:
        raise SceneError(message)
    return Vec3(*(parse_number(part) for part in parts))


def parse_vector(field: str) -> Vec3:
    """Parse an ``x,y,z`` field."""
    return _triple(field, "The positon should have a X , Y and Z.")


def parse_orientation(field: str) -> Vec3:
    """Parse an ``x,y,z`` field whose components must lie in -1..1."""
    vector = parse_vector(field)
    if any(c < -1 or c > 1 for c in vector):
        raise SceneError("The orientation should be between -1 and 1.")
    return vector


def parse_color(field: str) -> Color:
    """Parse an ``r,g,b`` field with channels in 0..255 (kept unscaled)."""
    parts = _split(field, ",")
    if len(parts) != 3:
        raise SceneError("The color should have a RGB.")
    values = [parse_number(part) for part in parts]
    if any(v < 0 or v > 255 for v in values):
        raise SceneError("The RGB should be between 0 and 255.")
    return Color(*values)


def parse_scalar(
    field: str,
    message: str,
    low: Optional[float] = None,
    high: Optional[float] = None,
) -> float:
    """Parse a single number, raising ``SceneError(message)`` when it is
    out of the inclusive range or the field holds a comma."""
    value = parse_number(field)
    if (
        "," in field
        or (low is not None and value < low)
        or (high is not None and value > high)
    ):
        raise SceneError(message)
    return value


def transform_camera(camera: Camera, fields: Sequence[str]) -> Camera:
    """Apply the optional rotation (field 4) and translation (field 5)."""
    if len(fields) > 4:
        angles = _triple(fields[4], "Please Check the rotation in camera.")
        camera = replace(camera, look_at=rotate(camera.look_at, angles))
        if len(fields) > 5:
            shift = _triple(fields[5], "Please Check the translation in camera.")
            camera = replace(camera, eye=camera.eye + shift)
    return camera


def transform_light(light: Light, fields: Sequence[str]) -> Light:
    """Apply the optional translation in field 4."""
    if len(fields) == 5:
        light = replace(light, position=light.position + parse_vector(fields[4]))
    return light


def _rotate_then_shift(
    obj: SceneObject,
    fields: Sequence[str],
    first: int,
    normal_attr: str,
    point_attr: str,
    name: str,
) -> SceneObject:
    angles = _triple(fields[first], f"Please check the rotation {name}.")
    obj = replace(obj, **{normal_attr: rotate(getattr(obj, normal_attr), angles)})
    if len(fields) > first + 1:
        shift = _triple(fields[first + 1], f"Please check the translation {name}.")
        obj = replace(obj, **{point_attr: getattr(obj, point_attr) + shift})
    return obj


def transform_object(obj: SceneObject, fields: Sequence[str]) -> SceneObject:
    """Apply the optional rotation and translation fields of an object line."""
    count = len(fields)
    match obj:
        case Sphere() if count > 4:
            shift = _triple(fields[4], "Please check the rotation in sphere.")
            return replace(obj, center=obj.center + shift)
        case Cylinder() if count > 6:
            return _rotate_then_shift(
                obj, fields, 6, "normal", "position", "in cylinder"
            )
        case Plane() if count > 4:
            return _rotate_then_shift(obj, fields, 4, "normal", "point", "plane")
        case Square() if count > 5:
            # The square's rotation is read from field 4, its colour field.
            return _rotate_then_shift(obj, fields, 4, "normal", "center", "square")
        case Triangle() if count == 6:
            shift = _triple(fields[5], "Please check the translation triangle.")
            return replace(
                obj,
                first=obj.first + shift,
                second=obj.second + shift,
                third=obj.third + shift,
            )
    return obj