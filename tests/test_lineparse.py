import re

import pytest

from minirt.colors import Color
from minirt.lineparse import (
    is_blank,
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
from minirt.scene import (
    Camera,
    Cylinder,
    Light,
    Plane,
    SceneError,
    Sphere,
    Square,
    Triangle,
)
from minirt.vectors import Vec3, rotate

RED = Color(255, 0, 0)


def _close(a, b):
    return all(abs(p - q) < 1e-9 for p, q in zip(a, b))


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_blank_characters(char):
    assert is_blank(char) is True


@pytest.mark.parametrize("char", ["a", ",", "-", "0", ""])
def test_non_blank_characters(char):
    assert is_blank(char) is False


def test_normalize_strips_leading_and_replaces_blanks():
    out = normalize_line(" \t sp\t0,0,0  1")
    assert out.startswith("sp")
    assert not any(ch in out for ch in "\t\n\v\f\r")
    assert split_fields(out) == ["sp", "0,0,0", "1"]


def test_normalize_blank_before_comma_becomes_point():
    assert normalize_line("1 ,2") == "1.,2"


def test_normalize_blank_after_comma_becomes_zero():
    assert normalize_line("1, 3") == "1,03"


def test_normalize_minus_after_blank_is_moved():
    assert normalize_line("sp 0, -1,2") == "sp -,001,2"


def test_normalize_keeps_plain_line():
    line = "sp 0,0,20 5 255,0,0"
    assert normalize_line(line) == line


def test_split_fields_drops_empty():
    assert split_fields("a  b   c") == ["a", "b", "c"]


def test_parse_vector():
    assert parse_vector("1,-2.5,3") == Vec3(1, -2.5, 3)


@pytest.mark.parametrize("field", ["1,2", "1,2,3,4", ""])
def test_parse_vector_wrong_count(field):
    with pytest.raises(SceneError, match=re.escape("The positon should have a X , Y and Z.")):
        parse_vector(field)


def test_parse_orientation_in_range():
    assert parse_orientation("0,-1,1") == Vec3(0, -1, 1)


def test_parse_orientation_out_of_range():
    with pytest.raises(SceneError, match="between -1 and 1"):
        parse_orientation("0,2,0")


def test_parse_color():
    assert parse_color("10,20,30") == Color(10, 20, 30)


def test_parse_color_wrong_count():
    with pytest.raises(SceneError, match=re.escape("The color should have a RGB.")):
        parse_color("10,20")


@pytest.mark.parametrize("field", ["0,256,0", "0,0,-5"])
def test_parse_color_out_of_range(field):
    with pytest.raises(SceneError, match="between 0 and 255"):
        parse_color(field)


def test_parse_scalar_in_range():
    assert parse_scalar("0.5", "bad", 0, 1) == 0.5


def test_parse_scalar_unbounded():
    assert parse_scalar("-3", "bad") == -3.0


@pytest.mark.parametrize("field", ["2", "1,5"])
def test_parse_scalar_rejects(field):
    with pytest.raises(SceneError, match="bad ratio"):
        parse_scalar(field, "bad ratio", 0, 1)


def test_transform_camera_rotation_and_translation():
    camera = Camera(Vec3(), Vec3(0, 0, 1), 70)
    fields = ["c", "0,0,0", "0,0,1", "70", "0,30,0", "1,2,3"]
    moved = transform_camera(camera, fields)
    assert moved.look_at == rotate(Vec3(0, 0, 1), Vec3(0, 30, 0))
    assert moved.eye == Vec3(1, 2, 3)
    assert moved.fov == camera.fov


def test_transform_camera_without_extra_fields():
    camera = Camera(Vec3(1, 1, 1), Vec3(0, 0, 1), 70)
    assert transform_camera(camera, ["c", "1,1,1", "0,0,1", "70"]) == camera


def test_transform_camera_bad_rotation():
    camera = Camera(Vec3(), Vec3(0, 0, 1), 70)
    with pytest.raises(SceneError, match=re.escape("Please Check the rotation in camera.")):
        transform_camera(camera, ["c", "0,0,0", "0,0,1", "70", "1,2"])


def test_transform_light_translation():
    light = Light(Vec3(1, 1, 1), 0.5, RED)
    moved = transform_light(light, ["l", "1,1,1", "0.5", "255,0,0", "2,3,4"])
    assert moved.position == Vec3(1, 1, 1) + Vec3(2, 3, 4)
    assert moved.ratio == light.ratio


def test_transform_light_untouched():
    light = Light(Vec3(1, 1, 1), 0.5, RED)
    assert transform_light(light, ["l", "1,1,1", "0.5", "255,0,0"]) == light


def test_transform_sphere_translation():
    sphere = Sphere(Vec3(0, 0, 5), 1.0, RED)
    moved = transform_object(sphere, ["sp", "0,0,5", "1", "255,0,0", "1,2,3"])
    assert moved.center == Vec3(1, 2, 8)


def test_transform_sphere_bad_translation():
    sphere = Sphere(Vec3(0, 0, 5), 1.0, RED)
    with pytest.raises(SceneError, match=re.escape("Please check the rotation in sphere.")):
        transform_object(sphere, ["sp", "0,0,5", "1", "255,0,0", "1,2"])


def test_transform_plane():
    plane = Plane(Vec3(0, 0, 0), Vec3(0, 1, 0), RED)
    fields = ["pl", "0,0,0", "0,1,0", "255,0,0", "90,0,0", "0,5,0"]
    moved = transform_object(plane, fields)
    assert moved.normal == rotate(Vec3(0, 1, 0), Vec3(90, 0, 0))
    assert moved.point == Vec3(0, 5, 0)


def test_transform_plane_bad_translation():
    plane = Plane(Vec3(0, 0, 0), Vec3(0, 1, 0), RED)
    fields = ["pl", "0,0,0", "0,1,0", "255,0,0", "0,0,0", "1"]
    with pytest.raises(SceneError, match=re.escape("Please check the translation plane.")):
        transform_object(plane, fields)


def test_transform_square_reads_rotation_from_colour_field():
    square = Square(Vec3(0, 0, 0), Vec3(0, 0, 1), 2.0, RED)
    fields = ["sq", "0,0,0", "0,0,1", "2", "255,0,0", "1,1,1"]
    moved = transform_object(square, fields)
    assert _close(moved.normal, rotate(Vec3(0, 0, 1), Vec3(255, 0, 0)))
    assert moved.center == Vec3(1, 1, 1)


def test_transform_square_without_extra_fields():
    square = Square(Vec3(0, 0, 0), Vec3(0, 0, 1), 2.0, RED)
    fields = ["sq", "0,0,0", "0,0,1", "2", "255,0,0"]
    assert transform_object(square, fields) == square


def test_transform_cylinder():
    cyl = Cylinder(Vec3(0, 0, 0), Vec3(0, 1, 0), 2.0, 4.0, RED)
    fields = ["cy", "0,0,0", "0,1,0", "255,0,0", "2", "4", "0,0,45", "3,0,0"]
    moved = transform_object(cyl, fields)
    assert moved.normal == rotate(Vec3(0, 1, 0), Vec3(0, 0, 45))
    assert moved.position == Vec3(3, 0, 0)
    assert moved.height == cyl.height


def test_transform_cylinder_bad_rotation():
    cyl = Cylinder(Vec3(0, 0, 0), Vec3(0, 1, 0), 2.0, 4.0, RED)
    fields = ["cy", "0,0,0", "0,1,0", "255,0,0", "2", "4", "0,0"]
    with pytest.raises(SceneError, match=re.escape("Please check the rotation in cylinder.")):
        transform_object(cyl, fields)


def test_transform_triangle_moves_all_points():
    tri = Triangle(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0), RED)
    shift = Vec3(1, 2, 3)
    fields = ["tr", "0,0,0", "1,0,0", "0,1,0", "255,0,0", "1,2,3"]
    moved = transform_object(tri, fields)
    assert moved.first == tri.first + shift
    assert moved.second == tri.second + shift
    assert moved.third == tri.third + shift


def test_transform_triangle_untouched():
    tri = Triangle(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0), RED)
    fields = ["tr", "0,0,0", "1,0,0", "0,1,0", "255,0,0"]
    assert transform_object(tri, fields) == tri